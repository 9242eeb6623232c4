"""
Weighted ranking agent for Blokus.

Every legal move of every remaining piece is scored as a linear
combination of move features, and the highest-scoring move is played.
The weight vector is what the evolution loop tunes.
"""

from typing import List, Sequence

import numpy as np

from engine.board import PLAYER_IDS
from engine.coords import CoordSet
from engine.legality import PlayerInputs, get_board_state
from engine.move_generator import GIVE_UP, Move, generate_valid_moves
from engine.pieces import Piece

from agents.base import Decision

FEATURE_NAMES = (
    "cells_gained",
    "start_point_delta",
    "piece_difficulty",
    "opponent_start_points_taken",
)


class RankingAgent:
    """
    Linear-scoring agent.

    Features, in weight order:
    1. cells gained (the piece's point value)
    2. change in the player's own start point count after the move
    3. piece difficulty
    4. opponents' start points the move occupies
    """

    NUM_WEIGHTS = len(FEATURE_NAMES)

    def __init__(self, weights: Sequence[float]):
        self.set_weights(weights)

    def set_weights(self, weights: Sequence[float]):
        if len(weights) != self.NUM_WEIGHTS:
            raise ValueError(
                f"RankingAgent requires {self.NUM_WEIGHTS} weights, got {len(weights)}"
            )
        self.weights = [float(weight) for weight in weights]
        self._weight_vector = np.array(self.weights)

    def make_move(self, inputs: PlayerInputs, pieces: List[Piece]) -> Decision:
        legal_moves = generate_valid_moves(inputs, pieces)
        if not legal_moves:
            return GIVE_UP

        features = np.stack(self.compute_features(inputs, legal_moves))
        scores = features @ self._weight_vector
        # np.argmax returns the first maximum, so ties go to generation order
        return legal_moves[int(np.argmax(scores))]

    def compute_features(self, inputs: PlayerInputs, moves: List[Move]) -> List[np.ndarray]:
        """
        Compute the feature vector of each candidate move.

        The board is copied once; each move is written into the copy,
        measured and then erased again.
        """
        player_id = inputs.player_id
        work = inputs.board.grid.copy()
        current_start_points = len(inputs.start_points)
        opponent_start_points = self._opponent_start_points(work, player_id)

        features = []
        for move in moves:
            cells = move.cells.mask
            work[cells] = player_id
            start_points, _ = get_board_state(work, player_id)
            work[cells] = 0

            features.append(np.array([
                move.piece.points,
                len(start_points) - current_start_points,
                move.piece.difficulty,
                move.cells.intersection_count(opponent_start_points),
            ], dtype=float))
        return features

    @staticmethod
    def _opponent_start_points(grid: np.ndarray, player_id: int) -> CoordSet:
        combined = CoordSet()
        for opponent_id in PLAYER_IDS:
            if opponent_id == player_id:
                continue
            start_points, _ = get_board_state(grid, opponent_id)
            combined = combined | start_points
        return combined

    def description(self) -> str:
        return f"Ranking{self.weights}"
