"""
Random agent for Blokus that picks uniformly from legal moves.
"""

from typing import List, Optional

import numpy as np

from engine.legality import PlayerInputs
from engine.move_generator import GIVE_UP, generate_valid_moves
from engine.pieces import Piece

from agents.base import Decision


class RandomAgent:
    """
    Random agent that selects moves uniformly from legal moves.

    This agent serves as a baseline for comparison with the heuristic
    agents.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize random agent.

        Args:
            seed: Random seed for reproducible behavior
        """
        self.rng = np.random.RandomState(seed)

    def make_move(self, inputs: PlayerInputs, pieces: List[Piece]) -> Decision:
        """
        Select a random legal move, or give up if there are none.
        """
        legal_moves = generate_valid_moves(inputs, pieces)
        if not legal_moves:
            return GIVE_UP

        move_idx = self.rng.randint(0, len(legal_moves))
        return legal_moves[move_idx]

    def description(self) -> str:
        return "Random"
