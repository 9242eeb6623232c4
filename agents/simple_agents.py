"""
Simple priority agents: quitter, biggest-piece-first, hardest-piece-first.
"""

from typing import Callable, List, Optional

import numpy as np

from engine.legality import PlayerInputs
from engine.move_generator import GIVE_UP, generate_valid_moves
from engine.pieces import Piece

from agents.base import Decision


class QuitterAgent:
    """Gives up immediately. Useful as a test scaffold."""

    def make_move(self, inputs: PlayerInputs, pieces: List[Piece]) -> Decision:
        return GIVE_UP

    def description(self) -> str:
        return "Quitter"


class PriorityAgent:
    """
    Plays pieces in a fixed priority order.

    Pieces are tried from highest to lowest priority; the agent plays a
    random legal placement of the first piece that has any.
    """

    name = "Priority"

    def __init__(self, priority: Callable[[Piece], float], seed: Optional[int] = None):
        self.priority = priority
        self.rng = np.random.RandomState(seed)

    def make_move(self, inputs: PlayerInputs, pieces: List[Piece]) -> Decision:
        # sorted() is stable, so equal priorities keep inventory order
        for piece in sorted(pieces, key=self.priority, reverse=True):
            legal_moves = generate_valid_moves(inputs, [piece])
            if legal_moves:
                return legal_moves[self.rng.randint(0, len(legal_moves))]
        return GIVE_UP

    def description(self) -> str:
        return self.name


class BiggestFirstAgent(PriorityAgent):
    """Plays the piece with the most cells first."""

    name = "BiggestFirst"

    def __init__(self, seed: Optional[int] = None):
        super().__init__(lambda piece: piece.points, seed=seed)


class HardestFirstAgent(PriorityAgent):
    """
    Plays the hardest piece first.

    Difficulty is area x (1 + interior cells): long, awkward pentominoes go
    before compact ones while there is still room to place them.
    """

    name = "HardestFirst"

    def __init__(self, seed: Optional[int] = None):
        super().__init__(lambda piece: piece.difficulty, seed=seed)
