"""
Legal move generator for Blokus.
"""

import logging
import os
import time
from dataclasses import dataclass
from typing import Iterable, List

from .coords import Coord, CoordSet
from .legality import PlayerInputs
from .pieces import Piece, PieceForm

logger = logging.getLogger(__name__)

# Debug flag for move generation timing (controlled via environment variable)
MOVEGEN_DEBUG = bool(os.getenv("BLOKUS_MOVEGEN_DEBUG", ""))


@dataclass(frozen=True, eq=False)
class Move:
    """A piece and the concrete board cells it occupies."""
    piece: Piece
    cells: CoordSet

    @property
    def points(self) -> int:
        return self.piece.points

    def __str__(self):
        return f"Move(piece={self.piece.name}, cells=[{self.cells}])"


def generate_move(origin: Coord, root: Coord, form: PieceForm) -> List[Coord]:
    """
    Place a form so that its root cell lands on origin.

    Every occupied cell of the form (roots and interior cells alike) is
    translated by origin - root. The result may contain off-board
    coordinates; validation is the caller's job.
    """
    row_offset = origin[0] - root[0]
    col_offset = origin[1] - root[1]
    return [(m + row_offset, n + col_offset) for m, n in form.cells]


def generate_valid_moves(inputs: PlayerInputs, pieces: Iterable[Piece]) -> List[Move]:
    """
    Enumerate every legal placement of the given pieces.

    Tries each start point against each variant and each root of that
    variant, keeping the placements validate_move accepts.

    Args:
        inputs: Legality inputs for the player to move
        pieces: Pieces the player still holds

    Returns:
        List of legal moves, in start point / piece / variant / root order
    """
    start = time.perf_counter()
    pieces = list(pieces)
    origins = list(inputs.start_points)
    validate = inputs.validate_move
    valid = []
    evals = 0

    for origin in origins:
        for piece in pieces:
            for variant in piece.variants:
                for root in variant.roots:
                    evals += 1
                    cells = generate_move(origin, root, variant)
                    if validate(cells) is not None:
                        continue
                    valid.append(Move(piece, CoordSet(cells)))

    logger.debug(f"Evaluated {evals} possible moves, pruned to {len(valid)}")

    # Debug timing hook (only logs when BLOKUS_MOVEGEN_DEBUG is set)
    if MOVEGEN_DEBUG:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.info(
            f"MoveGen: player={inputs.player_id}, start_points={len(origins)}, "
            f"pieces={len(pieces)}, legal_moves={len(valid)}, elapsed_ms={elapsed_ms:.2f}"
        )

    return valid


def generate_valid_moves_for_piece(inputs: PlayerInputs, piece: Piece) -> List[Move]:
    """Get all legal moves for a single piece."""
    return generate_valid_moves(inputs, [piece])


class GiveUp:
    """An agent's decision to stop playing for the rest of the game."""

    def __repr__(self):
        return "GiveUp()"


GIVE_UP = GiveUp()
