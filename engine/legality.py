"""
Legality engine: start points and excluded cells for a player.

A legal Blokus move occupies only empty cells and touches the player's own
pieces only at corners, never along an edge. Both rules reduce to two board
bounded coordinate sets per player and turn:

- exclude: every occupied cell plus every cell edge-adjacent to the player's
  own pieces
- start points: cells diagonally adjacent to the player's own pieces that
  are not excluded
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .board import Board
from .coords import BOARD_SIZE, Coord, CoordSet

ORTHOGONAL_OFFSETS: List[Tuple[int, int]] = [(-1, 0), (1, 0), (0, -1), (0, 1)]
DIAGONAL_OFFSETS: List[Tuple[int, int]] = [(-1, -1), (-1, 1), (1, -1), (1, 1)]


def _neighbour_mask(cells: np.ndarray, offsets: List[Tuple[int, int]]) -> np.ndarray:
    """Cells that sit at one of offsets from a True cell, clipped to the board."""
    rows, cols = cells.shape
    padded = np.pad(cells, 1)
    result = np.zeros_like(cells)
    for dr, dc in offsets:
        # result[r, c] |= cells[r - dr, c - dc]
        result |= padded[1 - dr:1 - dr + rows, 1 - dc:1 - dc + cols]
    return result


def get_board_state(grid: np.ndarray, player_id: int) -> Tuple[CoordSet, CoordSet]:
    """
    Derive the start points and excluded cells for a player.

    Args:
        grid: 20x20 occupancy grid (0 empty, 1-4 owner)
        player_id: Player to compute the sets for

    Returns:
        Tuple of (start_points, exclude). start_points never intersects
        exclude, and both only contain on-board coordinates.
    """
    own = grid == player_id
    occupied = grid != 0

    exclude = occupied | _neighbour_mask(own, ORTHOGONAL_OFFSETS)
    candidates = _neighbour_mask(own, DIAGONAL_OFFSETS)
    start_points = candidates & ~exclude

    return CoordSet.from_mask(start_points), CoordSet.from_mask(exclude)


@dataclass
class PlayerInputs:
    """
    Everything an agent needs to choose its next move.

    Coordinates in start_points and exclude are guaranteed to be on the
    board. The board is shared with the game state and must be treated as
    read-only.
    """
    board: Board
    player_id: int
    start_points: CoordSet
    exclude: CoordSet
    _excluded: List[List[bool]] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Plain nested lists index faster than numpy scalars in the hot loop.
        self._excluded = self.exclude.mask.tolist()

    def validate_move(self, cells: Iterable[Coord]) -> Optional[str]:
        """
        Check a candidate cell set against the board edges and exclusions.

        Returns:
            None if every cell is legal, otherwise the reason the first
            offending cell was rejected.
        """
        excluded = self._excluded
        for row, col in cells:
            if row < 0 or row >= BOARD_SIZE or col < 0 or col >= BOARD_SIZE:
                return f"{[row, col]} falls off the board"
            if excluded[row][col]:
                return f"{[row, col]} is illegal"
        return None


def get_player_inputs(board: Board, player_id: int) -> PlayerInputs:
    """Build a player's inputs from the current board."""
    start_points, exclude = get_board_state(board.grid, player_id)
    return PlayerInputs(board, player_id, start_points, exclude)


def first_round_inputs(board: Board, player_id: int, corner: Coord) -> PlayerInputs:
    """
    Build the synthetic inputs for a player's opening move.

    The only start point is the player's corner and nothing is excluded;
    the board scan is bypassed entirely.
    """
    return PlayerInputs(board, player_id, CoordSet([corner]), CoordSet())
