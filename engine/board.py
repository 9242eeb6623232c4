"""
Blokus Board implementation with a 20x20 occupancy grid.
"""

from enum import Enum
from typing import Iterable, List, Optional

import numpy as np

from .coords import BOARD_SIZE, Coord, CoordSet


class Color(Enum):
    """Player colors, valued by the player id written into the grid."""
    RED = 1
    BLUE = 2
    YELLOW = 3
    GREEN = 4


PLAYER_IDS = tuple(color.value for color in Color)

# Corner each seat must start from in the first round, by seat index.
FIRST_ROUND_CORNERS: List[Coord] = [
    (0, 0),
    (0, BOARD_SIZE - 1),
    (BOARD_SIZE - 1, 0),
    (BOARD_SIZE - 1, BOARD_SIZE - 1),
]


class Board:
    """
    Blokus game board.

    The board is a 20x20 grid where:
    - 0 represents empty space
    - 1-4 represent the player that owns the cell
    """

    SIZE = BOARD_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None):
        if grid is None:
            self.grid = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        else:
            if grid.shape != (self.SIZE, self.SIZE):
                raise ValueError(f"Board grid must be {self.SIZE}x{self.SIZE}, got {grid.shape}")
            self.grid = grid.astype(np.int8, copy=True)

    def is_valid_position(self, coord: Coord) -> bool:
        """Check if position is within board bounds."""
        row, col = coord
        return 0 <= row < self.SIZE and 0 <= col < self.SIZE

    def get_cell(self, coord: Coord) -> int:
        """Get the value at a position, or -1 off the board."""
        if not self.is_valid_position(coord):
            return -1
        return int(self.grid[coord[0], coord[1]])

    def is_empty(self, coord: Coord) -> bool:
        return self.get_cell(coord) == 0

    def get_owner(self, coord: Coord) -> Optional[Color]:
        """Get the color at a position, or None if empty or off the board."""
        value = self.get_cell(coord)
        if value <= 0:
            return None
        return Color(value)

    def place_cells(self, cells: Iterable[Coord], player_id: int) -> None:
        """Write player_id into every cell. Legality is the caller's concern."""
        if player_id not in PLAYER_IDS:
            raise ValueError(f"Invalid player id: {player_id}")
        for row, col in cells:
            self.grid[row, col] = player_id

    def count_cells(self, player_id: int) -> int:
        """Number of cells owned by a player."""
        return int(np.count_nonzero(self.grid == player_id))

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        return Board(self.grid)

    def render(self, highlight: Optional[CoordSet] = None) -> str:
        """
        Render the board as text.

        Empty cells are '.', owned cells show the owner id, and any empty
        cell in highlight (typically the current start points) is '*'.
        """
        rows = []
        for row in range(self.SIZE):
            row_str = ""
            for col in range(self.SIZE):
                value = self.grid[row, col]
                if value == 0:
                    if highlight is not None and (row, col) in highlight:
                        row_str += "*"
                    else:
                        row_str += "."
                else:
                    row_str += str(value)
            rows.append(row_str)
        return "\n".join(rows)

    def __str__(self) -> str:
        return self.render()
