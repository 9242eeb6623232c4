"""
Board coordinates and board-bounded coordinate sets.
"""

from typing import Iterable, Iterator, Tuple

import numpy as np

# Coords are (row, col) pairs. They may fall off the board while being
# computed; CoordSet drops those on insertion.
Coord = Tuple[int, int]

BOARD_SIZE = 20


def in_bounds(coord: Coord, size: int = BOARD_SIZE) -> bool:
    """Check if a coordinate lies on a size x size board."""
    row, col = coord
    return 0 <= row < size and 0 <= col < size


class CoordSet:
    """
    A set of coordinates on the 20x20 board.

    Backed by a boolean mask, so membership and insertion are O(1) and
    iteration is always in row-major order. Coordinates off the board are
    silently dropped on insertion and are never members.
    """

    __slots__ = ("_mask",)

    def __init__(self, coords: Iterable[Coord] = ()):
        self._mask = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=bool)
        for coord in coords:
            self.add(coord)

    @classmethod
    def from_mask(cls, mask: np.ndarray) -> "CoordSet":
        """Wrap a copy of a 20x20 boolean mask."""
        if mask.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"Mask must be {BOARD_SIZE}x{BOARD_SIZE}, got {mask.shape}")
        result = cls()
        result._mask = mask.astype(bool, copy=True)
        return result

    @property
    def mask(self) -> np.ndarray:
        """Read-only view of the underlying boolean mask."""
        view = self._mask.view()
        view.flags.writeable = False
        return view

    def add(self, coord: Coord) -> None:
        row, col = coord
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            self._mask[row, col] = True

    def __contains__(self, coord: Coord) -> bool:
        row, col = coord
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return bool(self._mask[row, col])
        return False

    def __len__(self) -> int:
        return int(np.count_nonzero(self._mask))

    def __iter__(self) -> Iterator[Coord]:
        for row, col in np.argwhere(self._mask):
            yield (int(row), int(col))

    def __bool__(self) -> bool:
        return bool(self._mask.any())

    def __eq__(self, other) -> bool:
        if not isinstance(other, CoordSet):
            return NotImplemented
        return bool(np.array_equal(self._mask, other._mask))

    __hash__ = None

    def difference(self, other: "CoordSet") -> "CoordSet":
        result = CoordSet()
        result._mask = self._mask & ~other._mask
        return result

    def union(self, other: "CoordSet") -> "CoordSet":
        result = CoordSet()
        result._mask = self._mask | other._mask
        return result

    __sub__ = difference
    __or__ = union

    def intersection_count(self, other: "CoordSet") -> int:
        """Number of coordinates present in both sets."""
        return int(np.count_nonzero(self._mask & other._mask))

    def copy(self) -> "CoordSet":
        return CoordSet.from_mask(self._mask)

    def __repr__(self) -> str:
        return f"CoordSet({list(self)})"

    def __str__(self) -> str:
        return ", ".join(str(list(coord)) for coord in self)
