"""
Blokus piece definitions: the 21 polyominoes and their rotations/reflections.

Each piece is described by a small form whose cells are marked:
- 0: not part of the piece
- 1: root cell, a corner of the piece outline that may be anchored on a
     start point during move generation
- 2: interior cell, occupies board space but is never an anchor
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Sequence, Tuple, Union

import numpy as np

from .coords import Coord

EMPTY_CELL = 0
ROOT_CELL = 1
INTERIOR_CELL = 2

CANONICAL_FORMS: List[List[List[int]]] = [
    # One monomino.
    [[1]],
    # One domino.
    [[1, 1]],
    # Two trominoes.
    [[1, 1],
     [1, 0]],
    [[1, 2, 1]],
    # Five tetrominoes.
    [[1, 2, 2, 1]],
    [[1, 2, 1],
     [0, 1, 0]],
    [[1, 1],
     [1, 1]],
    [[1, 1, 0],
     [0, 1, 1]],
    [[1, 1, 1],
     [0, 0, 1]],
    # Twelve pentominoes.
    [[1, 2, 2, 2, 1]],
    [[1, 2, 1],
     [0, 1, 1]],
    [[0, 1, 2, 1],
     [1, 1, 0, 0]],
    [[1, 2, 2, 1],
     [0, 1, 0, 0]],
    [[1, 2, 2, 1],
     [1, 0, 0, 0]],
    [[1, 2, 1],
     [1, 0, 1]],
    [[1, 2, 1],
     [0, 2, 0],
     [0, 1, 0]],
    [[1, 2, 1],
     [0, 0, 2],
     [0, 0, 1]],
    [[0, 1, 0],
     [1, 2, 1],
     [0, 1, 0]],
    [[0, 1, 1],
     [1, 1, 0],
     [1, 0, 0]],
    [[1, 1, 0],
     [0, 2, 0],
     [0, 1, 1]],
    [[1, 1, 0],
     [0, 2, 1],
     [0, 1, 0]],
]

PIECE_NAMES: List[str] = [
    "Monomino",
    "Domino",
    "Tromino V",
    "Tromino I",
    "Tetromino I",
    "Tetromino T",
    "Tetromino O",
    "Tetromino Z",
    "Tetromino L",
    "Pentomino I",
    "Pentomino P",
    "Pentomino N",
    "Pentomino Y",
    "Pentomino L",
    "Pentomino U",
    "Pentomino T",
    "Pentomino V",
    "Pentomino X",
    "Pentomino W",
    "Pentomino Z",
    "Pentomino F",
]

NUM_PIECES = 21

if len(CANONICAL_FORMS) != NUM_PIECES or len(PIECE_NAMES) != NUM_PIECES:
    raise RuntimeError(
        f"Missing canonical pieces! Wanted {NUM_PIECES}, got {len(CANONICAL_FORMS)}"
    )

MONOMINO_ID = 1


class PieceForm:
    """
    An immutable 2D pattern of cell kinds.

    Rotating or flipping a form returns a new form. Equality and hashing are
    structural, so forms can be deduplicated with a set or dict.
    """

    __slots__ = ("_cells", "_key", "roots", "cells")

    def __init__(self, data: Union[Sequence[Sequence[int]], np.ndarray]):
        if isinstance(data, np.ndarray):
            array = data
        else:
            rows = [list(row) for row in data]
            if not rows or not rows[0]:
                raise ValueError("Piece form must not be empty")
            if any(len(row) != len(rows[0]) for row in rows):
                raise ValueError("Piece form must be rectangular")
            array = np.array(rows)
        if array.ndim != 2 or array.size == 0:
            raise ValueError("Piece form must be a non-empty 2D array")
        if not np.isin(array, (EMPTY_CELL, ROOT_CELL, INTERIOR_CELL)).all():
            raise ValueError("Piece form cells must be 0, 1 or 2")
        if not (array == ROOT_CELL).any():
            raise ValueError("Piece form must have at least one root cell")

        cells = np.array(array, dtype=np.int8)
        cells.flags.writeable = False
        self._cells = cells
        self._key = (cells.shape, cells.tobytes())
        # Precomputed once per form; move generation reads these in its
        # innermost loop.
        self.roots: Tuple[Coord, ...] = tuple(
            (int(m), int(n)) for m, n in np.argwhere(cells == ROOT_CELL)
        )
        self.cells: Tuple[Coord, ...] = tuple(
            (int(m), int(n)) for m, n in np.argwhere(cells > 0)
        )

    @property
    def M(self) -> int:
        return self._cells.shape[0]

    @property
    def N(self) -> int:
        return self._cells.shape[1]

    @property
    def size(self) -> int:
        """Number of board cells the form occupies."""
        return len(self.cells)

    @property
    def interior_count(self) -> int:
        return int(np.count_nonzero(self._cells == INTERIOR_CELL))

    def get(self, m: int, n: int) -> int:
        return int(self._cells[m, n])

    def to_list(self) -> List[List[int]]:
        return self._cells.tolist()

    def rotate_clockwise(self) -> "PieceForm":
        """Rotate 90 degrees clockwise: cell (m, n) moves to (n, M - 1 - m)."""
        return PieceForm(np.rot90(self._cells, k=-1))

    def flip(self) -> "PieceForm":
        """Mirror vertically by reversing the row order."""
        return PieceForm(np.flipud(self._cells))

    def __eq__(self, other) -> bool:
        if not isinstance(other, PieceForm):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return f"PieceForm({self.to_list()})"


def generate_variants(canonical: PieceForm) -> Tuple[PieceForm, ...]:
    """
    Generate the distinct rotations and reflections of a form.

    The canonical form is rotated clockwise three times, then each of those
    four forms is flipped, giving eight candidates. Duplicates (from pieces
    with symmetry) are dropped, keeping the first occurrence.
    """
    rotations = [canonical]
    for _ in range(3):
        rotations.append(rotations[-1].rotate_clockwise())
    candidates = rotations + [form.flip() for form in rotations]

    # dict preserves insertion order
    return tuple(dict.fromkeys(candidates))


@dataclass(frozen=True, eq=False)
class Piece:
    """
    A Blokus piece: its canonical form plus every distinct variant.

    Pieces are shared read-only by all players; players track which pieces
    they still hold, not private copies of the geometry.
    """
    id: int
    name: str
    canonical: PieceForm
    variants: Tuple[PieceForm, ...] = field(repr=False)
    points: int
    difficulty: int

    @classmethod
    def from_form(cls, piece_id: int, name: str, canonical: PieceForm) -> "Piece":
        points = canonical.size
        return cls(
            id=piece_id,
            name=name,
            canonical=canonical,
            variants=generate_variants(canonical),
            points=points,
            difficulty=points * (1 + canonical.interior_count),
        )

    @property
    def is_monomino(self) -> bool:
        return self.id == MONOMINO_ID


@lru_cache(maxsize=None)
def get_pieces() -> Tuple[Piece, ...]:
    """
    Get all 21 Blokus pieces.

    Built on first use and memoised; the same immutable tuple is returned
    on every call.
    """
    return tuple(
        Piece.from_form(piece_id, name, PieceForm(form))
        for piece_id, (name, form) in enumerate(zip(PIECE_NAMES, CANONICAL_FORMS), start=1)
    )


def get_piece_by_id(piece_id: int) -> Piece:
    """Get a piece by its ID (1-based)."""
    if not 1 <= piece_id <= NUM_PIECES:
        raise KeyError(f"Unknown piece id: {piece_id}")
    return get_pieces()[piece_id - 1]
