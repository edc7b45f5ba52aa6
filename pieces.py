# pieces.py
# Piece definitions + rotations/flips

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

# An orientation is a normalized, sorted tuple of (x, y) offsets.
# The sorted tuple doubles as its canonical key.
Orientation = tuple[tuple[int, int], ...]

# Base piece shapes as (x, y) offsets
PIECE_SHAPES: dict[str, list[tuple[int, int]]] = {
    "L": [(0, 0), (1, 0), (2, 0), (3, 0), (0, 1)],
    "N": [(0, 0), (1, 0), (1, 1), (2, 1), (3, 1)],
    "P": [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)],
    "U": [(0, 0), (2, 0), (0, 1), (1, 1), (2, 1)],
    "V": [(0, 0), (1, 0), (2, 0), (0, 1), (0, 2)],
    "Y": [(0, 0), (1, 0), (2, 0), (3, 0), (1, 1)],
    "Z": [(0, 0), (0, 1), (1, 1), (2, 1), (2, 2)],
    "RECTANGLE": [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)],
}


@dataclass(frozen=True)
class Piece:
    name: str
    orientations: tuple[Orientation, ...]


def normalize(cells: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    cells = list(cells)
    if not cells:
        return []
    min_x = min(x for x, _ in cells)
    min_y = min(y for _, y in cells)
    return [(x - min_x, y - min_y) for x, y in cells]


def canonical_key(cells: Iterable[tuple[int, int]]) -> Orientation:
    return tuple(sorted(normalize(cells)))


def rotate_cells(cells: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    # (x, y) -> (y, -x), then back to the origin
    return normalize((y, -x) for x, y in cells)


def flip_cells(cells: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    # mirror around the vertical axis
    return normalize((-x, y) for x, y in cells)


def generate_orientations(base_shape: Iterable[tuple[int, int]]) -> tuple[Orientation, ...]:
    """All unique rotations, then all unique rotations of the mirror image.

    Discovery order is preserved, so index 0 is always the base shape.
    Symmetric pieces yield fewer than 8 orientations.
    """
    base_shape = list(base_shape)
    seen: set[Orientation] = set()
    result: list[Orientation] = []

    for start in (normalize(base_shape), flip_cells(base_shape)):
        current = start
        for _ in range(4):
            key = canonical_key(current)
            if key not in seen:
                seen.add(key)
                result.append(key)
            current = rotate_cells(current)

    return tuple(result)


PIECES: dict[str, Piece] = {
    name: Piece(name, generate_orientations(shape)) for name, shape in PIECE_SHAPES.items()
}


def get_piece(name: str) -> Piece | None:
    return PIECES.get(name)


def piece_names() -> list[str]:
    return list(PIECES)


def get_piece_orientation(name: str, index: int = 0) -> Orientation | None:
    """Orientation at `index`, wrapping in both directions. None for an unknown piece."""
    piece = PIECES.get(name)
    if piece is None:
        return None
    # Python's % already wraps negative indices into range.
    return piece.orientations[index % len(piece.orientations)]


def next_orientation(name: str, index: int = 0) -> int:
    piece = PIECES.get(name)
    if piece is None:
        return 0
    return (index + 1) % len(piece.orientations)


def prev_orientation(name: str, index: int = 0) -> int:
    piece = PIECES.get(name)
    if piece is None:
        return 0
    return (index - 1) % len(piece.orientations)


def find_flipped_orientation(name: str, index: int = 0) -> int:
    """Index of the mirror image of orientation `index`.

    Falls back to `index` when no orientation matches, which only happens
    if the catalog was generated incorrectly.
    """
    piece = PIECES.get(name)
    if piece is None:
        return index
    count = len(piece.orientations)
    target = canonical_key(flip_cells(piece.orientations[index % count]))
    for i, orientation in enumerate(piece.orientations):
        if orientation == target:
            return i
    return index


def bounding_box(cells: Iterable[tuple[int, int]]) -> tuple[int, int] | None:
    """(width, height) of a set of offsets."""
    cells = list(cells)
    if not cells:
        return None
    xs = [x for x, _ in cells]
    ys = [y for _, y in cells]
    return max(xs) - min(xs) + 1, max(ys) - min(ys) + 1
