"""Grid coordinate helpers for the octagon tessellation."""

from __future__ import annotations

import math

from alugard.engine.models import CellId, Direction

SQRT2_HALF = math.sqrt(2) / 2  # ≈ 0.7071

# (dcol, drow) for each compass direction; rows grow downward
DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.N: (0, -1),
    Direction.S: (0, 1),
    Direction.E: (1, 0),
    Direction.W: (-1, 0),
    Direction.NE: (1, -1),
    Direction.NW: (-1, -1),
    Direction.SE: (1, 1),
    Direction.SW: (-1, 1),
}

OPPOSITE: dict[Direction, Direction] = {
    Direction.N: Direction.S,
    Direction.S: Direction.N,
    Direction.E: Direction.W,
    Direction.W: Direction.E,
    Direction.NE: Direction.SW,
    Direction.SW: Direction.NE,
    Direction.NW: Direction.SE,
    Direction.SE: Direction.NW,
}


def cell_id(col: int, row: int) -> CellId:
    return CellId(f"oct_{col}_{row}")


def parse_cell_id(key: str) -> tuple[int, int]:
    _prefix, col, row = key.split("_")
    return int(col), int(row)


def diagonal_cut(s: float) -> float:
    """Length d of each corner-cutting edge for side length s."""
    return s * SQRT2_HALF


def piece_size(s: float) -> float:
    """Bounding box side W = s + 2d of one octagon."""
    return s + 2 * diagonal_cut(s)


def neighbor_map(col: int, row: int, cols: int, rows: int) -> dict[Direction, CellId]:
    """Return in-bounds neighbor ids of (col, row) keyed by direction."""
    result: dict[Direction, CellId] = {}
    for direction, (dc, dr) in DIRECTION_OFFSETS.items():
        nc, nr = col + dc, row + dr
        if 0 <= nc < cols and 0 <= nr < rows:
            result[direction] = cell_id(nc, nr)
    return result
