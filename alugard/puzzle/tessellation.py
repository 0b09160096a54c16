"""Octagon tessellation engine for the 4.8.8 semi-regular tiling.

    s    = side length of each octagon (all sides equal)
    d    = s * √2 / 2, length of the corner diagonal cut
    W    = s + 2d, bounding box width (= height) of one octagon
    step = s + d, repeating step between octagon origins on both axes

Vertices relative to the top-left corner (0, 0):

    (d, 0) → (d+s, 0) → (W, d) → (W, d+s) → (d+s, W) → (d, W) → (0, d+s) → (0, d)
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from alugard.config import settings
from alugard.engine.models import LevelConfig, OctagonCell
from alugard.puzzle.types import (
    SQRT2_HALF,
    cell_id,
    diagonal_cut,
    neighbor_map,
    piece_size,
)

Vertex = tuple[float, float]


def compute_side_length(
    board_width: float,
    board_height: float,
    cols: int,
    rows: int,
    margin: float | None = None,
) -> int:
    """Largest integer side length s letting a cols x rows grid fit the board.

    The step derived from each axis is ``dim / (count + √2/2)``; the smaller
    one is shrunk by the board margin (0.92 by default) and converted back
    to s via ``step = s * (1 + √2/2)``.
    """
    if board_width <= 0 or board_height <= 0 or cols < 1 or rows < 1:
        return 0
    if margin is None:
        margin = settings.board_margin

    max_step_w = board_width / (cols + SQRT2_HALF)
    max_step_h = board_height / (rows + SQRT2_HALF)
    step = min(max_step_w, max_step_h) * margin

    return max(0, math.floor(step / (1 + SQRT2_HALF)))


def octagon_vertices(s: float) -> tuple[Vertex, ...]:
    """Return the 8 boundary vertices of an octagon in local coordinates."""
    d = diagonal_cut(s)
    w = s + 2 * d
    return (
        (d, 0.0),
        (d + s, 0.0),
        (w, d),
        (w, d + s),
        (d + s, w),
        (d, w),
        (0.0, d + s),
        (0.0, d),
    )


def build_clip_path(vertices: Iterable[Vertex]) -> str:
    """Format vertices as a CSS ``polygon()`` clip-path in pixels."""
    points = ", ".join(f"{x:.2f}px {y:.2f}px" for x, y in vertices)
    return f"polygon({points})"


def build_grid(
    cols: int,
    rows: int,
    s: float,
    board_width: float,
    board_height: float,
) -> list[OctagonCell]:
    """Build every octagon cell of the grid in row-major order.

    The grid is centered inside the board. Returns an empty list for a
    degenerate side length.
    """
    if s <= 0 or cols < 1 or rows < 1:
        return []

    d = diagonal_cut(s)
    w = s + 2 * d
    step = s + d

    total_w = cols * step + d
    total_h = rows * step + d
    offset_x = max(0.0, (board_width - total_w) / 2)
    offset_y = max(0.0, (board_height - total_h) / 2)

    # Every octagon shares the same local outline
    vertices = octagon_vertices(s)
    clip_path = build_clip_path(vertices)

    cells: list[OctagonCell] = []
    for row in range(rows):
        for col in range(cols):
            origin_x = offset_x + col * step
            origin_y = offset_y + row * step
            cells.append(OctagonCell(
                id=cell_id(col, row),
                col=col,
                row=row,
                origin_x=origin_x,
                origin_y=origin_y,
                center_x=origin_x + w / 2,
                center_y=origin_y + w / 2,
                vertices=vertices,
                clip_path=clip_path,
                # Image and board share dimensions, so the slice offset is the origin
                bg_offset_x=origin_x,
                bg_offset_y=origin_y,
                neighbors=neighbor_map(col, row, cols, rows),
            ))

    return cells


def index_cells(cells: Iterable[OctagonCell]) -> dict[str, OctagonCell]:
    return {cell.id: cell for cell in cells}


def build_level_grid(
    level_config: LevelConfig | None,
    board_width: float,
    board_height: float,
) -> tuple[list[OctagonCell], int, float]:
    """Build the grid for a level on a board.

    Returns ``(cells, side_length, piece_size)``; all empty/zero when the
    level is missing or the board has no area.
    """
    if level_config is None or board_width <= 0 or board_height <= 0:
        return [], 0, 0.0

    s = compute_side_length(board_width, board_height, level_config.cols, level_config.rows)
    cells = build_grid(level_config.cols, level_config.rows, s, board_width, board_height)
    return cells, s, piece_size(s)


def is_point_in_octagon(lx: float, ly: float, d: float, w: float) -> bool:
    """Convex containment test in local coordinates of one octagon."""
    # Axis-aligned edges
    if lx < 0 or lx > w or ly < 0 or ly > w:
        return False
    # Corner cuts: top-left, top-right, bottom-left, bottom-right
    if lx + ly < d:
        return False
    if (w - lx) + ly < d:
        return False
    if lx + (w - ly) < d:
        return False
    if (w - lx) + (w - ly) < d:
        return False
    return True


def find_cell_at_point(
    x: float,
    y: float,
    cells: Sequence[OctagonCell],
    s: float,
) -> OctagonCell | None:
    """Return the first cell whose octagon contains board point (x, y)."""
    d = diagonal_cut(s)
    w = s + 2 * d
    for cell in cells:
        # Quick bounding-box check first
        if (
            x < cell.origin_x or x > cell.origin_x + w
            or y < cell.origin_y or y > cell.origin_y + w
        ):
            continue
        if is_point_in_octagon(x - cell.origin_x, y - cell.origin_y, d, w):
            return cell
    return None
