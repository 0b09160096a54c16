"""Piece scramble: shuffled, jittered tray layout for a fresh puzzle."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from typing import TypeVar

from alugard.config import settings
from alugard.engine.models import LevelConfig, OctagonCell, PieceId, PuzzlePiece, TraySize

T = TypeVar("T")


def create_and_scramble_pieces(
    cells: Sequence[OctagonCell],
    level_config: LevelConfig,
    tray: TraySize,
    piece_size: float,
    rng: random.Random | None = None,
) -> list[PuzzlePiece]:
    """Create one unplaced piece per cell and scatter them over the tray.

    Args:
        cells: ordered cells from ``build_grid()``
        level_config: supplies ``scatter_px``, the jitter radius
        tray: size of the tray area the pieces are laid out in
        piece_size: W = s + 2d, bounding box side of each piece
        rng: random source; seeded from ``settings.random_seed`` when omitted
    """
    if rng is None:
        rng = random.Random(settings.random_seed)

    pieces = [PuzzlePiece(id=PieceId(cell.id)) for cell in cells]
    pieces = fisher_yates(pieces, rng)

    padding = settings.tray_padding
    scatter = level_config.scatter_px
    cols = max(1, math.floor(tray.width / (piece_size + padding)))

    laid_out: list[PuzzlePiece] = []
    for i, piece in enumerate(pieces):
        col = i % cols
        row = i // cols

        x = col * (piece_size + padding)
        y = row * (piece_size + padding)

        if scatter > 0:
            x += rng.uniform(-scatter * 0.3, scatter * 0.3)
            y += rng.uniform(-scatter * 0.1, scatter * 0.1)

        # Clamp into the tray; a tray narrower than one piece pins x to 0
        x = max(0.0, min(x, tray.width - piece_size))
        y = max(0.0, min(y, tray.height * 1.5))

        laid_out.append(piece.model_copy(update={"x": x, "y": y}))

    return laid_out


def fisher_yates(items: Sequence[T], rng: random.Random) -> list[T]:
    """Return a uniformly shuffled copy of *items* in O(n)."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randrange(i + 1)
        result[i], result[j] = result[j], result[i]
    return result
