"""Win detection, completion and neighbor scoring."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from alugard.engine.models import OctagonCell, PuzzlePiece


def is_home(piece: PuzzlePiece) -> bool:
    return piece.is_placed and piece.current_cell_id == piece.id


def check_win(pieces: Mapping[str, PuzzlePiece]) -> bool:
    """True when every piece sits in its own home cell."""
    return all(is_home(piece) for piece in pieces.values())


def compute_completion(pieces: Mapping[str, PuzzlePiece]) -> float:
    """Fraction (0-1) of pieces currently home; 0 when there are none."""
    total = len(pieces)
    if total == 0:
        return 0.0
    return count_home_pieces(pieces.values()) / total


def compute_piece_neighbor_score(
    cell_id: str,
    occupancy_map: Mapping[str, str | None],
    cell_index: Mapping[str, OctagonCell],
) -> int:
    """Count neighbors of *cell_id* whose occupant is home in that neighbor.

    This scores the surroundings of a cell; whether the piece in *cell_id*
    is itself home does not matter.
    """
    cell = cell_index.get(cell_id)
    if cell is None:
        return 0
    count = 0
    for neighbor_cell_id in cell.neighbors.values():
        if occupancy_map.get(neighbor_cell_id) == neighbor_cell_id:
            count += 1
    return count


def compute_neighbor_status(
    cell: OctagonCell,
    occupancy_map: Mapping[str, str | None],
) -> dict[str, bool]:
    """Map each neighbor cell id of *cell* to whether its occupant is home.

    Used by the border pass to color shared edges.
    """
    return {
        neighbor_cell_id: occupancy_map.get(neighbor_cell_id) == neighbor_cell_id
        for neighbor_cell_id in cell.neighbors.values()
    }


def count_home_pieces(pieces: Iterable[PuzzlePiece]) -> int:
    return sum(1 for piece in pieces if is_home(piece))
