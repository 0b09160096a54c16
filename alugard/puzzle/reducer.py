"""Puzzle state machine: a pure reducer over discrete game actions.

Every transition returns a new ``GameState``; the previous snapshot is never
modified. Actions that reference unknown pieces or cells return the state
unchanged.

    idle ──START_GAME──▶ scrambled ──PLACE_PIECE──▶ solving ──(all home)──▶ won
      ▲                                                                   │
      └──────────────────────── RESET / SET_LEVEL ◀──────────────────────┘
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from alugard.engine.models import (
    ACTIVE_PHASES,
    GameAction,
    GamePhase,
    GameState,
    PickupPiece,
    PlacePiece,
    PuzzlePiece,
    Reset,
    SetLevel,
    StartGame,
    Tick,
    Win,
)
from alugard.puzzle.scoring import check_win, compute_completion, compute_piece_neighbor_score
from alugard.puzzle.tessellation import index_cells


def initial_state() -> GameState:
    return GameState()


def game_reducer(state: GameState, action: GameAction) -> GameState:
    if isinstance(action, SetLevel):
        return GameState(level=action.level, image_index=action.level - 1)

    if isinstance(action, StartGame):
        return _apply_start_game(state, action)

    if isinstance(action, PlacePiece):
        return _apply_place_piece(state, action)

    if isinstance(action, PickupPiece):
        return _apply_pickup_piece(state, action)

    if isinstance(action, Tick):
        if state.phase not in ACTIVE_PHASES:
            return state
        return state.model_copy(update={"elapsed_seconds": state.elapsed_seconds + 1})

    if isinstance(action, Win):
        return state.model_copy(update={"phase": GamePhase.WON})

    if isinstance(action, Reset):
        return GameState(level=state.level, image_index=state.image_index)

    return state


# ── Private handlers ──

def _apply_start_game(state: GameState, action: StartGame) -> GameState:
    grid = tuple(action.grid)
    return state.model_copy(update={
        "phase": GamePhase.SCRAMBLED,
        "grid": grid,
        "cell_index": index_cells(grid),
        "pieces": {piece.id: piece for piece in action.pieces},
        "occupancy_map": {cell.id: None for cell in grid},
        "side_length": action.side_length,
        "move_count": 0,
        "elapsed_seconds": 0,
        "completion_pct": 0.0,
    })


def _apply_place_piece(state: GameState, action: PlacePiece) -> GameState:
    piece_id, cell_id = action.piece_id, action.cell_id
    piece = state.pieces.get(piece_id)
    if piece is None or cell_id not in state.occupancy_map:
        return state

    occupancy = dict(state.occupancy_map)
    pieces = dict(state.pieces)
    previous_cell_id = piece.current_cell_id

    # Free the cell this piece was previously in
    if previous_cell_id is not None:
        occupancy[previous_cell_id] = None

    # A different piece already in the target cell goes back to the tray
    evicted_id = occupancy.get(cell_id)
    if evicted_id is not None and evicted_id != piece_id and evicted_id in pieces:
        pieces[evicted_id] = _to_tray(pieces[evicted_id])

    occupancy[cell_id] = piece_id
    pieces[piece_id] = piece.model_copy(update={
        "current_cell_id": cell_id,
        "is_placed": True,
        "correct_neighbor_count": compute_piece_neighbor_score(
            cell_id, occupancy, state.cell_index,
        ),
    })

    # Neighbors of both the destination and the vacated cell may have changed
    affected = _neighbor_cell_ids(state, cell_id)
    if previous_cell_id is not None:
        affected.extend(_neighbor_cell_ids(state, previous_cell_id))
    _rescore(pieces, occupancy, state, affected)

    phase = GamePhase.WON if check_win(pieces) else GamePhase.SOLVING
    return state.model_copy(update={
        "phase": phase,
        "pieces": pieces,
        "occupancy_map": occupancy,
        "move_count": state.move_count + 1,
        "completion_pct": compute_completion(pieces),
    })


def _apply_pickup_piece(state: GameState, action: PickupPiece) -> GameState:
    piece = state.pieces.get(action.piece_id)
    if piece is None or piece.current_cell_id is None:
        return state

    vacated_cell_id = piece.current_cell_id
    occupancy = dict(state.occupancy_map)
    occupancy[vacated_cell_id] = None
    pieces = dict(state.pieces)
    pieces[piece.id] = _to_tray(piece)

    # Former neighbors lose this cell from their surroundings if it was home
    _rescore(pieces, occupancy, state, _neighbor_cell_ids(state, vacated_cell_id))

    return state.model_copy(update={
        "pieces": pieces,
        "occupancy_map": occupancy,
        "completion_pct": compute_completion(pieces),
    })


def _to_tray(piece: PuzzlePiece) -> PuzzlePiece:
    return piece.model_copy(update={
        "current_cell_id": None,
        "is_placed": False,
        "correct_neighbor_count": 0,
    })


def _neighbor_cell_ids(state: GameState, cell_id: str) -> list[str]:
    cell = state.cell_index.get(cell_id)
    if cell is None:
        return []
    return list(cell.neighbors.values())


def _rescore(
    pieces: dict[str, PuzzlePiece],
    occupancy: Mapping[str, str | None],
    state: GameState,
    cell_ids: Iterable[str],
) -> None:
    """Recompute the neighbor score of every piece occupying *cell_ids*.

    Mutates the working *pieces* dict only; it is never shared with a
    published snapshot.
    """
    for neighbor_cell_id in cell_ids:
        occupant_id = occupancy.get(neighbor_cell_id)
        if occupant_id is None or occupant_id not in pieces:
            continue
        occupant = pieces[occupant_id]
        score = compute_piece_neighbor_score(neighbor_cell_id, occupancy, state.cell_index)
        if occupant.correct_neighbor_count != score:
            pieces[occupant_id] = occupant.model_copy(update={"correct_neighbor_count": score})
