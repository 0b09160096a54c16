from __future__ import annotations

import logging
import random
from typing import Callable

from alugard.engine.models import (
    GameAction,
    GamePhase,
    GameState,
    LevelConfig,
    PickupPiece,
    PlacePiece,
    SetLevel,
    StartGame,
    TraySize,
)
from alugard.puzzle.levels import LevelRegistry
from alugard.puzzle.reducer import game_reducer, initial_state
from alugard.puzzle.scramble import create_and_scramble_pieces
from alugard.puzzle.tessellation import build_level_grid, find_cell_at_point

logger = logging.getLogger(__name__)

Listener = Callable[[GameState], None]


class GameStore:
    """
    Holds the authoritative puzzle state for one player session.

    Responsibilities:
    - Apply actions through the pure reducer, strictly in arrival order
    - Publish each new snapshot to subscribers (rendering, timers)
    - Accept placement events from the drag layer by piece/cell id
    - Compose grid build + scramble when a level starts
    """

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else initial_state()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> GameState:
        return self._state

    # ------------------------------------------------------------------ #
    #  Dispatch
    # ------------------------------------------------------------------ #

    def dispatch(self, action: GameAction) -> GameState:
        """Apply *action* and notify subscribers if the snapshot changed."""
        previous = self._state
        state = game_reducer(previous, action)
        if state is previous:
            return state

        self._state = state
        logger.debug(
            f"Applied {action.action_type}: phase={state.phase.value} "
            f"moves={state.move_count} completion={state.completion_pct:.2f}"
        )
        if state.phase == GamePhase.WON and previous.phase != GamePhase.WON:
            logger.info(
                f"Level {state.level} solved in {state.move_count} moves, "
                f"{state.elapsed_seconds}s"
            )

        for listener in list(self._listeners):
            listener(state)
        return state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------ #
    #  Level lifecycle
    # ------------------------------------------------------------------ #

    def start_game(
        self,
        level_config: LevelConfig,
        board_width: float,
        board_height: float,
        tray: TraySize,
        rng: random.Random | None = None,
    ) -> GameState:
        """Build the level's grid for the board, scramble pieces, and start."""
        cells, side_length, size = build_level_grid(level_config, board_width, board_height)
        pieces = create_and_scramble_pieces(cells, level_config, tray, size, rng=rng)
        logger.info(
            f"Starting level {level_config.level} ({level_config.label}): "
            f"{len(cells)} cells, side length {side_length}px"
        )
        return self.dispatch(StartGame(grid=cells, pieces=pieces, side_length=side_length))

    def advance_level(self, registry: LevelRegistry) -> LevelConfig | None:
        """Move to the next registered level, if any."""
        config = registry.next_level(self._state.level)
        if config is not None:
            self.dispatch(SetLevel(level=config.level))
        return config

    # ------------------------------------------------------------------ #
    #  PlacementSink
    # ------------------------------------------------------------------ #

    def place(self, piece_id: str, cell_id: str) -> None:
        self.dispatch(PlacePiece(piece_id=piece_id, cell_id=cell_id))

    def pickup(self, piece_id: str) -> None:
        self.dispatch(PickupPiece(piece_id=piece_id))

    def place_at_point(self, piece_id: str, x: float, y: float) -> bool:
        """Drop *piece_id* onto the cell under board point (x, y).

        Returns False, leaving the state untouched, when no cell is hit.
        """
        cell = find_cell_at_point(x, y, self._state.grid, self._state.side_length)
        if cell is None:
            return False
        self.place(piece_id, cell.id)
        return True
