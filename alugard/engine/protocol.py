from __future__ import annotations

from collections.abc import Awaitable
from typing import Protocol, runtime_checkable

from alugard.engine.models import GameAction, GameState


@runtime_checkable
class PlacementSink(Protocol):
    """Interface a drag-and-drop layer drives.

    The drag layer resolves raw pointer/touch gestures to a piece id and a
    drop-target cell id on its own; the core only accepts the ids.
    """

    def place(self, piece_id: str, cell_id: str) -> None:
        ...

    def pickup(self, piece_id: str) -> None:
        ...


class Dispatcher(Protocol):
    """Anything that owns a game state and applies actions to it in order."""

    @property
    def state(self) -> GameState:
        ...

    def dispatch(self, action: GameAction) -> GameState:
        ...


class Sleep(Protocol):
    """Async clock used by tick drivers (``asyncio.sleep`` in production)."""

    def __call__(self, delay: float) -> Awaitable[None]:
        ...
