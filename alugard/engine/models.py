from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, NewType, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

# --- Identifiers ---
CellId = NewType("CellId", str)
PieceId = NewType("PieceId", str)


# --- Phase ---
class GamePhase(str, Enum):
    IDLE = "idle"            # level selector visible
    LOADING = "loading"      # reserved for the rendering layer
    EXPLODING = "exploding"  # reserved for the rendering layer
    SCRAMBLED = "scrambled"
    SOLVING = "solving"
    WON = "won"


ACTIVE_PHASES = frozenset({GamePhase.SCRAMBLED, GamePhase.SOLVING})


class Direction(str, Enum):
    N = "N"
    S = "S"
    E = "E"
    W = "W"
    NE = "NE"
    NW = "NW"
    SE = "SE"
    SW = "SW"


# --- Geometry ---
class TraySize(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float = Field(ge=0)
    height: float = Field(ge=0)


# --- Level ---
class LevelConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: int = Field(ge=1)
    cols: int = Field(ge=1)
    rows: int = Field(ge=1)
    scatter_px: float = Field(default=0, ge=0)  # max jitter radius in the tray
    image_path: str = ""
    label: str = ""


# --- Grid ---
class OctagonCell(BaseModel):
    """One octagon of the 4.8.8 solution grid."""

    model_config = ConfigDict(frozen=True)

    id: CellId
    col: int
    row: int
    origin_x: float
    origin_y: float
    center_x: float
    center_y: float
    vertices: tuple[tuple[float, float], ...]  # local (0, 0)-origin boundary
    clip_path: str
    bg_offset_x: float
    bg_offset_y: float
    neighbors: dict[Direction, CellId] = Field(default_factory=dict)


# --- Pieces ---
class PuzzlePiece(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: PieceId  # same as the home cell id
    current_cell_id: CellId | None = None
    x: float = 0.0
    y: float = 0.0
    is_placed: bool = False
    correct_neighbor_count: int = 0


# --- Game State ---
class GameState(BaseModel):
    model_config = ConfigDict(frozen=True)

    phase: GamePhase = GamePhase.IDLE
    level: int = 1
    image_index: int = 0
    grid: tuple[OctagonCell, ...] = ()
    pieces: dict[str, PuzzlePiece] = Field(default_factory=dict)  # PieceId -> piece
    occupancy_map: dict[str, str | None] = Field(default_factory=dict)  # CellId -> PieceId
    move_count: int = 0
    elapsed_seconds: int = 0
    completion_pct: float = 0.0
    side_length: int = 0
    # Derived from grid; never serialized
    cell_index: dict[str, OctagonCell] = Field(default_factory=dict, exclude=True, repr=False)

    @model_validator(mode="after")
    def _index_grid(self) -> GameState:
        object.__setattr__(self, "cell_index", {cell.id: cell for cell in self.grid})
        return self


# --- Actions ---
class SetLevel(BaseModel):
    model_config = ConfigDict(frozen=True)

    action_type: Literal["set_level"] = "set_level"
    level: int


class StartGame(BaseModel):
    model_config = ConfigDict(frozen=True)

    action_type: Literal["start_game"] = "start_game"
    grid: tuple[OctagonCell, ...]
    pieces: tuple[PuzzlePiece, ...]
    side_length: int


class PlacePiece(BaseModel):
    model_config = ConfigDict(frozen=True)

    action_type: Literal["place_piece"] = "place_piece"
    piece_id: str
    cell_id: str


class PickupPiece(BaseModel):
    model_config = ConfigDict(frozen=True)

    action_type: Literal["pickup_piece"] = "pickup_piece"
    piece_id: str


class Tick(BaseModel):
    model_config = ConfigDict(frozen=True)

    action_type: Literal["tick"] = "tick"


class Win(BaseModel):
    model_config = ConfigDict(frozen=True)

    action_type: Literal["win"] = "win"


class Reset(BaseModel):
    model_config = ConfigDict(frozen=True)

    action_type: Literal["reset"] = "reset"


GameAction = Annotated[
    Union[SetLevel, StartGame, PlacePiece, PickupPiece, Tick, Win, Reset],
    Field(discriminator="action_type"),
]
