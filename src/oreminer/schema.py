"""Portable Pydantic schemas that describe the judge<>engine contract."""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Item(int, Enum):
    """Item carried by a robot, using the judge's numeric codes."""

    NONE = -1
    RADAR = 2
    TRAP = 3
    ORE = 4


class EntityType(int, Enum):
    """Kind of entity reported on an entity line."""

    OWN_ROBOT = 0
    OPPONENT_ROBOT = 1
    RADAR = 2
    TRAP = 3


class DigIntent(str, Enum):
    """What a DIG command is trying to achieve at its target cell."""

    RADAR = "RADAR"
    TRAP = "TRAP"
    ORE = "ORE"


# ---------------------------------------------------------------------------
# Geometry helpers
# ---------------------------------------------------------------------------


class GridSize(BaseModel):
    """Global grid dimensions, fixed for the whole game."""

    width: int = Field(ge=1, description="Number of columns along +X.")
    height: int = Field(ge=1, description="Number of rows along +Y.")

    @property
    def cells(self) -> int:
        return self.width * self.height


class Position(BaseModel):
    """Absolute in-bounds integer coordinates."""

    x: int = Field(ge=0, description="Column index, 0 is the base column.")
    y: int = Field(ge=0, description="Row index, 0-based from top.")


# ---------------------------------------------------------------------------
# Robot commands
# ---------------------------------------------------------------------------


class WaitCommand(BaseModel):
    """Do nothing this turn."""

    kind: Literal["WAIT"] = "WAIT"


class MoveCommand(BaseModel):
    """Move toward a target cell."""

    kind: Literal["MOVE"] = "MOVE"
    target: Position = Field(description="Destination cell.")


class DigCommand(BaseModel):
    """Dig at (or next to) a target cell."""

    kind: Literal["DIG"] = "DIG"
    target: Position = Field(description="Cell to dig.")
    intent: DigIntent = Field(description="Item the dig is meant to place or collect.")


class RequestRadarCommand(BaseModel):
    """Ask the base for a radar."""

    kind: Literal["REQUEST_RADAR"] = "REQUEST_RADAR"


class RequestTrapCommand(BaseModel):
    """Ask the base for a trap."""

    kind: Literal["REQUEST_TRAP"] = "REQUEST_TRAP"


RobotCommand = Union[
    WaitCommand,
    MoveCommand,
    DigCommand,
    RequestRadarCommand,
    RequestTrapCommand,
]


# ---------------------------------------------------------------------------
# Turn input
# ---------------------------------------------------------------------------


class Entity(BaseModel):
    """One entity line; dead or removed entities sit at x = -1."""

    id: int = Field(description="Entity id, stable for the game.")
    type: EntityType = Field(description="Owner and kind of the entity.")
    x: int = Field(ge=-1)
    y: int = Field(ge=-1)
    item: Item = Field(default=Item.NONE, description="Carried item for robots.")


class TurnSnapshot(BaseModel):
    """Everything the judge reports for a single turn."""

    my_score: int = 0
    opponent_score: int = 0
    ore: List[List[Optional[int]]] = Field(
        description="Row-major ore counts; None marks an unknown cell."
    )
    holes: List[List[bool]] = Field(
        default_factory=list, description="Row-major hole flags (read, unused)."
    )
    entities: List[Entity] = Field(default_factory=list)
    radar_cooldown: int = Field(default=0, ge=0)
    trap_cooldown: int = Field(default=0, ge=0)

    def entities_of(self, kind: EntityType) -> List[Entity]:
        return [entity for entity in self.entities if entity.type == kind]
