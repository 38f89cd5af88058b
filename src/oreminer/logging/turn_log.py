from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from pydantic import BaseModel, Field

from oreminer.config import EngineConfig
from oreminer.schema import GridSize, Item


class GameMeta(BaseModel):
    grid_size: GridSize
    config: EngineConfig


class RobotFrame(BaseModel):
    slot: int = Field(ge=0)
    robot_id: int
    pos: Tuple[int, int]
    item: Item
    command: str = Field(description="Command line emitted for this slot.")


class Frame(BaseModel):
    t: int = Field(ge=0)
    elapsed_ms: float = Field(ge=0.0)
    radar_cooldown: int = Field(ge=0)
    trap_cooldown: int = Field(ge=0)
    unknown_fraction: float = Field(ge=0.0, le=1.0)
    known_ore: int
    robots: List[RobotFrame]


class GameLog(BaseModel):
    meta: GameMeta
    frames: List[Frame] = Field(default_factory=list)

    def write(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
