"""Per-slot robot bookkeeping and sticky-command validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from oreminer.env.grid import OreGrid
from oreminer.schema import (
    DigCommand,
    DigIntent,
    Entity,
    EntityType,
    Item,
    MoveCommand,
    RequestRadarCommand,
    RequestTrapCommand,
    RobotCommand,
    WaitCommand,
)
from oreminer.utils.real_time_logger import get_logger

LOGGER = get_logger()


@dataclass
class RobotState:
    slot: int
    id: int = -1
    position: Tuple[int, int] = (-1, -1)
    item: Item = Item.NONE
    command: RobotCommand = field(default_factory=WaitCommand)

    @property
    def is_dead(self) -> bool:
        return self.position[0] == -1

    @property
    def at_base(self) -> bool:
        return self.position[0] == 0


def is_command_valid(robot: RobotState, grid: OreGrid) -> bool:
    """Decide whether last turn's command should be carried into this turn.

    A still-valid ORE dig reserves one unit of its target's ore. A dig whose
    target is already fully claimed is dropped and leaves the count alone.
    """

    command = robot.command
    if isinstance(command, DigCommand):
        if command.intent == DigIntent.RADAR:
            return robot.item == Item.RADAR
        if command.intent == DigIntent.TRAP:
            return robot.item == Item.TRAP
        # At most one ore unit can be carried.
        if robot.item == Item.ORE:
            return False
        target = command.target
        if grid.ore_at(target.x, target.y) <= 0:
            return False
        grid.reserve(target.x, target.y)
        return True
    if isinstance(command, MoveCommand):
        return robot.position != (command.target.x, command.target.y)
    if isinstance(command, RequestRadarCommand):
        return robot.item != Item.RADAR
    if isinstance(command, RequestTrapCommand):
        return robot.item != Item.TRAP
    return False


class RobotTracker:
    """Fixed fleet of slots filled by own robots in order of appearance."""

    def __init__(self, fleet_size: int) -> None:
        self.robots: List[RobotState] = [RobotState(slot=i) for i in range(fleet_size)]

    def refresh(self, entities: Iterable[Entity]) -> None:
        own = [entity for entity in entities if entity.type == EntityType.OWN_ROBOT]
        if len(own) > len(self.robots):
            LOGGER.warning(
                "[tracker] %d own robots reported for %d slots; ignoring the surplus",
                len(own),
                len(self.robots),
            )
        for robot, entity in zip(self.robots, own):
            robot.id = entity.id
            robot.position = (entity.x, entity.y)
            robot.item = entity.item
        # Slots missing from this turn are treated as dead.
        for robot in self.robots[len(own):]:
            robot.position = (-1, -1)
            robot.item = Item.NONE

    def revalidate(self, grid: OreGrid) -> List[int]:
        """Keep valid commands, reset the rest to WAIT and queue their slots."""

        queue: List[int] = []
        for robot in self.robots:
            if robot.is_dead:
                robot.command = WaitCommand()
                continue
            if is_command_valid(robot, grid):
                continue
            robot.command = WaitCommand()
            queue.append(robot.slot)
        return queue

    def commands(self) -> List[RobotCommand]:
        return [robot.command for robot in self.robots]
