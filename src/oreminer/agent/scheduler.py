"""Greedy task assignment for robots that need a fresh command."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from oreminer.agent.robots import RobotState
from oreminer.config import EngineConfig
from oreminer.env.coverage import best_radar_position
from oreminer.env.grid import OreGrid
from oreminer.schema import (
    DigCommand,
    DigIntent,
    Item,
    MoveCommand,
    RequestRadarCommand,
)
from oreminer.utils.real_time_logger import get_logger

LOGGER = get_logger()


@dataclass
class AssignmentReport:
    returning: int = 0
    radar_digs: int = 0
    radar_requests: int = 0
    ore_digs: int = 0
    exploring: int = 0
    radar_cooldown: int = 0


class TaskScheduler:
    """Turns the queue of undecided robots into commands in slot order."""

    def __init__(self, config: EngineConfig) -> None:
        self.config = config

    def assign(
        self,
        robots: Sequence[RobotState],
        queue: Sequence[int],
        grid: OreGrid,
        radar_cooldown: int,
    ) -> AssignmentReport:
        report = AssignmentReport(radar_cooldown=radar_cooldown)
        wants_radars = grid.unknown_fraction() >= self.config.unknown_threshold
        idle: List[RobotState] = []

        for slot in queue:
            robot = robots[slot]
            if robot.item == Item.ORE:
                robot.command = self._return_to_base(robot, grid)
                report.returning += 1
            elif robot.at_base:
                if robot.item == Item.RADAR:
                    target = best_radar_position(grid, self.config.radar_radius)
                    if target.x == 0:
                        # Nothing left to reveal; dig ore until a radar spot appears.
                        idle.append(robot)
                    else:
                        robot.command = DigCommand(target=target, intent=DigIntent.RADAR)
                        report.radar_digs += 1
                elif robot.item == Item.TRAP:
                    # Trap placement is not planned; the robot is used as a digger.
                    idle.append(robot)
                elif report.radar_cooldown == 0 and wants_radars:
                    robot.command = RequestRadarCommand()
                    # Only one robot may ask before the judge confirms the cooldown.
                    report.radar_cooldown = self.config.radar_cooldown_turns
                    report.radar_requests += 1
                else:
                    idle.append(robot)
            else:
                idle.append(robot)

        if idle:
            self._resolve_idle(idle, grid, report)
        return report

    def _resolve_idle(
        self, idle: List[RobotState], grid: OreGrid, report: AssignmentReport
    ) -> None:
        pending = list(idle)
        ore_available = grid.total_ore() > 0

        # Column-major scan sends robots to the cells closest to base first.
        if ore_available:
            for x in range(grid.size.width):
                for y in range(grid.size.height):
                    while pending and grid.ore_at(x, y) > 0:
                        robot = pending.pop(0)
                        robot.command = DigCommand(
                            target=grid.clamp(x, y), intent=DigIntent.ORE
                        )
                        grid.reserve(x, y)
                        report.ore_digs += 1
                    if not pending:
                        return
        else:
            robot = pending.pop(0)
            robot.command = self._return_to_base(robot, grid)
            report.returning += 1

        center = grid.center()
        for robot in pending:
            robot.command = MoveCommand(target=center)
            report.exploring += 1
        if pending:
            LOGGER.debug("[scheduler] %d robots exploring toward %s", len(pending), center)

    def _return_to_base(self, robot: RobotState, grid: OreGrid) -> MoveCommand:
        return MoveCommand(target=grid.clamp(0, robot.position[1]))
