"""Turn driver that wires the grid, robot tracker and scheduler together."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional, TextIO

from oreminer.agent.robots import RobotTracker
from oreminer.agent.scheduler import AssignmentReport, TaskScheduler
from oreminer.config import EngineConfig
from oreminer.env.grid import OreGrid
from oreminer.logging.turn_log import Frame, GameLog, GameMeta, RobotFrame
from oreminer.protocol import format_command, parse_grid_size, read_turn
from oreminer.schema import EntityType, GridSize, RobotCommand, TurnSnapshot
from oreminer.utils.errors import ProtocolError
from oreminer.utils.real_time_logger import get_logger

LOGGER = get_logger()


@dataclass
class TurnResult:
    commands: List[RobotCommand]
    report: AssignmentReport
    elapsed_ms: float
    unknown_fraction: float
    known_ore: int


class TurnDriver:
    """Runs one decision pass per snapshot; grid dimensions never change."""

    def __init__(
        self,
        size: GridSize,
        config: Optional[EngineConfig] = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.size = size
        self.config = config or EngineConfig()
        self.grid = OreGrid(size)
        self.tracker = RobotTracker(self.config.fleet_size)
        self.scheduler = TaskScheduler(self.config)
        self.turn_index = 0
        self._clock = clock

    def play_turn(self, snapshot: TurnSnapshot) -> TurnResult:
        start = self._clock()

        self.grid.load_snapshot(snapshot)
        for trap in snapshot.entities_of(EntityType.TRAP):
            if self.grid.in_bounds(trap.x, trap.y):
                self.grid.clear_ore(trap.x, trap.y)
        unknown_fraction = self.grid.unknown_fraction()
        known_ore = self.grid.total_ore()

        self.tracker.refresh(snapshot.entities)
        queue = self.tracker.revalidate(self.grid)
        report = self.scheduler.assign(
            self.tracker.robots, queue, self.grid, snapshot.radar_cooldown
        )

        elapsed_ms = (self._clock() - start) * 1000.0
        LOGGER.debug(
            "[turn %d] %.2f ms, %d robots re-planned, unknown=%.2f, ore=%d",
            self.turn_index,
            elapsed_ms,
            len(queue),
            unknown_fraction,
            known_ore,
        )
        if elapsed_ms > self.config.turn_budget_ms:
            LOGGER.warning(
                "[turn %d] decision took %.2f ms, budget is %.2f ms",
                self.turn_index,
                elapsed_ms,
                self.config.turn_budget_ms,
            )
        self.turn_index += 1
        return TurnResult(
            commands=self.tracker.commands(),
            report=report,
            elapsed_ms=elapsed_ms,
            unknown_fraction=unknown_fraction,
            known_ore=known_ore,
        )

    def frame_for(self, snapshot: TurnSnapshot, result: TurnResult) -> Frame:
        return Frame(
            t=self.turn_index - 1,
            elapsed_ms=result.elapsed_ms,
            radar_cooldown=snapshot.radar_cooldown,
            trap_cooldown=snapshot.trap_cooldown,
            unknown_fraction=result.unknown_fraction,
            known_ore=result.known_ore,
            robots=[
                RobotFrame(
                    slot=robot.slot,
                    robot_id=robot.id,
                    pos=robot.position,
                    item=robot.item,
                    command=format_command(robot.command),
                )
                for robot in self.tracker.robots
            ],
        )


def run_game(
    lines: Iterable[str],
    out: TextIO,
    config: Optional[EngineConfig] = None,
    turn_log: Optional[Path] = None,
) -> int:
    """Play turns until the input ends; returns the number of turns played."""

    stream = iter(lines)
    try:
        header = next(stream)
    except StopIteration as exc:
        raise ProtocolError("Input ended before the grid size line.") from exc

    size = parse_grid_size(header)
    driver = TurnDriver(size, config)
    log = GameLog(meta=GameMeta(grid_size=size, config=driver.config)) if turn_log else None
    LOGGER.info("[game] %dx%d grid, fleet of %d", size.width, size.height, driver.config.fleet_size)

    try:
        while True:
            snapshot = read_turn(stream, size)
            if snapshot is None:
                break
            result = driver.play_turn(snapshot)
            for command in result.commands:
                out.write(format_command(command) + "\n")
            out.flush()
            if log is not None:
                log.frames.append(driver.frame_for(snapshot, result))
    finally:
        if log is not None and turn_log is not None:
            log.write(turn_log)
            LOGGER.info("[game] Turn log saved to %s", turn_log)

    LOGGER.info("[game] Input ended after %d turns", driver.turn_index)
    return driver.turn_index
