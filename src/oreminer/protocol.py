"""Line-based reader/writer for the judge's turn protocol."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from pydantic import ValidationError

from oreminer.schema import (
    DigCommand,
    Entity,
    GridSize,
    MoveCommand,
    RequestRadarCommand,
    RequestTrapCommand,
    RobotCommand,
    TurnSnapshot,
    WaitCommand,
)
from oreminer.utils.errors import ProtocolError


def _ints(line: str, count: int, what: str) -> List[int]:
    tokens = line.split()
    if len(tokens) < count:
        raise ProtocolError(f"Expected {count} integers for {what}, got {line!r}.")
    try:
        return [int(token) for token in tokens[:count]]
    except ValueError as exc:
        raise ProtocolError(f"Non-integer token in {what}: {line!r}.") from exc


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration as exc:
        raise ProtocolError(f"Input ended while reading {what}.") from exc


def parse_grid_size(line: str) -> GridSize:
    width, height = _ints(line, 2, "grid size")
    try:
        return GridSize(width=width, height=height)
    except ValidationError as exc:
        raise ProtocolError(f"Invalid grid size: {line!r}.") from exc


def parse_cell_row(line: str, width: int) -> Tuple[List[Optional[int]], List[bool]]:
    """Split one map row into ore counts (None when unknown) and hole flags."""

    tokens = line.split()
    if len(tokens) < 2 * width:
        raise ProtocolError(f"Expected {2 * width} tokens in map row, got {len(tokens)}.")
    ore: List[Optional[int]] = []
    holes: List[bool] = []
    for i in range(width):
        raw_ore, raw_hole = tokens[2 * i], tokens[2 * i + 1]
        try:
            ore.append(int(raw_ore))
        except ValueError:
            # "?" and any other placeholder mean the cell is not revealed.
            ore.append(None)
        try:
            holes.append(int(raw_hole) != 0)
        except ValueError as exc:
            raise ProtocolError(f"Invalid hole flag {raw_hole!r} in map row.") from exc
    return ore, holes


def parse_entity(line: str) -> Entity:
    entity_id, kind, x, y, item = _ints(line, 5, "entity")
    try:
        return Entity(id=entity_id, type=kind, x=x, y=y, item=item)
    except ValidationError as exc:
        raise ProtocolError(f"Invalid entity line: {line!r}.") from exc


def read_turn(lines: Iterator[str], size: GridSize) -> Optional[TurnSnapshot]:
    """Read one full turn; returns None when input ends between turns."""

    try:
        score_line = next(lines)
    except StopIteration:
        return None
    if not score_line.strip():
        return None
    my_score, opponent_score = _ints(score_line, 2, "scores")

    ore_rows: List[List[Optional[int]]] = []
    hole_rows: List[List[bool]] = []
    for _ in range(size.height):
        ore, holes = parse_cell_row(_next_line(lines, "map row"), size.width)
        ore_rows.append(ore)
        hole_rows.append(holes)

    entity_count, radar_cooldown, trap_cooldown = _ints(
        _next_line(lines, "entity header"), 3, "entity header"
    )
    entities = [parse_entity(_next_line(lines, "entity")) for _ in range(entity_count)]

    try:
        return TurnSnapshot(
            my_score=my_score,
            opponent_score=opponent_score,
            ore=ore_rows,
            holes=hole_rows,
            entities=entities,
            radar_cooldown=radar_cooldown,
            trap_cooldown=trap_cooldown,
        )
    except ValidationError as exc:
        raise ProtocolError("Turn input failed validation.") from exc


def format_command(command: RobotCommand) -> str:
    if isinstance(command, MoveCommand):
        return f"MOVE {command.target.x} {command.target.y}"
    if isinstance(command, DigCommand):
        return f"DIG {command.target.x} {command.target.y}"
    if isinstance(command, RequestRadarCommand):
        return "REQUEST RADAR"
    if isinstance(command, RequestTrapCommand):
        return "REQUEST TRAP"
    if isinstance(command, WaitCommand):
        return "WAIT"
    raise TypeError(f"Unknown command type: {type(command).__name__}")
