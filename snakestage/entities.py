"""Timed objects placed on the grid: gates, items and temporary walls."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum

from snakestage.snake import Position

GATE_DURATION_SECONDS = 10
ITEM_DURATION_SECONDS = 5.0


class GateType(Enum):
    ENTRANCE = "entrance"
    EXIT = "exit"


class WallType(Enum):
    OUTER = "outer"
    INNER = "inner"


class ItemType(Enum):
    GROWTH = "growth"
    POISON = "poison"
    SPEED = "speed"


@dataclass
class Gate:
    """One end of a gate pair, set into a wall."""

    x: int
    y: int
    gate_type: GateType
    wall_type: WallType
    pair_id: int = 0
    original_wall_value: int = 1
    created_at: float = field(default_factory=time.monotonic)

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    def is_entrance(self) -> bool:
        return self.gate_type is GateType.ENTRANCE

    def is_exit(self) -> bool:
        return self.gate_type is GateType.EXIT

    def is_outer_wall(self) -> bool:
        return self.wall_type is WallType.OUTER

    def is_inner_wall(self) -> bool:
        return self.wall_type is WallType.INNER

    def is_expired(self) -> bool:
        elapsed_seconds = int(time.monotonic() - self.created_at)
        return elapsed_seconds >= GATE_DURATION_SECONDS


@dataclass
class Item:
    """A collectible item that disappears after ``duration`` seconds."""

    x: int
    y: int
    item_type: ItemType
    duration: float = ITEM_DURATION_SECONDS
    created_at: float = field(default_factory=time.monotonic)

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    def is_expired(self) -> bool:
        return time.monotonic() - self.created_at >= self.duration

    def remaining_time(self) -> float:
        """Seconds left before expiry, never negative."""
        remaining = self.duration - (time.monotonic() - self.created_at)
        return max(remaining, 0.0)


@dataclass
class TemporaryWall:
    """A wall cell that lasts ``lifetime`` seconds."""

    position: Position
    lifetime: float
    created_at: float = field(default_factory=time.monotonic)

    def is_expired(self) -> bool:
        return time.monotonic() - self.created_at >= self.lifetime