"""The snake: its body, heading and movement on the grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

INITIAL_LENGTH = 3
MIN_LENGTH = 3


@dataclass(frozen=True)
class Position:
    """A cell on the grid, column ``x`` and row ``y``."""

    x: int
    y: int


class Direction(Enum):
    """Heading of the snake, valued by its (dx, dy) step."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake whose head is the first cell of its body."""

    def __init__(self, start_x: int, start_y: int) -> None:
        self._body: list[Position] = []
        self._direction = Direction.RIGHT
        self._should_grow = False
        self.reset(start_x, start_y)

    @property
    def head(self) -> Position:
        return self._body[0]

    @property
    def head_x(self) -> int:
        return self._body[0].x

    @property
    def head_y(self) -> int:
        return self._body[0].y

    @property
    def length(self) -> int:
        return len(self._body)

    @property
    def body(self) -> tuple[Position, ...]:
        return tuple(self._body)

    @property
    def direction(self) -> Direction:
        return self._direction

    def move(self) -> None:
        """Advance one cell in the current direction."""
        head = self._body[0]
        new_head = Position(head.x + self._direction.dx, head.y + self._direction.dy)
        self._body.insert(0, new_head)
        if self._should_grow:
            self._should_grow = False
        else:
            self._body.pop()

    def turn(self, new_direction: Direction) -> None:
        """Change heading, ignoring a reversal onto the body."""
        if not self.is_opposite_direction(new_direction):
            self._direction = new_direction

    def grow(self) -> None:
        """Lengthen by one now and keep the tail on the next move."""
        self._should_grow = True
        if self._body:
            self._body.append(self._body[-1])

    def has_self_collision(self) -> bool:
        head = self._body[0]
        return head in self._body[1:]

    def is_opposite_direction(self, new_direction: Direction) -> bool:
        return new_direction is self._direction.opposite

    def apply_growth_item(self) -> None:
        self.grow()

    def apply_poison_item(self) -> bool:
        """Drop the tail; return False if the snake is already at minimum length."""
        if len(self._body) <= MIN_LENGTH:
            return False
        self._body.pop()
        return True

    def teleport_to(self, position: Position) -> None:
        """Move only the head to ``position``."""
        if self._body:
            self._body[0] = position

    def reset(self, start_x: int, start_y: int) -> None:
        """Restore the initial three-cell body facing right at the given head."""
        self._body = [Position(start_x - offset, start_y) for offset in range(INITIAL_LENGTH)]
        self._direction = Direction.RIGHT
        self._should_grow = False