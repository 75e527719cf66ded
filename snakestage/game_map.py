"""The playing field: a grid of cell codes."""

from __future__ import annotations

import curses

from snakestage.colors import ColorManager, ColorType

EMPTY = 0
WALL = 1
IMMUNE_WALL = 2
SNAKE_HEAD = 3
SNAKE_BODY = 4
GROWTH_ITEM = 5
POISON_ITEM = 6
GATE = 7
SPEED_ITEM = 8
TEMPORARY_WALL = 9
OUT_OF_BOUNDS = -1

_GLYPHS = {
    EMPTY: " ",
    WALL: "#",
    IMMUNE_WALL: "*",
    SNAKE_HEAD: "@",
    SNAKE_BODY: "o",
    GROWTH_ITEM: "+",
    POISON_ITEM: "-",
    GATE: "G",
    SPEED_ITEM: "*",
    TEMPORARY_WALL: "T",
}

_CELL_COLORS = {
    WALL: ColorType.WALL,
    IMMUNE_WALL: ColorType.IMMUNE_WALL,
    SNAKE_HEAD: ColorType.SNAKE_HEAD,
    SNAKE_BODY: ColorType.SNAKE_BODY,
    GROWTH_ITEM: ColorType.GROWTH_ITEM,
    POISON_ITEM: ColorType.POISON_ITEM,
    GATE: ColorType.GATE,
    SPEED_ITEM: ColorType.SPEED_ITEM,
    TEMPORARY_WALL: ColorType.WALL,
}


class GameMap:
    """A width by height grid bordered with immune walls."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.color_manager: ColorManager | None = None
        self._cells = [[EMPTY] * width for _ in range(height)]
        self.initialize_map()

    def initialize_map(self) -> None:
        """Set the border cells to immune walls."""
        for x in range(self.width):
            self._cells[0][x] = IMMUNE_WALL
            self._cells[self.height - 1][x] = IMMUNE_WALL
        for row in self._cells:
            row[0] = IMMUNE_WALL
            row[self.width - 1] = IMMUNE_WALL

    def get_cell(self, x: int, y: int) -> int:
        """Cell code at (x, y), or OUT_OF_BOUNDS outside the grid."""
        if not self.is_valid_position(x, y):
            return OUT_OF_BOUNDS
        return self._cells[y][x]

    def set_cell(self, x: int, y: int, value: int) -> None:
        """Set a cell; positions outside the grid are ignored."""
        if self.is_valid_position(x, y):
            self._cells[y][x] = value

    def set_wall(self, x: int, y: int) -> None:
        self.set_cell(x, y, WALL)

    def set_snake_head(self, x: int, y: int) -> None:
        self.set_cell(x, y, SNAKE_HEAD)

    def set_snake_body(self, x: int, y: int) -> None:
        self.set_cell(x, y, SNAKE_BODY)

    def set_gate(self, x: int, y: int) -> None:
        self.set_cell(x, y, GATE)

    def set_temporary_wall(self, x: int, y: int) -> None:
        self.set_cell(x, y, TEMPORARY_WALL)

    def is_valid_position(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def find_safe_position(self) -> tuple[int, int] | None:
        """First head position, row by row, with three empty cells ending at it."""
        for y in range(1, self.height - 1):
            row = self._cells[y]
            for x in range(3, self.width - 1):
                if row[x] == EMPTY and row[x - 1] == EMPTY and row[x - 2] == EMPTY:
                    return (x, y)
        return None

    def render(self) -> list[str]:
        """The grid as text rows, one glyph per cell."""
        return ["".join(_GLYPHS.get(value, "?") for value in row) for row in self._cells]

    def draw(self, window) -> None:
        """Paint the grid onto a curses window."""
        window.clear()
        manager = self.color_manager
        for y, row in enumerate(self._cells):
            for x, value in enumerate(row):
                if manager is not None:
                    manager.apply_color(window, _CELL_COLORS.get(value, ColorType.DEFAULT))
                try:
                    window.addch(y, x, _GLYPHS.get(value, "?"))
                except curses.error:
                    # Writing the bottom-right cell moves the cursor off screen.
                    pass
                if manager is not None:
                    manager.reset_color(window)
        window.refresh()