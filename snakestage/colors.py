"""Curses colour pairs for each kind of map cell."""

from __future__ import annotations

import curses
from enum import Enum


class ColorType(Enum):
    """Kinds of cell colour; each value is its curses pair number."""

    DEFAULT = 0
    WALL = 1
    IMMUNE_WALL = 2
    SNAKE_HEAD = 3
    SNAKE_BODY = 4
    GROWTH_ITEM = 5
    POISON_ITEM = 6
    GATE = 7
    SPEED_ITEM = 8


_FOREGROUNDS = {
    ColorType.WALL: curses.COLOR_WHITE,
    ColorType.IMMUNE_WALL: curses.COLOR_RED,
    ColorType.SNAKE_HEAD: curses.COLOR_GREEN,
    ColorType.SNAKE_BODY: curses.COLOR_CYAN,
    ColorType.GROWTH_ITEM: curses.COLOR_YELLOW,
    ColorType.POISON_ITEM: curses.COLOR_MAGENTA,
    ColorType.GATE: curses.COLOR_BLUE,
    ColorType.SPEED_ITEM: curses.COLOR_WHITE,
}


class ColorManager:
    """Sets up colour pairs and switches them on and off on a window."""

    def __init__(self) -> None:
        self._supported = False

    def has_color_support(self) -> bool:
        return self._supported

    def initialize_colors(self) -> bool:
        """Start colour mode; must follow curses initialisation. Returns support."""
        try:
            self._supported = curses.has_colors()
            if not self._supported:
                return False
            curses.start_color()
        except curses.error:
            self._supported = False
            return False
        self.setup_color_pairs()
        return True

    def setup_color_pairs(self) -> None:
        if not self._supported:
            return
        for color_type, foreground in _FOREGROUNDS.items():
            curses.init_pair(color_type.value, foreground, curses.COLOR_BLACK)

    def apply_color(self, window, color_type: ColorType) -> None:
        if not self._supported:
            return
        pair = self.color_pair(color_type)
        if pair > 0:
            window.attron(curses.color_pair(pair))

    def reset_color(self, window) -> None:
        """Switch off every colour pair this manager defines."""
        if not self._supported:
            return
        for color_type in _FOREGROUNDS:
            window.attroff(curses.color_pair(color_type.value))

    def color_pair(self, color_type: ColorType) -> int:
        return color_type.value