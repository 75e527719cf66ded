"""Command that shows a small demonstration map."""

from __future__ import annotations

import argparse
import curses

from snakestage.colors import ColorManager
from snakestage.game_map import GameMap

DEMO_SIZE = 21


def build_demo_map() -> GameMap:
    """A 21x21 map with a short wall and a three-cell snake on it."""
    game_map = GameMap(DEMO_SIZE, DEMO_SIZE)
    for y in (5, 6, 7):
        game_map.set_wall(5, y)
    game_map.set_snake_head(10, 10)
    game_map.set_snake_body(10, 11)
    game_map.set_snake_body(10, 12)
    return game_map


def _show(window, game_map: GameMap) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    color_manager = ColorManager()
    color_manager.initialize_colors()
    game_map.color_manager = color_manager
    game_map.draw(window)
    window.getch()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="snakestage", description="Show a demonstration map; press any key to exit."
    )
    parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="write the map as text to standard output instead of the terminal screen",
    )
    args = parser.parse_args(argv)

    game_map = build_demo_map()
    if args.print_only:
        for row in game_map.render():
            print(row)
        return 0

    curses.wrapper(_show, game_map)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())