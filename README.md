# snakestage

The building blocks of a terminal snake game: a grid map with walls, a snake
that moves, grows and teleports, timed items, gates and temporary walls, and a
run of four stages, each with its own wall layout and missions.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The demo command

```
snakestage-demo
```

This draws a 21 x 21 demo map in the terminal (a short wall and a three-cell
snake inside the immune-wall border), in colour where the terminal supports
it, and waits for a key press. It needs a terminal that curses can drive.

```
snakestage-demo --print
```

writes the same map as text to standard output instead.

The map it shows is built by `snakestage.cli.build_demo_map()`.

## What the package does not do

There is no playable game here. The package has no game loop, no keyboard
control of the snake, no score keeping, and nothing that spawns items, places
gates or teleports the snake through them. It provides the map, the snake, the
timed objects and the stage and mission bookkeeping that such a game would be
built from, and the demo command above only displays a fixed map.

## The map

`snakestage.game_map.GameMap(width, height)` is a grid of integer cells whose
border is set to immune walls when it is created. The cell values, available
as constants in `snakestage.game_map`, are:

| Value | Constant         | Drawn as |
|-------|------------------|----------|
| 0     | `EMPTY`          | space    |
| 1     | `WALL`           | `#`      |
| 2     | `IMMUNE_WALL`    | `*`      |
| 3     | `SNAKE_HEAD`     | `@`      |
| 4     | `SNAKE_BODY`     | `o`      |
| 5     | `GROWTH_ITEM`    | `+`      |
| 6     | `POISON_ITEM`    | `-`      |
| 7     | `GATE`           | `G`      |
| 8     | `SPEED_ITEM`     | `*`      |
| 9     | `TEMPORARY_WALL` | `T`      |

Any other value is drawn as `?`. Reading a cell outside the map gives
`OUT_OF_BOUNDS` (-1); writing outside it is ignored.

```python
from snakestage.game_map import GameMap

game_map = GameMap(31, 31)
game_map.set_wall(10, 10)
game_map.set_snake_head(5, 5)
game_map.set_snake_body(4, 5)
game_map.set_temporary_wall(12, 12)
print(game_map.get_cell(10, 10))          # 1
print(game_map.is_valid_position(31, 5))  # False
print(game_map.find_safe_position())      # (3, 1) on an empty map
for row in game_map.render():             # the map as lines of text
    print(row)
```

`find_safe_position()` scans row by row from the top and returns the first
`(x, y)`, with `x` from 3, where the cells at `x`, `x - 1` and `x - 2` are all
empty, or `None` when there is no such place.

`draw(window)` paints the map onto a curses window. If its `color_manager`
attribute is set to a `snakestage.colors.ColorManager`, each cell is coloured
by kind.

## Colours

`snakestage.colors.ColorManager` sets up one curses colour pair per
`ColorType` (walls white, immune walls red, snake head green, body cyan,
growth items yellow, poison items magenta, gates blue, speed items white, all
on black). Call `initialize_colors()` after curses has started; it returns
whether colour is supported. `color_pair(color_type)` gives the pair number,
0 for `ColorType.DEFAULT`; `apply_color(window, color_type)` and
`reset_color(window)` switch pairs on and off.

## The snake

`snakestage.snake.Snake(x, y)` starts with length 3, heading right, its head
at `(x, y)` and its body trailing to the left. Positions are
`snakestage.snake.Position(x, y)` and headings are `Direction.UP`, `DOWN`,
`LEFT` and `RIGHT`.

```python
from snakestage.snake import Direction, Position, Snake

snake = Snake(10, 10)
snake.turn(Direction.LEFT)     # ignored: that would reverse onto the body
snake.turn(Direction.UP)
snake.move()                   # head now at (10, 9)
snake.grow()                   # one segment longer at once
print(snake.length, snake.head, snake.body)
print(snake.has_self_collision())
snake.apply_poison_item()      # drops the tail; False if length is already 3
snake.teleport_to(Position(3, 7))  # moves the head only
snake.reset(5, 5)              # length 3, heading right again
```

## Items, gates and temporary walls

`snakestage.entities` holds the timed objects, all measured on a monotonic
clock from when they are created:

- `Item(x, y, item_type, duration=5.0)` with `ItemType.GROWTH`, `POISON` or
  `SPEED`; `is_expired()` and `remaining_time()` (seconds, never negative).
- `Gate(x, y, gate_type, wall_type, pair_id=0, original_wall_value=1)` with
  `GateType.ENTRANCE` or `EXIT` and `WallType.OUTER` or `INNER`; it expires
  after 10 whole seconds. `is_entrance()`, `is_exit()`, `is_outer_wall()` and
  `is_inner_wall()` tell its kind.
- `TemporaryWall(position, lifetime)`, expiring after `lifetime` seconds.

Each has a `position` giving a `Position`.

## Missions

`snakestage.missions.Mission` is a goal of reaching `target_value` on one
counter of a `MissionType` (`LENGTH`, `GROWTH_ITEMS`, `POISON_ITEMS`,
`GATES`). Its `progress()` is the fraction reached, capped at 1.0.

`MissionManager` keeps an ordered list of missions; it supports `len()` and
iteration. A manager with no missions counts as complete and as fully
progressed.

```python
from snakestage.missions import MissionManager, MissionType

missions = MissionManager()
missions.add_mission(MissionType.LENGTH, 10, "Reach length 10")
missions.add_mission(MissionType.GROWTH_ITEMS, 4, "Collect 4 growth items")
missions.update_mission_progress(MissionType.LENGTH, 5)
print(missions.overall_progress())          # 0.25
print(missions.completed_mission_count())   # 0
print(missions.get_mission(5))              # None: out of range
```

## Stages

`snakestage.stages.StageManager` holds four stages, starting on the first:

1. Basic Stage: collect 1 growth item; no walls.
2. Cross Stage: collect 1 growth item and use a gate once; a cross of walls.
3. L-Shape Stage: the same missions; an L of walls.
4. Box Stage: the same missions; two nested boxes of walls.

Applying a stage to a map clears the cells with `x` and `y` from 1 to 19 and
places the stage's walls that fall inside that area; wall cells outside it
are left out.

```python
from snakestage.game_map import GameMap
from snakestage.missions import MissionType
from snakestage.stages import StageManager

stages = StageManager()
game_map = GameMap(31, 31)
stages.apply_current_stage_to_map(game_map)

stages.update_mission_progress(MissionType.GROWTH_ITEMS, 1)
if stages.is_current_stage_completed():
    stages.next_stage()         # False once the last stage is reached
    stages.apply_current_stage_to_map(game_map)

print(stages.current_stage_number(), stages.current_stage().name)
print(stages.is_game_completed())
stages.reset_game()             # back to stage 1, all missions reset
```