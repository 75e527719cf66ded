"""Stages: wall layouts with their missions, played in sequence."""

from __future__ import annotations

from snakestage.game_map import EMPTY, WALL, GameMap
from snakestage.missions import Mission, MissionManager, MissionType

# Stage layouts are laid into this fixed interior area of the map.
_LAYOUT_LIMIT = 20


class Stage:
    """A numbered stage with a wall layout and a set of missions."""

    def __init__(self, number: int, name: str) -> None:
        self.number = number
        self.name = name
        self.wall_layout: list[tuple[int, int]] = []
        self._missions = MissionManager()

    def apply_to_map(self, game_map: GameMap) -> None:
        """Clear the layout area of the map and place this stage's walls."""
        for x in range(1, _LAYOUT_LIMIT):
            for y in range(1, _LAYOUT_LIMIT):
                game_map.set_cell(x, y, EMPTY)
        for x, y in self.wall_layout:
            if 1 <= x < _LAYOUT_LIMIT and 1 <= y < _LAYOUT_LIMIT:
                game_map.set_cell(x, y, WALL)

    def add_mission(self, mission_type: MissionType, target_value: int, description: str) -> None:
        self._missions.add_mission(mission_type, target_value, description)

    def update_mission_progress(self, mission_type: MissionType, current_value: int) -> None:
        self._missions.update_mission_progress(mission_type, current_value)

    def all_missions_completed(self) -> bool:
        return self._missions.all_missions_completed()

    def mission_count(self) -> int:
        return len(self._missions)

    def completed_mission_count(self) -> int:
        return self._missions.completed_mission_count()

    def overall_progress(self) -> float:
        return self._missions.overall_progress()

    def get_mission(self, index: int) -> Mission | None:
        return self._missions.get_mission(index)

    def reset_missions(self) -> None:
        self._missions.reset_all_missions()


def _cross_walls() -> list[tuple[int, int]]:
    vertical = [(15, y) for y in range(8, 23)]
    horizontal = [(x, 15) for x in range(8, 15)] + [(x, 15) for x in range(16, 23)]
    return vertical + horizontal


def _l_shape_walls() -> list[tuple[int, int]]:
    vertical = [(10, y) for y in range(8, 16)]
    horizontal = [(x, 15) for x in range(10, 18)]
    return vertical + horizontal


def _box_walls() -> list[tuple[int, int]]:
    outer = (
        [(x, 8) for x in range(8, 23)]
        + [(x, 22) for x in range(8, 23)]
        + [(8, y) for y in range(9, 22)]
        + [(22, y) for y in range(9, 22)]
    )
    inner = (
        [(x, 13) for x in range(13, 18)]
        + [(x, 17) for x in range(13, 18)]
        + [(13, y) for y in range(14, 17)]
        + [(17, y) for y in range(14, 17)]
    )
    return outer + inner


def _build_stages() -> list[Stage]:
    basic = Stage(1, "Basic Stage")
    basic.add_mission(MissionType.GROWTH_ITEMS, 1, "Collect 1 growth item")

    stages = [basic]
    for number, name, layout in (
        (2, "Cross Stage", _cross_walls()),
        (3, "L-Shape Stage", _l_shape_walls()),
        (4, "Box Stage", _box_walls()),
    ):
        stage = Stage(number, name)
        stage.add_mission(MissionType.GROWTH_ITEMS, 1, "Collect 1 growth item")
        stage.add_mission(MissionType.GATES, 1, "Use gates 1 time")
        stage.wall_layout = layout
        stages.append(stage)
    return stages


class StageManager:
    """Holds the fixed sequence of stages and which one is being played."""

    def __init__(self) -> None:
        self._stages = _build_stages()
        self._index = 0

    def current_stage_number(self) -> int:
        return self._index + 1

    def total_stage_count(self) -> int:
        return len(self._stages)

    def current_stage(self) -> Stage | None:
        if 0 <= self._index < len(self._stages):
            return self._stages[self._index]
        return None

    def is_last_stage(self) -> bool:
        return self._index == len(self._stages) - 1

    def next_stage(self) -> bool:
        """Advance to the next stage; False if already on the last one."""
        if self._index < len(self._stages) - 1:
            self._index += 1
            return True
        return False

    def reset_game(self) -> None:
        """Return to the first stage with every stage's missions reset."""
        self._index = 0
        for stage in self._stages:
            stage.reset_missions()

    def reset_current_stage(self) -> None:
        stage = self.current_stage()
        if stage is not None:
            stage.reset_missions()

    def apply_current_stage_to_map(self, game_map: GameMap) -> None:
        stage = self.current_stage()
        if stage is not None:
            stage.apply_to_map(game_map)

    def update_mission_progress(self, mission_type: MissionType, current_value: int) -> None:
        self._stages[self._index].update_mission_progress(mission_type, current_value)

    def is_current_stage_completed(self) -> bool:
        stage = self.current_stage()
        return stage.all_missions_completed() if stage is not None else False

    def is_game_completed(self) -> bool:
        return self.is_last_stage() and self.is_current_stage_completed()