"""Stage missions: goals measured against the running score counters."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class MissionType(Enum):
    """What a mission counts."""

    LENGTH = "length"
    GROWTH_ITEMS = "growth_items"
    POISON_ITEMS = "poison_items"
    GATES = "gates"


@dataclass
class Mission:
    """A goal of reaching ``target_value`` on one counter."""

    mission_type: MissionType
    target_value: int
    description: str
    current_value: int = field(default=0, init=False)

    def update_progress(self, value: int) -> None:
        """Record the counter's current value."""
        self.current_value = value

    def progress(self) -> float:
        """Fraction of the target reached, capped at 1.0; 0.0 for a zero target."""
        if self.target_value == 0:
            return 0.0
        return min(self.current_value / self.target_value, 1.0)

    def is_completed(self) -> bool:
        return self.current_value >= self.target_value

    def reset(self) -> None:
        self.current_value = 0


class MissionManager:
    """An ordered set of missions tracked together."""

    def __init__(self) -> None:
        self._missions: list[Mission] = []

    def __len__(self) -> int:
        return len(self._missions)

    def __iter__(self) -> Iterator[Mission]:
        return iter(self._missions)

    def add_mission(self, mission_type: MissionType, target_value: int, description: str) -> None:
        self._missions.append(Mission(mission_type, target_value, description))

    def clear_all_missions(self) -> None:
        self._missions.clear()

    def get_mission(self, index: int) -> Mission | None:
        """The mission at ``index``, or None when the index is out of range."""
        if 0 <= index < len(self._missions):
            return self._missions[index]
        return None

    def update_mission_progress(self, mission_type: MissionType, current_value: int) -> None:
        """Update every mission of the given type."""
        for mission in self._missions:
            if mission.mission_type is mission_type:
                mission.update_progress(current_value)

    def reset_all_missions(self) -> None:
        for mission in self._missions:
            mission.reset()

    def all_missions_completed(self) -> bool:
        """True when every mission is done; an empty set counts as done."""
        return all(mission.is_completed() for mission in self._missions)

    def completed_mission_count(self) -> int:
        return sum(1 for mission in self._missions if mission.is_completed())

    def overall_progress(self) -> float:
        """Mean progress of all missions; 1.0 when there are none."""
        if not self._missions:
            return 1.0
        return sum(mission.progress() for mission in self._missions) / len(self._missions)