import pytest

from snakestage.missions import Mission, MissionManager, MissionType


@pytest.fixture
def manager():
    return MissionManager()


def test_creation(manager):
    assert len(manager) == 0
    assert manager.all_missions_completed()


def test_add_mission(manager):
    manager.add_mission(MissionType.LENGTH, 10, "Reach length 10")
    assert len(manager) == 1
    assert not manager.all_missions_completed()

    manager.add_mission(MissionType.GROWTH_ITEMS, 5, "Collect 5 growth items")
    assert len(manager) == 2
    assert not manager.all_missions_completed()


def test_update_mission_progress(manager):
    manager.add_mission(MissionType.LENGTH, 8, "Reach length 8")
    manager.add_mission(MissionType.GROWTH_ITEMS, 3, "Collect 3 growth items")

    manager.update_mission_progress(MissionType.LENGTH, 5)
    length_mission = manager.get_mission(0)
    assert length_mission.current_value == 5
    assert not length_mission.is_completed()

    manager.update_mission_progress(MissionType.GROWTH_ITEMS, 2)
    growth_mission = manager.get_mission(1)
    assert growth_mission.current_value == 2
    assert not growth_mission.is_completed()


def test_mission_completion(manager):
    manager.add_mission(MissionType.POISON_ITEMS, 2, "Collect 2 poison items")
    manager.add_mission(MissionType.GATES, 1, "Use gate 1 time")
    assert not manager.all_missions_completed()

    manager.update_mission_progress(MissionType.POISON_ITEMS, 2)
    assert not manager.all_missions_completed()

    manager.update_mission_progress(MissionType.GATES, 1)
    assert manager.all_missions_completed()


def test_get_mission(manager):
    manager.add_mission(MissionType.LENGTH, 15, "Reach length 15")
    manager.add_mission(MissionType.GROWTH_ITEMS, 7, "Collect 7 growth items")

    mission0 = manager.get_mission(0)
    assert mission0.mission_type is MissionType.LENGTH
    assert mission0.target_value == 15

    mission1 = manager.get_mission(1)
    assert mission1.mission_type is MissionType.GROWTH_ITEMS
    assert mission1.target_value == 7

    assert manager.get_mission(2) is None
    assert manager.get_mission(-1) is None


def test_completed_mission_count(manager):
    manager.add_mission(MissionType.LENGTH, 5, "Reach length 5")
    manager.add_mission(MissionType.GROWTH_ITEMS, 3, "Collect 3 growth items")
    manager.add_mission(MissionType.POISON_ITEMS, 1, "Collect 1 poison item")
    assert manager.completed_mission_count() == 0

    manager.update_mission_progress(MissionType.LENGTH, 5)
    assert manager.completed_mission_count() == 1
    manager.update_mission_progress(MissionType.GROWTH_ITEMS, 3)
    assert manager.completed_mission_count() == 2
    manager.update_mission_progress(MissionType.POISON_ITEMS, 1)
    assert manager.completed_mission_count() == 3


def test_reset_missions(manager):
    manager.add_mission(MissionType.LENGTH, 10, "Reach length 10")
    manager.add_mission(MissionType.GATES, 2, "Use gates 2 times")
    manager.update_mission_progress(MissionType.LENGTH, 7)
    manager.update_mission_progress(MissionType.GATES, 1)
    assert manager.get_mission(0).current_value == 7
    assert manager.get_mission(1).current_value == 1

    manager.reset_all_missions()

    assert manager.get_mission(0).current_value == 0
    assert manager.get_mission(1).current_value == 0
    assert not manager.all_missions_completed()


def test_overall_progress(manager):
    manager.add_mission(MissionType.LENGTH, 10, "Reach length 10")
    manager.add_mission(MissionType.GROWTH_ITEMS, 4, "Collect 4 growth items")
    assert manager.overall_progress() == pytest.approx(0.0)

    manager.update_mission_progress(MissionType.LENGTH, 5)
    assert manager.overall_progress() == pytest.approx(0.25)

    manager.update_mission_progress(MissionType.GROWTH_ITEMS, 4)
    assert manager.overall_progress() == pytest.approx(0.75)

    manager.update_mission_progress(MissionType.LENGTH, 10)
    assert manager.overall_progress() == pytest.approx(1.0)


def test_clear_missions(manager):
    manager.add_mission(MissionType.LENGTH, 5, "Reach length 5")
    manager.add_mission(MissionType.GROWTH_ITEMS, 2, "Collect 2 growth items")
    assert len(manager) == 2

    manager.clear_all_missions()

    assert len(manager) == 0
    assert manager.all_missions_completed()


def test_empty_manager_progress_is_full(manager):
    assert manager.overall_progress() == pytest.approx(1.0)


def test_mission_progress_is_capped():
    mission = Mission(MissionType.GATES, 2, "Use gates 2 times")
    mission.update_progress(5)
    assert mission.progress() == pytest.approx(1.0)
    assert mission.is_completed()


def test_mission_zero_target_progress():
    mission = Mission(MissionType.LENGTH, 0, "Nothing")
    assert mission.progress() == pytest.approx(0.0)
    assert mission.is_completed()


def test_mission_reset():
    mission = Mission(MissionType.LENGTH, 10, "Reach length 10")
    mission.update_progress(7)
    mission.reset()
    assert mission.current_value == 0
    assert not mission.is_completed()