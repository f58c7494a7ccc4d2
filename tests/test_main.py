import pytest

import main
from assessment.controller import AssessmentController
from assessment.store import MemoryFragmentStore


@pytest.fixture
def controller(monkeypatch):
    controller = AssessmentController(MemoryFragmentStore())
    monkeypatch.setattr(main, "CONTROLLER", controller)
    return controller


def test_get_assessment(controller):
    view = main.get_assessment()
    assert view["name"] == "Don Norman"
    assert len(view["tracks"]) == 18
    assert view["tracks"][0]["name"] == "UX Strategy & Planning"
    assert view["fragment"] == controller.fragment


def test_change_name(controller):
    assert main.change_name("Ann")["name"] == "Ann"
    assert controller.state.name == "Ann"


def test_set_track_milestone(controller):
    view = main.set_track_milestone("AGILE", 5)
    assert view["focused_track_id"] == "AGILE"
    assert controller.state.milestone_by_track["AGILE"] == 5


def test_set_track_milestone_unknown_track(controller):
    result = main.set_track_milestone("COOKING", 3)
    assert "error" in result
    assert controller.state.focused_track_id == "UX_LEADERSHIP"


def test_focus_track_unknown_track(controller):
    assert "error" in main.focus_track("COOKING")


def test_shift_focus(controller):
    assert main.shift_focus(1)["focused_track_id"] == "UX_STRATEGY_PLANNING"


def test_shift_focused_milestone(controller):
    main.shift_focused_milestone(-5)
    assert controller.state.milestone_by_track["UX_LEADERSHIP"] == 0


def test_pick_title(controller):
    assert main.pick_title("UX Manager")["title"] == "UX Manager"


def test_get_share_link(controller, monkeypatch):
    monkeypatch.setattr(main, "BASE_URL", "https://snowflake.example/")
    assert main.get_share_link() == {"url": "https://snowflake.example/#" + controller.fragment}


def test_get_point_summary(controller):
    assert main.get_point_summary()["total_points"] == 72


def test_reset_assessment(controller):
    main.change_name("Someone else")
    assert main.reset_assessment()["name"] == "Don Norman"


@pytest.mark.parametrize("milestone", [9, -1, 6, True])
def test_set_track_milestone_out_of_range(controller, milestone):
    result = main.set_track_milestone("AGILE", milestone)
    assert "error" in result
    assert controller.state.milestone_by_track["AGILE"] == 2
    assert controller.state.focused_track_id == "UX_LEADERSHIP"
