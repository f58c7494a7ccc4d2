import logging
import os

from fastapi import FastAPI
from mcp.server.fastmcp import FastMCP

from assessment.controller import AssessmentController
from assessment.models import MILESTONES, TRACK_IDS, TRACK_NAMES, is_track
from assessment.store import FragmentStore

logging.basicConfig(level=os.getenv("SNOWFLAKE_LOG_LEVEL", "INFO"))

BASE_URL = os.getenv("SNOWFLAKE_BASE_URL", "http://localhost:8000/")

app = FastAPI()

mcp = FastMCP(
    name="Skill Snowflake",
    instructions="Self-assess UX skill tracks on a 0-5 milestone scale and pick a title",
)

CONTROLLER = None


def get_controller() -> AssessmentController:
    global CONTROLLER
    if CONTROLLER is None:
        CONTROLLER = AssessmentController(FragmentStore())
    return CONTROLLER


def _view(controller: AssessmentController) -> dict:
    state = controller.state
    return {
        "name": state.name,
        "title": state.title,
        "focused_track_id": state.focused_track_id,
        "tracks": [
            {
                "id": track_id,
                "name": TRACK_NAMES[track_id],
                "milestone": state.milestone_by_track[track_id],
            }
            for track_id in TRACK_IDS
        ],
        "fragment": controller.fragment,
    }


@mcp.tool(
    name="get_assessment",
    description="View the current assessment: name, title, focused track and milestones",
)
def get_assessment():
    return _view(get_controller())


@mcp.tool(name="change_name", description="Change the name on the assessment")
def change_name(text: str):
    controller = get_controller()
    controller.on_name_change(text)
    return _view(controller)


@mcp.tool(
    name="pick_title",
    description="Pick a title; falls back to the first eligible title if it is not eligible",
)
def pick_title(title: str):
    controller = get_controller()
    controller.on_title_pick(title)
    return _view(controller)


@mcp.tool(
    name="set_track_milestone",
    description="Set a track's milestone (0-5) and focus that track",
)
def set_track_milestone(track_id: str, milestone: int):
    if not is_track(track_id):
        return {"error": f"Unknown track '{track_id}'. Choose from: {', '.join(TRACK_IDS)}"}
    if isinstance(milestone, bool) or milestone not in MILESTONES:
        return {"error": f"Invalid milestone '{milestone}'. Choose from: 0-5"}

    controller = get_controller()
    controller.on_track_milestone_change(track_id, milestone)
    return _view(controller)


@mcp.tool(name="focus_track", description="Focus a track by id")
def focus_track(track_id: str):
    if not is_track(track_id):
        return {"error": f"Unknown track '{track_id}'. Choose from: {', '.join(TRACK_IDS)}"}

    controller = get_controller()
    controller.on_focus_track(track_id)
    return _view(controller)


@mcp.tool(
    name="shift_focus",
    description="Move focus forward (positive) or backward (negative), wrapping around",
)
def shift_focus(delta: int = 1):
    controller = get_controller()
    controller.on_shift_focus(delta)
    return _view(controller)


@mcp.tool(
    name="shift_focused_milestone",
    description="Raise (positive) or lower (negative) the focused track's milestone",
)
def shift_focused_milestone(delta: int = 1):
    controller = get_controller()
    controller.on_shift_focused_milestone(delta)
    return _view(controller)


@mcp.tool(name="get_share_link", description="Get a link that reopens this assessment")
def get_share_link():
    return {"url": get_controller().share_url(BASE_URL)}


@mcp.tool(
    name="get_point_summary",
    description="Total points, level, points to the next level and eligible titles",
)
def get_point_summary():
    return get_controller().summary()


@mcp.tool(name="reset_assessment", description="Replace the assessment with the example one")
def reset_assessment():
    controller = get_controller()
    controller.reset()
    return _view(controller)


@app.get("/assessment")
def read_assessment():
    return get_assessment()


app.mount("/", mcp.sse_app())
