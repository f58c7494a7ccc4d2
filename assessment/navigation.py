"""
Pure transformations of an AssessmentState.

Each function returns a new state and leaves its input untouched. Anything
that changes milestones re-derives the title through a title resolver, a
callable mapping a milestone map to the ordered list of eligible titles.
"""

import logging
from dataclasses import replace
from typing import Callable, Mapping, Sequence

from assessment.coerce import coerce_milestone
from assessment.models import (
    AssessmentState,
    MAX_MILESTONE,
    MIN_MILESTONE,
    TRACK_IDS,
    is_track,
)
from titles.resolver import eligible_titles

logger = logging.getLogger(__name__)

TitleResolver = Callable[[Mapping[str, int]], Sequence[str]]

# Title used when no title is eligible at all.
NO_TITLE = ""


def pick_title(eligible: Sequence[str], current: str) -> str:
    if current in eligible:
        return current
    if not eligible:
        return NO_TITLE
    return eligible[0]


def clamp_milestone(value: int) -> int:
    return max(MIN_MILESTONE, min(MAX_MILESTONE, value))


def set_name(state: AssessmentState, name: str) -> AssessmentState:
    return replace(state, name=name or "")


def shift_focused_track(state: AssessmentState, delta: int) -> AssessmentState:
    count = len(TRACK_IDS)
    index = TRACK_IDS.index(state.focused_track_id) if is_track(state.focused_track_id) else 0
    index = (index + delta % count + count) % count
    return replace(state, focused_track_id=TRACK_IDS[index])


def set_focused_track(state: AssessmentState, track_id: str) -> AssessmentState:
    if not is_track(track_id):
        logger.warning("Unknown track %r, focusing %s", track_id, TRACK_IDS[0])
        track_id = TRACK_IDS[0]
    return replace(state, focused_track_id=track_id)


def set_track_milestone(
    state: AssessmentState,
    track_id: str,
    milestone: int,
    resolver: TitleResolver = eligible_titles,
) -> AssessmentState:
    if not is_track(track_id):
        logger.warning("Ignoring milestone change for unknown track %r", track_id)
        return state

    milestone_by_track = dict(state.milestone_by_track)
    milestone_by_track[track_id] = coerce_milestone(milestone)

    title = pick_title(list(resolver(milestone_by_track)), state.title)
    return replace(
        state,
        milestone_by_track=milestone_by_track,
        focused_track_id=track_id,
        title=title,
    )


def shift_focused_milestone(
    state: AssessmentState,
    delta: int,
    resolver: TitleResolver = eligible_titles,
) -> AssessmentState:
    track_id = state.focused_track_id
    previous = coerce_milestone(state.milestone_by_track.get(track_id))
    milestone = clamp_milestone(previous + delta)
    return set_track_milestone(state, track_id, milestone, resolver)


def set_title(
    state: AssessmentState,
    title: str,
    resolver: TitleResolver = eligible_titles,
) -> AssessmentState:
    """Explicit title pick; an ineligible title falls back to the first eligible one."""
    eligible = list(resolver(state.milestone_by_track))
    return replace(state, title=pick_title(eligible, title))
