"""
Bidirectional mapping between an AssessmentState and a URL fragment.

Fragment layout, one field per slot, joined with SEPARATOR:

    m0,m1,...,m17,name,title

Milestones are single digits in TRACK_IDS order. Name and title are
percent-escaped with no safe characters, so neither the separator nor '#'
can leak into them. Decoding is lenient: every field is repaired on its own
and a short or garbled fragment still yields a complete state.
"""

import logging
from typing import List, Optional
from urllib.parse import quote, unquote

from assessment.coerce import coerce_milestone
from assessment.models import AssessmentState, TRACK_IDS, empty_state

logger = logging.getLogger(__name__)

SEPARATOR = ","
FIELD_COUNT = len(TRACK_IDS) + 2
NAME_INDEX = len(TRACK_IDS)
TITLE_INDEX = len(TRACK_IDS) + 1


def escape_text(text: str) -> str:
    # lone surrogates (e.g. from JSON "\ud800") become "?" instead of raising
    return quote(text or "", safe="", errors="replace")


def unescape_text(text: str) -> str:
    return unquote(text)


def encode(state: Optional[AssessmentState]) -> Optional[str]:
    if state is None or not state.milestone_by_track:
        return None

    values: List[str] = [
        str(coerce_milestone(state.milestone_by_track.get(track_id)))
        for track_id in TRACK_IDS
    ]
    values.append(escape_text(state.name))
    values.append(escape_text(state.title))
    return SEPARATOR.join(values)


def decode(fragment: Optional[str]) -> Optional[AssessmentState]:
    """
    Parse a fragment (with or without its leading '#').

    Returns None only when there is nothing to parse; any other input gives
    a full state, with unreadable milestones set to 0 and missing name/title
    left at their empty values.
    """
    if not fragment or not isinstance(fragment, str):
        return None
    if fragment.startswith("#"):
        fragment = fragment[1:]
    if not fragment:
        return None

    fields = fragment.split(SEPARATOR)
    if len(fields) != FIELD_COUNT:
        logger.debug("Fragment has %d fields, expected %d", len(fields), FIELD_COUNT)

    result = empty_state()
    milestones = {
        track_id: coerce_milestone(fields[i] if i < len(fields) else None)
        for i, track_id in enumerate(TRACK_IDS)
    }

    name = result.name
    title = result.title
    if len(fields) > NAME_INDEX and fields[NAME_INDEX]:
        name = unescape_text(fields[NAME_INDEX])
    if len(fields) > TITLE_INDEX and fields[TITLE_INDEX]:
        title = unescape_text(fields[TITLE_INDEX])

    return AssessmentState(
        name=name,
        title=title,
        milestone_by_track=milestones,
        focused_track_id=result.focused_track_id,
    )


def share_url(base_url: str, state: AssessmentState) -> str:
    """Build a shareable link: the base URL with the state as its fragment."""
    base = base_url.split("#", 1)[0]
    return f"{base}#{encode(state) or ''}"
