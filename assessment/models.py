from dataclasses import dataclass, field
from typing import Dict


# Canonical track order. Shared by presentation and the positional hash encoding.
TRACK_IDS = (
    "UX_STRATEGY_PLANNING",
    "UX_WRITING",
    "INFORMATION_ARCHITECTURE",
    "USER_FLOWS",
    "COMMUNICATION_PRESENTING",
    "PROTOTYPING",
    "BRANDING",
    "UI_DESIGN",
    "INTERACTION_DESIGN",
    "WORKSHOP_FACILITATION",
    "DESIGN_THINKING",
    "AGILE",
    "EMPATHY",
    "QUALITIVATIVE_RESEARCH",
    "QUANTITATIVE_RESEARCH",
    "ANALYSIS",
    "UX_AUDITS",
    "UX_LEADERSHIP",
)

TRACK_NAMES = {
    "UX_STRATEGY_PLANNING": "UX Strategy & Planning",
    "UX_WRITING": "UX Writing",
    "INFORMATION_ARCHITECTURE": "Information Architecture",
    "USER_FLOWS": "User Flows",
    "COMMUNICATION_PRESENTING": "Communication & Presenting",
    "PROTOTYPING": "Prototyping",
    "BRANDING": "Branding",
    "UI_DESIGN": "UI Design",
    "INTERACTION_DESIGN": "Interaction Design",
    "WORKSHOP_FACILITATION": "Workshop Facilitation",
    "DESIGN_THINKING": "Design Thinking",
    "AGILE": "Agile",
    "EMPATHY": "Empathy",
    "QUALITIVATIVE_RESEARCH": "Qualitative Research",
    "QUANTITATIVE_RESEARCH": "Quantitative Research",
    "ANALYSIS": "Analysis",
    "UX_AUDITS": "UX Audits",
    "UX_LEADERSHIP": "UX Leadership",
}

MIN_MILESTONE = 0
MAX_MILESTONE = 5
MILESTONES = tuple(range(MIN_MILESTONE, MAX_MILESTONE + 1))

DEFAULT_FOCUSED_TRACK = "UX_LEADERSHIP"


def is_track(value) -> bool:
    return isinstance(value, str) and value in TRACK_IDS


def empty_milestone_map() -> Dict[str, int]:
    return {track_id: MIN_MILESTONE for track_id in TRACK_IDS}


@dataclass(frozen=True)
class AssessmentState:
    """
    One self-assessment. Treated as a value: mutations build a new instance
    with dataclasses.replace and a fresh milestone dict.
    """

    name: str = ""
    title: str = ""
    milestone_by_track: Dict[str, int] = field(default_factory=empty_milestone_map)
    focused_track_id: str = DEFAULT_FOCUSED_TRACK


def empty_state() -> AssessmentState:
    return AssessmentState()


def default_state() -> AssessmentState:
    """The illustrative assessment shown when nothing has been stored yet."""
    milestones = empty_milestone_map()
    milestones.update(
        {
            "UX_LEADERSHIP": 1,
            "UX_STRATEGY_PLANNING": 2,
            "UX_WRITING": 3,
            "INFORMATION_ARCHITECTURE": 2,
            "USER_FLOWS": 4,
            "COMMUNICATION_PRESENTING": 1,
            "PROTOTYPING": 1,
            "BRANDING": 4,
            "UI_DESIGN": 3,
            "INTERACTION_DESIGN": 2,
            "WORKSHOP_FACILITATION": 0,
            "DESIGN_THINKING": 4,
            "AGILE": 2,
            "EMPATHY": 2,
            "QUALITIVATIVE_RESEARCH": 3,
            "QUANTITATIVE_RESEARCH": 0,
        }
    )
    return AssessmentState(
        name="Don Norman",
        title="Design Guru",
        milestone_by_track=milestones,
        focused_track_id=DEFAULT_FOCUSED_TRACK,
    )
