"""
Default title and level rules for a milestone map.

The assessment core only calls eligible_titles(); points and levels feed the
point summary shown next to the assessment. All thresholds live in
titles.yaml next to this module.
"""

from pathlib import Path
from typing import Dict, List, Mapping, Optional

import yaml

from assessment.coerce import coerce_milestone
from assessment.models import TRACK_IDS

RULES_PATH = Path(__file__).parent / "titles.yaml"


def load_rules(path: Path = RULES_PATH) -> Dict:
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    return {
        "milestone_points": {int(k): int(v) for k, v in raw["milestone_points"].items()},
        "levels": sorted(raw["levels"], key=lambda lvl: lvl["min_points"]),
        "titles": list(raw["titles"]),
    }


RULES = load_rules()
MILESTONE_POINTS: Dict[int, int] = RULES["milestone_points"]
LEVELS: List[Dict] = RULES["levels"]
TITLES: List[Dict] = RULES["titles"]


def total_points(milestone_by_track: Mapping[str, int]) -> int:
    return sum(
        MILESTONE_POINTS.get(coerce_milestone(milestone_by_track.get(track_id)), 0)
        for track_id in TRACK_IDS
    )


def compute_level(points: int) -> str:
    level = LEVELS[0]["label"]
    for lvl in LEVELS:
        if points >= lvl["min_points"]:
            level = lvl["label"]
    return level


def _next_level(points: int) -> Optional[Dict]:
    for lvl in LEVELS:
        if lvl["min_points"] > points:
            return lvl
    return None


def eligible_titles(milestone_by_track: Mapping[str, int]) -> List[str]:
    points = total_points(milestone_by_track)
    return [
        title["label"]
        for title in TITLES
        if title["min_points"] <= points <= title.get("max_points", points)
    ]


def point_summary(milestone_by_track: Mapping[str, int]) -> Dict:
    points = total_points(milestone_by_track)
    next_level = _next_level(points)
    return {
        "total_points": points,
        "level": compute_level(points),
        "next_level": next_level["label"] if next_level else None,
        "points_to_next_level": next_level["min_points"] - points if next_level else None,
        "titles": eligible_titles(milestone_by_track),
    }
