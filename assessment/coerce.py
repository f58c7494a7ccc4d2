import math

from assessment.models import MIN_MILESTONE, MILESTONES


def _to_number(raw):
    # bool is an int subclass but never a milestone
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return 0
        # float() also takes "0_3" and non-ASCII digits like "３"
        if not text.isascii() or "_" in text:
            return None
        try:
            return float(text)
        except ValueError:
            return None
    return None


def coerce_milestone(raw) -> int:
    """
    Repair any value into a milestone. Only an exact integer in 0..5 survives,
    everything else (NaN, fractions, out of range, garbage) becomes 0.
    """
    value = _to_number(raw)
    if value is None:
        return MIN_MILESTONE
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value) or not value.is_integer():
            return MIN_MILESTONE
        value = int(value)
    if value in MILESTONES:
        return value
    return MIN_MILESTONE
