"""Min/max normalization and duration parsing shared by the rankers."""

import re

_HOURS_RE = re.compile(r"(\d+)h")
_MINUTES_RE = re.compile(r"(\d+)m")


def normalize(value: float, min_value: float, max_value: float) -> float:
    """
    Rescale value into [0, 1] relative to the observed range.

    A degenerate range (every candidate tied) returns 0.5 so the field
    neither favors nor penalizes anyone.
    """
    if max_value == min_value:
        return 0.5
    return (value - min_value) / (max_value - min_value)


def parse_duration(duration: str | None) -> int:
    """Parse "4h 15m" style text into minutes. Missing parts count as 0."""
    if not duration:
        return 0
    hours = _HOURS_RE.search(duration)
    minutes = _MINUTES_RE.search(duration)
    return (int(hours.group(1)) if hours else 0) * 60 + (int(minutes.group(1)) if minutes else 0)
