"""Value bounds for affinity and skill stats."""
from __future__ import annotations

AFFINITY_MIN = 0
AFFINITY_MAX = 100
STAT_MIN = 0
STAT_MAX = 20


def clamp(value: int, lower: int, upper: int) -> int:
    """Saturate ``value`` into ``[lower, upper]``."""
    return min(upper, max(lower, value))


def clamp_affinity(value: int) -> int:
    return clamp(value, AFFINITY_MIN, AFFINITY_MAX)


def clamp_stat(value: int) -> int:
    return clamp(value, STAT_MIN, STAT_MAX)
