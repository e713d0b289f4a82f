"""
Violation detector - Classify speed excess over a limit.
"""

from enum import Enum

WARNING_EXCESS_KMH = 10.0
CRITICAL_EXCESS_KMH = 22.0


class ViolationLevel(Enum):
    """Speed violation severity."""
    NONE = "none"
    WARNING = "warning"
    CRITICAL = "critical"

    @property
    def severity(self) -> int:
        """Ordinal severity (0 = none)."""
        return _SEVERITY[self]


_SEVERITY = {
    ViolationLevel.NONE: 0,
    ViolationLevel.WARNING: 1,
    ViolationLevel.CRITICAL: 2,
}


def classify_violation(actual_kmh: float, limit_kmh: float) -> ViolationLevel:
    """Classify speed against a limit.

    Args:
        actual_kmh: Observed speed in km/h
        limit_kmh: Speed limit in km/h

    Returns:
        NONE up to 10 km/h over, WARNING up to 22 km/h over,
        CRITICAL beyond
    """
    excess = actual_kmh - limit_kmh

    if excess <= WARNING_EXCESS_KMH:
        return ViolationLevel.NONE
    if excess <= CRITICAL_EXCESS_KMH:
        return ViolationLevel.WARNING
    return ViolationLevel.CRITICAL
