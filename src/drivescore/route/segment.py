"""
Route segment - A contiguous part of a route with a target speed.

Defines:
- Segment nominal distance and target speed
- Driving instruction
- Per-session progress record kept apart from the route
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RouteSegment:
    """A single segment of a navigation route.

    Segments are immutable; completion state is tracked per session
    in a SegmentProgress record so one route can be driven many times.
    """
    index: int = 0
    distance_m: float = 100.0         # Nominal segment length
    target_speed_kmh: float = 60.0    # Speed to hold (also the limit)
    instruction: str = ""
    duration_s: float = 0.0           # Router estimate, informational

    @property
    def speed_limit_kmh(self) -> float:
        """Speed limit used for violation checks."""
        return self.target_speed_kmh

    def describe(self) -> str:
        """Short human readable summary."""
        text = self.instruction or f"Continue for {round(self.distance_m)}m"
        return f"#{self.index + 1} {text} @ {self.target_speed_kmh:g} km/h"


@dataclass
class SegmentProgress:
    """Progress of one segment within a drive session."""
    index: int
    completed: bool = False
    accuracy: Optional[int] = None    # Rounded, written once on completion

    def complete(self, accuracy: float) -> None:
        """Mark segment completed with its final accuracy.

        Args:
            accuracy: Live accuracy at the moment of completion
        """
        if self.completed:
            raise RuntimeError(f"Segment {self.index} already completed")
        self.completed = True
        self.accuracy = round(accuracy)
