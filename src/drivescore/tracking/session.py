"""
Drive session - Mutable state of one drive over an immutable route.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from drivescore.route.route import Route
from drivescore.route.segment import RouteSegment, SegmentProgress
from drivescore.scoring.violation import ViolationLevel
from drivescore.tracking.position import PositionSample


@dataclass
class DriveSession:
    """State of an active drive.

    Created on start, updated by each position sample and discarded
    once converted into a result.
    """
    route: Route
    start_time_ms: float
    current_segment: int = 0
    traveled_distance_m: float = 0.0
    segment_accuracies: List[float] = field(default_factory=list)
    last_position: Optional[PositionSample] = None
    last_accuracy: Optional[float] = None
    last_violation: ViolationLevel = ViolationLevel.NONE
    sample_count: int = 0
    progress: List[SegmentProgress] = field(default_factory=list)

    def __post_init__(self):
        if not self.progress:
            self.progress = [SegmentProgress(index=i) for i in range(self.route.num_segments)]

    @property
    def segment(self) -> Optional[RouteSegment]:
        """Segment currently being driven, None past the end."""
        if self.current_segment < self.route.num_segments:
            return self.route[self.current_segment]
        return None

    @property
    def segments_completed(self) -> int:
        """Number of completed segments."""
        return len(self.segment_accuracies)

    @property
    def overall_accuracy(self) -> float:
        """Mean of completed segments, else the latest live accuracy."""
        if self.segment_accuracies:
            return sum(self.segment_accuracies) / len(self.segment_accuracies)
        return self.last_accuracy or 0.0

    def distance_into_segment(self) -> float:
        """Traveled distance beyond the current segment's nominal start."""
        return self.traveled_distance_m - self.route.segment_start_distance(self.current_segment)
