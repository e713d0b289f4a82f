"""
Drive result - Terminal record of a finished drive.

Provides:
- DriveResult record consumed by storage/leaderboard collaborators
- Result assembly from session state
- Plain dictionary export
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence
import numpy as np

from drivescore.scoring.aggregate import ScoreBreakdown, score_breakdown


@dataclass(frozen=True)
class DriveResult:
    """Record of a completed drive."""
    result_id: str
    user_id: Optional[str]
    distance_m: float                  # Route distance used for scoring
    traveled_distance_m: float         # Distance measured from samples
    duration_ms: float
    segments_completed: int
    total_segments: int
    average_accuracy: int              # Rounded mean segment accuracy
    score: int
    segment_accuracies: List[float] = field(default_factory=list)
    completed_at_ms: float = 0.0
    breakdown: Optional[ScoreBreakdown] = None

    @property
    def date(self) -> str:
        """Completion time as ISO-8601 UTC string."""
        return datetime.fromtimestamp(
            self.completed_at_ms / 1000.0, tz=timezone.utc
        ).isoformat()

    @property
    def all_segments_completed(self) -> bool:
        """Whether every route segment was completed."""
        return self.segments_completed == self.total_segments

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary.

        Returns:
            Dictionary of result fields plus the ISO date
        """
        data = asdict(self)
        data["date"] = self.date
        return data


def mean_accuracy(accuracies: Sequence[float]) -> float:
    """Mean of segment accuracies, 0 for an empty list."""
    if len(accuracies) == 0:
        return 0.0
    return float(np.mean(np.asarray(accuracies, dtype=float)))


def build_result(
    segment_accuracies: Sequence[float],
    total_distance_m: float,
    traveled_distance_m: float,
    total_segments: int,
    start_time_ms: float,
    end_time_ms: float,
    user_id: Optional[str] = None,
) -> DriveResult:
    """Assemble the result of a finished drive.

    Args:
        segment_accuracies: Completed segment accuracies in order
        total_distance_m: Route distance in meters
        traveled_distance_m: Measured distance in meters
        total_segments: Number of segments on the route
        start_time_ms: Drive start (epoch ms)
        end_time_ms: Drive end (epoch ms)
        user_id: Opaque user reference

    Returns:
        Drive result
    """
    accuracies = list(segment_accuracies)
    average = mean_accuracy(accuracies)
    breakdown = score_breakdown(average, total_distance_m, accuracies)

    return DriveResult(
        result_id=str(int(end_time_ms)),
        user_id=user_id,
        distance_m=total_distance_m,
        traveled_distance_m=traveled_distance_m,
        duration_ms=end_time_ms - start_time_ms,
        segments_completed=len(accuracies),
        total_segments=total_segments,
        average_accuracy=round(average),
        score=breakdown.final_score,
        segment_accuracies=accuracies,
        completed_at_ms=end_time_ms,
        breakdown=breakdown,
    )
