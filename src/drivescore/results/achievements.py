"""
Achievements - Milestones unlocked by a finished drive.
"""

from dataclasses import dataclass
from typing import List, Optional

from drivescore.results.result import DriveResult

PRECISION_MASTER_ACCURACY = 95
LONG_DISTANCE_M = 50000.0


@dataclass(frozen=True)
class Achievement:
    """An unlocked achievement."""
    key: str
    title: str
    description: str


def check_achievements(
    result: DriveResult,
    personal_best: Optional[DriveResult] = None,
) -> List[Achievement]:
    """List achievements earned by a drive.

    Args:
        result: Finished drive
        personal_best: Previous best drive in the same category, if any

    Returns:
        Achievements in display order
    """
    achievements: List[Achievement] = []

    if personal_best is None:
        achievements.append(Achievement(
            "first_drive", "First Drive", "Completed your first racing drive!",
        ))
    elif result.score > personal_best.score:
        margin = result.score - personal_best.score
        achievements.append(Achievement(
            "personal_best", "New Personal Best!",
            f"Beat previous best by {margin} points",
        ))

    if result.average_accuracy >= PRECISION_MASTER_ACCURACY:
        achievements.append(Achievement(
            "precision_master", "Precision Master", "Achieved 95%+ accuracy!",
        ))

    if result.distance_m >= LONG_DISTANCE_M:
        achievements.append(Achievement(
            "long_distance", "Long Distance Driver", "Completed 50+ km drive!",
        ))

    if result.all_segments_completed:
        achievements.append(Achievement(
            "route_master", "Route Master", "Completed all route segments!",
        ))

    return achievements
