"""
Grading - Presentation helpers for accuracy and score values.

Provides:
- Letter grade for an accuracy value
- Leaderboard distance category
- Compact score formatting
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class AccuracyGrade:
    """Letter grade with display hints."""
    grade: str
    color: str
    label: str


# (minimum accuracy, grade), checked top-down
GRADE_TABLE: List[Tuple[float, AccuracyGrade]] = [
    (95.0, AccuracyGrade("S", "#FFD700", "Perfect!")),
    (90.0, AccuracyGrade("A+", "#00DD88", "Excellent")),
    (85.0, AccuracyGrade("A", "#44CC44", "Great")),
    (80.0, AccuracyGrade("B+", "#88BB00", "Good")),
    (75.0, AccuracyGrade("B", "#CCAA00", "Decent")),
    (70.0, AccuracyGrade("C+", "#DD8800", "Fair")),
    (60.0, AccuracyGrade("C", "#FF6600", "Poor")),
]
FAILING_GRADE = AccuracyGrade("D", "#FF4444", "Bad")

# (upper bound in km, category)
DISTANCE_CATEGORIES: List[Tuple[float, str]] = [
    (10.0, "10km"),
    (50.0, "50km"),
    (100.0, "100km"),
]
LONGEST_CATEGORY = "1000km"


def accuracy_grade(accuracy: float) -> AccuracyGrade:
    """Letter grade for an accuracy value.

    Args:
        accuracy: Accuracy (0-100)

    Returns:
        Grade record
    """
    for minimum, grade in GRADE_TABLE:
        if accuracy >= minimum:
            return grade
    return FAILING_GRADE


def distance_category(distance_m: float) -> str:
    """Leaderboard category for a drive distance."""
    km = distance_m / 1000.0
    for upper_km, category in DISTANCE_CATEGORIES:
        if km < upper_km:
            return category
    return LONGEST_CATEGORY


def format_score(score: int) -> str:
    """Format a score, abbreviating thousands ("1.8K")."""
    if score >= 1000:
        return f"{score / 1000:.1f}K"
    return str(score)
