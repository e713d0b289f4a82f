"""
Scoring module - Speed accuracy, violations and final drive score.

This module contains:
- calculate_speed_accuracy: Accuracy of a speed against a target
- classify_violation: Speed excess classification
- calculate_final_score: Composite score with distance and consistency
- Grading helpers for display and leaderboard categories
"""

from drivescore.scoring.segment_scorer import calculate_speed_accuracy
from drivescore.scoring.violation import ViolationLevel, classify_violation
from drivescore.scoring.aggregate import (
    ScoreBreakdown,
    calculate_final_score,
    consistency_bonus,
    distance_multiplier,
    score_breakdown,
)
from drivescore.scoring.grading import (
    AccuracyGrade,
    accuracy_grade,
    distance_category,
    format_score,
)

__all__ = [
    "calculate_speed_accuracy",
    "ViolationLevel",
    "classify_violation",
    "ScoreBreakdown",
    "calculate_final_score",
    "consistency_bonus",
    "distance_multiplier",
    "score_breakdown",
    "AccuracyGrade",
    "accuracy_grade",
    "distance_category",
    "format_score",
]
