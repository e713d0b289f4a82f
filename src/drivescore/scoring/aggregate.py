"""
Aggregate scorer - Final drive score from segment accuracies.

Provides:
- Logarithmic distance multiplier
- Consistency bonus from accuracy spread
- Capped final score with full breakdown
"""

from dataclasses import dataclass
from typing import Sequence
import math
import numpy as np

BASE_SCORE_PER_ACCURACY = 10.0
MAX_SCORE = 9999
CONSISTENCY_MAX_STD = 30.0      # Std dev at which the bonus vanishes
CONSISTENCY_MAX_BONUS = 20.0    # Percent bonus for perfectly even segments


@dataclass(frozen=True)
class ScoreBreakdown:
    """Intermediate values of a final score calculation."""
    average_accuracy: float
    base_score: float
    distance_km: float
    distance_multiplier: float
    accuracy_std: float
    bonus_percent: float
    final_score: int


def distance_multiplier(total_distance_m: float) -> float:
    """Score multiplier rewarding longer routes with diminishing returns.

    Args:
        total_distance_m: Route distance in meters

    Returns:
        ``log10(km + 1) + 1``, exactly 1 at zero distance
    """
    distance_km = max(0.0, total_distance_m) / 1000.0
    return math.log10(distance_km + 1.0) + 1.0


def accuracy_std(accuracies: Sequence[float]) -> float:
    """Population standard deviation of segment accuracies (0 if empty)."""
    if len(accuracies) == 0:
        return 0.0
    return float(np.std(np.asarray(accuracies, dtype=float)))


def consistency_bonus(accuracies: Sequence[float]) -> float:
    """Percent bonus for consistent segment accuracies.

    Args:
        accuracies: Completed segment accuracies

    Returns:
        Bonus in [0, 20] percent; 0 with fewer than two segments
    """
    if len(accuracies) < 2:
        return 0.0

    std = accuracy_std(accuracies)
    consistency = max(0.0, (CONSISTENCY_MAX_STD - std) / CONSISTENCY_MAX_STD)
    return consistency * CONSISTENCY_MAX_BONUS


def score_breakdown(
    average_accuracy: float,
    total_distance_m: float,
    accuracies: Sequence[float],
) -> ScoreBreakdown:
    """Calculate the final score along with its components.

    Args:
        average_accuracy: Mean segment accuracy (0-100)
        total_distance_m: Route distance in meters
        accuracies: Completed segment accuracies

    Returns:
        Score breakdown
    """
    multiplier = distance_multiplier(total_distance_m)
    std = accuracy_std(accuracies)

    if average_accuracy <= 0:
        return ScoreBreakdown(
            average_accuracy=average_accuracy,
            base_score=0.0,
            distance_km=total_distance_m / 1000.0,
            distance_multiplier=multiplier,
            accuracy_std=std,
            bonus_percent=0.0,
            final_score=0,
        )

    base = average_accuracy * BASE_SCORE_PER_ACCURACY
    bonus = consistency_bonus(accuracies)
    raw = base * multiplier * (1.0 + bonus / 100.0)

    return ScoreBreakdown(
        average_accuracy=average_accuracy,
        base_score=base,
        distance_km=total_distance_m / 1000.0,
        distance_multiplier=multiplier,
        accuracy_std=std,
        bonus_percent=bonus,
        final_score=int(round(min(MAX_SCORE, raw))),
    )


def calculate_final_score(
    average_accuracy: float,
    total_distance_m: float,
    accuracies: Sequence[float],
) -> int:
    """Calculate the final drive score.

    Args:
        average_accuracy: Mean segment accuracy (0-100)
        total_distance_m: Route distance in meters
        accuracies: Completed segment accuracies

    Returns:
        Score in [0, 9999]
    """
    return score_breakdown(average_accuracy, total_distance_m, accuracies).final_score
