"""
Segment scorer - Speed accuracy against a target speed.

Accuracy is piecewise linear in the speed deviation:
- Inside the tolerance band (10% of target): 100 down to 80
- Outside: 80 down to 0, reaching 0 at 100% excess deviation
"""

TOLERANCE_RATIO = 0.10
BAND_DROP = 20.0          # Accuracy lost across the tolerance band
BAND_FLOOR = 80.0         # Accuracy at the edge of the band


def calculate_speed_accuracy(actual_kmh: float, target_kmh: float) -> float:
    """Score how closely a speed matches the target.

    Args:
        actual_kmh: Observed speed in km/h
        target_kmh: Segment target speed in km/h

    Returns:
        Accuracy in [0, 100], 100 at the target speed
    """
    deviation = abs(actual_kmh - target_kmh)

    # No band to measure against: exact match or nothing
    if target_kmh <= 0:
        return 100.0 if deviation == 0 else 0.0

    tolerance = target_kmh * TOLERANCE_RATIO

    if deviation <= tolerance:
        return 100.0 - (deviation / tolerance) * BAND_DROP

    excess_ratio = (deviation - tolerance) / target_kmh
    return max(0.0, BAND_FLOOR - excess_ratio * BAND_FLOOR)
