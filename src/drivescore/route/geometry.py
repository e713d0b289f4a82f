"""
Geometry helpers - Great-circle calculations on a spherical Earth.

Provides:
- Haversine distance between two coordinates
- Destination point from origin, bearing and distance
- Speed unit conversion
"""

import math
from typing import Optional, Tuple

EARTH_RADIUS_M = 6371000.0
MPS_TO_KMH = 3.6


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Calculate great-circle distance between two points.

    Args:
        lat1, lng1: First point (decimal degrees)
        lat2, lng2: Second point (decimal degrees)

    Returns:
        Distance in meters
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lng2 - lng1)

    a = (math.sin(delta_phi / 2) ** 2 +
         math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def destination_point(
    lat: float,
    lng: float,
    bearing_deg: float,
    distance_m: float,
) -> Tuple[float, float]:
    """Point reached travelling a distance along a constant initial bearing.

    Args:
        lat, lng: Origin (decimal degrees)
        bearing_deg: Initial bearing, clockwise from north
        distance_m: Distance to travel in meters

    Returns:
        (lat, lng) of the destination
    """
    phi1 = math.radians(lat)
    lambda1 = math.radians(lng)
    theta = math.radians(bearing_deg)
    delta = distance_m / EARTH_RADIUS_M

    phi2 = math.asin(
        math.sin(phi1) * math.cos(delta) +
        math.cos(phi1) * math.sin(delta) * math.cos(theta)
    )
    lambda2 = lambda1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi1),
        math.cos(delta) - math.sin(phi1) * math.sin(phi2),
    )

    # Normalise longitude to [-180, 180)
    lng2 = (math.degrees(lambda2) + 540.0) % 360.0 - 180.0
    return math.degrees(phi2), lng2


def mps_to_kmh(speed_mps: Optional[float]) -> float:
    """Convert m/s to km/h, treating a missing or non-finite reading as standstill."""
    if speed_mps is None or not math.isfinite(speed_mps):
        return 0.0
    return speed_mps * MPS_TO_KMH
