"""
Route module - Route definition consumed by the drive tracker.

This module contains:
- Route: Immutable ordered segment collection
- RouteSegment: Segment with nominal distance and target speed
- SegmentProgress: Per-session completion record
- Geometry helpers for great-circle distances
"""

from drivescore.route.route import Route
from drivescore.route.segment import RouteSegment, SegmentProgress
from drivescore.route.geometry import haversine_distance, destination_point, mps_to_kmh

__all__ = [
    "Route",
    "RouteSegment",
    "SegmentProgress",
    "haversine_distance",
    "destination_point",
    "mps_to_kmh",
]
