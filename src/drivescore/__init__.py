"""
drivescore - Drive tracking and speed-accuracy scoring engine.

This package turns a live stream of geolocation samples taken during a
navigation session into per-segment speed-accuracy scores and a final
composite score:
- Route model with immutable segments and nominal distances
- Drive tracker state machine with typed feedback events
- Segment accuracy, speed violation and aggregate scoring
- Drive result record, grading and achievements
- Feedback recorder and drive simulator
"""

__version__ = "0.1.0"

from drivescore.errors import DriveScoreError, InvalidRouteError
from drivescore.route.route import Route
from drivescore.route.segment import RouteSegment
from drivescore.tracking.position import PositionSample
from drivescore.tracking.tracker import DriveTracker, TrackerConfig, TrackerState
from drivescore.results.result import DriveResult

__all__ = [
    "DriveScoreError",
    "InvalidRouteError",
    "Route",
    "RouteSegment",
    "PositionSample",
    "DriveTracker",
    "TrackerConfig",
    "TrackerState",
    "DriveResult",
    "__version__",
]
