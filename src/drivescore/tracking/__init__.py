"""
Tracking module - Live drive tracking from a position stream.

This module contains:
- DriveTracker: Session state machine and segment progression
- DriveSession: Mutable state of one drive
- PositionSample: Geolocation fix
- EventBus and typed events for feedback collaborators
"""

from drivescore.tracking.position import PositionSample
from drivescore.tracking.session import DriveSession
from drivescore.tracking.tracker import DriveTracker, TrackerConfig, TrackerState
from drivescore.tracking.events import (
    DriveEvent,
    DriveStarted,
    PositionScored,
    ViolationChanged,
    SegmentCompleted,
    DriveFinished,
    EventBus,
)

__all__ = [
    "PositionSample",
    "DriveSession",
    "DriveTracker",
    "TrackerConfig",
    "TrackerState",
    "DriveEvent",
    "DriveStarted",
    "PositionScored",
    "ViolationChanged",
    "SegmentCompleted",
    "DriveFinished",
    "EventBus",
]
