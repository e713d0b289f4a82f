"""
Tracker events - Typed notifications for feedback collaborators.

Provides:
- Event records emitted by the drive tracker
- EventBus observer channel with optional per-type filtering
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Type
import logging

from drivescore.results.result import DriveResult
from drivescore.scoring.violation import ViolationLevel
from drivescore.tracking.position import PositionSample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DriveEvent:
    """Base class for tracker events."""
    timestamp_ms: float


@dataclass(frozen=True)
class DriveStarted(DriveEvent):
    """A new drive session began."""
    total_segments: int
    total_distance_m: float


@dataclass(frozen=True)
class PositionScored(DriveEvent):
    """Live scoring of one position sample."""
    sample: PositionSample
    segment_index: int
    speed_kmh: float
    target_speed_kmh: float
    accuracy: float
    violation: ViolationLevel
    overall_accuracy: float
    traveled_distance_m: float


@dataclass(frozen=True)
class ViolationChanged(DriveEvent):
    """Violation level differs from the previous sample."""
    previous: ViolationLevel
    current: ViolationLevel
    speed_kmh: float
    limit_kmh: float
    segment_index: int


@dataclass(frozen=True)
class SegmentCompleted(DriveEvent):
    """A segment crossed its completion threshold."""
    segment_index: int
    accuracy: int
    segments_completed: int
    total_segments: int


@dataclass(frozen=True)
class DriveFinished(DriveEvent):
    """The drive finished and produced a result."""
    result: DriveResult


Listener = Callable[[DriveEvent], None]


class EventBus:
    """Synchronous observer channel.

    Listeners run in subscription order on the caller's thread.
    A listener that raises is logged and skipped.
    """

    def __init__(self):
        """Initialize with no listeners."""
        self._listeners: List[Tuple[Optional[Type[DriveEvent]], Listener]] = []

    @property
    def listener_count(self) -> int:
        """Number of subscribed listeners."""
        return len(self._listeners)

    def subscribe(
        self,
        listener: Listener,
        event_type: Optional[Type[DriveEvent]] = None,
    ) -> Callable[[], None]:
        """Subscribe a listener.

        Args:
            listener: Callable taking one event
            event_type: Only deliver events of this type (all if None)

        Returns:
            Function that removes the subscription
        """
        entry = (event_type, listener)
        self._listeners.append(entry)

        def unsubscribe() -> None:
            if entry in self._listeners:
                self._listeners.remove(entry)

        return unsubscribe

    def emit(self, event: DriveEvent) -> None:
        """Deliver an event to matching listeners.

        Args:
            event: Event to deliver
        """
        for event_type, listener in list(self._listeners):
            if event_type is not None and not isinstance(event, event_type):
                continue
            try:
                listener(event)
            except Exception:
                logger.exception("Listener %r failed on %s", listener, type(event).__name__)

    def clear(self) -> None:
        """Remove all listeners."""
        self._listeners.clear()
