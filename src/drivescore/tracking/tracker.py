"""
Drive tracker - Segment progression and scoring from a position stream.

Provides:
- Idle -> Active -> Finished session lifecycle
- Live speed accuracy and violation feedback per sample
- Distance accumulation and segment completion
- Final result assembly
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional
import logging
import time

from drivescore.errors import InvalidRouteError
from drivescore.results.result import DriveResult, build_result
from drivescore.route.route import Route
from drivescore.scoring.segment_scorer import calculate_speed_accuracy
from drivescore.scoring.violation import ViolationLevel, classify_violation
from drivescore.tracking.events import (
    DriveFinished,
    DriveStarted,
    EventBus,
    Listener,
    PositionScored,
    SegmentCompleted,
    ViolationChanged,
)
from drivescore.tracking.position import PositionSample
from drivescore.tracking.session import DriveSession

logger = logging.getLogger(__name__)


def _wall_clock_ms() -> float:
    return time.time() * 1000.0


@dataclass
class TrackerConfig:
    """Drive tracker configuration."""
    completion_threshold: float = 0.9      # Fraction of segment distance to complete it
    user_id: Optional[str] = "demo"        # Attached to results
    clock: Callable[[], float] = field(default=_wall_clock_ms)  # Epoch ms

    def __post_init__(self):
        """Validate configuration."""
        if not 0.0 < self.completion_threshold <= 1.0:
            raise ValueError(
                f"completion_threshold must be in (0, 1], got {self.completion_threshold}"
            )


class TrackerState(Enum):
    """Drive tracker lifecycle state."""
    IDLE = "idle"
    ACTIVE = "active"
    FINISHED = "finished"


class DriveTracker:
    """Drives segment progression from externally delivered positions.

    The tracker owns no timers; it only reacts to start/finish calls
    and position samples, which are assumed to arrive in time order.

    Usage:
        tracker = DriveTracker()
        tracker.subscribe(on_event)
        tracker.start(route)

        for sample in location_watch():
            tracker.update_position(sample)

        result = tracker.finish() or tracker.result
    """

    def __init__(
        self,
        config: TrackerConfig | None = None,
        events: EventBus | None = None,
    ):
        """Initialize tracker.

        Args:
            config: Tracker configuration
            events: Event channel (a private one is created if None)
        """
        self.config = config or TrackerConfig()
        self.events = events or EventBus()

        self._state: TrackerState = TrackerState.IDLE
        self._session: Optional[DriveSession] = None
        self._result: Optional[DriveResult] = None

    @property
    def state(self) -> TrackerState:
        """Current lifecycle state."""
        return self._state

    @property
    def is_active(self) -> bool:
        """Whether a drive is in progress."""
        return self._state == TrackerState.ACTIVE

    @property
    def session(self) -> Optional[DriveSession]:
        """Active session (None when idle or finished)."""
        return self._session

    @property
    def result(self) -> Optional[DriveResult]:
        """Result of the last finished drive."""
        return self._result

    def subscribe(self, listener: Listener, event_type: type | None = None) -> Callable[[], None]:
        """Subscribe to tracker events.

        Args:
            listener: Callable taking one event
            event_type: Restrict to one event class

        Returns:
            Unsubscribe function
        """
        return self.events.subscribe(listener, event_type)

    def start(self, route: Route) -> None:
        """Start a new drive on a route.

        Any drive in progress is discarded without a result.

        Args:
            route: Route to drive

        Raises:
            InvalidRouteError: Route has no segments or bad segment data
        """
        if route is None:
            raise InvalidRouteError("No route given")
        route.validate()

        if self._state == TrackerState.ACTIVE:
            logger.info("Discarding in-flight drive for a new start")

        now = self.config.clock()
        self._session = DriveSession(route=route, start_time_ms=now)
        self._result = None
        self._state = TrackerState.ACTIVE

        logger.info(
            "Drive started: %d segments, %.0f m",
            route.num_segments, route.total_distance_m,
        )
        self.events.emit(DriveStarted(
            timestamp_ms=now,
            total_segments=route.num_segments,
            total_distance_m=route.total_distance_m,
        ))

    def update_position(self, sample: PositionSample) -> Optional[PositionScored]:
        """Process a position sample.

        Args:
            sample: Latest geolocation fix

        Returns:
            Live scoring of the sample, None if no drive is active or a
            violation listener ended it
        """
        if self._state != TrackerState.ACTIVE or self._session is None:
            logger.debug("Ignoring position sample while %s", self._state.value)
            return None

        session = self._session
        segment = session.segment

        # Live feedback against the current segment
        speed_kmh = sample.speed_kmh
        accuracy = calculate_speed_accuracy(speed_kmh, segment.target_speed_kmh)
        violation = classify_violation(speed_kmh, segment.speed_limit_kmh)

        # First sample only sets the baseline
        if session.last_position is not None:
            session.traveled_distance_m += session.last_position.distance_to(sample)
        session.last_position = sample
        session.last_accuracy = accuracy
        session.sample_count += 1

        if violation != session.last_violation:
            self._on_violation_changed(
                session.last_violation, violation, speed_kmh, segment, sample.timestamp_ms,
            )
            session.last_violation = violation
            if not self._owns(session):
                return None

        scored = PositionScored(
            timestamp_ms=sample.timestamp_ms,
            sample=sample,
            segment_index=segment.index,
            speed_kmh=speed_kmh,
            target_speed_kmh=segment.target_speed_kmh,
            accuracy=accuracy,
            violation=violation,
            overall_accuracy=session.overall_accuracy,
            traveled_distance_m=session.traveled_distance_m,
        )
        self.events.emit(scored)

        # A listener may have finished or restarted the drive
        if not self._owns(session):
            return scored

        if session.distance_into_segment() >= self.config.completion_threshold * segment.distance_m:
            self._complete_segment(accuracy, sample.timestamp_ms)

        return scored

    def _owns(self, session: DriveSession) -> bool:
        """Whether session is still the active drive."""
        return self._state == TrackerState.ACTIVE and self._session is session

    def _on_violation_changed(self, previous, current, speed_kmh, segment, timestamp_ms) -> None:
        if current == ViolationLevel.CRITICAL:
            logger.warning(
                "Critical speed: %.1f km/h in %.0f km/h segment %d",
                speed_kmh, segment.speed_limit_kmh, segment.index,
            )
        self.events.emit(ViolationChanged(
            timestamp_ms=timestamp_ms,
            previous=previous,
            current=current,
            speed_kmh=speed_kmh,
            limit_kmh=segment.speed_limit_kmh,
            segment_index=segment.index,
        ))

    def _complete_segment(self, accuracy: float, timestamp_ms: float) -> None:
        """Record the current segment and advance, finishing at route end."""
        session = self._session
        index = session.current_segment

        progress = session.progress[index]
        progress.complete(accuracy)
        session.segment_accuracies.append(accuracy)
        session.current_segment += 1

        logger.info("Segment %d completed with %d%% accuracy", index + 1, progress.accuracy)
        self.events.emit(SegmentCompleted(
            timestamp_ms=timestamp_ms,
            segment_index=index,
            accuracy=progress.accuracy,
            segments_completed=session.segments_completed,
            total_segments=session.route.num_segments,
        ))

        if self._owns(session) and session.current_segment >= session.route.num_segments:
            self.finish()

    def finish(self) -> Optional[DriveResult]:
        """Finish the drive and build its result.

        Returns:
            Drive result, None if no drive is active
        """
        if self._state != TrackerState.ACTIVE or self._session is None:
            logger.debug("finish() ignored while %s", self._state.value)
            return None

        session = self._session
        end_time = self.config.clock()

        result = build_result(
            segment_accuracies=session.segment_accuracies,
            total_distance_m=session.route.total_distance_m,
            traveled_distance_m=session.traveled_distance_m,
            total_segments=session.route.num_segments,
            start_time_ms=session.start_time_ms,
            end_time_ms=end_time,
            user_id=self.config.user_id,
        )

        self._result = result
        self._session = None
        self._state = TrackerState.FINISHED

        logger.info(
            "Drive finished: %d/%d segments, accuracy %d%%, score %d",
            result.segments_completed, result.total_segments,
            result.average_accuracy, result.score,
        )
        self.events.emit(DriveFinished(timestamp_ms=end_time, result=result))

        return result

    def get_state(self) -> dict:
        """Get tracker state.

        Returns:
            Dictionary with tracker and session state
        """
        session = self._session
        if session is None:
            return {
                "state": self._state.value,
                "result": self._result.to_dict() if self._result else None,
            }

        return {
            "state": self._state.value,
            "current_segment": session.current_segment,
            "total_segments": session.route.num_segments,
            "segments_completed": session.segments_completed,
            "traveled_distance_m": session.traveled_distance_m,
            "overall_accuracy": session.overall_accuracy,
            "last_accuracy": session.last_accuracy,
            "last_violation": session.last_violation.value,
            "sample_count": session.sample_count,
            "progress": [
                {"index": p.index, "completed": p.completed, "accuracy": p.accuracy}
                for p in session.progress
            ],
        }
