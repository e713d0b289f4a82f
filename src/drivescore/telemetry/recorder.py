"""
Feedback recorder - Collects live tracker feedback during a drive.

Provides:
- Speed, accuracy and distance channels fed from tracker events
- Violation counts per level
- Per-segment completion log
"""

from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional

from drivescore.scoring.violation import ViolationLevel
from drivescore.telemetry.channel import ChannelConfig, FeedbackChannel
from drivescore.tracking.events import (
    DriveEvent,
    DriveFinished,
    DriveStarted,
    PositionScored,
    SegmentCompleted,
    ViolationChanged,
)
from drivescore.tracking.tracker import DriveTracker


STANDARD_CHANNELS = {
    "speed_kmh": ChannelConfig("speed_kmh", "km/h", 0, 400, 1),
    "target_speed_kmh": ChannelConfig("target_speed_kmh", "km/h", 0, 400, 1),
    "accuracy": ChannelConfig("accuracy", "%", 0, 100, 1),
    "overall_accuracy": ChannelConfig("overall_accuracy", "%", 0, 100, 1),
    "distance_m": ChannelConfig("distance_m", "m", 0, float('inf'), 1),
}


@dataclass
class RecorderConfig:
    """Recorder configuration."""
    channels: List[str] | None = None  # Channels to record (None = all)
    buffer_size: int = 100000          # Per-channel buffer size


class FeedbackRecorder:
    """Records the live feedback stream of a drive tracker.

    Usage:
        recorder = FeedbackRecorder()
        recorder.attach(tracker)
        ...
        recorder.get_statistics()
    """

    def __init__(self, config: RecorderConfig | None = None):
        """Initialize recorder.

        Args:
            config: Recorder configuration
        """
        self.config = config or RecorderConfig()

        self._channels: Dict[str, FeedbackChannel] = {}
        self._setup_channels()

        self._violation_counts: Dict[ViolationLevel, int] = {level: 0 for level in ViolationLevel}
        self._segment_log: List[SegmentCompleted] = []
        self._finished: Optional[DriveFinished] = None
        self._detach: Optional[Callable[[], None]] = None

    def _setup_channels(self) -> None:
        names = self.config.channels or list(STANDARD_CHANNELS.keys())
        for name in names:
            base = STANDARD_CHANNELS.get(name) or ChannelConfig(name=name)
            self._channels[name] = FeedbackChannel(
                replace(base, buffer_size=self.config.buffer_size)
            )

    @property
    def channels(self) -> Dict[str, FeedbackChannel]:
        """All channels by name."""
        return self._channels

    @property
    def segment_log(self) -> List[SegmentCompleted]:
        """Segment completions in order."""
        return list(self._segment_log)

    @property
    def is_finished(self) -> bool:
        """Whether the recorded drive has finished."""
        return self._finished is not None

    def get_channel(self, name: str) -> Optional[FeedbackChannel]:
        """Get channel by name."""
        return self._channels.get(name)

    def violation_count(self, level: ViolationLevel) -> int:
        """Number of transitions into a violation level."""
        return self._violation_counts[level]

    def attach(self, tracker: DriveTracker) -> None:
        """Subscribe to a tracker's events, replacing any previous one."""
        self.detach()
        self._detach = tracker.subscribe(self.handle_event)

    def detach(self) -> None:
        """Stop receiving events."""
        if self._detach is not None:
            self._detach()
            self._detach = None

    def handle_event(self, event: DriveEvent) -> None:
        """Record one tracker event.

        Args:
            event: Event from the tracker
        """
        if isinstance(event, DriveStarted):
            self.clear()
        elif isinstance(event, PositionScored):
            self._record_position(event)
        elif isinstance(event, ViolationChanged):
            self._violation_counts[event.current] += 1
        elif isinstance(event, SegmentCompleted):
            self._segment_log.append(event)
        elif isinstance(event, DriveFinished):
            self._finished = event

    def _record_position(self, event: PositionScored) -> None:
        values = {
            "speed_kmh": event.speed_kmh,
            "target_speed_kmh": event.target_speed_kmh,
            "accuracy": event.accuracy,
            "overall_accuracy": event.overall_accuracy,
            "distance_m": event.traveled_distance_m,
        }
        for name, value in values.items():
            if name in self._channels:
                self._channels[name].record(event.timestamp_ms, value)

    def get_statistics(self) -> Dict[str, dict]:
        """Statistics for all channels."""
        return {name: ch.get_state() for name, ch in self._channels.items()}

    def clear(self) -> None:
        """Clear all recorded data."""
        for channel in self._channels.values():
            channel.clear()
        self._violation_counts = {level: 0 for level in ViolationLevel}
        self._segment_log = []
        self._finished = None

    def get_state(self) -> dict:
        """Get recorder state.

        Returns:
            Dictionary containing recorder state
        """
        return {
            "finished": self.is_finished,
            "segments_completed": len(self._segment_log),
            "violations": {level.value: n for level, n in self._violation_counts.items()},
            "channels": self.get_statistics(),
        }
