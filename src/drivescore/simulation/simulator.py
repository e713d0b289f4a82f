"""
Drive simulator - Synthetic position streams for a route.

Provides:
- Straight-line movement on a fixed bearing
- Constant or per-segment speed profiles
- Simulated clock for deterministic durations
- Feeding a tracker until the drive finishes
"""

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Union
import logging

from drivescore.results.result import DriveResult
from drivescore.route.geometry import destination_point
from drivescore.route.route import Route
from drivescore.tracking.position import PositionSample
from drivescore.tracking.tracker import DriveTracker

logger = logging.getLogger(__name__)

# km/h for a given (step, segment index)
SpeedProfile = Callable[[int, int], Optional[float]]


@dataclass
class SimulationConfig:
    """Simulator configuration."""
    start_lat: float = 52.5200
    start_lng: float = 13.4050
    bearing_deg: float = 90.0         # Direction of travel
    sample_interval_ms: float = 1000.0  # ~1 Hz location watch
    start_time_ms: float = 1_700_000_000_000.0
    max_steps: int = 100000           # Safety limit per run


class DriveSimulator:
    """Generates position samples as if driving a route.

    Usage:
        sim = DriveSimulator()
        tracker = DriveTracker(TrackerConfig(clock=sim.clock))
        result = sim.run(tracker, route, speed_kmh=60.0)
    """

    def __init__(self, config: SimulationConfig | None = None):
        """Initialize simulator.

        Args:
            config: Simulation configuration
        """
        self.config = config or SimulationConfig()
        self.reset()

    @property
    def time_ms(self) -> float:
        """Current simulated time (epoch ms)."""
        return self._time_ms

    @property
    def step_count(self) -> int:
        """Samples emitted since reset."""
        return self._step

    def clock(self) -> float:
        """Simulated clock, usable as a tracker clock."""
        return self._time_ms

    def reset(self) -> None:
        """Return to the start position and time."""
        self._lat = self.config.start_lat
        self._lng = self.config.start_lng
        self._time_ms = self.config.start_time_ms
        self._step = 0

    def next_sample(self, speed_kmh: Optional[float]) -> PositionSample:
        """Advance one interval at a speed and return the new fix.

        The first call after reset reports the start position.

        Args:
            speed_kmh: Speed held over the interval (None = no reading, standstill)

        Returns:
            Position sample
        """
        if self._step > 0:
            distance = (speed_kmh or 0.0) / 3.6 * self.config.sample_interval_ms / 1000.0
            if distance > 0:
                self._lat, self._lng = destination_point(
                    self._lat, self._lng, self.config.bearing_deg, distance
                )
            self._time_ms += self.config.sample_interval_ms

        self._step += 1
        return PositionSample(
            lat=self._lat,
            lng=self._lng,
            speed_mps=None if speed_kmh is None else speed_kmh / 3.6,
            timestamp_ms=self._time_ms,
        )

    def samples(self, speed_kmh: float, count: int) -> Iterator[PositionSample]:
        """Yield samples at a constant speed.

        Args:
            speed_kmh: Constant speed
            count: Number of samples
        """
        for _ in range(count):
            yield self.next_sample(speed_kmh)

    def run(
        self,
        tracker: DriveTracker,
        route: Route,
        speed_kmh: Union[float, List[float], SpeedProfile] = 60.0,
    ) -> Optional[DriveResult]:
        """Start a drive and feed samples until it finishes.

        Args:
            tracker: Tracker to drive
            route: Route to drive
            speed_kmh: Constant speed, one speed per segment, or a
                profile called with (step, segment index)

        Returns:
            Drive result, or the result of finishing early if the
            step limit is reached first
        """
        profile = self._as_profile(speed_kmh)
        tracker.start(route)

        while tracker.is_active and self._step < self.config.max_steps:
            session = tracker.session
            speed = profile(self._step, session.current_segment)
            tracker.update_position(self.next_sample(speed))

        if tracker.is_active:
            logger.warning("Step limit %d reached, finishing drive early", self.config.max_steps)
            return tracker.finish()
        return tracker.result

    @staticmethod
    def _as_profile(speed_kmh: Union[float, List[float], SpeedProfile]) -> SpeedProfile:
        if callable(speed_kmh):
            return speed_kmh
        if isinstance(speed_kmh, (list, tuple)):
            speeds = list(speed_kmh)
            return lambda step, segment: speeds[min(segment, len(speeds) - 1)]
        return lambda step, segment: float(speed_kmh)
