"""
Feedback channel - Time series of one live feedback value.

Provides:
- Bounded sample buffer with value clamping
- Statistics over the buffered window
- Time-range queries
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional, Tuple
import numpy as np


@dataclass
class ChannelConfig:
    """Configuration for a feedback channel."""
    name: str = "unnamed"
    unit: str = ""
    min_value: float = float('-inf')
    max_value: float = float('inf')
    precision: int = 2
    buffer_size: int = 10000


class FeedbackChannel:
    """Buffered time series for a single feedback value.

    Statistics cover the samples currently held in the buffer;
    the total count includes samples already evicted.
    """

    def __init__(self, config: ChannelConfig | None = None, name: str = "channel"):
        """Initialize channel.

        Args:
            config: Channel configuration
            name: Channel name (used if config not provided)
        """
        self.config = config or ChannelConfig(name=name)

        self._times: Deque[float] = deque(maxlen=self.config.buffer_size)
        self._values: Deque[float] = deque(maxlen=self.config.buffer_size)
        self._total_count: int = 0

    @property
    def name(self) -> str:
        """Channel name."""
        return self.config.name

    @property
    def count(self) -> int:
        """Samples recorded since creation or last clear."""
        return self._total_count

    @property
    def last_value(self) -> Optional[float]:
        """Most recent value."""
        return self._values[-1] if self._values else None

    def record(self, time_ms: float, value: float) -> None:
        """Record a value, clamped to the channel range.

        Args:
            time_ms: Sample timestamp
            value: Value to record
        """
        value = float(np.clip(value, self.config.min_value, self.config.max_value))
        self._times.append(time_ms)
        self._values.append(value)
        self._total_count += 1

    def values(self) -> np.ndarray:
        """Buffered values."""
        return np.array(self._values, dtype=float)

    def times(self) -> np.ndarray:
        """Buffered timestamps."""
        return np.array(self._times, dtype=float)

    def get_range(self, start_ms: float, end_ms: float) -> Tuple[np.ndarray, np.ndarray]:
        """Samples with start_ms <= time <= end_ms.

        Returns:
            Tuple of (times, values) arrays
        """
        times = self.times()
        values = self.values()
        mask = (times >= start_ms) & (times <= end_ms)
        return times[mask], values[mask]

    def statistics(self) -> dict:
        """Min/max/mean/std over the buffer, None values when empty."""
        if not self._values:
            return {"min": None, "max": None, "mean": None, "std": None}

        arr = self.values()
        p = self.config.precision
        return {
            "min": round(float(arr.min()), p),
            "max": round(float(arr.max()), p),
            "mean": round(float(arr.mean()), p),
            "std": round(float(arr.std()), p),
        }

    def clear(self) -> None:
        """Clear all recorded data."""
        self._times.clear()
        self._values.clear()
        self._total_count = 0

    def get_state(self) -> dict:
        """Get channel state.

        Returns:
            Dictionary with channel data
        """
        state = {
            "name": self.config.name,
            "unit": self.config.unit,
            "count": self._total_count,
            "last": self.last_value,
        }
        state.update(self.statistics())
        return state
