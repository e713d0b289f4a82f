"""
Telemetry module - Live feedback collection during a drive.

This module contains:
- FeedbackRecorder: Records tracker events into channels
- FeedbackChannel: Individual buffered time series
"""

from drivescore.telemetry.channel import ChannelConfig, FeedbackChannel
from drivescore.telemetry.recorder import FeedbackRecorder, RecorderConfig

__all__ = [
    "ChannelConfig",
    "FeedbackChannel",
    "FeedbackRecorder",
    "RecorderConfig",
]
