"""
Position sample - A single geolocation fix from the caller's location watch.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from drivescore.route.geometry import haversine_distance, mps_to_kmh


@dataclass(frozen=True)
class PositionSample:
    """Geolocation fix."""
    lat: float
    lng: float
    speed_mps: Optional[float] = None   # None when the device reports no speed
    timestamp_ms: float = 0.0
    accuracy_m: Optional[float] = None  # Reported radius, informational

    @property
    def speed_kmh(self) -> float:
        """Speed in km/h (0 when missing)."""
        return mps_to_kmh(self.speed_mps)

    def distance_to(self, other: "PositionSample") -> float:
        """Great-circle distance to another sample in meters."""
        return haversine_distance(self.lat, self.lng, other.lat, other.lng)

    @classmethod
    def from_geolocation(cls, data: Dict[str, Any]) -> "PositionSample":
        """Build from a browser-style geolocation payload.

        Accepts either a flat dict (``lat``, ``lng``, ``speed``,
        ``timestamp``, ``accuracy``) or a ``coords`` sub-dict with
        ``latitude``/``longitude``.
        """
        coords = data.get("coords", data)
        return cls(
            lat=float(coords.get("lat", coords.get("latitude", 0.0))),
            lng=float(coords.get("lng", coords.get("longitude", 0.0))),
            speed_mps=coords.get("speed"),
            timestamp_ms=float(data.get("timestamp", 0.0)),
            accuracy_m=coords.get("accuracy"),
        )
