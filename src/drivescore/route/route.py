"""
Route - Ordered, read-only sequence of route segments.

Contains:
- Segment collection with cumulative start distances
- Route totals (distance, duration)
- Validation before a drive starts
- Conversion from an OSRM route response
"""

from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional, Tuple
import numpy as np

from drivescore.errors import InvalidRouteError
from drivescore.route.segment import RouteSegment

# Target speeds assigned to router steps, by step length
LONG_STEP_THRESHOLD_M = 1000.0
LONG_STEP_SPEED_KMH = 90.0
SHORT_STEP_SPEED_KMH = 60.0


class Route:
    """Navigation route made of consecutive segments.

    The route is owned by the caller and never mutated by a tracker.
    Segment indices are assigned in order on construction.

    Usage:
        route = Route([
            RouteSegment(distance_m=1000.0, target_speed_kmh=60.0),
            RouteSegment(distance_m=1000.0, target_speed_kmh=60.0),
        ])
        route.segment_start_distance(1)  # 1000.0
    """

    def __init__(
        self,
        segments: Iterable[RouteSegment],
        total_distance_m: Optional[float] = None,
        total_duration_s: float = 0.0,
        route_id: str = "",
    ):
        """Initialize route.

        Args:
            segments: Segments in driving order
            total_distance_m: Router total; sum of segments if None
            total_duration_s: Router duration estimate
            route_id: Optional identifier
        """
        self._segments: Tuple[RouteSegment, ...] = tuple(
            replace(segment, index=i) for i, segment in enumerate(segments)
        )

        distances = np.array([s.distance_m for s in self._segments], dtype=float)
        # Cumulative distance to each segment start
        self._start_distances: Tuple[float, ...] = tuple(
            float(d) for d in np.concatenate(([0.0], np.cumsum(distances)[:-1]))
        ) if len(distances) else ()

        if total_distance_m is None:
            total_distance_m = float(distances.sum()) if len(distances) else 0.0
        self._total_distance_m = float(total_distance_m)
        self._total_duration_s = float(total_duration_s)
        self.route_id = route_id

    @property
    def segments(self) -> Tuple[RouteSegment, ...]:
        """Route segments in order."""
        return self._segments

    @property
    def num_segments(self) -> int:
        """Number of segments."""
        return len(self._segments)

    @property
    def total_distance_m(self) -> float:
        """Total route distance in meters."""
        return self._total_distance_m

    @property
    def total_duration_s(self) -> float:
        """Estimated route duration in seconds."""
        return self._total_duration_s

    def __len__(self) -> int:
        return len(self._segments)

    def __getitem__(self, index: int) -> RouteSegment:
        return self._segments[index]

    def segment_start_distance(self, index: int) -> float:
        """Sum of nominal distances of all segments before index.

        Args:
            index: Segment index

        Returns:
            Distance in meters
        """
        return self._start_distances[index]

    def validate(self) -> None:
        """Check the route can be driven.

        Raises:
            InvalidRouteError: No segments, or a segment with a
                negative distance or negative target speed. Zero-length
                steps such as an OSRM arrival are allowed.
        """
        if not self._segments:
            raise InvalidRouteError("Route has no segments")

        for segment in self._segments:
            if not np.isfinite(segment.distance_m) or segment.distance_m < 0:
                raise InvalidRouteError(
                    f"Segment {segment.index} has invalid distance {segment.distance_m!r}"
                )
            if not np.isfinite(segment.target_speed_kmh) or segment.target_speed_kmh < 0:
                raise InvalidRouteError(
                    f"Segment {segment.index} has invalid target speed "
                    f"{segment.target_speed_kmh!r}"
                )

    @classmethod
    def from_osrm(cls, osrm_route: Dict[str, Any], route_id: str = "") -> "Route":
        """Build a route from one entry of an OSRM ``routes`` array.

        Only the first leg's steps are used. The response must already
        have been fetched with ``steps=true``.

        Args:
            osrm_route: Decoded OSRM route object
            route_id: Optional identifier

        Returns:
            Route with one segment per step

        Raises:
            InvalidRouteError: Response has no legs
        """
        legs = osrm_route.get("legs") or []
        if not legs:
            raise InvalidRouteError("OSRM route has no legs")

        segments: List[RouteSegment] = []
        for step in legs[0].get("steps", []):
            distance = round(float(step.get("distance", 0.0)))
            instruction = (step.get("maneuver") or {}).get("instruction")
            segments.append(RouteSegment(
                distance_m=distance,
                duration_s=round(float(step.get("duration", 0.0))),
                target_speed_kmh=(
                    LONG_STEP_SPEED_KMH
                    if float(step.get("distance", 0.0)) > LONG_STEP_THRESHOLD_M
                    else SHORT_STEP_SPEED_KMH
                ),
                instruction=instruction or f"Continue for {distance}m",
            ))

        return cls(
            segments,
            total_distance_m=round(float(osrm_route.get("distance", 0.0))),
            total_duration_s=round(float(osrm_route.get("duration", 0.0))),
            route_id=route_id,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Route":
        """Build a route from a plain dictionary.

        Args:
            data: ``{"segments": [{"distance_m", "target_speed_kmh",
                "instruction"}], "total_distance_m", "total_duration_s"}``

        Returns:
            Route
        """
        segments = [
            RouteSegment(
                distance_m=float(s["distance_m"]),
                target_speed_kmh=float(s["target_speed_kmh"]),
                instruction=s.get("instruction", ""),
                duration_s=float(s.get("duration_s", 0.0)),
            )
            for s in data.get("segments", [])
        ]
        return cls(
            segments,
            total_distance_m=data.get("total_distance_m"),
            total_duration_s=data.get("total_duration_s", 0.0),
            route_id=data.get("route_id", ""),
        )

    def get_state(self) -> dict:
        """Get route summary.

        Returns:
            Dictionary with route data
        """
        return {
            "route_id": self.route_id,
            "num_segments": self.num_segments,
            "total_distance_m": self._total_distance_m,
            "total_duration_s": self._total_duration_s,
            "segments": [
                {
                    "index": s.index,
                    "distance_m": s.distance_m,
                    "target_speed_kmh": s.target_speed_kmh,
                    "instruction": s.instruction,
                }
                for s in self._segments
            ],
        }
