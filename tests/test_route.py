"""Tests for the drivescore route module."""

import dataclasses
import math

import pytest

from drivescore.errors import InvalidRouteError
from drivescore.route.route import Route
from drivescore.route.segment import RouteSegment, SegmentProgress
from drivescore.route.geometry import (
    EARTH_RADIUS_M,
    destination_point,
    haversine_distance,
    mps_to_kmh,
)
from drivescore.tracking.position import PositionSample
from drivescore.tracking.tracker import DriveTracker, TrackerConfig, TrackerState

METERS_PER_DEGREE = EARTH_RADIUS_M * math.pi / 180.0


class TestGeometry:
    """Test great-circle helpers."""

    def test_same_point(self):
        """Test zero distance for identical points."""
        assert haversine_distance(52.52, 13.405, 52.52, 13.405) == 0.0

    def test_one_degree_latitude(self):
        """Test one degree along a meridian."""
        expected = EARTH_RADIUS_M * math.pi / 180.0
        assert haversine_distance(0.0, 0.0, 1.0, 0.0) == pytest.approx(expected)

    def test_destination_point_distance(self):
        """Test destination point lies at the requested distance."""
        lat, lng = destination_point(48.1, 11.5, 37.0, 1234.5)
        assert haversine_distance(48.1, 11.5, lat, lng) == pytest.approx(1234.5, abs=1e-6)

    def test_destination_point_east(self):
        """Test travelling east keeps latitude on the equator."""
        lat, lng = destination_point(0.0, 0.0, 90.0, 1000.0)
        assert lat == pytest.approx(0.0, abs=1e-9)
        assert lng > 0.0

    def test_speed_conversion(self):
        """Test m/s to km/h with missing readings."""
        assert mps_to_kmh(10.0) == pytest.approx(36.0)
        assert mps_to_kmh(None) == 0.0
        assert mps_to_kmh(float("nan")) == 0.0
        assert mps_to_kmh(float("inf")) == 0.0


class TestRouteSegment:
    """Test route segment and progress."""

    def test_segment_is_immutable(self):
        """Test segments cannot be modified."""
        segment = RouteSegment(distance_m=500.0, target_speed_kmh=50.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            segment.distance_m = 10.0

    def test_speed_limit_is_target(self):
        """Test limit used for violations equals target speed."""
        segment = RouteSegment(target_speed_kmh=90.0)
        assert segment.speed_limit_kmh == 90.0

    def test_describe_fallback(self):
        """Test description without instruction."""
        segment = RouteSegment(index=1, distance_m=250.0, target_speed_kmh=50.0)
        assert segment.describe() == "#2 Continue for 250m @ 50 km/h"

    def test_progress_written_once(self):
        """Test progress accuracy is set once and rounded."""
        progress = SegmentProgress(index=0)
        progress.complete(99.6)

        assert progress.completed
        assert progress.accuracy == 100

        with pytest.raises(RuntimeError):
            progress.complete(50.0)
        assert progress.accuracy == 100


class TestRoute:
    """Test route class."""

    def _segments(self):
        return [
            RouteSegment(distance_m=1000.0, target_speed_kmh=60.0, instruction="Head north"),
            RouteSegment(distance_m=500.0, target_speed_kmh=50.0),
            RouteSegment(distance_m=2000.0, target_speed_kmh=90.0),
        ]

    def test_indices_assigned(self):
        """Test segment indices follow order."""
        route = Route(self._segments())
        assert [s.index for s in route.segments] == [0, 1, 2]
        assert route.num_segments == 3
        assert len(route) == 3

    def test_total_distance_defaults_to_sum(self):
        """Test total distance from segments."""
        route = Route(self._segments())
        assert route.total_distance_m == pytest.approx(3500.0)

    def test_total_distance_override(self):
        """Test router total is kept as given."""
        route = Route(self._segments(), total_distance_m=3600.0, total_duration_s=300.0)
        assert route.total_distance_m == 3600.0
        assert route.total_duration_s == 300.0

    def test_segment_start_distances(self):
        """Test nominal start distance of each segment."""
        route = Route(self._segments())
        assert route.segment_start_distance(0) == 0.0
        assert route.segment_start_distance(1) == pytest.approx(1000.0)
        assert route.segment_start_distance(2) == pytest.approx(1500.0)

    def test_validate_empty(self):
        """Test empty route is rejected."""
        route = Route([])
        with pytest.raises(InvalidRouteError):
            route.validate()

    def test_invalid_route_is_value_error(self):
        """Test error hierarchy."""
        with pytest.raises(ValueError):
            Route([]).validate()

    def test_validate_bad_segment(self):
        """Test malformed segments are rejected."""
        with pytest.raises(InvalidRouteError):
            Route([RouteSegment(distance_m=-1.0)]).validate()
        with pytest.raises(InvalidRouteError):
            Route([RouteSegment(distance_m=float("nan"))]).validate()
        with pytest.raises(InvalidRouteError):
            Route([RouteSegment(distance_m=100.0, target_speed_kmh=-1.0)]).validate()

    def test_validate_ok(self):
        """Test a good route validates."""
        Route(self._segments()).validate()

    def test_from_osrm(self):
        """Test conversion from an OSRM route object."""
        osrm = {
            "distance": 2900.6,
            "duration": 210.4,
            "legs": [{
                "steps": [
                    {"distance": 1000.0, "duration": 60.2, "maneuver": {"instruction": "Head east"}},
                    {"distance": 1500.4, "duration": 100.0, "maneuver": {"instruction": "Turn left"}},
                    {"distance": 400.2, "duration": 50.2, "maneuver": {}},
                ],
            }],
        }
        route = Route.from_osrm(osrm)

        assert route.num_segments == 3
        assert route.total_distance_m == 2901
        assert route.total_duration_s == 210
        assert [s.target_speed_kmh for s in route.segments] == [60.0, 90.0, 60.0]
        assert route[1].distance_m == 1500
        assert route[0].instruction == "Head east"
        assert route[2].instruction == "Continue for 400m"

    def test_from_osrm_arrive_step(self):
        """Test a zero-length arrival step can be driven to completion."""
        osrm = {
            "distance": 1500.0,
            "duration": 90.0,
            "legs": [{
                "steps": [
                    {"distance": 1500.0, "duration": 90.0, "maneuver": {"instruction": "Head north"}},
                    {"distance": 0.0, "duration": 0.0, "maneuver": {"type": "arrive"}},
                ],
            }],
        }
        route = Route.from_osrm(osrm)
        assert route[1].distance_m == 0
        route.validate()

        tracker = DriveTracker(TrackerConfig(clock=lambda: 0.0))
        tracker.start(route)
        for d in (0.0, 1400.0, 1501.0):
            tracker.update_position(PositionSample(
                lat=d / METERS_PER_DEGREE, lng=0.0, speed_mps=60.0 / 3.6,
            ))

        assert tracker.state == TrackerState.FINISHED
        assert tracker.result.segments_completed == 2
        assert tracker.result.segment_accuracies == [100.0, 100.0]

    def test_from_osrm_without_legs(self):
        """Test OSRM object without legs is rejected."""
        with pytest.raises(InvalidRouteError):
            Route.from_osrm({"distance": 10.0})

    def test_from_dict(self):
        """Test building from a plain dictionary."""
        route = Route.from_dict({
            "segments": [
                {"distance_m": 800, "target_speed_kmh": 50, "instruction": "Go"},
                {"distance_m": 1200, "target_speed_kmh": 70},
            ],
        })
        assert route.num_segments == 2
        assert route.total_distance_m == pytest.approx(2000.0)
        assert route[1].target_speed_kmh == 70.0

    def test_state(self):
        """Test route summary dictionary."""
        state = Route(self._segments(), route_id="r1").get_state()
        assert state["route_id"] == "r1"
        assert state["num_segments"] == 3
        assert len(state["segments"]) == 3
