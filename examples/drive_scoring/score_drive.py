#!/usr/bin/env python3
"""
Drive Scoring Example

This example demonstrates how to:
1. Build a route from an OSRM-style response
2. Attach a feedback recorder to a drive tracker
3. Simulate a drive with a per-segment speed profile
4. Inspect the result, grade and achievements

Run with: python score_drive.py
"""

import logging

from drivescore import Route, DriveTracker, TrackerConfig
from drivescore.results import check_achievements
from drivescore.scoring import accuracy_grade, distance_category, format_score
from drivescore.simulation import DriveSimulator
from drivescore.telemetry import FeedbackRecorder
from drivescore.scoring.violation import ViolationLevel


OSRM_ROUTE = {
    "distance": 3650.4,
    "duration": 260.2,
    "legs": [{
        "steps": [
            {"distance": 420.2, "duration": 40.1, "maneuver": {"instruction": "Head east"}},
            {"distance": 1830.0, "duration": 120.0, "maneuver": {"instruction": "Merge onto B96"}},
            {"distance": 1400.2, "duration": 100.1, "maneuver": {}},
        ],
    }],
}


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    print("=" * 60)
    print("drivescore Drive Scoring Example")
    print("=" * 60)

    # Step 1: Build the route
    print("\n1. Building route...")
    route = Route.from_osrm(OSRM_ROUTE, route_id="example")
    for segment in route.segments:
        print(f"   {segment.describe()} ({segment.distance_m:g} m)")

    # Step 2: Set up tracker and recorder
    print("\n2. Setting up tracker...")
    sim = DriveSimulator()
    tracker = DriveTracker(TrackerConfig(clock=sim.clock, user_id="example-driver"))
    recorder = FeedbackRecorder()
    recorder.attach(tracker)

    # Step 3: Drive slightly off target on the middle segment
    print("\n3. Driving...")
    result = sim.run(tracker, route, speed_kmh=[60.0, 84.0, 62.0])

    # Step 4: Results
    print("\n4. Result:")
    grade = accuracy_grade(result.average_accuracy)
    print(f"   Segments: {result.segments_completed}/{result.total_segments}")
    print(f"   Accuracy: {result.average_accuracy}% ({grade.grade}, {grade.label})")
    print(f"   Score: {result.score} ({format_score(result.score)})")
    print(f"   Category: {distance_category(result.distance_m)}")
    print(f"   Duration: {result.duration_ms / 1000:.0f} s")
    print(f"   Warnings: {recorder.violation_count(ViolationLevel.WARNING)}, "
          f"critical: {recorder.violation_count(ViolationLevel.CRITICAL)}")

    for achievement in check_achievements(result):
        print(f"   Achievement: {achievement.title} - {achievement.description}")

    print("\n" + "=" * 60)
    print("Drive complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
