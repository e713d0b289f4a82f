"""
Results module - Drive result record and post-drive evaluation.

This module contains:
- DriveResult: Terminal record of a drive
- build_result: Result assembly from session state
- check_achievements: Milestones unlocked by a drive
"""

from drivescore.results.result import DriveResult, build_result, mean_accuracy
from drivescore.results.achievements import Achievement, check_achievements

__all__ = [
    "DriveResult",
    "build_result",
    "mean_accuracy",
    "Achievement",
    "check_achievements",
]
