"""
Simulation module - Synthetic drives for testing and demos.

This module contains:
- DriveSimulator: Position stream generator and tracker driver
"""

from drivescore.simulation.simulator import DriveSimulator, SimulationConfig

__all__ = [
    "DriveSimulator",
    "SimulationConfig",
]
