"""Exceptions raised by drivescore."""


class DriveScoreError(Exception):
    """Base class for drivescore errors."""


class InvalidRouteError(DriveScoreError, ValueError):
    """Route cannot be driven: no segments or malformed segment data."""
