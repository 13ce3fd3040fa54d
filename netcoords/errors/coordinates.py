"""
Coordinate exceptions for netcoords.

Raised by NetworkCoordinate and CoordinateNode when an update cannot
produce, or would be fed, a usable coordinate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from netcoords.models.network_coordinate import NetworkCoordinate


class VivaldiError(Exception):
    """Base class for every netcoords error."""

    pass


class InvalidCoordinateError(VivaldiError):
    """
    Raised when a component of a coordinate vector is NaN or infinite
    after an update.

    CoordinateNode.try_update raises this and leaves the node holding the
    invalid coordinate. CoordinateNode.update catches it and restores the
    coordinate from before the update instead.
    """

    def __init__(self, coordinate: NetworkCoordinate) -> None:
        self.coordinate = coordinate
        super().__init__(
            f"Coordinate vector is not finite: {coordinate.vec.as_array()}"
        )


class InvalidErrorEstimateError(VivaldiError):
    """
    Raised when an error estimate that is not a finite, positive number
    is written to a node.
    """

    def __init__(self, error_estimate: float) -> None:
        self.error_estimate = error_estimate
        super().__init__(
            f"Error estimate must be finite and greater than zero, got {error_estimate}"
        )


class PreconditionViolation(VivaldiError, ValueError):
    """
    Raised when an update is called with an RTT that is not positive or
    when both coordinates report a non-positive error estimate.

    This is a programming error. Nothing in netcoords catches it.
    """

    pass
