from __future__ import annotations

import random
from typing import Iterable

from netcoords.errors import PreconditionViolation
from netcoords.vectors import OVERLAP_THRESHOLD, FixedVector, Vector

from .vivaldi_config import DEFAULT_ERROR_MAX, VivaldiConfig

DEFAULT_DIMENSIONS = 8


class NetworkCoordinate:
    """
    A Vivaldi network coordinate: a position vector plus height, error
    estimate and offset.

    The estimated RTT between two coordinates is the distance between
    their vectors plus both heights and both offsets. Height models the
    access-link latency of a node and is maintained by ``update``. The
    error estimate is the node's confidence in its own position, lower
    meaning more confident, and decides how far each side moves.
    """

    __slots__ = ("_vec", "_error_estimate", "_height", "_offset")

    def __init__(
        self,
        vec: Vector,
        error_estimate: float = DEFAULT_ERROR_MAX,
        height: float = 0.0,
        offset: float = 0.0,
    ) -> None:
        self._vec = vec
        self._error_estimate = error_estimate
        self._height = height
        self._offset = max(0.0, offset)

    @classmethod
    def zero(
        cls,
        dimensions: int | None = DEFAULT_DIMENSIONS,
        vector_type: type[Vector] = FixedVector,
    ) -> NetworkCoordinate:
        """Coordinate at the origin with maximal error estimate."""
        return cls(vector_type.zero(dimensions))

    @classmethod
    def random(
        cls,
        dimensions: int | None = DEFAULT_DIMENSIONS,
        vector_type: type[Vector] = FixedVector,
        rng: random.Random | None = None,
    ) -> NetworkCoordinate:
        """
        Coordinate placed uniformly in [-1, 1) on every axis, so that new
        nodes do not all start at the same point.
        """
        return cls(vector_type.random_unit_cube(dimensions, rng=rng))

    @classmethod
    def from_vector(cls, vec: Vector) -> NetworkCoordinate:
        return cls(vec)

    @classmethod
    def from_array(
        cls,
        values: Iterable[float],
        vector_type: type[Vector] = FixedVector,
    ) -> NetworkCoordinate:
        return cls(vector_type.from_array(values))

    @property
    def vec(self) -> Vector:
        return self._vec

    @property
    def dimensions(self) -> int:
        return self._vec.dimensions

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, height: float) -> None:
        self._height = height

    @property
    def offset(self) -> float:
        return self._offset

    @offset.setter
    def offset(self, offset: float) -> None:
        # Negative offsets are ignored and reset the offset to zero.
        self._offset = max(0.0, offset)

    @property
    def error_estimate(self) -> float:
        return self._error_estimate

    @error_estimate.setter
    def error_estimate(self, error_estimate: float) -> None:
        self._error_estimate = error_estimate

    def set_adjusted_offset(self, offset: float) -> None:
        """
        Store an offset computed from an adjustment window verbatim.
        Unlike the ``offset`` setter, negative values are kept.
        """
        self._offset = offset

    def copy(self) -> NetworkCoordinate:
        snapshot = NetworkCoordinate(
            self._vec.copy(),
            error_estimate=self._error_estimate,
            height=self._height,
        )
        snapshot._offset = self._offset
        return snapshot

    def distance_to(self, other: NetworkCoordinate) -> float:
        """Estimated RTT in seconds, including heights and offsets."""
        return self.raw_distance_to(other) + self._offset + other._offset

    def raw_distance_to(self, other: NetworkCoordinate) -> float:
        """Estimated RTT in seconds, including heights but not offsets."""
        return self._vec.distance(other._vec) + self._height + other._height

    def is_finite(self) -> bool:
        return self._vec.is_finite()

    def update(
        self,
        rtt: float,
        other: NetworkCoordinate,
        config: VivaldiConfig,
    ) -> None:
        """
        Move this coordinate based on a measured RTT (seconds) to ``other``.

        A high local error estimate moves this coordinate further. A high
        error estimate on ``other`` means it is unsure of its own position,
        so this coordinate moves less.

        Raises PreconditionViolation if ``rtt`` is not positive or if the
        two error estimates do not sum to a positive value.
        """
        if not rtt > 0.0:
            raise PreconditionViolation(f"RTT must be greater than zero, got {rtt}")

        local_error = self._error_estimate
        total_error = local_error + other._error_estimate
        if not total_error > 0.0:
            raise PreconditionViolation(
                f"At least one error estimate must be positive, got "
                f"{local_error} and {other._error_estimate}"
            )

        weight = local_error / total_error

        dist = self._vec.distance(other._vec)
        relative_error = max(dist - rtt, 0.0) / rtt

        smoothing = config.ce * weight
        self._error_estimate = min(
            relative_error * smoothing + local_error * (1.0 - smoothing),
            config.error_max,
        )

        force = config.cc * weight * (rtt - dist)
        self._apply_force_from(other, force, config)

    def apply_gravity(self, origin: NetworkCoordinate, config: VivaldiConfig) -> None:
        """Pull the coordinate toward ``origin`` to keep the system from drifting."""
        relative_gravity = self.distance_to(origin) / config.gravity_rho
        self._apply_force_from(origin, -(relative_gravity * relative_gravity), config)

    def _apply_force_from(
        self,
        other: NetworkCoordinate,
        force: float,
        config: VivaldiConfig,
    ) -> None:
        self._height = max(self._height, config.height_min)

        magnitude, unit = self._vec.unit_vector_from(other._vec)
        self._vec.scale_add_assign(unit, force)

        # Height scales with the pre-move magnitude.
        if magnitude > OVERLAP_THRESHOLD:
            self._height = max(
                self._height + force * (self._height / magnitude),
                config.height_min,
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetworkCoordinate):
            return NotImplemented

        return (
            self._vec == other._vec
            and self._error_estimate == other._error_estimate
            and self._height == other._height
            and self._offset == other._offset
        )

    def __repr__(self) -> str:
        return (
            f"NetworkCoordinate(vec={self._vec.as_array()}, "
            f"error_estimate={self._error_estimate}, "
            f"height={self._height}, offset={self._offset})"
        )
