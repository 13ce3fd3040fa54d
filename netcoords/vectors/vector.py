from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, TypeVar

# Two vectors closer than this are treated as the same point.
OVERLAP_THRESHOLD = 1.0e-6


V = TypeVar("V", bound="Vector")


class Vector(ABC):
    """
    Abstract N-dimensional real vector used by network coordinates.

    Concrete vectors supply storage and the componentwise arithmetic.
    Everything built on top of that (magnitude, distance, unit vectors,
    random placement, operators) lives here so that coordinate code can
    be written once against this contract and run on either backing.
    """

    __slots__ = ()

    @classmethod
    @abstractmethod
    def zero(cls: type[V], dimensions: int | None = None) -> V:
        """Return an all-zero vector."""

    @classmethod
    @abstractmethod
    def from_array(cls: type[V], values: Iterable[float]) -> V:
        """Return a vector holding a copy of the given components."""

    @property
    @abstractmethod
    def dimensions(self) -> int: ...

    @abstractmethod
    def as_array(self) -> list[float]: ...

    @abstractmethod
    def copy(self: V) -> V: ...

    @abstractmethod
    def difference(self: V, other: Vector) -> V:
        """Return ``self - other``."""

    @abstractmethod
    def add(self: V, other: Vector) -> V:
        """Return ``self + other``."""

    @abstractmethod
    def add_assign(self, other: Vector) -> None:
        """Add ``other`` to this vector in place."""

    @abstractmethod
    def scale_add_assign(self, other: Vector, factor: float) -> None:
        """Add ``other * factor`` to this vector in place."""

    @abstractmethod
    def scale(self: V, factor: float) -> V: ...

    @abstractmethod
    def divide(self: V, divisor: float) -> V: ...

    @abstractmethod
    def magnitude_squared(self) -> float:
        """
        Sum of squared components, accumulated left to right so that
        every backing produces bit-identical distances.
        """

    @abstractmethod
    def is_finite(self) -> bool: ...

    @abstractmethod
    def __getitem__(self, index: int) -> float: ...

    @abstractmethod
    def __setitem__(self, index: int, value: float) -> None: ...

    @classmethod
    def random_unit_cube(
        cls: type[V],
        dimensions: int | None = None,
        rng: random.Random | None = None,
    ) -> V:
        """
        Return a vector whose components are independently uniform on
        [-1, 1). Without an explicit ``rng`` the process-wide generator
        of the ``random`` module is used.
        """
        sample = rng.random if rng is not None else random.random
        vector = cls.zero(dimensions)
        for index in range(vector.dimensions):
            vector[index] = sample() * 2.0 - 1.0

        return vector

    @classmethod
    def basis(cls: type[V], dimensions: int | None = None) -> V:
        """Return the first basis vector ``(1, 0, ..., 0)``."""
        vector = cls.zero(dimensions)
        vector[0] = 1.0
        return vector

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def distance(self, other: Vector) -> float:
        return self.difference(other).magnitude()

    def unit_vector_from(self: V, other: Vector) -> tuple[float, V]:
        """
        Return ``(|self - other|, (self - other) / |self - other|)``.

        When the two points are within ``OVERLAP_THRESHOLD`` of each
        other the direction is undefined, so ``(0.0, e1)`` is returned
        instead. Callers rely on this to push coincident points apart.
        """
        delta = self.difference(other)
        magnitude = delta.magnitude()

        if magnitude < OVERLAP_THRESHOLD:
            return 0.0, type(self).basis(self.dimensions)

        return magnitude, delta.divide(magnitude)

    def _check_dimensions(self, other: Vector) -> None:
        if other.dimensions != self.dimensions:
            raise ValueError(
                f"Dimension mismatch: {self.dimensions} != {other.dimensions}"
            )

    def __len__(self) -> int:
        return self.dimensions

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_array())

    def __add__(self: V, other: Vector) -> V:
        return self.add(other)

    def __iadd__(self: V, other: Vector) -> V:
        self.add_assign(other)
        return self

    def __sub__(self: V, other: Vector) -> V:
        return self.difference(other)

    def __mul__(self: V, factor: float) -> V:
        return self.scale(factor)

    __rmul__ = __mul__

    def __truediv__(self: V, divisor: float) -> V:
        return self.divide(divisor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented

        return self.as_array() == other.as_array()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_array()})"
