from __future__ import annotations

import math
from typing import Iterable

from .vector import Vector


class DynamicVector(Vector):
    """
    List-backed vector for when the dimension is only known at runtime.
    Storage is allocated on construction and on ``resize``.
    """

    __slots__ = ("_inner",)

    def __init__(self, values: Iterable[float]) -> None:
        inner = [float(value) for value in values]
        if not inner:
            raise ValueError("Vectors need at least one dimension")

        self._inner = inner

    @classmethod
    def zero(cls, dimensions: int | None = None) -> DynamicVector:
        if dimensions is None:
            raise ValueError("dimensions is required for a DynamicVector")

        if dimensions < 1:
            raise ValueError(f"Vectors need at least one dimension, got {dimensions}")

        return cls([0.0] * dimensions)

    @classmethod
    def from_array(cls, values: Iterable[float]) -> DynamicVector:
        return cls(values)

    @property
    def dimensions(self) -> int:
        return len(self._inner)

    def resize(self, dimensions: int) -> None:
        """Truncate or zero-pad to ``dimensions`` components."""
        if dimensions < 1:
            raise ValueError(f"Vectors need at least one dimension, got {dimensions}")

        current = len(self._inner)
        if dimensions < current:
            del self._inner[dimensions:]

        else:
            self._inner.extend([0.0] * (dimensions - current))

    def as_array(self) -> list[float]:
        return list(self._inner)

    def copy(self) -> DynamicVector:
        return type(self)(self._inner)

    def _components(self, other: Vector) -> list[float]:
        self._check_dimensions(other)
        if isinstance(other, DynamicVector):
            return other._inner

        return other.as_array()

    def difference(self, other: Vector) -> DynamicVector:
        return type(self)(
            [left - right for left, right in zip(self._inner, self._components(other))]
        )

    def add(self, other: Vector) -> DynamicVector:
        return type(self)(
            [left + right for left, right in zip(self._inner, self._components(other))]
        )

    def add_assign(self, other: Vector) -> None:
        inner = self._inner
        for index, component in enumerate(self._components(other)):
            inner[index] += component

    def scale_add_assign(self, other: Vector, factor: float) -> None:
        inner = self._inner
        for index, component in enumerate(self._components(other)):
            inner[index] += component * factor

    def scale(self, factor: float) -> DynamicVector:
        return type(self)([component * factor for component in self._inner])

    def divide(self, divisor: float) -> DynamicVector:
        return type(self)([component / divisor for component in self._inner])

    def magnitude_squared(self) -> float:
        total = 0.0
        for component in self._inner:
            total += component * component

        return total

    def is_finite(self) -> bool:
        return all(math.isfinite(component) for component in self._inner)

    def __getitem__(self, index: int) -> float:
        return self._inner[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._inner[index] = float(value)
