from __future__ import annotations

from typing import ClassVar, Iterable

import numpy as np

from .vector import Vector


class FixedVector(Vector):
    """
    Vector with a dimension fixed by its class, stored in a preallocated
    float64 numpy array.

    Use ``FixedVector.of_dimension(n)`` to get the class for ``n``
    dimensions, or let ``FixedVector.from_array`` infer it. In-place
    operations write into the existing array, so a coordinate updated
    with ``add_assign``/``scale_add_assign`` never reallocates storage.
    """

    __slots__ = ("_inner",)

    DIMENSIONS: ClassVar[int | None] = None
    _dimension_types: ClassVar[dict[int, type[FixedVector]]] = {}

    def __init__(self, values: Iterable[float] | np.ndarray | None = None) -> None:
        dimensions = type(self).DIMENSIONS
        if dimensions is None:
            raise TypeError(
                "FixedVector has no dimension, use FixedVector.of_dimension(n)"
            )

        if values is None:
            self._inner = np.zeros(dimensions, dtype=np.float64)
            return

        inner = np.array(values, dtype=np.float64)
        if inner.shape != (dimensions,):
            raise ValueError(
                f"Expected {dimensions} components, got shape {inner.shape}"
            )

        self._inner = inner

    @classmethod
    def of_dimension(cls, dimensions: int) -> type[FixedVector]:
        if dimensions < 1:
            raise ValueError(f"Vectors need at least one dimension, got {dimensions}")

        vector_type = FixedVector._dimension_types.get(dimensions)
        if vector_type is None:
            vector_type = type(
                f"FixedVector{dimensions}",
                (FixedVector,),
                {
                    "__slots__": (),
                    "__module__": __name__,
                    "DIMENSIONS": dimensions,
                },
            )
            FixedVector._dimension_types[dimensions] = vector_type

        return vector_type

    @classmethod
    def _resolve(cls, dimensions: int | None) -> type[FixedVector]:
        if cls.DIMENSIONS is None:
            if dimensions is None:
                raise ValueError("dimensions is required for an unsized FixedVector")

            return cls.of_dimension(dimensions)

        if dimensions is not None and dimensions != cls.DIMENSIONS:
            raise ValueError(
                f"{cls.__name__} has {cls.DIMENSIONS} dimensions, not {dimensions}"
            )

        return cls

    @classmethod
    def zero(cls, dimensions: int | None = None) -> FixedVector:
        return cls._resolve(dimensions)()

    @classmethod
    def from_array(cls, values: Iterable[float]) -> FixedVector:
        inner = np.array(list(values), dtype=np.float64)
        if inner.ndim != 1:
            raise ValueError(f"Expected a flat sequence, got shape {inner.shape}")

        return cls._resolve(inner.shape[0])(inner)

    @property
    def dimensions(self) -> int:
        return self._inner.shape[0]

    def as_array(self) -> list[float]:
        return self._inner.tolist()

    def copy(self) -> FixedVector:
        return type(self)(self._inner)

    def _components(self, other: Vector) -> np.ndarray:
        self._check_dimensions(other)
        if isinstance(other, FixedVector):
            return other._inner

        return np.array(other.as_array(), dtype=np.float64)

    def difference(self, other: Vector) -> FixedVector:
        return type(self)(self._inner - self._components(other))

    def add(self, other: Vector) -> FixedVector:
        return type(self)(self._inner + self._components(other))

    def add_assign(self, other: Vector) -> None:
        np.add(self._inner, self._components(other), out=self._inner)

    def scale_add_assign(self, other: Vector, factor: float) -> None:
        self._inner += self._components(other) * factor

    def scale(self, factor: float) -> FixedVector:
        return type(self)(self._inner * factor)

    def divide(self, divisor: float) -> FixedVector:
        return type(self)(self._inner / divisor)

    def magnitude_squared(self) -> float:
        total = 0.0
        for component in self._inner.tolist():
            total += component * component

        return total

    def is_finite(self) -> bool:
        return bool(np.isfinite(self._inner).all())

    def __getitem__(self, index: int) -> float:
        return float(self._inner[index])

    def __setitem__(self, index: int, value: float) -> None:
        self._inner[index] = value

    def __reduce__(self):
        return (FixedVector.from_array, (self.as_array(),))
