from __future__ import annotations


class AdjustmentWindow:
    """
    Fixed-length ring of recent ``rtt - raw_distance`` residuals.

    The offset derived from the window is the mean residual halved, since
    half of any systematic error is attributed to each endpoint. Residuals
    and the resulting offset are kept as computed, negative or not. A
    window of size zero records nothing.
    """

    __slots__ = ("_samples", "_index")

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError(f"Adjustment window size must be at least 0, got {size}")

        self._samples = [0.0] * size
        self._index = 0

    @property
    def size(self) -> int:
        return len(self._samples)

    @property
    def index(self) -> int:
        return self._index

    @property
    def samples(self) -> tuple[float, ...]:
        return tuple(self._samples)

    @property
    def enabled(self) -> bool:
        return len(self._samples) > 0

    def record(self, residual: float) -> float | None:
        """
        Store ``residual`` in the next slot and return the new offset, or
        None when the window is disabled.
        """
        size = len(self._samples)
        if size == 0:
            return None

        self._samples[self._index] = residual
        self._index = (self._index + 1) % size

        return self.offset()

    def offset(self) -> float:
        size = len(self._samples)
        if size == 0:
            return 0.0

        return sum(self._samples) / (2.0 * size)

    def clear(self) -> None:
        for index in range(len(self._samples)):
            self._samples[index] = 0.0

        self._index = 0

    def copy(self) -> AdjustmentWindow:
        window = AdjustmentWindow(len(self._samples))
        window._samples[:] = self._samples
        window._index = self._index
        return window
