from __future__ import annotations

import datetime
import random
import sys
from typing import Iterable

from netcoords.env import Env
from netcoords.errors import InvalidCoordinateError, InvalidErrorEstimateError
from netcoords.logging import (
    CoordinateDebug,
    CoordinateWarning,
    Logger,
    LoggingConfig,
)
from netcoords.models import (
    DEFAULT_DIMENSIONS,
    NetworkCoordinate,
    VivaldiConfig,
)
from netcoords.vectors import FixedVector, Vector

from .adjustment_window import AdjustmentWindow

# Smallest positive normal double. Measured RTTs below it are raised to it.
MIN_RTT_SECONDS = sys.float_info.min

DEFAULT_MAX_ITERATIONS = 1000

LOGGER_NAME = "netcoords"

RTT = float | datetime.timedelta


def to_rtt_seconds(rtt: RTT) -> float:
    if isinstance(rtt, datetime.timedelta):
        rtt = rtt.total_seconds()

    return max(MIN_RTT_SECONDS, rtt)


class CoordinateNode:
    """
    Owns a NetworkCoordinate together with its VivaldiConfig and an
    optional adjustment window.

    ``update`` keeps the coordinate usable by rolling back any update
    that produces a non-finite vector. ``try_update`` raises
    InvalidCoordinateError instead and leaves the coordinate as it is, so
    the caller decides whether to ``reset`` the node.

    A node is not thread safe. Peers read each other's coordinates during
    an update but only the owning node writes to its own.
    """

    def __init__(
        self,
        config: VivaldiConfig | None = None,
        coordinate: NetworkCoordinate | None = None,
        dimensions: int = DEFAULT_DIMENSIONS,
        vector_type: type[Vector] = FixedVector,
        window_size: int = 0,
        logger: Logger | None = None,
    ) -> None:
        self._config = config if config is not None else VivaldiConfig()
        self._window = AdjustmentWindow(window_size)
        self._logger = logger if logger is not None else Logger()

        if coordinate is None:
            coordinate = NetworkCoordinate.zero(dimensions, vector_type)
            coordinate.error_estimate = self._config.error_max

        self._coordinate = self._install(coordinate)

    @classmethod
    def random(
        cls,
        config: VivaldiConfig | None = None,
        dimensions: int = DEFAULT_DIMENSIONS,
        vector_type: type[Vector] = FixedVector,
        window_size: int = 0,
        rng: random.Random | None = None,
        logger: Logger | None = None,
    ) -> CoordinateNode:
        config = config if config is not None else VivaldiConfig()

        coordinate = NetworkCoordinate.random(dimensions, vector_type, rng=rng)
        coordinate.error_estimate = config.error_max

        return cls(
            config=config,
            coordinate=coordinate,
            window_size=window_size,
            logger=logger,
        )

    @classmethod
    def from_env(
        cls,
        env: Env,
        vector_type: type[Vector] = FixedVector,
        rng: random.Random | None = None,
        logger: Logger | None = None,
    ) -> CoordinateNode:
        """
        Build a randomly placed node from ``NETCOORDS_*`` settings and
        apply the logging level and output they name.
        """
        LoggingConfig().update(**env.get_logging_options())

        return cls.random(
            config=env.get_vivaldi_config(),
            vector_type=vector_type,
            rng=rng,
            logger=logger,
            **env.get_node_options(),
        )

    @property
    def config(self) -> VivaldiConfig:
        return self._config

    @property
    def coordinate(self) -> NetworkCoordinate:
        """The live coordinate. Treat it as read-only."""
        return self._coordinate

    @property
    def dimensions(self) -> int:
        return self._coordinate.dimensions

    @property
    def window(self) -> AdjustmentWindow:
        return self._window

    @property
    def error_estimate(self) -> float:
        return self._coordinate.error_estimate

    def set_coordinate(self, coordinate: NetworkCoordinate) -> None:
        """
        Install a copy of ``coordinate``, raising its height to
        ``height_min`` and lowering its error estimate to ``error_max``.
        """
        self._coordinate = self._install(coordinate)
        self._log(CoordinateDebug, "Installed coordinate")

    def try_set_error_estimate(self, error_estimate: float) -> None:
        if not 0.0 < error_estimate < float("inf"):
            raise InvalidErrorEstimateError(error_estimate)

        self._coordinate.error_estimate = min(error_estimate, self._config.error_max)

    def set_error_estimate(self, error_estimate: float) -> bool:
        try:
            self.try_set_error_estimate(error_estimate)

        except InvalidErrorEstimateError:
            return False

        return True

    def is_valid(self) -> bool:
        return self._coordinate.is_finite()

    def reset(self, rng: random.Random | None = None) -> None:
        """
        Replace the coordinate with a fresh one of the same shape, placed
        randomly when ``rng`` is given and at the origin otherwise, and
        clear the adjustment window.
        """
        vector_type = type(self._coordinate.vec)
        dimensions = self._coordinate.dimensions

        if rng is None:
            coordinate = NetworkCoordinate.zero(dimensions, vector_type)

        else:
            coordinate = NetworkCoordinate.random(dimensions, vector_type, rng=rng)

        coordinate.error_estimate = self._config.error_max
        self._coordinate = self._install(coordinate)
        self._window.clear()

    def update(self, rtt: RTT, other: NetworkCoordinate) -> bool:
        """
        Update from an RTT sample to ``other``. Returns False, with the
        coordinate and window unchanged, if the update would have made the
        coordinate non-finite.
        """
        rtt_seconds = to_rtt_seconds(rtt)

        coordinate_snapshot = self._coordinate.copy()
        window_snapshot = self._window.copy()

        try:
            self.try_update(rtt_seconds, other)

        except InvalidCoordinateError:
            self._coordinate = coordinate_snapshot
            self._window = window_snapshot
            self._log(
                CoordinateWarning,
                f"Discarded update producing a non-finite coordinate (rtt={rtt_seconds}s)",
            )
            return False

        return True

    def try_update(self, rtt: RTT, other: NetworkCoordinate) -> None:
        """
        Update from an RTT sample to ``other``, raising
        InvalidCoordinateError if the resulting vector is not finite.
        The invalid coordinate is left in place.
        """
        rtt_seconds = to_rtt_seconds(rtt)

        self._coordinate.update(rtt_seconds, other, self._config)

        offset = self._window.record(
            rtt_seconds - self._coordinate.raw_distance_to(other)
        )
        if offset is not None:
            self._coordinate.set_adjusted_offset(offset)

        if not self._coordinate.is_finite():
            raise InvalidCoordinateError(self._coordinate)

    def update_until(
        self,
        rtt: RTT,
        other: NetworkCoordinate,
        threshold: float,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
    ) -> bool:
        """
        Repeat ``try_update`` until the estimated distance to ``other`` is
        within ``threshold`` seconds of ``rtt``. Returns False if that did
        not happen within ``max_iterations`` updates.
        """
        rtt_seconds = to_rtt_seconds(rtt)

        for _ in range(max_iterations):
            if self._within_threshold(rtt_seconds, other, threshold):
                return True

            self.try_update(rtt_seconds, other)

        if self._within_threshold(rtt_seconds, other, threshold):
            return True

        self._log(
            CoordinateWarning,
            f"Coordinate not within {threshold}s of {rtt_seconds}s after {max_iterations} updates",
        )
        return False

    def update_until_all(
        self,
        samples: Iterable[tuple[RTT, NetworkCoordinate]],
        threshold: float,
        max_passes: int = DEFAULT_MAX_ITERATIONS,
    ) -> bool:
        """
        Update against every ``(rtt, other)`` sample once per pass until
        all of them are within ``threshold`` seconds. Returns False if that
        did not happen within ``max_passes`` passes.

        Samples are interleaved (ABCABC...) rather than run to completion
        one at a time, which would drag the coordinate toward whichever
        peer came last.
        """
        normalized = [(to_rtt_seconds(rtt), other) for rtt, other in samples]

        for _ in range(max_passes):
            if self._all_within_threshold(normalized, threshold):
                return True

            for rtt_seconds, other in normalized:
                self.try_update(rtt_seconds, other)

        if self._all_within_threshold(normalized, threshold):
            return True

        self._log(
            CoordinateWarning,
            f"{len(normalized)} samples not within {threshold}s after {max_passes} passes",
        )
        return False

    def update_gravity(self, origin: NetworkCoordinate | None = None) -> None:
        if origin is None:
            origin = NetworkCoordinate.zero(
                self._coordinate.dimensions,
                type(self._coordinate.vec),
            )

        self._coordinate.apply_gravity(origin, self._config)

    def estimate_rtt_seconds(self, other: NetworkCoordinate) -> float:
        return max(0.0, self._coordinate.distance_to(other))

    def estimate_rtt_ms(self, other: NetworkCoordinate) -> float:
        return self.estimate_rtt_seconds(other) * 1000.0

    def distance_to(self, other: NetworkCoordinate) -> datetime.timedelta:
        return datetime.timedelta(seconds=self.estimate_rtt_seconds(other))

    def _within_threshold(
        self,
        rtt_seconds: float,
        other: NetworkCoordinate,
        threshold: float,
    ) -> bool:
        return abs(self._coordinate.distance_to(other) - rtt_seconds) <= threshold

    def _all_within_threshold(
        self,
        samples: list[tuple[float, NetworkCoordinate]],
        threshold: float,
    ) -> bool:
        return all(
            self._within_threshold(rtt_seconds, other, threshold)
            for rtt_seconds, other in samples
        )

    def _install(self, coordinate: NetworkCoordinate) -> NetworkCoordinate:
        installed = coordinate.copy()
        installed.height = max(self._config.height_min, installed.height)
        installed.error_estimate = min(
            self._config.error_max,
            installed.error_estimate,
        )

        return installed

    def _log(
        self,
        entry_type: type[CoordinateDebug] | type[CoordinateWarning],
        message: str,
    ) -> None:
        with self._logger.context(name=LOGGER_NAME, nested=True) as ctx:
            ctx.log(
                entry_type(
                    message=message,
                    dimensions=self._coordinate.dimensions,
                    error_estimate=self._coordinate.error_estimate,
                    height=self._coordinate.height,
                    offset=self._coordinate.offset,
                ),
                stacklevel=2,
            )
