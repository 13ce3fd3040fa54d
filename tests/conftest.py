"""
Pytest configuration for netcoords tests.

Provides seeded random sources, common coordinates, and resets the
process-wide logging settings between tests.
"""

import random

import pytest

from netcoords.logging import LoggingConfig
from netcoords.models import NetworkCoordinate, VivaldiConfig
from netcoords.vectors import DynamicVector, FixedVector


@pytest.fixture(autouse=True)
def reset_logging_config():
    config = LoggingConfig()
    disabled = config.disabled_loggers
    yield
    config.update(log_level="info", log_output="stdout")
    for logger_name in config.disabled_loggers:
        if logger_name not in disabled:
            config.enable(logger_name)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def config() -> VivaldiConfig:
    return VivaldiConfig()


@pytest.fixture(params=[FixedVector, DynamicVector], ids=["fixed", "dynamic"])
def vector_type(request) -> type:
    return request.param


@pytest.fixture
def near_coordinate() -> NetworkCoordinate:
    return NetworkCoordinate.from_array([2.3, 3.2, 4.1])


@pytest.fixture
def far_coordinate() -> NetworkCoordinate:
    return NetworkCoordinate.from_array([4.5, -6.1, -4.1])
