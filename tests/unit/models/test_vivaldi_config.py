"""
Tests for VivaldiConfig validation.
"""

import pytest
from pydantic import ValidationError

from netcoords.models import (
    DEFAULT_CC,
    DEFAULT_CE,
    DEFAULT_ERROR_MAX,
    DEFAULT_GRAVITY_RHO,
    DEFAULT_HEIGHT_MIN,
    VivaldiConfig,
)


class TestVivaldiConfigDefaults:
    """Default tuning values."""

    def test_defaults(self) -> None:
        config = VivaldiConfig()

        assert config.error_max == DEFAULT_ERROR_MAX == 1.5
        assert config.height_min == DEFAULT_HEIGHT_MIN == 0.0
        assert config.gravity_rho == DEFAULT_GRAVITY_RHO == 150.0
        assert config.ce == DEFAULT_CE == 0.25
        assert config.cc == DEFAULT_CC == 0.25

    def test_boundaries_accepted(self) -> None:
        config = VivaldiConfig(ce=1.0, cc=1.0, height_min=0.0)

        assert config.ce == 1.0
        assert config.cc == 1.0

    def test_frozen(self) -> None:
        config = VivaldiConfig()

        with pytest.raises(ValidationError):
            config.ce = 0.5

    def test_model_copy_with_update(self) -> None:
        config = VivaldiConfig().model_copy(update={"gravity_rho": 300.0})

        assert config.gravity_rho == 300.0


class TestVivaldiConfigValidation:
    """Out of range parameters are rejected on construction."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"error_max": 0.0},
            {"error_max": -1.5},
            {"height_min": -0.01},
            {"gravity_rho": 0.0},
            {"ce": 0.0},
            {"ce": 1.01},
            {"cc": 0.0},
            {"cc": 2.0},
        ],
    )
    def test_out_of_range(self, overrides) -> None:
        with pytest.raises(ValidationError):
            VivaldiConfig(**overrides)

    def test_integers_accepted_as_floats(self) -> None:
        config = VivaldiConfig(error_max=2, gravity_rho=300)

        assert config.error_max == 2
        assert config.gravity_rho == 300

    def test_strings_rejected(self) -> None:
        with pytest.raises(ValidationError):
            VivaldiConfig(error_max="2.0")

    def test_unknown_field_ignored(self) -> None:
        config = VivaldiConfig(not_a_field=1.0)

        assert not hasattr(config, "not_a_field")
