from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictFloat, model_validator

DEFAULT_ERROR_MAX = 1.5
DEFAULT_HEIGHT_MIN = 0.0
DEFAULT_GRAVITY_RHO = 150.0
DEFAULT_CE = 0.25
DEFAULT_CC = 0.25


class VivaldiConfig(BaseModel):
    """
    Tuning parameters for Vivaldi coordinate updates.

    Instances are immutable. Out of range values raise
    ``pydantic.ValidationError`` on construction.
    """

    model_config = ConfigDict(frozen=True)

    error_max: StrictFloat = DEFAULT_ERROR_MAX  # Upper bound and initial value of the error estimate
    height_min: StrictFloat = DEFAULT_HEIGHT_MIN  # Floor for coordinate height
    gravity_rho: StrictFloat = DEFAULT_GRAVITY_RHO  # Larger values weaken the pull toward the origin
    ce: StrictFloat = DEFAULT_CE  # Error estimate smoothing factor
    cc: StrictFloat = DEFAULT_CC  # Coordinate movement factor

    @model_validator(mode="after")
    def validate_bounds(self) -> VivaldiConfig:
        if not self.error_max > 0.0:
            raise ValueError(f"error_max must be greater than 0, got {self.error_max}")

        if not self.height_min >= 0.0:
            raise ValueError(f"height_min must be at least 0, got {self.height_min}")

        if not self.gravity_rho > 0.0:
            raise ValueError(
                f"gravity_rho must be greater than 0, got {self.gravity_rho}"
            )

        for name in ("ce", "cc"):
            value = getattr(self, name)
            if not 0.0 < value <= 1.0:
                raise ValueError(f"{name} must be in (0, 1], got {value}")

        return self
