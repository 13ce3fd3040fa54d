from __future__ import annotations

from typing import Callable, Dict, Literal, Union

from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr

from netcoords.models import (
    DEFAULT_CC,
    DEFAULT_CE,
    DEFAULT_DIMENSIONS,
    DEFAULT_ERROR_MAX,
    DEFAULT_GRAVITY_RHO,
    DEFAULT_HEIGHT_MIN,
    VivaldiConfig,
)

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    # Vivaldi tuning
    NETCOORDS_ERROR_MAX: StrictFloat = DEFAULT_ERROR_MAX
    NETCOORDS_HEIGHT_MIN: StrictFloat = DEFAULT_HEIGHT_MIN
    NETCOORDS_GRAVITY_RHO: StrictFloat = DEFAULT_GRAVITY_RHO
    NETCOORDS_CE: StrictFloat = DEFAULT_CE
    NETCOORDS_CC: StrictFloat = DEFAULT_CC

    # Node shape
    NETCOORDS_DIMENSIONS: StrictInt = DEFAULT_DIMENSIONS
    NETCOORDS_WINDOW_SIZE: StrictInt = 0

    # Logging
    NETCOORDS_LOG_LEVEL: StrictStr = "info"
    NETCOORDS_LOG_OUTPUT: Literal["stdout", "stderr"] = "stdout"

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "NETCOORDS_ERROR_MAX": float,
            "NETCOORDS_HEIGHT_MIN": float,
            "NETCOORDS_GRAVITY_RHO": float,
            "NETCOORDS_CE": float,
            "NETCOORDS_CC": float,
            "NETCOORDS_DIMENSIONS": int,
            "NETCOORDS_WINDOW_SIZE": int,
            "NETCOORDS_LOG_LEVEL": str,
            "NETCOORDS_LOG_OUTPUT": str,
        }

    def get_vivaldi_config(self) -> VivaldiConfig:
        return VivaldiConfig(
            error_max=self.NETCOORDS_ERROR_MAX,
            height_min=self.NETCOORDS_HEIGHT_MIN,
            gravity_rho=self.NETCOORDS_GRAVITY_RHO,
            ce=self.NETCOORDS_CE,
            cc=self.NETCOORDS_CC,
        )

    def get_node_options(self) -> Dict[str, int]:
        return {
            "dimensions": self.NETCOORDS_DIMENSIONS,
            "window_size": self.NETCOORDS_WINDOW_SIZE,
        }

    def get_logging_options(self) -> Dict[str, str]:
        return {
            "log_level": self.NETCOORDS_LOG_LEVEL,
            "log_output": self.NETCOORDS_LOG_OUTPUT,
        }
