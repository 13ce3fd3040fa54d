from .vivaldi_config import (
    DEFAULT_CC as DEFAULT_CC,
    DEFAULT_CE as DEFAULT_CE,
    DEFAULT_ERROR_MAX as DEFAULT_ERROR_MAX,
    DEFAULT_GRAVITY_RHO as DEFAULT_GRAVITY_RHO,
    DEFAULT_HEIGHT_MIN as DEFAULT_HEIGHT_MIN,
    VivaldiConfig as VivaldiConfig,
)
from .network_coordinate import (
    DEFAULT_DIMENSIONS as DEFAULT_DIMENSIONS,
    NetworkCoordinate as NetworkCoordinate,
)
