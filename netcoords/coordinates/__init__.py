from .adjustment_window import AdjustmentWindow as AdjustmentWindow
from .coordinate_node import (
    DEFAULT_MAX_ITERATIONS as DEFAULT_MAX_ITERATIONS,
    MIN_RTT_SECONDS as MIN_RTT_SECONDS,
    RTT as RTT,
    CoordinateNode as CoordinateNode,
    to_rtt_seconds as to_rtt_seconds,
)
from .coordinate_tracker import (
    DEFAULT_PEER_TTL_SECONDS as DEFAULT_PEER_TTL_SECONDS,
    CoordinateTracker as CoordinateTracker,
)
