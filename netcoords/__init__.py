"""
Vivaldi network coordinates.

Each node keeps a synthetic coordinate whose distance to a peer's
coordinate estimates the round-trip time between them, so latency to any
peer with a known coordinate can be estimated without measuring it.

Usage:
    from netcoords import CoordinateNode

    node = CoordinateNode.random(dimensions=8, window_size=16)
    peer = CoordinateNode.random(dimensions=8, window_size=16)

    node.update(0.042, peer.coordinate)
    peer.update(0.042, node.coordinate)

    node.distance_to(peer.coordinate)
"""

from .vectors import (
    OVERLAP_THRESHOLD as OVERLAP_THRESHOLD,
    DynamicVector as DynamicVector,
    FixedVector as FixedVector,
    Vector as Vector,
)
from .errors import (
    InvalidCoordinateError as InvalidCoordinateError,
    InvalidErrorEstimateError as InvalidErrorEstimateError,
    PreconditionViolation as PreconditionViolation,
    VivaldiError as VivaldiError,
)
from .models import (
    DEFAULT_DIMENSIONS as DEFAULT_DIMENSIONS,
    NetworkCoordinate as NetworkCoordinate,
    VivaldiConfig as VivaldiConfig,
)
from .coordinates import (
    MIN_RTT_SECONDS as MIN_RTT_SECONDS,
    AdjustmentWindow as AdjustmentWindow,
    CoordinateNode as CoordinateNode,
    CoordinateTracker as CoordinateTracker,
)
