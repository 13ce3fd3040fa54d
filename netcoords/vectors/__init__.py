from .vector import (
    OVERLAP_THRESHOLD as OVERLAP_THRESHOLD,
    Vector as Vector,
)
from .fixed_vector import FixedVector as FixedVector
from .dynamic_vector import DynamicVector as DynamicVector
