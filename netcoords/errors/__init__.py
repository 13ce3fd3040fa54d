from .coordinates import (
    InvalidCoordinateError as InvalidCoordinateError,
    InvalidErrorEstimateError as InvalidErrorEstimateError,
    PreconditionViolation as PreconditionViolation,
    VivaldiError as VivaldiError,
)
