from .models import Entry, LogLevel


class CoordinateTrace(Entry, kw_only=True):
    dimensions: int
    error_estimate: float
    height: float
    offset: float
    level: LogLevel = LogLevel.TRACE


class CoordinateDebug(Entry, kw_only=True):
    dimensions: int
    error_estimate: float
    height: float
    offset: float
    level: LogLevel = LogLevel.DEBUG


class CoordinateInfo(Entry, kw_only=True):
    dimensions: int
    error_estimate: float
    height: float
    offset: float
    level: LogLevel = LogLevel.INFO


class CoordinateWarning(Entry, kw_only=True):
    dimensions: int
    error_estimate: float
    height: float
    offset: float
    level: LogLevel = LogLevel.WARN


class CoordinateError(Entry, kw_only=True):
    dimensions: int
    error_estimate: float
    height: float
    offset: float
    level: LogLevel = LogLevel.ERROR
