from .models import (
    Entry as Entry,
    Log as Log,
    LogLevel as LogLevel,
    LogLevelName as LogLevelName,
)
from .config import (
    LoggingConfig as LoggingConfig,
    LogOutput as LogOutput,
    StreamType as StreamType,
)
from .streams import (
    Logger as Logger,
    LoggerContext as LoggerContext,
    LoggerStream as LoggerStream,
)
from .netcoords_logging_models import (
    CoordinateDebug as CoordinateDebug,
    CoordinateError as CoordinateError,
    CoordinateInfo as CoordinateInfo,
    CoordinateTrace as CoordinateTrace,
    CoordinateWarning as CoordinateWarning,
)
