import contextvars
from typing import List, Literal

from netcoords.logging.models import LogLevel, LogLevelName

from .log_level_map import LogLevelMap
from .stream_type import StreamType

LogOutput = Literal["stdout", "stderr"]

_global_log_level = contextvars.ContextVar("_global_log_level", default=LogLevel.INFO)
_global_disabled_loggers: contextvars.ContextVar[tuple[str, ...]] = (
    contextvars.ContextVar("_global_disabled_loggers", default=())
)
_global_level_map = LogLevelMap()
_global_log_output_type = contextvars.ContextVar(
    "_global_log_output_type", default=StreamType.STDOUT
)
_global_logging_directory: contextvars.ContextVar[str | None] = (
    contextvars.ContextVar("_global_logging_directory", default=None)
)


class LoggingConfig:
    """
    View over the process-wide logging settings.

    Settings live in context variables, so every LoggingConfig in the same
    context sees the same level, output and disabled loggers.
    """

    def __init__(self) -> None:
        self._log_level = _global_log_level
        self._log_output_type = _global_log_output_type
        self._log_directory = _global_logging_directory
        self._disabled_loggers = _global_disabled_loggers
        self._level_map = _global_level_map

    def update(
        self,
        log_directory: str | None = None,
        log_level: LogLevelName | None = None,
        log_output: LogOutput | None = None,
    ) -> None:
        if log_directory:
            self._log_directory.set(log_directory)

        if log_level:
            self._log_level.set(LogLevel.to_level(log_level))

        if log_output:
            self._log_output_type.set(
                StreamType.STDOUT if log_output == "stdout" else StreamType.STDERR
            )

    def disable(self, logger_name: str) -> None:
        disabled_loggers = self._disabled_loggers.get()
        if logger_name not in disabled_loggers:
            self._disabled_loggers.set(disabled_loggers + (logger_name,))

    def enable(self, logger_name: str) -> None:
        self._disabled_loggers.set(
            tuple(
                name for name in self._disabled_loggers.get() if name != logger_name
            )
        )

    def enabled(self, logger_name: str, log_level: LogLevel) -> bool:
        return logger_name not in self._disabled_loggers.get() and (
            self._level_map[log_level] >= self._level_map[self._log_level.get()]
        )

    @property
    def level(self) -> LogLevel:
        return self._log_level.get()

    @property
    def output(self) -> StreamType:
        return self._log_output_type.get()

    @property
    def directory(self) -> str | None:
        return self._log_directory.get()

    @property
    def disabled_loggers(self) -> List[str]:
        return list(self._disabled_loggers.get())
