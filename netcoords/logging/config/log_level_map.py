from typing import Dict

from netcoords.logging.models import LogLevel


class LogLevelMap:
    """Orders log levels so that a configured level can act as a floor."""

    def __init__(self) -> None:
        self._levels: Dict[LogLevel, int] = {
            level: rank for rank, level in enumerate(LogLevel)
        }

    def __getitem__(self, level: LogLevel) -> int:
        return self._levels[level]
