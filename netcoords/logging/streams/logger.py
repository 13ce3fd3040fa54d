from __future__ import annotations

import pathlib
from typing import Dict

from .logger_context import LoggerContext
from .logger_stream import LoggerStream


def _split_path(path: str | None) -> tuple[str | None, str | None]:
    if not path:
        return None, None

    logfile_path = pathlib.Path(path)
    is_logfile = len(logfile_path.suffix) > 0

    filename = logfile_path.name if is_logfile else None
    directory = (
        str(logfile_path.parent.absolute())
        if is_logfile
        else str(logfile_path.absolute())
    )

    return filename, directory


class Logger:
    """Registry of named logger contexts."""

    def __init__(self) -> None:
        self._contexts: Dict[str, LoggerContext] = {}

    def __getitem__(self, name: str) -> LoggerContext:
        if self._contexts.get(name) is None:
            self._contexts[name] = LoggerContext(name=name)

        return self._contexts[name]

    def get_stream(
        self,
        name: str | None = None,
        template: str | None = None,
        path: str | None = None,
    ) -> LoggerStream:
        self.configure(name=name, template=template, path=path)
        return self._contexts[name if name else "default"].stream

    def configure(
        self,
        name: str | None = None,
        template: str | None = None,
        path: str | None = None,
    ) -> None:
        if name is None:
            name = "default"

        filename, directory = _split_path(path)

        existing = self._contexts.get(name)
        if existing is not None:
            existing.stream.close()

        self._contexts[name] = LoggerContext(
            name=name,
            template=template,
            filename=filename,
            directory=directory,
        )

    def context(
        self,
        name: str | None = None,
        template: str | None = None,
        path: str | None = None,
        nested: bool = False,
    ) -> LoggerContext:
        if name is None:
            name = "default"

        filename, directory = _split_path(path)

        if self._contexts.get(name) is None:
            self._contexts[name] = LoggerContext(
                name=name,
                template=template,
                filename=filename,
                directory=directory,
                nested=nested,
            )

        else:
            context = self._contexts[name]
            context.template = template if template else context.template
            context.filename = filename if filename else context.filename
            context.directory = directory if directory else context.directory
            context.nested = nested

        return self._contexts[name]

    def close(self) -> None:
        for context in self._contexts.values():
            context.stream.close()
