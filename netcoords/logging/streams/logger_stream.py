from __future__ import annotations

import datetime
import io
import os
import pathlib
import sys
import threading
from typing import Callable, Dict, TypeVar

import msgspec

from netcoords.logging.config import LoggingConfig, StreamType
from netcoords.logging.models import Entry, Log

T = TypeVar("T", bound=Entry)

DEFAULT_TEMPLATE = (
    "{timestamp} - {level} - {thread_id} - "
    "{filename}:{function_name}.{line_number} - {message}"
)
ERROR_TEMPLATE = (
    "{timestamp} - {level} - {thread_id} - "
    "{filename}:{function_name}.{line_number} - {error}"
)


class LoggerStream:
    """
    Writes log entries either as formatted lines to stdout/stderr or as
    JSON encoded ``Log`` records to a file.

    Entries below the configured level, from disabled loggers, or
    rejected by a filter are dropped before any formatting happens.
    """

    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
        filename: str | None = None,
        directory: str | None = None,
    ) -> None:
        self._name = name if name else "default"
        self._default_template = template
        self._default_logfile = filename
        self._default_log_directory = directory
        self._config = LoggingConfig()
        self._files: Dict[str, io.BufferedWriter] = {}

    @property
    def name(self) -> str:
        return self._name

    def set_defaults(
        self,
        template: str | None = None,
        filename: str | None = None,
        directory: str | None = None,
    ) -> None:
        self._default_template = template
        self._default_logfile = filename
        self._default_log_directory = directory

    def open_file(
        self,
        filename: str,
        directory: str | None = None,
    ) -> str:
        logfile_path = self._to_logfile_path(filename, directory=directory)

        logfile = self._files.get(logfile_path)
        if logfile is None or logfile.closed:
            pathlib.Path(logfile_path).parent.mkdir(parents=True, exist_ok=True)
            self._files[logfile_path] = open(logfile_path, "ab")

        return logfile_path

    def close_file(self, filename: str, directory: str | None = None) -> None:
        logfile_path = self._to_logfile_path(filename, directory=directory)
        logfile = self._files.pop(logfile_path, None)
        if logfile and logfile.closed is False:
            logfile.close()

    def close(self) -> None:
        for logfile in self._files.values():
            if logfile.closed is False:
                logfile.close()

        self._files.clear()

    def log(
        self,
        entry: T,
        template: str | None = None,
        path: str | None = None,
        filter: Callable[[T], bool] | None = None,
        stacklevel: int = 1,
    ) -> None:
        """
        Write ``entry`` to the resolved file or console stream.
        ``stacklevel`` picks the frame recorded as the source location, 1
        being the caller of ``log``.
        """
        filename: str | None = None
        directory: str | None = None

        if path:
            logfile_path = pathlib.Path(path)
            is_logfile = len(logfile_path.suffix) > 0

            filename = logfile_path.name if is_logfile else None
            directory = (
                str(logfile_path.parent.absolute())
                if is_logfile
                else str(logfile_path.absolute())
            )

        if template is None:
            template = self._default_template

        if filename is None:
            filename = self._default_logfile

        if directory is None:
            directory = self._default_log_directory

        if filename or directory:
            self._log_to_file(
                entry,
                filename=filename,
                directory=directory,
                filter=filter,
                stacklevel=stacklevel,
            )

        else:
            self._log(
                entry,
                template=template,
                filter=filter,
                stacklevel=stacklevel,
            )

    def _log(
        self,
        entry: T,
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
        stacklevel: int = 1,
    ) -> None:
        if self._config.enabled(self._name, entry.level) is False:
            return

        if filter and filter(entry) is False:
            return

        if template is None:
            template = DEFAULT_TEMPLATE

        log_file, line_number, function_name = self._find_caller(stacklevel)
        context = {
            "filename": log_file,
            "function_name": function_name,
            "line_number": line_number,
            "thread_id": threading.get_native_id(),
            "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
        }

        stream = sys.stdout if self._config.output == StreamType.STDOUT else sys.stderr

        try:
            stream.write(entry.to_template(template, context=context) + "\n")
            stream.flush()

        except (OSError, ValueError) as err:
            self._report_error(entry, context, err)

    def _log_to_file(
        self,
        entry: T,
        filename: str | None = None,
        directory: str | None = None,
        filter: Callable[[T], bool] | None = None,
        stacklevel: int = 1,
    ) -> None:
        if self._config.enabled(self._name, entry.level) is False:
            return

        if filter and filter(entry) is False:
            return

        log_file, line_number, function_name = self._find_caller(stacklevel)
        log = Log(
            entry=entry,
            logger_name=self._name,
            filename=log_file,
            function_name=function_name,
            line_number=line_number,
        )

        if filename is None:
            filename = "logs.json"

        if directory is None:
            directory = self._config.directory or os.path.join(os.getcwd(), "logs")

        logfile_path = self.open_file(filename, directory=directory)

        try:
            logfile = self._files[logfile_path]
            logfile.write(msgspec.json.encode(log) + b"\n")
            logfile.flush()

        except OSError as err:
            self._report_error(
                entry,
                {
                    "filename": log_file,
                    "function_name": function_name,
                    "line_number": line_number,
                    "thread_id": log.thread_id,
                    "timestamp": log.timestamp,
                },
                err,
            )

    def _report_error(self, entry: T, context: dict, err: Exception) -> None:
        if sys.stderr.closed is False:
            sys.stderr.write(
                entry.to_template(
                    ERROR_TEMPLATE,
                    context={**context, "error": str(err)},
                )
                + "\n"
            )

    def _to_logfile_path(
        self,
        filename: str,
        directory: str | None = None,
    ) -> str:
        filename_path = pathlib.Path(filename)
        if filename_path.suffix != ".json":
            raise ValueError(f"Log files must use the .json extension, got {filename}")

        if directory is None:
            directory = self._config.directory or os.path.join(os.getcwd(), "logs")

        return str(pathlib.Path(directory, filename_path.name).absolute())

    def _find_caller(self, stacklevel: int = 1):
        """
        Find the stack frame of the caller so that we can note the source
        file name, line number and function name.
        """
        frame = sys._getframe(2 + stacklevel)
        code = frame.f_code

        return (
            code.co_filename,
            frame.f_lineno,
            code.co_name,
        )
