import datetime
import threading

import msgspec

from .entry import Entry


class Log(msgspec.Struct, kw_only=True):
    """An entry plus where and when it was written, as stored in log files."""

    entry: Entry
    logger_name: str
    filename: str
    function_name: str
    line_number: int
    thread_id: int = msgspec.field(default_factory=threading.get_native_id)
    timestamp: str = msgspec.field(
        default_factory=lambda: datetime.datetime.now(datetime.UTC).isoformat()
    )
