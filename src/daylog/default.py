"""Shared process-wide writer with module-level calls."""
import threading

from src.daylog.settings import DAYLOG_PREFIX
from src.daylog.severity import Severity
from src.daylog.writer import DailyLogWriter

_writer: DailyLogWriter | None = None
_writer_lock = threading.Lock()

def get_writer() -> DailyLogWriter:
    global _writer
    with _writer_lock:
        if _writer is None:
            _writer = DailyLogWriter()
            _writer.prefix = DAYLOG_PREFIX
        return _writer

def reset_writer(writer: DailyLogWriter | None = None) -> None:
    global _writer
    with _writer_lock:
        _writer = writer

def set_prefix(prefix: str = DAYLOG_PREFIX) -> None:
    get_writer().initialize(prefix)

def log(text: str, severity=Severity.INFO) -> None:
    get_writer().log(text, severity)

def info(text: str) -> None:
    get_writer().info(text)

def warning(text: str) -> None:
    get_writer().warning(text)

def critical(text: str) -> None:
    get_writer().critical(text)

def error(text: str) -> None:
    get_writer().error(text)

def exception(text: str) -> None:
    get_writer().exception(text)
