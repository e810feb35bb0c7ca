import os
import threading
from datetime import datetime
from typing import Callable

from src.daylog.console import note, report_error
from src.daylog.settings import (
    DAYLOG_DIR,
    DAYLOG_ENCODING,
    DAYLOG_STRICT,
    DAYLOG_VERBOSE,
    DEFAULT_PREFIX,
)
from src.daylog.severity import Severity, date_stamp, format_line

# characters the file encoding cannot represent are escaped
UNENCODABLE = "backslashreplace"

class DailyLogWriter:
    """Appends severity-tagged lines to ``{prefix}_{yyyy-MM-dd}.log``."""

    def __init__(
        self,
        base_dir: str | None = None,
        clock: Callable[[], datetime] = datetime.now,
        strict: bool = DAYLOG_STRICT,
        verbose: bool = DAYLOG_VERBOSE,
        encoding: str = DAYLOG_ENCODING,
    ):
        self.base_dir = base_dir or DAYLOG_DIR
        self.prefix = DEFAULT_PREFIX
        self.current_path: str | None = None
        self.current_date: str | None = None
        self._clock = clock
        self._strict = strict
        self._verbose = verbose
        self._encoding = encoding
        self._lock = threading.RLock()

    @property
    def initialized(self) -> bool:
        return self.current_path is not None

    def ensure_log_dir(self):
        try:
            os.makedirs(self.base_dir, exist_ok=True)
        except OSError as exception:
            self._fail(exception, "mkdir")

    def _log_path_for(self, stamp: str) -> str:
        return os.path.join(self.base_dir, f"{self.prefix}_{stamp}.log")

    def _switch_to(self, stamp: str):
        self.current_date = stamp
        self.current_path = self._log_path_for(stamp)
        self._create_file()

    def _create_file(self):
        if os.path.exists(self.current_path):
            return
        try:
            with open(self.current_path, "a", encoding=self._encoding, errors=UNENCODABLE):
                pass
        except OSError as exception:
            self._fail(exception, f"create {self.current_path}")

    def _fail(self, exception: OSError, context: str):
        report_error(exception, context)
        if self._strict:
            raise exception

    def initialize(self, prefix: str = DEFAULT_PREFIX):
        with self._lock:
            self.prefix = prefix
            self._switch_to(date_stamp(self._clock()))

    def _ensure_current_day(self, now: datetime) -> bool:
        today = date_stamp(now)
        if not self.initialized:
            self._switch_to(today)
            return True
        if self.current_date != today:
            note(f"log file not current, rotating to new file for {today}", self._verbose)
            self._switch_to(today)
            return True
        note(f"log file current ({self.current_date})", self._verbose)
        return False

    def ensure_current_day(self) -> bool:
        with self._lock:
            return self._ensure_current_day(self._clock())

    def _append(self, message: str, severity, now: datetime) -> None:
        with open(self.current_path, "a", encoding=self._encoding, errors=UNENCODABLE) as file:
            file.write(format_line(message, severity, now))

    def log(self, message: str, severity=Severity.INFO) -> None:
        with self._lock:
            now = self._clock()
            # create failures are reported inside, strict mode re-raises them
            self._ensure_current_day(now)
            try:
                self._append(message, severity, now)
            except OSError as exception:
                self._fail(exception, f"append {self.current_path}")

    def try_log(self, message: str, severity=Severity.INFO) -> OSError | None:
        with self._lock:
            now = self._clock()
            try:
                self._ensure_current_day(now)
            except OSError as exception:
                return exception
            try:
                self._append(message, severity, now)
            except OSError as exception:
                report_error(exception, f"append {self.current_path}")
                return exception
        return None

    def info(self, text: str) -> None:
        self.log(text, Severity.INFO)

    def warning(self, text: str) -> None:
        self.log(text, Severity.WARNING)

    def critical(self, text: str) -> None:
        self.log(text, Severity.CRITICAL)

    def error(self, text: str) -> None:
        self.log(text, Severity.ERROR)

    def exception(self, text: str) -> None:
        self.log(text, Severity.EXCEPTION)
