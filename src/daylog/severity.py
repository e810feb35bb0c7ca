from datetime import datetime
from enum import Enum

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"

class Severity(Enum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"
    ERROR = "error"
    EXCEPTION = "exception"

_TAGS = {
    Severity.INFO: "[INFO] |\t",
    Severity.WARNING: "[WARNING] |\t",
    Severity.CRITICAL: "[CRITICAL] |\t",
    Severity.ERROR: "[ERROR] |\t",
    Severity.EXCEPTION: "[EXCEPTION] |\t",
}

UNDEFINED_TAG = "UNDEFINED |\t"

def severity_tag(severity) -> str:
    if not isinstance(severity, Severity):
        return UNDEFINED_TAG
    return _TAGS.get(severity, UNDEFINED_TAG)

def parse_severity(name: str) -> Severity | None:
    try:
        return Severity[(name or "").strip().upper()]
    except KeyError:
        return None

def date_stamp(moment: datetime) -> str:
    return moment.strftime(DATE_FORMAT)

def time_stamp(moment: datetime) -> str:
    # milliseconds, truncated like the file format expects
    return f"{moment.strftime(TIME_FORMAT)}.{moment.microsecond // 1000:03d}"

def format_line(message: str, severity, moment: datetime) -> str:
    return f"{date_stamp(moment)} -- {time_stamp(moment)}\t| {severity_tag(severity)}{message}\n"
