import sys

from src.daylog.settings import DAYLOG_VERBOSE

def note(message: str, verbose: bool = DAYLOG_VERBOSE) -> None:
    if verbose:
        print(f"[DAYLOG/CHECK] {message}", file=sys.stderr)

def report_error(exception: BaseException, context: str = "") -> None:
    where = f" ({context})" if context else ""
    print(f"[DAYLOG/ERROR]{where} {type(exception).__name__}: {exception}", file=sys.stderr)

def warn(message: str) -> None:
    print(f"[DAYLOG/WARN] {message}", file=sys.stderr)
