import argparse

from src.daylog.console import warn
from src.daylog.settings import DAYLOG_DIR, DAYLOG_PREFIX
from src.daylog.severity import parse_severity
from src.daylog.writer import DailyLogWriter

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="daylog", description="Append one line to today's log file")
    parser.add_argument("message", nargs="+")
    parser.add_argument("--prefix", default=DAYLOG_PREFIX)
    parser.add_argument("--dir", dest="base_dir", default=DAYLOG_DIR)
    parser.add_argument("--severity", default="info", help="info, warning, critical, error or exception")
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    # errors are reported on stderr, the exit code stays 0 even with DAYLOG_STRICT
    writer = DailyLogWriter(base_dir=args.base_dir, strict=False)
    writer.ensure_log_dir()
    writer.initialize(args.prefix)
    severity = parse_severity(args.severity)
    if severity is None:
        warn(f"Unknown severity {args.severity!r}, line tagged UNDEFINED")
    writer.log(" ".join(args.message), severity)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
