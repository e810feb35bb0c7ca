import os

DAYLOG_DIR = os.getenv("DAYLOG_DIR", "") or os.getcwd()
DAYLOG_PREFIX = os.getenv("DAYLOG_PREFIX", "Log")
DAYLOG_STRICT = os.getenv("DAYLOG_STRICT", "false").lower() == "true"
DAYLOG_VERBOSE = os.getenv("DAYLOG_VERBOSE", "true").lower() in ("1", "true", "yes", "on")
DAYLOG_ENCODING = os.getenv("DAYLOG_ENCODING", "utf-8")

DEFAULT_PREFIX = "Log"
