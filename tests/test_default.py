import pytest

from src.daylog import default
from src.daylog.severity import Severity
from src.daylog.writer import DailyLogWriter


@pytest.fixture(autouse=True)
def shared(tmp_path, clock):
    writer = DailyLogWriter(base_dir=str(tmp_path), clock=clock)
    default.reset_writer(writer)
    yield writer
    default.reset_writer()


def test_module_calls_share_one_writer(shared, tmp_path):
    default.set_prefix("Service")
    default.info("up")
    default.error("down")
    default.log("raw", Severity.WARNING)
    assert default.get_writer() is shared
    lines = (tmp_path / "Service_2024-01-15.log").read_text(encoding="utf-8").splitlines()
    assert [line.split("\t| ", 1)[1] for line in lines] == [
        "[INFO] |\tup",
        "[ERROR] |\tdown",
        "[WARNING] |\traw",
    ]


def test_remaining_shorthands(tmp_path):
    default.warning("w")
    default.critical("c")
    default.exception("e")
    text = (tmp_path / "Log_2024-01-15.log").read_text(encoding="utf-8")
    assert "[WARNING] |\tw\n" in text
    assert "[CRITICAL] |\tc\n" in text
    assert "[EXCEPTION] |\te\n" in text


def test_get_writer_creates_lazily():
    default.reset_writer()
    first = default.get_writer()
    assert isinstance(first, DailyLogWriter)
    assert not first.initialized
    assert default.get_writer() is first
