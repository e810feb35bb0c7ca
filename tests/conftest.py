from datetime import datetime, timedelta

import pytest

from src.daylog.writer import DailyLogWriter


class FakeClock:
    def __init__(self, moment: datetime):
        self.moment = moment

    def __call__(self) -> datetime:
        return self.moment

    def advance(self, **kwargs):
        self.moment = self.moment + timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 1, 15, 10, 30, 0, 250000))


@pytest.fixture
def writer(tmp_path, clock):
    return DailyLogWriter(base_dir=str(tmp_path), clock=clock, strict=False, verbose=True)
