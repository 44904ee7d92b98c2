from datetime import datetime, timedelta

import pytest

from sizzle_pos.session import PosSession


class FakeClock:
    def __init__(self, start=datetime(2026, 10, 18, 12, 0, 0)):
        self.now = start

    def __call__(self):
        current = self.now
        self.now = self.now + timedelta(minutes=1)
        return current


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session(clock, tmp_path):
    return PosSession(clock=clock, report_dir=tmp_path)
