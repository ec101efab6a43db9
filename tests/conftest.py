from __future__ import annotations

import os
import time
from datetime import datetime, timezone

import pytest


@pytest.fixture(autouse=True, scope="session")
def utc_local_time():
    """Run every test with the process' local time zone set to UTC."""
    old = os.environ.get("TZ")
    os.environ["TZ"] = "UTC"
    time.tzset()
    yield
    if old is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = old
    time.tzset()


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(fixed_now: datetime):
    return lambda: fixed_now
