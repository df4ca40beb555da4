import random

import pytest

from services.event_catalog import load_sample_events
from use_cases.app_shell import AppShell
from use_cases.timers import TimerQueue

FIXED_EPOCH_MS = 1717171717123


@pytest.fixture
def timers():
    return TimerQueue(now=lambda: 0.0)


@pytest.fixture
def shell(timers):
    return AppShell(
        load_sample_events(),
        timers=timers,
        rng=random.Random(7),
        epoch_ms=lambda: FIXED_EPOCH_MS,
    )
