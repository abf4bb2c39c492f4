"""Shared test helpers."""

import pytest

from wordscore.models.game import WordLookup

SECRETS = ["WORD", "PART", "RAIN", "MOLD"]
ACCEPTED = ["WORE", "RANT", "RANS", "BCDE", "BCFG", "ABCD", "ABEF", "AAII", "MINT", "LAMP"]


class FakeTimer:
    """threading.Timer stand-in that only fires when told to."""

    def __init__(self, interval, function, args=None, kwargs=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.kwargs = kwargs or {}
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled:
            self.function(*self.args, **self.kwargs)


class FakeTimerFactory:
    """Records every timer it creates."""

    def __init__(self):
        self.timers = []

    def __call__(self, interval, function, args=None, kwargs=None):
        timer = FakeTimer(interval, function, args, kwargs)
        self.timers.append(timer)
        return timer

    @property
    def last(self):
        return self.timers[-1]


@pytest.fixture
def lookup():
    return WordLookup.from_words(SECRETS, ACCEPTED)


@pytest.fixture
def timer_factory():
    return FakeTimerFactory()
