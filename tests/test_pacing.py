from __future__ import annotations

import pytest

from exercise_grader.pacing import FixedIntervalPacer, no_delay


def test_fixed_interval_sleeps_in_seconds():
    slept = []
    pacer = FixedIntervalPacer(205, sleep=slept.append)
    pacer()
    pacer()
    assert slept == [0.205, 0.205]


def test_default_interval():
    assert FixedIntervalPacer().interval_ms == 205


def test_zero_interval_does_not_sleep():
    slept = []
    FixedIntervalPacer(0, sleep=slept.append)()
    assert slept == []


def test_negative_interval_rejected():
    with pytest.raises(ValueError):
        FixedIntervalPacer(-1)


def test_no_delay_returns_none():
    assert no_delay() is None
