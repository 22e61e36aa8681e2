import math

import pytest

from duckengine.timing import Time


def test_defaults():
    time = Time()
    assert time.elapsed_time == 0.0
    assert time.delta_time == 0.0


def test_first_update_measures_from_zero():
    time = Time()
    time.update(0.5)
    assert time.delta_time == pytest.approx(0.5)
    assert time.elapsed_time == 0.5
    assert time.fps == pytest.approx(2.0)


def test_successive_updates():
    time = Time()
    readings = [0.1, 0.35, 0.6, 1.2]
    previous = 0.0
    for now in readings:
        time.update(now)
        assert time.delta_time == pytest.approx(now - previous)
        assert time.fps * time.delta_time == pytest.approx(1.0)
        assert time.elapsed_time == now
        previous = now


def test_zero_delta_gives_infinite_fps():
    time = Time()
    time.update(1.0)
    time.update(1.0)
    assert time.delta_time == 0.0
    assert math.isinf(time.fps)