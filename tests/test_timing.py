from unittest import mock

import pytest

from graphkernels.timing import CycleTimer, Unit, counter_works, read_counter


def test_read_counter_is_non_decreasing():
    readings = [read_counter() for _ in range(50)]
    assert readings == sorted(readings)


def test_counter_works_when_counter_advances():
    with mock.patch("time.perf_counter_ns", side_effect=[5, 9]):
        assert counter_works() is True


def test_counter_works_false_when_counter_stalls():
    with mock.patch("time.perf_counter_ns", side_effect=[5, 5]):
        assert counter_works() is False


def test_timer_elapsed_in_units():
    with mock.patch("time.perf_counter_ns", side_effect=[100, 1100]):
        with CycleTimer() as timer:
            pass
    assert timer.elapsed(Unit.NANO_SEC) == 1000
    assert timer.elapsed(Unit.MICRO_SEC) == pytest.approx(1.0)
    assert timer.elapsed(2) == pytest.approx(500.0)


def test_timer_real_measurement_non_negative():
    with CycleTimer() as timer:
        sum(range(1000))
    assert timer.elapsed() >= 0


def test_elapsed_before_exit_raises():
    timer = CycleTimer()
    with pytest.raises(RuntimeError):
        timer.elapsed()


def test_elapsed_rejects_non_positive_unit():
    with CycleTimer() as timer:
        pass
    with pytest.raises(ValueError):
        timer.elapsed(0)