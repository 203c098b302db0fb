from gameframe.timer import EngineTime


def make_clock(values):
    it = iter(values)
    return lambda: next(it)


def test_time_check_returns_elapsed():
    timer = EngineTime(make_clock([10.0, 10.5, 12.0]))
    assert timer.time_check() == 0.5
    assert timer.time_check() == 1.5
    assert timer.delta_time == 1.5


def test_reset_restarts_measurement():
    timer = EngineTime(make_clock([0.0, 100.0, 101.0]))
    timer.reset()
    assert timer.time_check() == 1.0


def test_real_clock_is_non_negative():
    timer = EngineTime()
    first = timer.time_check()
    second = timer.time_check()
    assert first >= 0.0
    assert second >= 0.0