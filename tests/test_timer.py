import pytest

from magpie.timer import Timer


class FakeClock:
    def __init__(self):
        self.now = 1000

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_new_timer_is_stopped(clock):
    timer = Timer(clock, 1)
    clock.now += 50
    assert timer.is_started() is False
    assert timer.elapsed_seconds() == 0.0


def test_elapsed_follows_clock(clock):
    timer = Timer(clock, 1)
    timer.start()
    clock.now += 5
    assert timer.elapsed_seconds() == 5.0


def test_frequency_scales_ticks(clock):
    timer = Timer(clock, 4)
    timer.start()
    clock.now += 2
    assert timer.elapsed_seconds() == 0.5


def test_pause_freezes_elapsed(clock):
    timer = Timer(clock, 1)
    timer.start()
    clock.now += 3
    timer.pause()
    frozen = timer.elapsed_seconds()
    clock.now += 100
    assert timer.is_paused()
    assert timer.elapsed_seconds() == frozen


def test_resume_excludes_paused_time(clock):
    timer = Timer(clock, 1)
    timer.start()
    clock.now += 3
    timer.pause()
    before = timer.elapsed_seconds()
    clock.now += 100
    timer.resume()
    assert timer.is_paused() is False
    assert timer.elapsed_seconds() == before


def test_pause_ignored_when_stopped(clock):
    timer = Timer(clock, 1)
    timer.pause()
    assert timer.is_paused() is False


def test_reset_returns_elapsed_and_restarts(clock):
    timer = Timer(clock, 1)
    timer.start()
    clock.now += 7
    elapsed = timer.reset()
    assert elapsed == 7.0
    assert timer.elapsed_seconds() == 0.0
    assert timer.is_started()


def test_reset_on_stopped_timer_stays_stopped(clock):
    timer = Timer(clock, 1)
    assert timer.reset() == 0.0
    assert timer.is_started() is False


def test_stop_clears_state(clock):
    timer = Timer(clock, 1)
    timer.start()
    timer.pause()
    timer.stop()
    assert timer.is_started() is False
    assert timer.is_paused() is False
    assert timer.elapsed_seconds() == 0.0


def test_rejects_non_positive_frequency(clock):
    with pytest.raises(ValueError):
        Timer(clock, 0)


def test_default_clock_moves_forward():
    timer = Timer()
    timer.start()
    assert timer.elapsed_seconds() >= 0.0