import pytest

from freakland.timer import FIXED_DELTA_TIME, FrameTimer


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def timer(clock):
    t = FrameTimer(clock)
    t.init()
    return t


def test_init_seeds_values(timer):
    assert timer.delta_time == FIXED_DELTA_TIME
    assert timer.frame_count == 0
    assert timer.total_time == 0.0
    assert timer.fps == 60.0


def test_begin_frame_measures_delta(clock, timer):
    clock.now += 0.02
    timer.begin_frame()
    assert timer.delta_time == pytest.approx(0.02)
    assert timer.frame_count == 1
    assert timer.total_time == pytest.approx(0.02)


def test_delta_clamped(clock, timer):
    clock.now += 5.0
    timer.begin_frame()
    assert timer.delta_time == pytest.approx(0.1)
    assert timer.total_time == pytest.approx(0.1)


def test_total_time_accumulates(clock, timer):
    steps = [0.01, 0.03, 0.02]
    for step in steps:
        clock.now += step
        timer.begin_frame()
    assert timer.frame_count == len(steps)
    assert timer.total_time == pytest.approx(sum(steps))


def test_fps_moves_toward_instant(clock, timer):
    clock.now += 0.1
    timer.begin_frame()
    assert 10.0 < timer.fps < 60.0


def test_zero_elapsed_raises_fps(clock, timer):
    timer.begin_frame()
    assert timer.delta_time == 0.0
    assert timer.fps > 60.0