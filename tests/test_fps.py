from brickfall.constants import FPS_UPDATE_INTERVAL, TARGET_FPS
from brickfall.fps import FrameRateController


class FakeTime:
    def __init__(self):
        self.now = 0
        self.sleeps = []

    def clock(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += round(seconds * 1000)


def _controller():
    fake = FakeTime()
    return fake, FrameRateController(clock=fake.clock, sleep=fake.sleep)


def test_first_frame_does_not_wait():
    fake, controller = _controller()
    controller.wait()
    assert fake.sleeps == [0.0]


def test_wait_is_never_negative_when_late():
    fake, controller = _controller()
    controller.wait()
    fake.now += 10_000
    controller.wait()
    assert fake.sleeps[-1] == 0.0


def test_second_frame_waits_for_frame_time():
    fake, controller = _controller()
    controller.wait()
    controller.wait()
    assert 0 < fake.sleeps[-1] <= 1 / TARGET_FPS


def test_fps_stays_zero_before_enough_frames():
    _, controller = _controller()
    for _ in range(int(TARGET_FPS) * 2):
        controller.wait()
    assert controller.fps == 0.0


def test_fps_converges_to_target():
    _, controller = _controller()
    for _ in range(FPS_UPDATE_INTERVAL + int(TARGET_FPS)):
        controller.wait()
    assert abs(controller.fps - TARGET_FPS) < 1.0


def test_invalidate_resets_average():
    fake, controller = _controller()
    for _ in range(FPS_UPDATE_INTERVAL + int(TARGET_FPS)):
        controller.wait()
    assert controller.fps > 0
    controller.invalidate()
    fake.now += 5_000
    controller.wait()
    assert controller.fps == 0.0
    assert fake.sleeps[-1] == 0.0