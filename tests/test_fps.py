from fourierviz.fps import FpsCounter


class FakeClock:
    def __init__(self, times):
        self._times = iter(times)

    def __call__(self):
        return next(self._times)


def test_no_report_within_first_second(capsys):
    counter = FpsCounter(FakeClock([0.0, 0.2, 0.5, 0.9]))
    results = [counter.execute() for _ in range(3)]
    assert results == [None, None, None]
    assert capsys.readouterr().out == ""


def test_reports_after_one_second(capsys):
    counter = FpsCounter(FakeClock([0.0, 0.5, 1.0]))
    assert counter.execute() is None
    fps = counter.execute()
    assert fps == 2.0
    assert capsys.readouterr().out == f"FPS: {fps}\n"


def test_counter_resets_after_report():
    counter = FpsCounter(FakeClock([0.0, 0.5, 1.0, 1.5, 2.0]))
    counter.execute()
    first = counter.execute()
    assert counter.execute() is None
    second = counter.execute()
    assert second == first


def test_slow_frames_give_rate_below_one(capsys):
    counter = FpsCounter(FakeClock([0.0, 4.0]))
    fps = counter.execute()
    assert 0.0 < fps < 1.0
    assert capsys.readouterr().out.startswith("FPS: ")