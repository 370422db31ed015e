import pytest

from ogt.app import FrameClock, MouseTracker, main


def test_first_mouse_update_gives_no_offset():
    tracker = MouseTracker()
    assert tracker.update(123.0, 456.0) == (0.0, 0.0)
    assert tracker.first is False


def test_mouse_offsets_invert_y():
    tracker = MouseTracker()
    x, y = 100.0, 50.0
    dx, dy = 7.5, -2.5
    tracker.update(x, y)
    assert tracker.update(x + dx, y + dy) == (dx, -dy)


def test_mouse_tracker_remembers_last_position():
    tracker = MouseTracker()
    tracker.update(10.0, 20.0)
    tracker.update(30.0, 40.0)
    assert (tracker.last_x, tracker.last_y) == (30.0, 40.0)
    assert tracker.update(30.0, 40.0) == (0.0, 0.0)


def test_mouse_tracker_offsets_accumulate_to_total_motion():
    tracker = MouseTracker()
    points = [(0.0, 0.0), (3.0, 1.0), (5.0, -4.0), (-2.0, 6.0)]
    total_x = total_y = 0.0
    for x, y in points:
        ox, oy = tracker.update(x, y)
        total_x += ox
        total_y += oy
    assert total_x == points[-1][0] - points[0][0]
    assert total_y == points[0][1] - points[-1][1]


def test_frame_clock_first_tick_measures_from_start():
    clock = FrameClock()
    assert clock.tick(1.25) == 1.25
    assert clock.last_frame == 1.25


def test_frame_clock_successive_deltas_sum_to_elapsed():
    clock = FrameClock()
    times = [0.5, 0.75, 1.0, 2.0]
    deltas = [clock.tick(t) for t in times]
    assert sum(deltas) == pytest.approx(times[-1])
    assert all(d > 0 for d in deltas)


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--no-such-option"])
    assert info.value.code == 2