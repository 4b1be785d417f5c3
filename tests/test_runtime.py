import pytest

from sleepypet.runtime import (
    MoveAnimation,
    Point,
    Rect,
    Scheduler,
    Sprite,
    Stage,
    Timer,
    Window,
)


def test_rect_edges_are_inclusive():
    rect = Rect(0, 0, 1920, 1080)
    assert rect.right == 1919
    assert rect.contains(Point(rect.right, rect.bottom))
    assert not rect.contains(Point(rect.right + 1, 0))
    assert not rect.contains(Point(-1, 5))


def test_point_arithmetic_round_trip():
    a, b = Point(3, 9), Point(10, -4)
    assert (a + b) - b == a
    assert Point().is_null
    assert not a.is_null


def test_window_move_updates_pos():
    window = Window()
    window.move(40, 70)
    assert window.pos == Point(40, 70)


def test_sprite_show_records_history():
    sprite = Sprite()
    sprite.show(3)
    sprite.show(4, True)
    assert (sprite.frame, sprite.flipped) == (4, True)
    assert sprite.history == [(3, False), (4, True)]


def test_scheduler_runs_callbacks_in_time_order():
    scheduler = Scheduler()
    seen = []
    scheduler.call_later(30, lambda: seen.append("late"))
    scheduler.call_later(10, lambda: seen.append("early"))
    scheduler.call_later(100, lambda: seen.append("never"))
    ran = scheduler.advance(50)
    assert seen == ["early", "late"]
    assert ran == 2
    assert scheduler.now == 50
    assert scheduler.pending == 1


def test_scheduler_cancel_skips_callback():
    scheduler = Scheduler()
    seen = []
    handle = scheduler.call_later(5, lambda: seen.append("x"))
    scheduler.cancel(handle)
    scheduler.advance(10)
    assert seen == []


def test_scheduler_rejects_negative_values():
    scheduler = Scheduler()
    with pytest.raises(ValueError):
        scheduler.call_later(-1, lambda: None)
    with pytest.raises(ValueError):
        scheduler.advance(-1)


def test_timer_repeats_until_stopped():
    scheduler = Scheduler()
    timer = Timer(scheduler)
    ticks = []
    timer.set_callback(lambda: ticks.append(scheduler.now))
    timer.start(20)
    scheduler.advance(100)
    assert len(ticks) == 5
    timer.stop()
    assert not timer.active
    scheduler.advance(100)
    assert len(ticks) == 5


def test_timer_callback_replacement_and_bad_interval():
    scheduler = Scheduler()
    timer = Timer(scheduler)
    first, second = [], []
    timer.set_callback(lambda: first.append(1))
    timer.start(10)
    scheduler.advance(10)
    timer.set_callback(lambda: second.append(1))
    scheduler.advance(10)
    assert (len(first), len(second)) == (1, 1)
    with pytest.raises(ValueError):
        timer.start(0)


def test_move_animation_reaches_end_and_notifies_once():
    scheduler = Scheduler()
    window = Window(0, 0)
    mover = MoveAnimation(window, scheduler)
    done = []

    def listener():
        done.append(window.pos)

    mover.on_finished(listener)
    mover.on_finished(listener)
    mover.configure(Point(0, 0), Point(200, 100), 1000)
    mover.start()
    scheduler.advance(500)
    assert 0 < window.x < 200
    assert mover.running
    scheduler.advance(600)
    assert window.pos == Point(200, 100)
    assert done == [Point(200, 100)]
    assert not mover.running


def test_move_animation_stop_prevents_finish():
    scheduler = Scheduler()
    window = Window()
    mover = MoveAnimation(window, scheduler)
    done = []
    mover.on_finished(lambda: done.append(True))
    mover.configure(Point(0, 0), Point(50, 0), 100)
    mover.start()
    mover.stop()
    scheduler.advance(1000)
    assert done == []
    assert window.pos == Point(0, 0)


def test_move_animation_errors():
    mover = MoveAnimation(Window(), Scheduler())
    with pytest.raises(RuntimeError):
        mover.start()
    with pytest.raises(ValueError):
        mover.configure(Point(), Point(), -5)


def test_stage_mover_drives_stage_window():
    stage = Stage(screen=Rect(0, 0, 800, 600))
    stage.mover.configure(stage.window.pos, Point(300, 200), 0)
    stage.mover.start()
    stage.scheduler.advance(1)
    assert stage.window.pos == Point(300, 200)
    assert stage.screen.contains(stage.window.pos)