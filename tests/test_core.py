import io

import pytest

from kongworld.core import (
    MESSAGE_DURATION,
    Actor,
    Color,
    DebugMessage,
    Patrol,
    Screen,
    Vector,
)


def test_vector_addition_adds_each_component():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(0.0, -840.0, 0.0)
    total = a + b
    assert total.x == a.x + b.x
    assert total.y == a.y + b.y
    assert total.z == a.z + b.z


def test_vector_addition_with_zero_is_identity():
    point = Vector(1206.68, -1460.0, 550.0)
    assert point + Vector() == point


def test_vector_addition_rejects_other_types():
    with pytest.raises(TypeError):
        Vector(1.0, 2.0, 3.0) + 5


def test_screen_records_messages_in_order():
    screen = Screen()
    screen.show("first", Color.GREEN)
    screen.show("second", Color.RED)
    assert screen.texts() == ["first", "second"]
    assert [m.color for m in screen.messages] == [Color.GREEN, Color.RED]


def test_screen_show_returns_message_with_default_duration():
    screen = Screen()
    message = screen.show("hola", Color.BLUE)
    assert message == DebugMessage("hola", Color.BLUE, 15.0)
    assert message.duration == MESSAGE_DURATION


def test_screen_rejects_unknown_color():
    with pytest.raises(ValueError):
        Screen().show("x", "purple")


def test_screen_echoes_to_stream():
    stream = io.StringIO()
    screen = Screen(stream)
    screen.show("uno", Color.CYAN)
    screen.show("dos", Color.CYAN)
    assert stream.getvalue().splitlines() == ["uno", "dos"]


def _route():
    start = Vector(5.0, 0.0, 7.0)
    end = start + Vector(0.0, -6.0, 0.0)
    return Patrol(start=start, end=end, step=2.0)


def test_patrol_starts_at_start_moving_forward():
    patrol = _route()
    assert patrol.current == patrol.start
    assert patrol.forward is True


def test_patrol_reaches_end_then_pauses_and_turns():
    patrol = _route()
    positions = [patrol.advance() for _ in range(3)]
    assert positions[-1] == patrol.end
    ys = [p.y for p in positions]
    assert ys == sorted(ys, reverse=True)
    assert patrol.advance() == patrol.end
    assert patrol.forward is False


def test_patrol_returns_to_start_and_turns_again():
    patrol = _route()
    for _ in range(4):
        patrol.advance()
    back = [patrol.advance() for _ in range(3)]
    assert back[-1] == patrol.start
    assert patrol.advance() == patrol.start
    assert patrol.forward is True


def test_patrol_stays_within_bounds_and_keeps_other_axes():
    patrol = _route()
    for _ in range(50):
        position = patrol.advance()
        assert patrol.end.y <= position.y <= patrol.start.y
        assert position.x == patrol.start.x
        assert position.z == patrol.start.z


def test_actor_begin_play_only_once():
    actor = Actor(Screen(), Vector(1.0, 2.0, 3.0))
    actor.begin_play()
    assert actor.has_begun_play is True
    with pytest.raises(RuntimeError):
        actor.begin_play()


def test_actor_tick_accumulates_age():
    actor = Actor(Screen())
    actor.tick(0.5)
    assert actor.age == 0.5
    actor.tick(0.5)
    assert actor.age == 1.0