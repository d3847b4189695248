import pytest

from rustdrill.drills.messages import ChangeColor, Echo, Move, Point, Quit, State


def test_match_message_call():
    state = State(quit=False, position=Point(x=0, y=0), color=(0, 0, 0))
    state.process(ChangeColor((255, 0, 255)))
    state.process(Echo("hello world"))
    state.process(Move(Point(x=10, y=15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True


def test_echo_prints_text(capsys):
    State().process(Echo("hello world"))
    assert capsys.readouterr().out == "hello world\n"


def test_echo_leaves_state_unchanged():
    state = State()
    state.process(Echo("hello world"))
    assert state == State()


def test_unknown_message_is_rejected():
    with pytest.raises(TypeError):
        State().process("Quit")