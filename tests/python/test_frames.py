"""Tests for space-time diagram rendering."""

import pytest

from tape_automaton import Machine, Move, Rule

frames = pytest.importorskip("tape_automaton.frames")
TapeHistory = frames.TapeHistory
create_frame = frames.create_frame
RESOLUTION_TINY = frames.RESOLUTION_TINY

WHITE = (255, 255, 255)
ORANGE = (255, 85, 0)


def bounce(payload, symbol):
    """Paints a cell then moves, left on even steps and right on odd ones."""
    move = Move.LEFT if payload % 2 == 0 else Move.RIGHT
    return Rule.goto(payload + 1, write=True, head_move=move)


def record_run(machine, executor, steps):
    history = TapeHistory()
    history.record(machine.peek())
    for step_index in range(steps):
        machine.step(executor)
        history.record(machine.peek(), step_index=step_index + 1)
    return history


class TestTapeHistory:
    def test_rows_are_copies(self):
        machine = Machine("A", [False])
        history = TapeHistory()
        history.record(machine.peek())
        machine.step(lambda payload, symbol: Rule(write=True))
        assert history.rows[0].cells == (False,)
        assert len(history) == 1

    def test_image_aligns_on_original_edge(self):
        machine = Machine(0, [False])
        history = record_run(machine, bounce, 2)
        image = history.to_image()

        # Tape: [F] -> [F, T] (grew left) -> [T, T] with head on index 1
        assert image.size == (2, 3)
        assert image.getpixel((1, 0)) == WHITE
        assert image.getpixel((0, 1)) == WHITE
        assert image.getpixel((1, 1)) == ORANGE
        assert image.getpixel((0, 2)) == ORANGE
        assert image.getpixel((1, 2)) == ORANGE

    def test_custom_colors_cycle(self):
        machine = Machine("A", [0, 1, 2, 3])
        history = TapeHistory()
        history.record(machine.peek())
        image = history.to_image(colors=["#000000", "#FF0000", "#00FF00"])
        assert image.getpixel((0, 0)) == (0, 0, 0)
        assert image.getpixel((1, 0)) == (255, 0, 0)
        assert image.getpixel((2, 0)) == (0, 255, 0)
        assert image.getpixel((3, 0)) == (255, 0, 0)

    def test_empty_history_rejected(self):
        with pytest.raises(ValueError):
            TapeHistory().to_image()

    def test_bad_color_rejected(self):
        history = TapeHistory()
        history.record(Machine("A", [1]).peek())
        with pytest.raises(ValueError):
            history.to_image(colors=["#FFF"])


def test_create_frame_resizes_and_converts():
    machine = Machine(0, [False])
    history = record_run(machine, bounce, 10)
    frame = create_frame(history.to_image(), "bounce", 10, RESOLUTION_TINY)
    assert frame.size == RESOLUTION_TINY
    assert frame.mode == "RGBA"


def test_image_uses_machine_blank():
    machine = Machine("A", ["x"], blank="_")
    machine.step(lambda payload, symbol: Rule(head_move=Move.LEFT))
    history = TapeHistory()
    history.record(machine.peek())
    image = history.to_image()

    assert history.rows[0].blank == "_"
    assert image.getpixel((0, 0)) == WHITE
    assert image.getpixel((1, 0)) == ORANGE
