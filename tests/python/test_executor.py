"""Tests for Rule construction and TableExecutor."""

import pytest

from tape_automaton import (
    HALTED,
    Halted,
    Machine,
    MissingRuleError,
    Move,
    Rule,
    Running,
    TableExecutor,
)


def test_rule_fields_default_to_absent():
    rule = Rule()
    assert rule.new_state is None
    assert rule.write is None
    assert rule.head_move is None


def test_rule_shortcuts():
    assert Rule.halt(write=1) == Rule(new_state=HALTED, write=1)
    assert Rule.goto("B", head_move=Move.LEFT) == Rule(
        new_state=Running("B"), head_move=Move.LEFT
    )


def test_halted_is_payload_free_singleton_value():
    assert Halted() == HALTED
    assert Running(None) != HALTED
    assert len({HALTED, Halted()}) == 1


def test_table_executor_drives_machine():
    table = TableExecutor(
        {
            ("A", 0): Rule.goto("B", write=1, head_move=Move.RIGHT),
            ("B", 0): Rule.goto("A", write=1, head_move=Move.LEFT),
            ("A", 1): Rule.halt(head_move=Move.LEFT),
        }
    )
    machine = Machine("A", [0])
    steps = machine.run(table, step_limit=100)
    tape, state = machine.finish()
    assert steps == 3
    assert state == HALTED
    assert tape == [0, 1, 1]


def test_table_executor_reports_missing_pair():
    table = TableExecutor({("A", 0): Rule(head_move=Move.RIGHT)})
    assert table.covers("A", 0)
    assert not table.covers("A", 1)
    assert len(table) == 1

    with pytest.raises(MissingRuleError) as info:
        table("A", 1)
    assert info.value.payload == "A"
    assert info.value.symbol == 1
    assert isinstance(info.value, LookupError)


def test_missing_rule_propagates_from_step():
    machine = Machine("A", [1])
    with pytest.raises(MissingRuleError):
        machine.step(TableExecutor({}))
    assert not machine.halted()
    assert machine.step_count == 0
