"""Transition functions consumed by a Machine."""

from collections.abc import Mapping
from typing import Any, Protocol

from .rules import Rule


class Executor(Protocol):
    """Anything callable as ``executor(payload, symbol) -> Rule``.

    Executors must be pure and deterministic: the same payload and symbol
    always produce the same Rule. A plain function is the usual choice.
    """

    def __call__(self, payload: Any, symbol: Any) -> Rule: ...


class MissingRuleError(LookupError):
    """Raised by TableExecutor for a (payload, symbol) pair it does not define."""

    def __init__(self, payload, symbol):
        super().__init__(f"No rule for state {payload!r} reading {symbol!r}")
        self.payload = payload
        self.symbol = symbol


class TableExecutor:
    """Executor backed by a ``{(payload, symbol): Rule}`` mapping.

    >>> from tape_automaton.rules import Move
    >>> flip = TableExecutor({("A", 0): Rule(write=1, head_move=Move.RIGHT)})
    >>> flip("A", 0).write
    1
    >>> flip.covers("A", 1)
    False
    """

    def __init__(self, table: Mapping[tuple[Any, Any], Rule]):
        self.table = dict(table)

    def __call__(self, payload, symbol) -> Rule:
        try:
            return self.table[(payload, symbol)]
        except KeyError:
            raise MissingRuleError(payload, symbol) from None

    def covers(self, payload, symbol) -> bool:
        return (payload, symbol) in self.table

    def __len__(self):
        return len(self.table)
