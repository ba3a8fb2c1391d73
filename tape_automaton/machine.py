"""Single-tape deterministic machine driven by a caller-supplied executor.

A Machine owns its tape, head and state. Each ``step`` asks the executor for
a Rule given the current payload and the symbol under the head, and applies
it: state first, then the write, then the head move. Moving off either end
of the tape grows it by one blank cell, so the head always stays on the tape.

Example: binary increment, least significant bit first.

    >>> from tape_automaton import Machine, Move, Rule
    >>> def increment(payload, symbol):
    ...     if symbol:
    ...         return Rule(write=False, head_move=Move.RIGHT)
    ...     return Rule.halt(write=True)
    >>> machine = Machine("carry", [True, True])
    >>> machine.run(increment)
    3
    >>> machine.halted()
    True
    >>> machine.finish()
    ([False, False, True], HALTED)
"""

import logging
from dataclasses import dataclass
from collections.abc import Iterator
from typing import Any, Optional

from .executor import Executor
from .rules import Halted, Move, Running, State
from .tape import Tape, TapeView

logger = logging.getLogger(__name__)


class MachineFinishedError(RuntimeError):
    """Raised when a Machine is used after ``finish()``."""


@dataclass(frozen=True)
class MachinePeek:
    """Read-only snapshot of a Machine's internals.

    ``tape`` holds live views of the two halves of the tape; concatenating
    them in order gives the whole tape. The views follow later writes, so
    copy them if the snapshot has to outlive the next step. ``blank`` is the
    symbol the machine fills grown cells with.
    """

    state: State
    tape: tuple[TapeView, TapeView]
    head: int
    blank: Any = None

    @property
    def symbol(self):
        """Symbol under the head."""
        front, back = self.tape
        if self.head < len(front):
            return front[self.head]
        return back[self.head - len(front)]

    @property
    def left_growth(self) -> int:
        return len(self.tape[0])


class Machine:
    def __init__(self, state, tape, blank=None):
        """Create a running machine with the head on the first cell.

        Args:
            state: Initial state payload, wrapped as ``Running(state)``.
            tape: Non-empty iterable of initial symbols (copied).
            blank: Symbol for newly grown cells. Defaults to the zero value
                of the first symbol's type, e.g. ``False`` for ``bool``.

        Raises:
            ValueError: If ``tape`` is empty, or ``blank`` is omitted and the
                first symbol's type has no zero-argument constructor.
        """
        self._tape = Tape(tape)
        self._state = Running(state)
        self._head = 0
        if blank is None:
            symbol_type = type(self._tape[0])
            try:
                blank = symbol_type()
            except TypeError as e:
                raise ValueError(
                    f"Cannot derive a blank symbol from {symbol_type.__name__}; "
                    "pass blank= explicitly"
                ) from e
        self._blank = blank
        self._step_count = 0
        self._finished = False

    @classmethod
    def default(cls, state_type=int, symbol_type=bool):
        """Machine in ``Running(state_type())`` over one ``symbol_type()`` cell."""
        blank = symbol_type()
        return cls(state_type(), [blank], blank=blank)

    def __repr__(self):
        if self._finished:
            return "Machine(<finished>)"
        return (
            f"Machine(state={self._state!r}, head={self._head}, "
            f"tape={self._tape.to_list()!r})"
        )

    def _check_live(self):
        if self._finished:
            raise MachineFinishedError("Machine has already been finished")

    @property
    def blank(self):
        return self._blank

    @property
    def step_count(self) -> int:
        """Number of transitions applied so far."""
        self._check_live()
        return self._step_count

    def halted(self) -> bool:
        self._check_live()
        return isinstance(self._state, Halted)

    def step(self, executor: Executor) -> bool:
        """Apply one transition. Returns False, changing nothing, once halted.

        Anything the executor raises propagates before the machine is touched.

        Raises:
            TypeError: If the rule's ``new_state`` is neither ``Running`` nor
                ``Halted``. The machine is left unchanged.
        """
        self._check_live()
        if isinstance(self._state, Halted):
            return False

        rule = executor(self._state.payload, self._tape[self._head])

        if rule.new_state is not None and not isinstance(
            rule.new_state, (Running, Halted)
        ):
            raise TypeError(
                f"Rule.new_state must be Running or Halted, got {rule.new_state!r}"
            )

        if rule.new_state is not None:
            self._state = rule.new_state
            if isinstance(rule.new_state, Halted):
                logger.debug(
                    "Machine halted after %d steps", self._step_count + 1
                )

        if rule.write is not None:
            self._tape[self._head] = rule.write

        if rule.head_move is Move.LEFT:
            self._move_left()
        elif rule.head_move is Move.RIGHT:
            self._move_right()

        self._step_count += 1
        return True

    def _move_left(self):
        if self._head == 0:
            # The new cell takes index 0, so the head stays put
            self._tape.grow_left(self._blank)
        else:
            self._head -= 1

    def _move_right(self):
        if self._head == len(self._tape) - 1:
            self._tape.grow_right(self._blank)
        self._head += 1

    def run(self, executor: Executor, step_limit: Optional[int] = None) -> int:
        """Step until halted or ``step_limit`` steps; return steps applied."""
        self._check_live()
        if step_limit is not None and step_limit < 0:
            raise ValueError("step_limit must be at least 0")

        steps = 0
        while step_limit is None or steps < step_limit:
            if not self.step(executor):
                break
            steps += 1
        return steps

    def iter_steps(self, executor: Executor) -> Iterator[int]:
        """Yield the head index each transition was applied at, until halted.

        Raises MachineFinishedError immediately, not on first iteration.
        """
        self._check_live()
        return self._iter_steps(executor)

    def _iter_steps(self, executor):
        while not self.halted():
            previous_head = self._head
            self.step(executor)
            yield previous_head

    def peek(self) -> MachinePeek:
        self._check_live()
        return MachinePeek(
            state=self._state,
            tape=self._tape.as_slices(),
            head=self._head,
            blank=self._blank,
        )

    def finish(self) -> tuple[list[Any], State]:
        """Consume the machine, returning the final tape and state."""
        self._check_live()
        self._finished = True
        tape, state = self._tape.to_list(), self._state
        self._tape = None
        return tape, state
