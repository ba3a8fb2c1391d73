"""Vocabulary for describing machine status and transitions.

These types carry no behavior of their own: the Machine decides what they
mean when a Rule is applied.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class Move(Enum):
    """Direction the head shifts after a transition."""

    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class Running:
    """Non-terminal machine state holding the caller's payload."""

    payload: Any


class Halted:
    """Terminal, absorbing machine state. Carries no payload."""

    __slots__ = ()

    def __eq__(self, other):
        return isinstance(other, Halted)

    def __hash__(self):
        return hash(Halted)

    def __repr__(self):
        return "HALTED"


HALTED = Halted()

State = Union[Running, Halted]


@dataclass(frozen=True)
class Rule:
    """One transition, as a partial update of the machine.

    Every field defaults to ``None``, which means "leave this aspect
    unchanged":

    - ``new_state`` replaces the whole machine state (``HALTED`` stops it).
    - ``write`` overwrites the cell under the head.
    - ``head_move`` shifts the head one cell.

    >>> Rule(write=True)
    Rule(new_state=None, write=True, head_move=None)
    >>> Rule.halt().new_state
    HALTED
    >>> Rule.goto("B", head_move=Move.RIGHT).new_state
    Running(payload='B')
    """

    new_state: Optional[State] = None
    write: Any = None
    head_move: Optional[Move] = None

    @classmethod
    def halt(cls, write=None, head_move=None):
        return cls(new_state=HALTED, write=write, head_move=head_move)

    @classmethod
    def goto(cls, payload, write=None, head_move=None):
        return cls(new_state=Running(payload), write=write, head_move=head_move)
