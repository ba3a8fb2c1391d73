"""Tape Automaton - a generic single-tape deterministic machine core.

The caller brings the state payload, the symbols and a transition function;
the package runs it over a tape that grows on demand at either end.

Core:
    - Machine: owns tape, head and state; applies one Rule per step
    - MachinePeek: read-only snapshot returned by Machine.peek()
    - Tape, TapeView: two-stack growable tape and its read-only halves

Transitions:
    - Rule: optional new_state / write / head_move
    - Running, Halted, HALTED: machine states
    - Move: LEFT or RIGHT
    - Executor: protocol for ``executor(payload, symbol) -> Rule``
    - TableExecutor: Executor backed by a ``{(payload, symbol): Rule}`` dict

Frame utilities (Pillow):
    - TapeHistory: record peeks and render a space-time diagram
    - create_frame: resize and caption a diagram
    - Resolution constants: RESOLUTION_TINY, RESOLUTION_2K
"""

from .executor import Executor, MissingRuleError, TableExecutor
from .machine import Machine, MachineFinishedError, MachinePeek
from .rules import HALTED, Halted, Move, Rule, Running, State
from .tape import Tape, TapeView

# Import frame utilities (available if Pillow and matplotlib are installed)
try:
    from .frames import (
        TapeHistory,
        create_frame,
        RESOLUTION_TINY,
        RESOLUTION_2K,
    )
except ImportError:
    TapeHistory = None
    create_frame = None
    RESOLUTION_TINY = None
    RESOLUTION_2K = None

__all__ = [
    # Core
    "Machine",
    "MachinePeek",
    "MachineFinishedError",
    "Tape",
    "TapeView",
    # Transitions
    "Rule",
    "Running",
    "Halted",
    "HALTED",
    "State",
    "Move",
    "Executor",
    "TableExecutor",
    "MissingRuleError",
    # Frame utilities (if Pillow available)
    "TapeHistory",
    "create_frame",
    "RESOLUTION_TINY",
    "RESOLUTION_2K",
]
