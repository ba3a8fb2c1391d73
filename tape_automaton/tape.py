"""Growable single tape, stored as two stacks around the original left edge."""

import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)


class TapeView(Sequence):
    """Read-only, live view of one half of a Tape.

    The front half is stored reversed, so the view flips indices instead of
    copying the cells.
    """

    __slots__ = ("_cells", "_reversed")

    def __init__(self, cells, reversed_=False):
        self._cells = cells
        self._reversed = reversed_

    def __len__(self):
        return len(self._cells)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        size = len(self._cells)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("tape view index out of range")
        return self._cells[size - 1 - index] if self._reversed else self._cells[index]

    def __iter__(self):
        return reversed(self._cells) if self._reversed else iter(self._cells)

    def __eq__(self, other):
        if isinstance(other, (TapeView, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self):
        return f"TapeView({list(self)!r})"


class Tape:
    """Ordered tape that grows by one cell at either end in amortized O(1).

    Cells grown on the left live in ``front`` (last element is the leftmost
    cell); the initial cells and cells grown on the right live in ``back``.

    >>> tape = Tape([1, 0])
    >>> tape.grow_left(0)
    >>> tape.grow_right(0)
    >>> tape.to_list()
    [0, 1, 0, 0]
    >>> str(tape)
    '0|100'
    """

    def __init__(self, cells):
        self.front = []  # Cells left of the original edge (reversed)
        self.back = list(cells)
        if not self.back:
            raise ValueError("A tape must start with at least one cell")

    def __len__(self):
        return len(self.front) + len(self.back)

    def _locate(self, position):
        if not 0 <= position < len(self):
            raise IndexError(f"tape position {position} out of range")
        front_len = len(self.front)
        if position < front_len:
            return self.front, front_len - 1 - position
        return self.back, position - front_len

    def __getitem__(self, position):
        cells, index = self._locate(position)
        return cells[index]

    def __setitem__(self, position, value):
        cells, index = self._locate(position)
        cells[index] = value

    def __iter__(self):
        yield from reversed(self.front)
        yield from self.back

    def __str__(self):
        front_part = "".join(_cell_text(x) for x in reversed(self.front))
        back_part = "".join(_cell_text(x) for x in self.back)
        return f"{front_part}|{back_part}"

    @property
    def left_growth(self):
        """Logical index of the first initial cell."""
        return len(self.front)

    def grow_left(self, blank):
        self.front.append(blank)
        logger.debug("Tape grew left to %d cells", len(self))

    def grow_right(self, blank):
        self.back.append(blank)
        logger.debug("Tape grew right to %d cells", len(self))

    def as_slices(self):
        """Return the front and back halves as read-only views, in order."""
        return TapeView(self.front, reversed_=True), TapeView(self.back)

    def to_list(self):
        return list(self)

    def count(self, symbol):
        """Count the cells holding ``symbol``"""
        return self.front.count(symbol) + self.back.count(symbol)


def _cell_text(symbol):
    if isinstance(symbol, bool):
        return "1" if symbol else "0"
    return str(symbol)
