import numpy as np

BLANK = "E"
INITIAL_CAPACITY = 64


class Tape:
    """One-directional tape backed by a numpy array that doubles on demand.

    Offsets start at 0. Cells that were never written read as the blank
    symbol, however far out they are, and reading never allocates.
    """

    def __init__(self, blank=BLANK, capacity=INITIAL_CAPACITY):
        if len(blank) != 1:
            raise ValueError(f"Blank symbol must be a single character, got {blank!r}")
        self.blank = blank
        self.initial_capacity = max(int(capacity), 1)
        self.clear()

    def clear(self):
        self._cells = np.full(self.initial_capacity, self.blank, dtype="<U1")
        self.last = 0

    @property
    def capacity(self):
        return self._cells.size

    def _check(self, offset):
        if offset < 0:
            raise IndexError(f"Tape offset {offset} is left of the tape start")
        self.last = max(self.last, offset)

    def _grow(self, offset):
        capacity = max(self._cells.size * 2, offset + 1)
        grown = np.full(capacity, self.blank, dtype="<U1")
        grown[: self._cells.size] = self._cells
        self._cells = grown

    def read(self, offset):
        self._check(offset)
        if offset >= self._cells.size:
            return self.blank
        return str(self._cells[offset])

    def peek(self, offset):
        """Like read, but leaves the high-water mark alone."""
        if offset < 0 or offset >= self._cells.size:
            return self.blank
        return str(self._cells[offset])

    def write(self, offset, symbol):
        if len(symbol) != 1:
            raise ValueError(f"Tape symbols are single characters, got {symbol!r}")
        self._check(offset)
        if offset >= self._cells.size:
            self._grow(offset)
        self._cells[offset] = symbol

    def write_run(self, offset, symbols):
        """Write every character of `symbols` starting at `offset`."""
        if not symbols:
            return offset
        end = offset + len(symbols)
        self._check(end - 1)
        self._check(offset)
        if end > self._cells.size:
            self._grow(end - 1)
        self._cells[offset:end] = list(symbols)
        return end

    def run_length(self, offset, symbol):
        """Count consecutive `symbol` cells from `offset`, stopping at the first other cell."""
        if symbol == self.blank:
            raise ValueError("A run of blanks never ends")
        self._check(offset)
        segment = self._cells[offset:]
        others = np.flatnonzero(segment != symbol)
        if others.size:
            return int(others[0])
        # Everything past the backing array is blank
        return int(segment.size)

    def snapshot(self):
        """Symbols from offset 1 up to the highest offset accessed so far."""
        stored = "".join(self._cells[1 : self.last + 1].tolist())
        return stored + self.blank * max(0, self.last - len(stored))

    def __getitem__(self, offset):
        return self.read(offset)

    def __setitem__(self, offset, symbol):
        self.write(offset, symbol)

    def __repr__(self):
        return f"Tape({self.snapshot()!r})"
