from __future__ import annotations

from typing import Any, Iterable, List, NamedTuple, Tuple

import numpy as np

CELL_MIN = -(2 ** 31)
CELL_MAX = 2 ** 31 - 1
_CELL_RANGE = 2 ** 32

# Neighbor index meaning "nothing materialized on this side".
NO_CELL = -1

_INITIAL_CAPACITY = 16


def wrap_cell(value: int) -> int:
    """Two's-complement wraparound into the signed 32-bit range."""
    return ((value - CELL_MIN) % _CELL_RANGE) + CELL_MIN


def coerce_cell(value: Any) -> int:
    """Turn an externally supplied cell value into a cell integer.

    Anything that does not read as a number becomes 0.
    """
    try:
        if isinstance(value, str):
            text = value.strip()
            try:
                number = int(text)
            except ValueError:
                number = int(float(text))
        else:
            number = int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return wrap_cell(number)


class Cell(NamedTuple):
    cell_id: int
    value: int
    is_current: bool


class Tape:
    """Bidirectionally growable tape of 32-bit cells.

    Cells live in an arena of numpy arrays and link to their neighbors by
    index, so a cell id never changes once allocated. ``left``/``right``
    hold ``NO_CELL`` at the materialized ends.
    """

    def __init__(self, values: Iterable[Any] = (0,)):
        initial = [coerce_cell(v) for v in values] or [0]
        self._build(initial)

    def _build(self, values: List[int]) -> None:
        n = len(values)
        capacity = max(_INITIAL_CAPACITY, n * 2)
        self.values = np.zeros(capacity, dtype=np.int32)
        self.left = np.full(capacity, NO_CELL, dtype=np.int64)
        self.right = np.full(capacity, NO_CELL, dtype=np.int64)

        self.values[:n] = values
        self.left[1:n] = np.arange(0, n - 1)
        self.right[:n - 1] = np.arange(1, n)

        self.size = n
        self.current = 0
        self.leftmost = 0
        self.rightmost = n - 1

    # -- arena -----------------------------------------------------------

    @property
    def capacity(self) -> int:
        return len(self.values)

    def reserve(self, extra: int) -> None:
        """Make room for at least ``extra`` more cells without reallocating."""
        needed = self.size + extra
        if needed <= self.capacity:
            return
        new_capacity = max(self.capacity * 2, needed)
        grow = new_capacity - self.capacity
        self.values = np.concatenate([self.values, np.zeros(grow, dtype=np.int32)])
        self.left = np.concatenate([self.left, np.full(grow, NO_CELL, dtype=np.int64)])
        self.right = np.concatenate([self.right, np.full(grow, NO_CELL, dtype=np.int64)])

    def _alloc(self) -> int:
        self.reserve(1)
        cell_id = self.size
        self.values[cell_id] = 0
        self.left[cell_id] = NO_CELL
        self.right[cell_id] = NO_CELL
        self.size += 1
        return cell_id

    def _check(self, cell_id: int) -> int:
        cell_id = int(cell_id)
        if not 0 <= cell_id < self.size:
            raise KeyError(cell_id)
        return cell_id

    # -- cursor movement -------------------------------------------------

    def move_right(self) -> None:
        nxt = int(self.right[self.current])
        if nxt == NO_CELL:
            nxt = self._alloc()
            self.left[nxt] = self.current
            self.right[self.current] = nxt
            if self.current == self.rightmost:
                self.rightmost = nxt
        self.current = nxt

    def move_left(self) -> None:
        prev = int(self.left[self.current])
        if prev == NO_CELL:
            prev = self._alloc()
            self.right[prev] = self.current
            self.left[self.current] = prev
            if self.current == self.leftmost:
                self.leftmost = prev
        self.current = prev

    # -- cell values -----------------------------------------------------

    def increment(self) -> None:
        self.values[self.current] = wrap_cell(int(self.values[self.current]) + 1)

    def decrement(self) -> None:
        self.values[self.current] = wrap_cell(int(self.values[self.current]) - 1)

    def current_value(self) -> int:
        return int(self.values[self.current])

    def set_current_value(self, value: Any) -> None:
        self.values[self.current] = coerce_cell(value)

    def value(self, cell_id: int) -> int:
        return int(self.values[self._check(cell_id)])

    def set_value(self, cell_id: int, value: Any) -> None:
        self.values[self._check(cell_id)] = coerce_cell(value)

    # -- structure edits -------------------------------------------------

    def insert_left(self) -> int:
        cell_id = self._alloc()
        self.right[cell_id] = self.leftmost
        self.left[self.leftmost] = cell_id
        self.leftmost = cell_id
        return cell_id

    def insert_right(self) -> int:
        cell_id = self._alloc()
        self.left[cell_id] = self.rightmost
        self.right[self.rightmost] = cell_id
        self.rightmost = cell_id
        return cell_id

    def reinitialize_from(self, values: Iterable[Any]) -> None:
        """Replace the whole tape with ``values``; an empty sequence changes nothing."""
        new_values = [coerce_cell(v) for v in values]
        if not new_values:
            return
        self._build(new_values)

    # -- read surface ----------------------------------------------------

    def order(self) -> List[int]:
        """Cell ids from leftmost to rightmost."""
        ids = []
        cell_id = self.leftmost
        while cell_id != NO_CELL:
            ids.append(cell_id)
            cell_id = int(self.right[cell_id])
        return ids

    def cells(self) -> List[Cell]:
        return [
            Cell(cell_id, int(self.values[cell_id]), cell_id == self.current)
            for cell_id in self.order()
        ]

    def snapshot(self) -> List[Tuple[int, bool]]:
        return [(cell.value, cell.is_current) for cell in self.cells()]

    def to_array(self) -> np.ndarray:
        return self.values[self.order()]

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        cells = ' '.join(
            f"[{cell.value}]" if cell.is_current else str(cell.value)
            for cell in self.cells()
        )
        return f"Tape({cells})"
