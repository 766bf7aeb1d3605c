#!/usr/bin/env python3
"""
Test the growable tape: cursor movement, wraparound and external edits.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from screwtape.tape import CELL_MAX, CELL_MIN, Tape, coerce_cell, wrap_cell


def test_fresh_tape():
    tape = Tape()
    assert len(tape) == 1
    assert tape.snapshot() == [(0, True)]
    assert tape.current_value() == 0


def test_wraparound():
    tape = Tape([CELL_MAX])
    tape.increment()
    assert tape.current_value() == CELL_MIN
    tape.decrement()
    assert tape.current_value() == CELL_MAX

    tape = Tape()
    tape.decrement()
    assert tape.current_value() == -1


def test_move_right_then_left_returns_home():
    """Going out N and back materializes exactly N cells and keeps values."""
    tape = Tape()
    tape.increment()
    home = tape.current
    n = 40

    for _ in range(n):
        tape.move_right()
        tape.increment()
        tape.increment()
    for _ in range(n):
        tape.move_left()

    assert tape.current == home
    assert len(tape) == n + 1
    assert tape.current_value() == 1
    assert [value for value, _ in tape.snapshot()] == [1] + [2] * n

    # Walking the same path again allocates nothing.
    for _ in range(n):
        tape.move_right()
    assert len(tape) == n + 1


def test_cell_ids_stable_across_growth():
    tape = Tape()
    tape.move_left()
    tape.set_current_value(7)
    left_id = tape.current
    for _ in range(100):
        tape.move_right()
    assert tape.value(left_id) == 7
    assert tape.cells()[0].cell_id == left_id


def test_ends_track_growth():
    tape = Tape()
    tape.move_left()
    tape.move_left()
    assert tape.leftmost == tape.current
    tape.move_right()
    tape.move_right()
    tape.move_right()
    assert tape.rightmost == tape.current
    assert len(tape) == 4
    assert tape.snapshot() == [(0, False), (0, False), (0, False), (0, True)]


def test_insert_does_not_move_cursor():
    tape = Tape([5])
    left_id = tape.insert_left()
    right_id = tape.insert_right()
    assert tape.snapshot() == [(0, False), (5, True), (0, False)]
    assert tape.leftmost == left_id
    assert tape.rightmost == right_id

    # Moving onto inserted cells does not allocate more.
    tape.move_left()
    assert tape.current == left_id
    assert len(tape) == 3


def test_set_value_coercion():
    tape = Tape()
    tape.set_current_value("42")
    assert tape.current_value() == 42
    tape.set_current_value(" -3 ")
    assert tape.current_value() == -3
    tape.set_current_value("1.5")
    assert tape.current_value() == 1
    tape.set_current_value("-2.9")
    assert tape.current_value() == -2
    tape.set_current_value("abc")
    assert tape.current_value() == 0
    tape.set_current_value(None)
    assert tape.current_value() == 0
    tape.set_current_value(float('nan'))
    assert tape.current_value() == 0
    tape.set_current_value(2 ** 32 + 5)
    assert tape.current_value() == 5


def test_set_value_unknown_id():
    tape = Tape()
    try:
        tape.set_value(3, 1)
    except KeyError:
        pass
    else:
        raise AssertionError("expected KeyError for unknown cell id")


def test_reinitialize():
    tape = Tape()
    tape.move_right()
    tape.move_right()
    tape.reinitialize_from([4, "x", 6])
    assert tape.snapshot() == [(4, True), (0, False), (6, False)]
    assert len(tape) == 3
    tape.move_left()
    assert tape.snapshot() == [(0, True), (4, False), (0, False), (6, False)]


def test_reinitialize_empty_is_noop():
    tape = Tape([1, 2])
    tape.move_right()
    before = tape.cells()
    tape.reinitialize_from([])
    assert tape.cells() == before
    assert tape.current_value() == 2


def test_arena_growth_keeps_links():
    tape = Tape()
    start_capacity = tape.capacity
    for i in range(start_capacity * 3):
        tape.move_left()
        tape.set_current_value(i)
    assert tape.capacity >= len(tape)
    values = tape.to_array().tolist()
    assert values == list(reversed(range(start_capacity * 3))) + [0]


def test_helpers():
    assert wrap_cell(2 ** 31) == CELL_MIN
    assert wrap_cell(-2 ** 31 - 1) == CELL_MAX
    assert coerce_cell(True) == 1
    assert coerce_cell("1e3") == 1000
    assert coerce_cell("inf") == 0
    assert coerce_cell(3.9) == 3
