from __future__ import annotations

import numpy as np
from numba import njit

STOP_OUTPUT = 1  # '.' reached; the caller runs it as a regular step
STOP_GROW = 2  # arena full; the caller grows the tape and resumes
STOP_END = 3  # instruction pointer left the program
STOP_BUDGET = 4  # max_steps executed

CELL_MIN = -2147483648
CELL_MAX = 2147483647


@njit(cache=True)
def jit_run_batch(program_arr, jump_arr, values, left, right,
                  pc, current, leftmost, rightmost, size, max_steps):
    """
    Compiled Screwtape loop working directly on the tape arena.

    Mirrors ScrewtapeInterpreter.step() instruction for instruction,
    including the extra step spent on '[' after a backward jump.
    Output is left to the interpreter so display tokens have one source.
    """
    prog_len = len(program_arr)
    capacity = len(values)
    stop_reason = STOP_BUDGET
    steps = 0

    while steps < max_steps:
        if pc < 0 or pc >= prog_len:
            stop_reason = STOP_END
            break

        command = program_arr[pc]

        if command == 43:  # '+'
            v = np.int64(values[current]) + 1
            if v > CELL_MAX:
                v = CELL_MIN
            values[current] = v
        elif command == 45:  # '-'
            v = np.int64(values[current]) - 1
            if v < CELL_MIN:
                v = CELL_MAX
            values[current] = v
        elif command == 62:  # '>'
            nxt = right[current]
            if nxt == -1:
                if size >= capacity:
                    stop_reason = STOP_GROW
                    break
                nxt = size
                size += 1
                values[nxt] = 0
                right[nxt] = -1
                left[nxt] = current
                right[current] = nxt
                if current == rightmost:
                    rightmost = nxt
            current = nxt
        elif command == 60:  # '<'
            prev = left[current]
            if prev == -1:
                if size >= capacity:
                    stop_reason = STOP_GROW
                    break
                prev = size
                size += 1
                values[prev] = 0
                left[prev] = -1
                right[prev] = current
                left[current] = prev
                if current == leftmost:
                    leftmost = prev
            current = prev
        elif command == 46:  # '.'
            stop_reason = STOP_OUTPUT
            break
        elif command == 93:  # ']'
            if values[current] != 0:
                target = jump_arr[pc]
                if target != -1:
                    pc = target
                    steps += 1
                    continue

        pc += 1
        steps += 1
        if pc < 0 or pc >= prog_len:
            stop_reason = STOP_END
            break

    return pc, current, leftmost, rightmost, size, stop_reason, steps
