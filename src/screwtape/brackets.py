from __future__ import annotations

from typing import Dict, List

import numpy as np


def build_jump_table(program: str) -> Dict[int, int]:
    """Map each matched ']' index to the index of its '['.

    A ']' seen while no '[' is pending gets no entry; leftover '[' are dropped.
    """
    jump_table: Dict[int, int] = {}
    stack: List[int] = []

    for i, char in enumerate(program):
        if char == '[':
            stack.append(i)
        elif char == ']':
            if stack:
                jump_table[i] = stack.pop()

    return jump_table


def jump_array(program: str, jump_table: Dict[int, int]) -> np.ndarray:
    """Flatten the jump table for the compiled loop (-1 = no jump)."""
    arr = np.full(len(program), -1, dtype=np.int32)
    for close, open_ in jump_table.items():
        arr[close] = open_
    return arr
