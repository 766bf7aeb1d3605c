from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple

import numpy as np

from .brackets import build_jump_table, jump_array
from .errors import make_load_error
from .formatter import format_value
from .state import ExecutionState
from .tape import Tape, coerce_cell

# Opcode numbering used when a program is loaded onto the tape as data.
DEFAULT_OPCODES: Mapping[str, int] = {
    '+': 1,
    '-': 2,
    '>': 3,
    '<': 4,
    '.': 5,
    '[': 6,
    ']': 7,
}


class ScrewtapeInterpreter:
    """Single-step Screwtape interpreter.

    Screwtape differs from Brainfuck in its control flow: '[' never skips
    forward, and ']' jumps back onto its '[' while the current cell is
    nonzero. Cells are signed 32-bit and wrap around.
    """

    def __init__(self, program: str):
        if not isinstance(program, str):
            raise make_load_error(
                message=f"program is not text (got {type(program).__name__})",
                source='<program>',
            )
        self.program = program
        self.jump_table = build_jump_table(program)
        self.program_arr, self.jump_arr = self._compile_arrays()
        self.state = ExecutionState()
        self.tape = Tape()

    def _compile_arrays(self):
        program_arr = np.array([ord(c) for c in self.program], dtype=np.int32)
        return program_arr, jump_array(self.program, self.jump_table)

    def reset(self) -> None:
        self.state.reset()
        self.tape = Tape()

    def _in_bounds(self) -> bool:
        return 0 <= self.state.ip < len(self.program)

    def step(self) -> None:
        state = self.state
        if not self._in_bounds():
            state.terminated = True
            return

        command = self.program[state.ip]
        tape = self.tape
        state.step_count += 1

        if command == '+':
            tape.increment()
        elif command == '-':
            tape.decrement()
        elif command == '>':
            tape.move_right()
        elif command == '<':
            tape.move_left()
        elif command == '.':
            state.output.append(format_value(tape.current_value()))
        elif command == ']':
            if tape.current_value() != 0:
                target = self.jump_table.get(state.ip)
                if target is not None:
                    # Lands on the '[' itself; the next step is that no-op.
                    state.ip = target
                    return
        # '[' and anything unrecognized fall through as no-ops.

        state.ip += 1
        if not self._in_bounds():
            state.terminated = True

    # -- observation -----------------------------------------------------

    def is_terminated(self) -> bool:
        return self.state.terminated

    def current_instruction_pointer(self) -> int:
        return self.state.ip

    def current_instruction(self) -> Optional[str]:
        if self._in_bounds():
            return self.program[self.state.ip]
        return None

    def output_so_far(self) -> List[str]:
        return list(self.state.output)

    def output_text(self) -> str:
        return ''.join(self.state.output)

    def tape_snapshot(self) -> List[Tuple[int, bool]]:
        return self.tape.snapshot()

    # -- tape editing ----------------------------------------------------

    def set_cell_value(self, cell_id: int, value: Any) -> None:
        self.tape.set_value(cell_id, value)

    def insert_cell_left(self) -> int:
        return self.tape.insert_left()

    def insert_cell_right(self) -> int:
        return self.tape.insert_right()

    def reinitialize_tape_from_program_opcodes(
        self, mapping: Mapping[str, Any] = DEFAULT_OPCODES
    ) -> None:
        values = [coerce_cell(mapping[c]) for c in self.program if c in mapping]
        self.tape.reinitialize_from(values)
