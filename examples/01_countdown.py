#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from screwtape import ScrewtapeInterpreter


def main():
    # '[' never skips, so the body always runs once; ']' repeats it while nonzero.
    program = "++++++++[-.]"

    interp = ScrewtapeInterpreter(program)
    while not interp.is_terminated():
        ip = interp.current_instruction_pointer()
        instr = interp.current_instruction()
        interp.step()
        if instr is not None:
            cells = " ".join(
                f"[{value}]" if current else str(value)
                for value, current in interp.tape_snapshot()
            )
            print(f"{ip:3d} {instr}  {cells}")

    print("output:", " ".join(interp.output_so_far()))


if __name__ == "__main__":
    main()
