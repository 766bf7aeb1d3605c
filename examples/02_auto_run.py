#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from screwtape import Runner, ScrewtapeInterpreter


def main():
    program = "+" * 72 + ".>" + "+" * 105 + ".<+."

    interp = ScrewtapeInterpreter(program)
    printed = 0

    def on_step(it):
        nonlocal printed
        out = it.output_so_far()
        if len(out) > printed:
            sys.stdout.write("".join(out[printed:]))
            sys.stdout.flush()
            printed = len(out)

    # Same cadence as a visual auto-run, just faster.
    Runner(interp, on_step=on_step).run(delay=0.001)
    print()
    print(f"{interp.state.step_count} steps")


if __name__ == "__main__":
    main()
