from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Tuple

from .interpreter import ScrewtapeInterpreter
from .jit import STOP_BUDGET, STOP_END, STOP_GROW, STOP_OUTPUT, jit_run_batch

logger = logging.getLogger(__name__)

StepHook = Callable[[ScrewtapeInterpreter], None]


class Runner:
    """Drives an interpreter: single steps, timed auto-run, compiled batches.

    The interpreter itself never loops; everything that repeats lives here.
    ``pause()`` (typically from ``on_step``) stops a run after the current step.
    """

    def __init__(self, interpreter: ScrewtapeInterpreter, on_step: Optional[StepHook] = None):
        self.interpreter = interpreter
        self.on_step = on_step
        self.running = False

    def step(self) -> bool:
        """Execute one instruction; returns whether the program can continue."""
        self.interpreter.step()
        if self.on_step is not None:
            self.on_step(self.interpreter)
        return not self.interpreter.is_terminated()

    def pause(self) -> None:
        self.running = False

    def run(self, max_steps: Optional[int] = None, delay: float = 0.0) -> int:
        """Step until terminated, paused or ``max_steps`` instructions ran."""
        state = self.interpreter.state
        start = state.step_count
        self.running = True

        while self.running and not self.interpreter.is_terminated():
            if max_steps is not None and state.step_count - start >= max_steps:
                logger.debug("step budget of %d exhausted at ip=%d", max_steps, state.ip)
                break
            if not self.step():
                break
            if delay > 0:
                time.sleep(delay)

        self.running = False
        steps = state.step_count - start
        if self.interpreter.is_terminated():
            logger.debug("program terminated after %d steps", state.step_count)
        return steps

    def run_jit_step(self, max_steps: int = 10000) -> Tuple[int, int]:
        """
        Run up to ``max_steps`` instructions with the compiled loop.

        Returns (stop_reason, steps). Stops early after each '.', so callers
        that render output can do so between batches.
        """
        interp = self.interpreter
        state = interp.state
        tape = interp.tape

        if interp.is_terminated():
            return STOP_END, 0

        total = 0
        while total < max_steps:
            pc, current, leftmost, rightmost, size, stop_reason, steps = jit_run_batch(
                interp.program_arr, interp.jump_arr,
                tape.values, tape.left, tape.right,
                state.ip, tape.current, tape.leftmost, tape.rightmost, tape.size,
                max_steps - total,
            )
            state.ip = int(pc)
            tape.current = int(current)
            tape.leftmost = int(leftmost)
            tape.rightmost = int(rightmost)
            tape.size = int(size)
            state.step_count += int(steps)
            total += int(steps)

            if stop_reason == STOP_GROW:
                tape.reserve(1)
                logger.debug("tape arena grown to %d cells", tape.capacity)
                continue

            if stop_reason == STOP_OUTPUT:
                interp.step()
                total += 1
                if interp.is_terminated():
                    return STOP_END, total
                return STOP_OUTPUT, total

            if stop_reason == STOP_END:
                state.terminated = True
            return int(stop_reason), total

        return STOP_BUDGET, total

    def run_jit(self, max_steps: Optional[int] = None, batch_size: int = 10000) -> int:
        """Compiled counterpart of run(): batches until terminated, paused or out of budget."""
        state = self.interpreter.state
        start = state.step_count
        self.running = True

        while self.running and not self.interpreter.is_terminated():
            budget = batch_size
            if max_steps is not None:
                remaining = max_steps - (state.step_count - start)
                if remaining <= 0:
                    logger.debug("step budget of %d exhausted at ip=%d", max_steps, state.ip)
                    break
                budget = min(budget, remaining)

            stop_reason, _ = self.run_jit_step(budget)
            if self.on_step is not None:
                self.on_step(self.interpreter)
            if stop_reason == STOP_END:
                break

        self.running = False
        return state.step_count - start
