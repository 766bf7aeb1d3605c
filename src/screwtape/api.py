from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from .errors import make_load_error
from .interpreter import ScrewtapeInterpreter
from .runner import Runner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOptions:
    max_steps: Optional[int] = None
    use_jit: bool = False
    batch_size: int = 10000
    delay: float = 0.0
    opcodes: Optional[Mapping[str, int]] = None


@dataclass(frozen=True)
class RunResult:
    output: Tuple[str, ...]
    text: str
    tape: Tuple[Tuple[int, bool], ...]
    steps: int
    terminated: bool


def run_string(source: str, *, options: Optional[RunOptions] = None) -> RunResult:
    opts = options or RunOptions()
    interp = ScrewtapeInterpreter(source)
    if opts.opcodes is not None:
        interp.reinitialize_tape_from_program_opcodes(opts.opcodes)

    runner = Runner(interp)
    if opts.use_jit:
        steps = runner.run_jit(max_steps=opts.max_steps, batch_size=opts.batch_size)
    else:
        steps = runner.run(max_steps=opts.max_steps, delay=opts.delay)

    if not interp.is_terminated():
        logger.info("stopped after %d steps without terminating (ip=%d)",
                    steps, interp.current_instruction_pointer())

    return RunResult(
        output=tuple(interp.output_so_far()),
        text=interp.output_text(),
        tape=tuple(interp.tape_snapshot()),
        steps=steps,
        terminated=interp.is_terminated(),
    )


def run_file(path: str | Path, *, options: Optional[RunOptions] = None, encoding: str = "utf-8") -> RunResult:
    p = Path(path)
    try:
        source = p.read_text(encoding=encoding)
    except FileNotFoundError:
        raise make_load_error(message="no such file", source=str(p)) from None
    except UnicodeDecodeError as e:
        raise make_load_error(message=f"cannot decode program: {e.reason}", source=str(p)) from None
    except OSError as e:
        raise make_load_error(message=e.strerror or str(e), source=str(p)) from None
    return run_string(source, options=options)
