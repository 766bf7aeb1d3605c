from .api import RunOptions, RunResult, run_file, run_string
from .brackets import build_jump_table
from .errors import ProgramLoadError, ScrewtapeError
from .formatter import format_value
from .interpreter import DEFAULT_OPCODES, ScrewtapeInterpreter
from .runner import Runner
from .tape import Cell, Tape

__all__ = [
    'ScrewtapeInterpreter',
    'Runner',
    'Tape',
    'Cell',
    'build_jump_table',
    'format_value',
    'DEFAULT_OPCODES',
    'ScrewtapeError',
    'ProgramLoadError',
    'RunOptions',
    'RunResult',
    'run_string',
    'run_file',
]
