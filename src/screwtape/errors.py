from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def _hint_for(message: str) -> Optional[str]:
    msg = message.lower()
    if 'not text' in msg:
        return 'Pass the program as a str; decode bytes before loading.'
    if 'no such file' in msg or 'not found' in msg:
        return 'Check the path, or pass "-" to read the program from stdin.'
    if 'decode' in msg:
        return 'Program files are read as UTF-8 unless another encoding is given.'
    return None


@dataclass
class ScrewtapeError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ProgramLoadError(ScrewtapeError):
    source: str


def make_load_error(*, message: str, source: str) -> ProgramLoadError:
    hint = _hint_for(message)
    hint_block = f"\nHint: {hint}" if hint else ""
    return ProgramLoadError(
        message=f"LoadError: {message} ({source}){hint_block}",
        source=source,
    )
