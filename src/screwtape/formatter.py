from __future__ import annotations

from typing import Dict

PRINTABLE_MIN = 32
PRINTABLE_MAX = 126

CONTROL_TOKENS: Dict[int, str] = {
    0: '<NUL>',
    7: '<BEL>',
    8: '<BS>',
    9: '<TAB>',
    10: '<LF>',
    13: '<CR>',
}


def format_value(value: int) -> str:
    """Display token for a printed cell value.

    Printable ASCII comes out as the character itself; common control codes
    get a name and every other value is shown as ``<value N>``.
    """
    if PRINTABLE_MIN <= value <= PRINTABLE_MAX:
        return chr(value)
    token = CONTROL_TOKENS.get(value)
    if token is not None:
        return token
    return f"<value {value}>"
