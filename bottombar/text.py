"""Platform line-terminator handling for text read back from the workbench.

Every comparison against Output or Terminal text goes through here so the
win32 special case lives in one place.
"""

import re
import sys

WINDOWS_TERMINATOR = "\r\n"
POSIX_TERMINATOR = "\n"

_ANY_TERMINATOR = re.compile(r"\r\n|\r|\n")


def line_terminator(platform: str | None = None) -> str:
    """Return the line terminator the workbench uses on ``platform``."""
    platform = platform or sys.platform
    return WINDOWS_TERMINATOR if platform == "win32" else POSIX_TERMINATOR


def normalize_line_endings(text: str, terminator: str | None = None) -> str:
    """Rewrite every line break in ``text`` to ``terminator``."""
    terminator = terminator or line_terminator()
    return _ANY_TERMINATOR.sub(terminator, text)


def split_lines(text: str, terminator: str | None = None) -> list[str]:
    terminator = terminator or line_terminator()
    return normalize_line_endings(text, terminator).split(terminator)


def contains_line(text: str, expected: str, terminator: str | None = None) -> bool:
    """True if some line of ``text`` is exactly ``expected``."""
    return any(line == expected for line in split_lines(text, terminator))
