"""Process exit codes and small file helpers."""

from __future__ import annotations

import enum
import os

LF = "\n"
CR = "\r"
CRLF = "\r\n"

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class ExitCode(enum.IntEnum):
    """Exit status of a lint run."""

    SUCCESS = 0
    LINT_FAILURE = 1  # Lint errors, exclusively.
    INTERNAL_FAILURE = 2  # Parsing, internal and runtime errors.


class LineEndingError(ValueError):
    """Raised when no line ending dominates the content."""


def read_all_lines(file_name: str | os.PathLike, newline_char: str) -> list[str]:
    """Read a file and split its content on ``newline_char``."""
    with open(file_name, encoding=_ENCODING, errors=_ERRORS, newline="") as f:
        text = f.read()
    if newline_char == "":
        return list(text)
    return text.split(newline_char)


def write_lines_to_existing_file(
    file_name: str | os.PathLike, lines: list[str], newline_char: str
) -> None:
    """Join ``lines`` with ``newline_char`` and overwrite an existing file."""
    write_existing_file(file_name, newline_char.join(lines))


def write_existing_file(file_name: str | os.PathLike, data: bytes | str) -> None:
    """Overwrite an existing file; a missing file raises FileNotFoundError."""
    if isinstance(data, str):
        data = data.encode(_ENCODING, _ERRORS)
    fd = os.open(file_name, os.O_WRONLY | os.O_TRUNC)
    with os.fdopen(fd, "wb") as f:
        f.write(data)


def detect_line_ending(content: str) -> str:
    """Return the dominant line ending of ``content``, or "" if it has none."""
    counts: dict[str, int] = {}
    prev = " "
    for c in content:
        if c == "\r" and prev != "\n":
            counts[CR] = counts.get(CR, 0) + 1
        elif c == "\n":
            if prev == "\r":
                counts[CRLF] = counts.get(CRLF, 0) + 1
                counts[CR] = counts.get(CR, 0) - 1
            else:
                counts[LF] = counts.get(LF, 0) + 1
        prev = c

    lf, cr, crlf = counts.get(LF, 0), counts.get(CR, 0), counts.get(CRLF, 0)
    if lf + cr + crlf == 0:
        return ""
    if crlf > cr and crlf > lf:
        return CRLF
    if cr > lf and cr > crlf:
        return CR
    if lf > cr and lf > crlf:
        return LF
    ordered = {key: counts[key] for key in sorted(counts)}
    raise LineEndingError(f"not found dominant line ending, counts={ordered!r}")