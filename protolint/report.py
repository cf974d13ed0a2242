"""Lint failures."""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass

from .proto import Position

_ERROR_LEVEL = "error"

_VERB = re.compile(r"%([-+# 0]*)(\d*)(?:\.(\d+))?([a-zA-Z%])")


def _go_str(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    return str(value)


def _render(verb: str, precision: str | None, value) -> str:
    if verb == "q":
        text = value if isinstance(value, str) else _go_str(value)
        return json.dumps(text, ensure_ascii=False)
    if verb == "d":
        return str(int(value))
    if verb == "f":
        digits = int(precision) if precision else 6
        return f"{float(value):.{digits}f}"
    if verb == "t":
        return _go_str(bool(value))
    if verb in ("x", "X"):
        if isinstance(value, int):
            text = format(value, "x")
        else:
            raw = value.encode() if isinstance(value, str) else bytes(value)
            text = raw.hex()
        return text.upper() if verb == "X" else text
    return _go_str(value)


def _sprintf(fmt: str, args: tuple) -> str:
    """Format ``args`` with printf-style verbs such as %s, %q, %d and %v."""
    remaining = iter(args)

    def substitute(m: re.Match) -> str:
        flags, width, precision, verb = m.groups()
        if verb == "%":
            return "%"
        try:
            value = next(remaining)
        except StopIteration:
            return f"%!{verb}(MISSING)"
        text = _render(verb, precision, value)
        if width and len(text) < int(width):
            if "-" in flags:
                text = text.ljust(int(width))
            elif "0" in flags and verb in "dfxX":
                text = text.rjust(int(width), "0")
            else:
                text = text.rjust(int(width))
        return text

    out = _VERB.sub(substitute, fmt)
    extra = list(remaining)
    if extra:
        listed = ", ".join(f"{type(a).__name__}={_go_str(a)}" for a in extra)
        out += f"%!(EXTRA {listed})"
    return out


@dataclass(frozen=True)
class Failure:
    """A single lint error at a position."""

    pos: Position
    message: str
    rule_id: str
    severity: str = _ERROR_LEVEL

    def __str__(self) -> str:
        return f"[{self.pos}] {self.message}"

    def filename_without_ext(self) -> str:
        """The failure's file name with its extension removed."""
        name = self.pos.filename
        sep = max(name.rfind("/"), name.rfind(os.sep))
        dot = name.rfind(".")
        if dot > sep:
            return name[:dot]
        return name


def failuref(pos: Position, rule_id: str, format: str, *args) -> Failure:
    """Create an error-level failure with a printf-style message."""
    return failure_with_severityf(pos, rule_id, _ERROR_LEVEL, format, *args)


def failure_with_severityf(
    pos: Position, rule_id: str, severity: str, format: str, *args
) -> Failure:
    """Create a failure of the given severity with a printf-style message."""
    return Failure(
        pos=pos,
        message=_sprintf(format, args),
        rule_id=rule_id,
        severity=severity,
    )