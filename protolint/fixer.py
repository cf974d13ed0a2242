"""Edits to the content of a protocol buffer file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable

from .osutil import write_existing_file
from .proto import Proto

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


@dataclass(frozen=True)
class TextEdit:
    """Replacement of the bytes from ``pos`` to ``end`` with ``new_text``.

    ``end`` is inclusive: to replace ``abc`` at offset 1, pos is 1 and end is 3.
    An ``end`` of ``pos - 1`` inserts without removing anything.
    """

    pos: int
    end: int
    new_text: bytes

    def __post_init__(self) -> None:
        if isinstance(self.new_text, str):
            object.__setattr__(self, "new_text", self.new_text.encode(_ENCODING, _ERRORS))


class BaseFixing:
    """Holds a file's content, changes it, and writes it back on finalize."""

    def __init__(self, proto_file_name: str | os.PathLike) -> None:
        with open(proto_file_name, "rb") as f:
            self._content = f.read()
        self.file_name = os.fspath(proto_file_name)
        # The parser recognises only LF as a line ending, so the fixer does too.
        self._line_ending = "\n"
        self._text_edits: list[TextEdit] = []

    @property
    def content(self) -> bytes:
        """The current content."""
        return self._content

    @property
    def line_ending(self) -> str:
        """The line ending used to split and join lines."""
        return self._line_ending

    def lines(self) -> list[str]:
        """The current content split into lines."""
        return self._content.decode(_ENCODING, _ERRORS).split(self._line_ending)

    def _set_lines(self, lines: list[str]) -> None:
        self._content = self._line_ending.join(lines).encode(_ENCODING, _ERRORS)

    def replace_text(self, line: int, old: str, new: str) -> None:
        """Replace the first ``old`` with ``new`` on the 1-based ``line``."""
        lines = self.lines()
        if line < 1:
            raise IndexError(f"line {line} is out of range")
        lines[line - 1] = lines[line - 1].replace(old, new, 1)
        self._set_lines(lines)

    def replace_all(self, proc: Callable[[list[str]], list[str]]) -> None:
        """Replace all lines with what ``proc`` returns for them."""
        self._set_lines(proc(self.lines()))

    def replace_content(self, proc: Callable[[bytes], bytes]) -> None:
        """Replace the whole content with what ``proc`` returns for it."""
        self._content = proc(self._content)

    def replace(self, edit: TextEdit) -> None:
        """Record an edit to apply on finalize; edits go in offset order."""
        self._text_edits.append(edit)

    def finalize(self) -> None:
        """Apply the recorded edits and overwrite the file."""
        content = self._content
        diff = 0
        for edit in self._text_edits:
            pos = edit.pos + diff
            end = edit.end + diff
            content = content[:pos] + edit.new_text + content[end + 1:]
            diff += len(edit.new_text) - (end - pos + 1)
        self._content = content
        self._text_edits.clear()
        write_existing_file(self.file_name, content)


@dataclass
class NopFixing:
    """A fixing that never changes a file.

    It only counts the changes it was asked for and discarded.
    """

    discarded: int = 0
    finalized: bool = False

    def replace_text(self, line: int, old: str, new: str) -> None:
        """Discard the change."""
        self.discarded += 1

    def replace_all(self, proc: Callable[[list[str]], list[str]]) -> None:
        """Discard the change."""
        self.discarded += 1

    def replace_content(self, proc: Callable[[bytes], bytes]) -> None:
        """Discard the change."""
        self.discarded += 1

    def lines(self) -> list[str]:
        """Always empty."""
        return []

    def finalize(self) -> None:
        """Mark the fixing as finished without writing anything."""
        self.finalized = True


def new_fixing(fix_mode: bool, proto: Proto) -> BaseFixing | NopFixing:
    """A fixing for the proto's file in fix mode, otherwise one that does nothing."""
    if fix_mode:
        return BaseFixing(proto.meta.filename)
    return NopFixing()