"""Insertion of protolint:disable comments next to failing elements."""

from __future__ import annotations

import abc
import enum
import logging
import os
from typing import Sequence

from .disablerule import PREFIX_DISABLE_NEXT, PREFIX_DISABLE_THIS, RE_DISABLE_THIS
from .fixer import BaseFixing, TextEdit
from .proto import Comment

_log = logging.getLogger(__name__)

_ENCODING = "utf-8"


class PlacementType(enum.IntEnum):
    """Where a disable comment is placed."""

    NOOP = 0  # Does nothing.
    THIS_THEN_NEXT = 1  # Inline comments, falling back to a line above.
    NEXT = 2  # A comment on the line above.


class _Commentator:
    def __init__(self, filename: str | os.PathLike, rule_id: str) -> None:
        self._fixing = BaseFixing(filename)
        self._rule_id = rule_id

    def insert_newline(self, offset: int) -> None:
        comment = f"{PREFIX_DISABLE_NEXT} {self._rule_id}"
        content = self._fixing.content
        space = ""
        pos = offset
        for i in range(offset, 0, -1):
            ch = content[i:i + 1]
            if ch in (b" ", b"\t"):
                space += " "
            elif ch in (b"\n", b"\r"):
                break
            else:
                pos = i
                space = ""
        self._insert(f"// {comment}{self._fixing.line_ending}{space}", pos)

    def try_merge_inline(self, inline: Comment) -> bool:
        raw = inline.raw
        m = RE_DISABLE_THIS.search(raw)
        _log.debug("disable:this match %r in %r", m, raw)
        if m is None:
            return False
        extracted = m.group(0)
        start = len(raw[:m.start()].encode(_ENCODING))
        end = start + len(extracted.encode(_ENCODING))
        offset = inline.pos.offset
        self._fixing.replace(
            TextEdit(
                pos=offset + start,
                end=offset + end - 1,
                new_text=f"{extracted} {self._rule_id}",
            )
        )
        return True

    def insert_inline(self, offset: int) -> None:
        comment = f"{PREFIX_DISABLE_THIS} {self._rule_id}"
        content = self._fixing.content
        pos = offset
        for i in range(offset, len(content)):
            ch = content[i:i + 1]
            if ch in (b" ", b"\t"):
                continue
            if ch in (b"\n", b"\r"):
                break
            pos = i
        self._insert(f" // {comment}", pos + 1)

    def finalize(self) -> None:
        self._fixing.finalize()

    def _insert(self, text: str, pos: int) -> None:
        self._fixing.replace(TextEdit(pos=pos, end=pos - 1, new_text=text))


class PlacementStrategy(abc.ABC):
    """Puts disable comments for failures and writes them out."""

    @abc.abstractmethod
    def disable(
        self,
        offset: int,
        comments: Sequence[Comment] | None,
        inline: Comment | None,
    ) -> None:
        """Disable the rule for the element at ``offset``."""

    @abc.abstractmethod
    def finalize(self) -> None:
        """Write the accumulated comments."""


class NoopPlacementStrategy(PlacementStrategy):
    """Places nothing."""

    def disable(self, offset, comments, inline) -> None:
        """Do nothing."""

    def finalize(self) -> None:
        """Do nothing."""


class NextPlacementStrategy(PlacementStrategy):
    """Places a disable:next comment on the line above."""

    def __init__(self, commentator: _Commentator) -> None:
        self._commentator = commentator

    def disable(self, offset, comments, inline) -> None:
        """Insert a disable:next comment above the element."""
        self._commentator.insert_newline(offset)

    def finalize(self) -> None:
        """Write the comments to the file."""
        self._commentator.finalize()


class ThisThenNextPlacementStrategy(PlacementStrategy):
    """Places a disable:this comment inline, or disable:next if the line has a comment."""

    def __init__(self, commentator: _Commentator) -> None:
        self._commentator = commentator

    def disable(self, offset, comments, inline) -> None:
        """Add or merge an inline comment, falling back to the line above."""
        if inline is None:
            self._commentator.insert_inline(offset)
            return
        if self._commentator.try_merge_inline(inline):
            return
        self._commentator.insert_newline(offset)

    def finalize(self) -> None:
        """Write the comments to the file."""
        self._commentator.finalize()


def new_placement_strategy(
    ptype: PlacementType | int, filename: str | os.PathLike, rule_id: str
) -> PlacementStrategy:
    """Create the strategy for ``ptype``; the file is read unless it is NOOP."""
    try:
        ptype = PlacementType(ptype)
    except ValueError:
        raise ValueError(f"unknown placement type {ptype!r}") from None
    if ptype is PlacementType.NOOP:
        return NoopPlacementStrategy()
    commentator = _Commentator(filename, rule_id)
    if ptype is PlacementType.THIS_THEN_NEXT:
        return ThisThenNextPlacementStrategy(commentator)
    return NextPlacementStrategy(commentator)