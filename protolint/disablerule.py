"""Interpretation of protolint:disable / enable comments."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from .proto import Comment

PREFIX_DISABLE = "protolint:disable"
PREFIX_ENABLE = "protolint:enable"
PREFIX_DISABLE_NEXT = "protolint:disable:next"
PREFIX_DISABLE_THIS = "protolint:disable:this"

RE_DISABLE = re.compile(PREFIX_DISABLE + " (.*)")
RE_ENABLE = re.compile(PREFIX_ENABLE + " (.*)")
RE_DISABLE_NEXT = re.compile(PREFIX_DISABLE_NEXT + " (.*)")
RE_DISABLE_THIS = re.compile(PREFIX_DISABLE_THIS + " (.*)")


class _Kind(enum.Enum):
    DISABLE = enum.auto()
    ENABLE = enum.auto()
    DISABLE_NEXT = enum.auto()
    DISABLE_THIS = enum.auto()


_PATTERNS = (
    (RE_DISABLE, _Kind.DISABLE),
    (RE_ENABLE, _Kind.ENABLE),
    (RE_DISABLE_NEXT, _Kind.DISABLE_NEXT),
    (RE_DISABLE_THIS, _Kind.DISABLE_THIS),
)


@dataclass(frozen=True)
class _Command:
    rule_ids: tuple[str, ...]
    kind: _Kind

    def applies(self, kind: _Kind, rule_id: str) -> bool:
        return self.kind is kind and rule_id in self.rule_ids


def _parse_command(text: str) -> _Command | None:
    for pattern, kind in _PATTERNS:
        m = pattern.search(text)
        if m:
            return _Command(tuple(m.group(1).split()), kind)
    return None


def _parse_comments(comments: Iterable[Comment | None] | None) -> list[_Command]:
    return [
        cmd
        for comment in comments or ()
        if comment is not None and (cmd := _parse_command(comment.raw)) is not None
    ]


def _any(cmds: Iterable[_Command], kind: _Kind, rule_id: str) -> bool:
    return any(cmd.applies(kind, rule_id) for cmd in cmds)


class Interpreter:
    """Tracks whether one rule is disabled by comments in a file."""

    def __init__(self, rule_id: str) -> None:
        self.rule_id = rule_id
        self._is_disabled = False

    def interpret(self, comments: Iterable[Comment | None] | None, *args: Comment | None) -> bool:
        """Whether the rule is off for the element carrying these comments.

        ``comments`` are the leading comments; ``args`` are inline comments.
        """
        cmds = _parse_comments(comments)
        inline_cmds = _parse_comments(args)
        return (
            self._interpret(cmds + inline_cmds)
            or _any(cmds, _Kind.DISABLE_NEXT, self.rule_id)
            or _any(inline_cmds, _Kind.DISABLE_THIS, self.rule_id)
            or self._is_disabled
        )

    def valid_lines(self, lines: Iterable[str]) -> Iterator[tuple[int, str]]:
        """Yield ``(index, line)`` for each line on which the rule is active."""
        should_skip = False
        rule_id = self.rule_id
        for index, line in enumerate(lines):
            cmd = _parse_command(line)
            if cmd is None:
                if not self._is_disabled and not should_skip:
                    yield index, line
                should_skip = False
                continue
            if cmd.applies(_Kind.ENABLE, rule_id):
                self._is_disabled = False
                yield index, line
                continue
            if cmd.applies(_Kind.DISABLE, rule_id):
                self._is_disabled = True
                continue
            if cmd.applies(_Kind.DISABLE_THIS, rule_id):
                continue
            if cmd.applies(_Kind.DISABLE_NEXT, rule_id):
                should_skip = True
                yield index, line
                continue
            if should_skip:
                should_skip = False
                continue
            yield index, line

    def _interpret(self, cmds: list[_Command]) -> bool:
        if _any(cmds, _Kind.ENABLE, self.rule_id):
            self._is_disabled = False
            return False
        if _any(cmds, _Kind.DISABLE, self.rule_id):
            self._is_disabled = True
            return True
        return False