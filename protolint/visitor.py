"""Visitors that collect failures, and the runner that honours disable comments."""

from __future__ import annotations

import os
from typing import Callable, Sequence

from .autodisable import PlacementStrategy, PlacementType, new_placement_strategy
from .disablerule import Interpreter
from .fixer import new_fixing
from .proto import (
    RPC,
    BaseVisitor,
    Comment,
    EmptyStatement,
    Enum,
    EnumField,
    Extend,
    Extensions,
    Field,
    GroupField,
    Import,
    MapField,
    Message,
    Oneof,
    OneofField,
    Option,
    Package,
    Position,
    Proto,
    ProtoMeta,
    Reserved,
    Service,
    Syntax,
    Visitee,
)
from .report import Failure, failure_with_severityf


class BaseAddVisitor(BaseVisitor):
    """A no-op visitor that accumulates failures for one rule."""

    def __init__(self, rule_id: str, severity: str = "error") -> None:
        self.rule_id = rule_id
        self.severity = severity
        self._failures: list[Failure] = []

    @property
    def failures(self) -> list[Failure]:
        """The failures added so far, in order."""
        return list(self._failures)

    def add_failuref(self, pos: Position, format: str, *args) -> None:
        """Add a failure at ``pos`` with a printf-style message."""
        self._failures.append(
            failure_with_severityf(pos, self.rule_id, self.severity, format, *args)
        )

    def add_failuref_with_proto_meta(self, meta: ProtoMeta, format: str, *args) -> None:
        """Add a failure at the start of the file described by ``meta``."""
        self.add_failuref(
            Position(filename=meta.filename, offset=0, line=1, column=1),
            format,
            *args,
        )


class BaseFixableVisitor(BaseAddVisitor):
    """A visitor that accumulates failures and can fix the file it visits."""

    def __init__(
        self,
        rule_id: str,
        fix_mode: bool,
        proto: Proto,
        severity: str = "error",
    ) -> None:
        super().__init__(rule_id, severity)
        self.fixer = new_fixing(fix_mode, proto)

    def finalize(self) -> None:
        """Write the fixed content back to the file, if in fix mode."""
        self.fixer.finalize()
        super().finalize()


def _inlines(node: Visitee) -> tuple[Comment | None, ...]:
    behind = getattr(node, "inline_comment_behind_left_curly", None)
    return (node.inline_comment, behind)


class _AutoDisableVisitor:
    """Inserts disable comments for elements on which the inner visitor failed."""

    def __init__(self, inner, automator: PlacementStrategy) -> None:
        self._inner = inner
        self._automator = automator

    def on_start(self, proto: Proto) -> None:
        self._inner.on_start(proto)

    def finalize(self) -> None:
        self._automator.finalize()
        self._inner.finalize()

    @property
    def failures(self) -> list[Failure]:
        return self._inner.failures

    def _disable_on_failure(
        self,
        visit: Callable[[Visitee], bool],
        node: Visitee,
        inline: Comment | None,
        comments: Sequence[Comment] | None = None,
    ) -> bool:
        before = len(self._inner.failures)
        result = visit(node)
        failures = self._inner.failures
        if len(failures) != before:
            self._automator.disable(failures[-1].pos.offset, node.comments, inline)
        return result

    def visit_comment(self, comment: Comment) -> None:
        self._inner.visit_comment(comment)

    def visit_empty_statement(self, node: EmptyStatement) -> bool:
        return self._inner.visit_empty_statement(node)

    def visit_enum(self, node: Enum) -> bool:
        return self._disable_on_failure(
            self._inner.visit_enum, node, node.inline_comment_behind_left_curly
        )

    def visit_enum_field(self, node: EnumField) -> bool:
        return self._disable_on_failure(
            self._inner.visit_enum_field, node, node.inline_comment
        )

    def visit_extend(self, node: Extend) -> bool:
        return self._inner.visit_extend(node)

    def visit_extensions(self, node: Extensions) -> bool:
        return self._inner.visit_extensions(node)

    def visit_field(self, node: Field) -> bool:
        return self._disable_on_failure(self._inner.visit_field, node, node.inline_comment)

    def visit_group_field(self, node: GroupField) -> bool:
        return self._disable_on_failure(
            self._inner.visit_group_field, node, node.inline_comment
        )

    def visit_import(self, node: Import) -> bool:
        return self._inner.visit_import(node)

    def visit_map_field(self, node: MapField) -> bool:
        return self._disable_on_failure(
            self._inner.visit_map_field, node, node.inline_comment
        )

    def visit_message(self, node: Message) -> bool:
        return self._disable_on_failure(
            self._inner.visit_message, node, node.inline_comment_behind_left_curly
        )

    def visit_oneof(self, node: Oneof) -> bool:
        return self._inner.visit_oneof(node)

    def visit_oneof_field(self, node: OneofField) -> bool:
        return self._disable_on_failure(
            self._inner.visit_oneof_field, node, node.inline_comment
        )

    def visit_option(self, node: Option) -> bool:
        return self._inner.visit_option(node)

    def visit_package(self, node: Package) -> bool:
        return self._inner.visit_package(node)

    def visit_reserved(self, node: Reserved) -> bool:
        return self._inner.visit_reserved(node)

    def visit_rpc(self, node: RPC) -> bool:
        return self._disable_on_failure(self._inner.visit_rpc, node, node.inline_comment)

    def visit_service(self, node: Service) -> bool:
        return self._disable_on_failure(
            self._inner.visit_service, node, node.inline_comment_behind_left_curly
        )

    def visit_syntax(self, node: Syntax) -> bool:
        return self._inner.visit_syntax(node)


class _DisableRuleVisitor:
    """Skips elements on which disable comments turn the rule off."""

    def __init__(self, inner, rule_id: str) -> None:
        self._inner = inner
        self._interpreter = Interpreter(rule_id)

    def on_start(self, proto: Proto) -> None:
        self._inner.on_start(proto)

    def finalize(self) -> None:
        self._inner.finalize()

    @property
    def failures(self) -> list[Failure]:
        return self._inner.failures

    def _visit(self, visit: Callable[[Visitee], bool], node: Visitee) -> bool:
        if self._interpreter.interpret(node.comments, *_inlines(node)):
            return True
        return visit(node)

    def visit_comment(self, comment: Comment) -> None:
        if self._interpreter.interpret([comment]):
            return
        self._inner.visit_comment(comment)

    def visit_empty_statement(self, node: EmptyStatement) -> bool:
        return self._inner.visit_empty_statement(node)

    def visit_enum(self, node: Enum) -> bool:
        return self._visit(self._inner.visit_enum, node)

    def visit_enum_field(self, node: EnumField) -> bool:
        return self._visit(self._inner.visit_enum_field, node)

    def visit_extend(self, node: Extend) -> bool:
        return self._visit(self._inner.visit_extend, node)

    def visit_extensions(self, node: Extensions) -> bool:
        return self._visit(self._inner.visit_extensions, node)

    def visit_field(self, node: Field) -> bool:
        return self._visit(self._inner.visit_field, node)

    def visit_group_field(self, node: GroupField) -> bool:
        return self._visit(self._inner.visit_group_field, node)

    def visit_import(self, node: Import) -> bool:
        return self._visit(self._inner.visit_import, node)

    def visit_map_field(self, node: MapField) -> bool:
        return self._visit(self._inner.visit_map_field, node)

    def visit_message(self, node: Message) -> bool:
        return self._visit(self._inner.visit_message, node)

    def visit_oneof(self, node: Oneof) -> bool:
        return self._visit(self._inner.visit_oneof, node)

    def visit_oneof_field(self, node: OneofField) -> bool:
        return self._visit(self._inner.visit_oneof_field, node)

    def visit_option(self, node: Option) -> bool:
        return self._visit(self._inner.visit_option, node)

    def visit_package(self, node: Package) -> bool:
        return self._visit(self._inner.visit_package, node)

    def visit_reserved(self, node: Reserved) -> bool:
        return self._visit(self._inner.visit_reserved, node)

    def visit_rpc(self, node: RPC) -> bool:
        return self._visit(self._inner.visit_rpc, node)

    def visit_service(self, node: Service) -> bool:
        return self._visit(self._inner.visit_service, node)

    def visit_syntax(self, node: Syntax) -> bool:
        return self._visit(self._inner.visit_syntax, node)


def run_visitor(visitor, proto: Proto, rule_id: str) -> list[Failure]:
    """Walk ``proto`` with ``visitor``, honouring disable comments for ``rule_id``."""
    return run_visitor_auto_disable(visitor, proto, rule_id, PlacementType.NOOP)


def run_visitor_auto_disable(
    visitor,
    proto: Proto,
    rule_id: str,
    autodisable_type: PlacementType | int,
) -> list[Failure]:
    """Walk ``proto`` and insert disable comments where ``visitor`` fails.

    The visitor needs ``on_start``, ``finalize``, ``failures`` and the
    ``visit_*`` methods. The file is rewritten unless the type is NOOP.
    """
    filename: str | os.PathLike = proto.meta.filename if proto.meta is not None else ""
    automator = new_placement_strategy(autodisable_type, filename, rule_id)
    disabled = _DisableRuleVisitor(_AutoDisableVisitor(visitor, automator), rule_id)

    disabled.on_start(proto)
    proto.accept(disabled)
    disabled.finalize()
    return disabled.failures