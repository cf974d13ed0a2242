"""Syntax tree of a protocol buffer file and a no-op visitor base."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Union


@dataclass(frozen=True)
class Position:
    """A location in a source file."""

    filename: str = ""
    offset: int = 0
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass
class Comment:
    """A single-line or C-style comment, kept with its raw text."""

    raw: str = ""
    pos: Position = field(default_factory=Position)

    def accept(self, visitor) -> None:
        """Dispatch this comment to ``visitor``."""
        visitor.visit_comment(self)


@dataclass(kw_only=True)
class Visitee(abc.ABC):
    """A statement that can be walked by a visitor."""

    pos: Position = field(default_factory=Position)
    comments: list[Comment] = field(default_factory=list)
    inline_comment: Comment | None = None

    def accept(self, visitor) -> None:
        """Visit this node, then its children, then its comments.

        Children and comments are skipped when the visit returns False.
        """
        if not self._dispatch(visitor):
            return
        for child in self._children():
            child.accept(visitor)
        for comment in self._trailing_comments():
            comment.accept(visitor)

    @abc.abstractmethod
    def _dispatch(self, visitor) -> bool:
        """Call the visitor method that matches this node."""

    def _children(self) -> Iterable[Node]:
        return ()

    def _trailing_comments(self) -> Iterator[Comment]:
        yield from self.comments or ()
        if self.inline_comment is not None:
            yield self.inline_comment


Node = Union[Visitee, Comment]


@dataclass(kw_only=True)
class _Block(Visitee):
    inline_comment_behind_left_curly: Comment | None = None

    def _trailing_comments(self) -> Iterator[Comment]:
        yield from super()._trailing_comments()
        if self.inline_comment_behind_left_curly is not None:
            yield self.inline_comment_behind_left_curly


@dataclass(kw_only=True)
class Syntax(Visitee):
    """The ``syntax = "...";`` statement."""

    protobuf_version: str = ""

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_syntax(self)


@dataclass(kw_only=True)
class Package(Visitee):
    """The ``package`` statement."""

    name: str = ""

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_package(self)


@dataclass(kw_only=True)
class Import(Visitee):
    """An ``import`` statement."""

    location: str = ""
    modifier: str = ""

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_import(self)


@dataclass(kw_only=True)
class Option(Visitee):
    """An ``option`` statement."""

    option_name: str = ""
    constant: str = ""

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_option(self)


@dataclass(kw_only=True)
class Message(_Block):
    """A ``message`` definition."""

    message_name: str = ""
    message_body: list[Node] = field(default_factory=list)

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_message(self)

    def _children(self) -> Iterable[Node]:
        return self.message_body


@dataclass(kw_only=True)
class Enum(_Block):
    """An ``enum`` definition."""

    enum_name: str = ""
    enum_body: list[Node] = field(default_factory=list)

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_enum(self)

    def _children(self) -> Iterable[Node]:
        return self.enum_body


@dataclass(kw_only=True)
class EnumField(Visitee):
    """A value inside an enum."""

    ident: str = ""
    number: str = ""
    enum_value_options: list[str] = field(default_factory=list)

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_enum_field(self)


@dataclass(kw_only=True)
class Field(Visitee):
    """A normal message field."""

    is_repeated: bool = False
    is_required: bool = False
    is_optional: bool = False
    type: str = ""
    field_name: str = ""
    field_number: str = ""
    field_options: list[str] = field(default_factory=list)

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_field(self)


@dataclass(kw_only=True)
class MapField(Visitee):
    """A ``map<K, V>`` field."""

    key_type: str = ""
    type: str = ""
    map_name: str = ""
    field_number: str = ""
    field_options: list[str] = field(default_factory=list)

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_map_field(self)


@dataclass(kw_only=True)
class GroupField(_Block):
    """A proto2 ``group`` field."""

    is_repeated: bool = False
    is_required: bool = False
    is_optional: bool = False
    group_name: str = ""
    field_number: str = ""
    message_body: list[Node] = field(default_factory=list)

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_group_field(self)

    def _children(self) -> Iterable[Node]:
        return self.message_body


@dataclass(kw_only=True)
class OneofField(Visitee):
    """A field inside a ``oneof``."""

    type: str = ""
    field_name: str = ""
    field_number: str = ""
    field_options: list[str] = field(default_factory=list)

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_oneof_field(self)


@dataclass(kw_only=True)
class Oneof(_Block):
    """A ``oneof`` definition."""

    oneof_name: str = ""
    oneof_fields: list[OneofField] = field(default_factory=list)
    options: list[Option] = field(default_factory=list)

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_oneof(self)

    def _children(self) -> Iterable[Node]:
        return [*self.oneof_fields, *self.options]


@dataclass(kw_only=True)
class Extend(_Block):
    """An ``extend`` block."""

    message_type: str = ""
    extend_body: list[Node] = field(default_factory=list)

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_extend(self)

    def _children(self) -> Iterable[Node]:
        return self.extend_body


@dataclass(kw_only=True)
class Extensions(Visitee):
    """An ``extensions`` statement."""

    ranges: list[str] = field(default_factory=list)

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_extensions(self)


@dataclass(kw_only=True)
class Reserved(Visitee):
    """A ``reserved`` statement."""

    ranges: list[str] = field(default_factory=list)
    field_names: list[str] = field(default_factory=list)

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_reserved(self)


@dataclass(kw_only=True)
class RPC(Visitee):
    """An ``rpc`` inside a service."""

    rpc_name: str = ""
    rpc_request: str = ""
    rpc_response: str = ""
    options: list[Option] = field(default_factory=list)

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_rpc(self)

    def _children(self) -> Iterable[Node]:
        return self.options


@dataclass(kw_only=True)
class Service(_Block):
    """A ``service`` definition."""

    service_name: str = ""
    service_body: list[Node] = field(default_factory=list)

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_service(self)

    def _children(self) -> Iterable[Node]:
        return self.service_body


@dataclass(kw_only=True)
class EmptyStatement(Visitee):
    """A lone ``;``."""

    def _dispatch(self, visitor) -> bool:
        return visitor.visit_empty_statement(self)


@dataclass
class ProtoMeta:
    """Information about the file a tree came from."""

    filename: str = ""


@dataclass
class Proto:
    """The root of a parsed protocol buffer file."""

    syntax: Syntax | None = None
    proto_body: list[Node] = field(default_factory=list)
    meta: ProtoMeta | None = None

    def accept(self, visitor) -> None:
        """Walk the syntax statement and then every top-level statement."""
        if self.syntax is not None:
            self.syntax.accept(visitor)
        for body in self.proto_body:
            body.accept(visitor)


class BaseVisitor:
    """A visitor that reports no failures and always descends into children.

    It keeps the proto being walked and the last comment it saw.
    """

    _descend = True
    current_proto: Proto | None = None
    last_comment: Comment | None = None

    def on_start(self, proto: Proto) -> None:
        """Remember the proto whose walk is starting."""
        self.current_proto = proto

    def finalize(self) -> None:
        """Release the proto once the walk is done."""
        self.current_proto = None

    def visit_comment(self, comment: Comment) -> None:
        """Remember the comment just visited."""
        self.last_comment = comment

    def visit_empty_statement(self, node: EmptyStatement) -> bool:
        return self._descend

    def visit_enum(self, node: Enum) -> bool:
        return self._descend

    def visit_enum_field(self, node: EnumField) -> bool:
        return self._descend

    def visit_extensions(self, node: Extensions) -> bool:
        return self._descend

    def visit_extend(self, node: Extend) -> bool:
        return self._descend

    def visit_field(self, node: Field) -> bool:
        return self._descend

    def visit_group_field(self, node: GroupField) -> bool:
        return self._descend

    def visit_import(self, node: Import) -> bool:
        return self._descend

    def visit_map_field(self, node: MapField) -> bool:
        return self._descend

    def visit_message(self, node: Message) -> bool:
        return self._descend

    def visit_oneof(self, node: Oneof) -> bool:
        return self._descend

    def visit_oneof_field(self, node: OneofField) -> bool:
        return self._descend

    def visit_option(self, node: Option) -> bool:
        return self._descend

    def visit_package(self, node: Package) -> bool:
        return self._descend

    def visit_reserved(self, node: Reserved) -> bool:
        return self._descend

    def visit_rpc(self, node: RPC) -> bool:
        return self._descend

    def visit_service(self, node: Service) -> bool:
        return self._descend

    def visit_syntax(self, node: Syntax) -> bool:
        return self._descend