import pytest

from protolint.proto import (
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
    Reserved,
    Service,
    Syntax,
)


class Recorder(BaseVisitor):
    def __init__(self, descend=True):
        self.seen = []
        self.descend = descend

    def visit_comment(self, comment):
        self.seen.append(("comment", comment.raw))

    def visit_syntax(self, node):
        self.seen.append(("syntax", node.protobuf_version))
        return True

    def visit_message(self, node):
        self.seen.append(("message", node.message_name))
        return self.descend

    def visit_field(self, node):
        self.seen.append(("field", node.field_name))
        return True

    def visit_enum(self, node):
        self.seen.append(("enum", node.enum_name))
        return True

    def visit_enum_field(self, node):
        self.seen.append(("enum_field", node.ident))
        return True

    def visit_service(self, node):
        self.seen.append(("service", node.service_name))
        return True

    def visit_rpc(self, node):
        self.seen.append(("rpc", node.rpc_name))
        return True

    def visit_oneof(self, node):
        self.seen.append(("oneof", node.oneof_name))
        return True

    def visit_oneof_field(self, node):
        self.seen.append(("oneof_field", node.field_name))
        return True

    def visit_option(self, node):
        self.seen.append(("option", node.option_name))
        return True


def test_proto_visits_syntax_then_body_in_order():
    proto = Proto(
        syntax=Syntax(protobuf_version="proto3"),
        proto_body=[
            Message(message_name="A"),
            Enum(enum_name="E", enum_body=[EnumField(ident="X")]),
        ],
    )
    recorder = Recorder()
    proto.accept(recorder)
    assert recorder.seen == [
        ("syntax", "proto3"),
        ("message", "A"),
        ("enum", "E"),
        ("enum_field", "X"),
    ]


def test_empty_proto_visits_nothing():
    recorder = Recorder()
    Proto().accept(recorder)
    assert recorder.seen == []


def test_body_is_visited_before_comments():
    message = Message(
        message_name="A",
        message_body=[Field(field_name="f", comments=[Comment(raw="// f")])],
        comments=[Comment(raw="// lead")],
        inline_comment=Comment(raw="// inline"),
        inline_comment_behind_left_curly=Comment(raw="// curly"),
    )
    recorder = Recorder()
    message.accept(recorder)
    assert recorder.seen == [
        ("message", "A"),
        ("field", "f"),
        ("comment", "// f"),
        ("comment", "// lead"),
        ("comment", "// inline"),
        ("comment", "// curly"),
    ]


def test_false_from_visit_skips_children_and_comments():
    message = Message(
        message_name="A",
        message_body=[Field(field_name="f")],
        comments=[Comment(raw="// lead")],
    )
    recorder = Recorder(descend=False)
    Proto(proto_body=[message]).accept(recorder)
    assert recorder.seen == [("message", "A")]


def test_service_rpc_and_oneof_children():
    service = Service(
        service_name="S",
        service_body=[
            RPC(rpc_name="Get", options=[Option(option_name="deprecated")]),
        ],
    )
    oneof = Oneof(
        oneof_name="choice",
        oneof_fields=[OneofField(field_name="a"), OneofField(field_name="b")],
        options=[Option(option_name="opt")],
    )
    recorder = Recorder()
    Proto(proto_body=[service, Message(message_name="M", message_body=[oneof])]).accept(
        recorder
    )
    assert recorder.seen == [
        ("service", "S"),
        ("rpc", "Get"),
        ("option", "deprecated"),
        ("message", "M"),
        ("oneof", "choice"),
        ("oneof_field", "a"),
        ("oneof_field", "b"),
        ("option", "opt"),
    ]


def test_base_visitor_descends_into_nested_messages():
    class FieldCounter(BaseVisitor):
        def __init__(self):
            self.names = []

        def visit_field(self, node):
            self.names.append(node.field_name)
            return True

    inner = Message(message_name="Inner", message_body=[Field(field_name="b")])
    group = GroupField(group_name="G", message_body=[Field(field_name="c")])
    extend = Extend(message_type="Base", extend_body=[Field(field_name="d")])
    outer = Message(message_name="Outer", message_body=[Field(field_name="a"), inner, group])
    counter = FieldCounter()
    Proto(proto_body=[outer, extend]).accept(counter)
    assert counter.names == ["a", "b", "c", "d"]


@pytest.mark.parametrize(
    "call",
    [
        lambda v: v.visit_empty_statement(EmptyStatement()),
        lambda v: v.visit_enum(Enum()),
        lambda v: v.visit_enum_field(EnumField()),
        lambda v: v.visit_extensions(Extensions()),
        lambda v: v.visit_extend(Extend()),
        lambda v: v.visit_field(Field()),
        lambda v: v.visit_group_field(GroupField()),
        lambda v: v.visit_import(Import()),
        lambda v: v.visit_map_field(MapField()),
        lambda v: v.visit_message(Message()),
        lambda v: v.visit_oneof(Oneof()),
        lambda v: v.visit_oneof_field(OneofField()),
        lambda v: v.visit_option(Option()),
        lambda v: v.visit_package(Package()),
        lambda v: v.visit_reserved(Reserved()),
        lambda v: v.visit_rpc(RPC()),
        lambda v: v.visit_service(Service()),
        lambda v: v.visit_syntax(Syntax()),
    ],
)
def test_base_visitor_always_continues(call):
    assert call(BaseVisitor()) is True


def test_position_string():
    pos = Position(filename="example.proto", offset=100, line=5, column=10)
    assert str(pos) == "example.proto:5:10"