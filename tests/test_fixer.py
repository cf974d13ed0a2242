import pytest

from protolint.fixer import BaseFixing, NopFixing, TextEdit, new_fixing
from protolint.proto import Proto, ProtoMeta

CONTENT = 'syntax = "proto3";\nmessage foo {\n  string name = 1;\n}\n'


@pytest.fixture
def proto_path(tmp_path):
    path = tmp_path / "sample.proto"
    path.write_bytes(CONTENT.encode())
    return path


def test_lines_split_on_lf(proto_path):
    fixing = BaseFixing(proto_path)
    assert fixing.lines() == CONTENT.split("\n")
    assert fixing.line_ending == "\n"


def test_replace_text_changes_only_given_line(proto_path):
    fixing = BaseFixing(proto_path)
    before = fixing.lines()
    fixing.replace_text(2, "foo", "Foo")
    after = fixing.lines()
    assert "Foo" in after[1] and "foo" not in after[1]
    assert after[0] == before[0]
    assert after[2:] == before[2:]


def test_replace_text_rejects_line_zero(proto_path):
    fixing = BaseFixing(proto_path)
    with pytest.raises(IndexError):
        fixing.replace_text(0, "foo", "Foo")


def test_replace_all(proto_path):
    fixing = BaseFixing(proto_path)
    original = fixing.lines()
    fixing.replace_all(lambda lines: list(reversed(lines)))
    assert fixing.lines() == list(reversed(original))


def test_replace_content(proto_path):
    fixing = BaseFixing(proto_path)
    fixing.replace_content(lambda content: content.upper())
    assert fixing.content == CONTENT.encode().upper()


def test_finalize_writes_replacement(proto_path):
    fixing = BaseFixing(proto_path)
    fixing.replace(TextEdit(pos=0, end=5, new_text=b"SYNTAX"))
    fixing.finalize()
    assert proto_path.read_text() == CONTENT.replace("syntax", "SYNTAX", 1)


def test_finalize_applies_edits_with_shifting_offsets(proto_path):
    original = CONTENT.encode()
    start = original.index(b"foo")
    fixing = BaseFixing(proto_path)
    fixing.replace(TextEdit(pos=0, end=-1, new_text="// head\n"))
    fixing.replace(TextEdit(pos=start, end=start + 2, new_text=b"Foo"))
    fixing.finalize()
    expected = b"// head\n" + original[:start] + b"Foo" + original[start + 3:]
    assert proto_path.read_bytes() == expected
    assert fixing.content == expected


def test_insertion_keeps_following_text(proto_path):
    original = CONTENT.encode()
    pos = original.index(b"message")
    fixing = BaseFixing(proto_path)
    fixing.replace(TextEdit(pos=pos, end=pos - 1, new_text=b"// c\n"))
    fixing.finalize()
    assert proto_path.read_bytes() == original[:pos] + b"// c\n" + original[pos:]


def test_finalize_without_edits_keeps_file(proto_path):
    fixing = BaseFixing(proto_path)
    fixing.finalize()
    assert proto_path.read_text() == CONTENT


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        BaseFixing(tmp_path / "missing.proto")


def test_finalize_on_removed_file_raises(proto_path):
    fixing = BaseFixing(proto_path)
    proto_path.unlink()
    with pytest.raises(FileNotFoundError):
        fixing.finalize()


def test_new_fixing_in_fix_mode_reads_file(proto_path):
    fixing = new_fixing(True, Proto(meta=ProtoMeta(filename=str(proto_path))))
    assert isinstance(fixing, BaseFixing)
    assert fixing.lines() == CONTENT.split("\n")


def test_new_fixing_without_fix_mode_is_nop(proto_path):
    fixing = new_fixing(False, Proto(meta=ProtoMeta(filename=str(proto_path))))
    assert isinstance(fixing, NopFixing)
    assert fixing.lines() == []


def test_nop_fixing_leaves_file_untouched(proto_path):
    fixing = NopFixing()
    fixing.replace_text(1, "syntax", "SYNTAX")
    fixing.replace_all(lambda lines: [])
    fixing.replace_content(lambda content: b"")
    fixing.finalize()
    assert proto_path.read_text() == CONTENT
    assert fixing.lines() == []