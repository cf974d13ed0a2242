import os

import pytest

from protolint.protofiles import ProtoFile, ProtoSet


@pytest.fixture
def proto_tree(tmp_path, monkeypatch):
    root = tmp_path.resolve()
    base = root / "testdir"
    (base / "innerdir").mkdir(parents=True)
    (base / "innerdir" / "testinner.proto").write_text("")
    (base / "innerdir2").mkdir()
    (base / "innerdir2" / "readme.txt").write_text("")
    (base / "innerdir3").mkdir()
    (base / "test.proto").write_text("")
    (base / "test2.proto").write_text("")
    monkeypatch.chdir(root)
    return base


def test_empty_dir_raises(proto_tree):
    with pytest.raises(ValueError, match="not found protocol buffer files"):
        ProtoSet.from_paths([str(proto_tree / "innerdir3")])


def test_dir_without_proto_raises(proto_tree):
    with pytest.raises(ValueError, match="not found protocol buffer files"):
        ProtoSet.from_paths([str(proto_tree / "innerdir2")])


def test_missing_path_raises(proto_tree):
    with pytest.raises(FileNotFoundError):
        ProtoSet.from_paths([str(proto_tree / "missing")])


def test_inner_dir(proto_tree):
    got = ProtoSet.from_paths([str(proto_tree / "innerdir")])
    path = os.path.join(str(proto_tree / "innerdir"), "testinner.proto")
    assert got.proto_files == (
        ProtoFile(path, os.path.join("testdir", "innerdir", "testinner.proto")),
    )


def test_walks_in_lexical_order(proto_tree):
    got = ProtoSet.from_paths([str(proto_tree)])
    assert [f.display_path for f in got.proto_files] == [
        os.path.join("testdir", "innerdir", "testinner.proto"),
        os.path.join("testdir", "test.proto"),
        os.path.join("testdir", "test2.proto"),
    ]
    assert [f.path for f in got.proto_files] == [
        str(proto_tree / "innerdir" / "testinner.proto"),
        str(proto_tree / "test.proto"),
        str(proto_tree / "test2.proto"),
    ]


def test_relative_target_and_single_file(proto_tree):
    got = ProtoSet.from_paths([os.path.join("testdir", "test.proto")])
    assert got.proto_files == (
        ProtoFile(str(proto_tree / "test.proto"), os.path.join("testdir", "test.proto")),
    )


def test_display_path_outside_cwd(proto_tree, monkeypatch):
    other = proto_tree.parent / "other"
    other.mkdir()
    monkeypatch.chdir(other)
    got = ProtoSet.from_paths([str(proto_tree / "innerdir")])
    assert got.proto_files[0].display_path == os.path.join(
        "..", "testdir", "innerdir", "testinner.proto"
    )


def test_multiple_targets_keep_order(proto_tree):
    got = ProtoSet.from_paths([str(proto_tree / "test2.proto"), str(proto_tree / "innerdir")])
    assert [os.path.basename(f.path) for f in got.proto_files] == [
        "test2.proto",
        "testinner.proto",
    ]