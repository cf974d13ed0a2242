"""Protocol buffer files to lint and how they are displayed."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from typing import Iterable, Iterator

_PROTO_EXT = ".proto"


@dataclass(frozen=True)
class ProtoFile:
    """A .proto file: its absolute, cleaned path and the path shown in output."""

    path: str
    display_path: str


def _ext(path: str) -> str:
    base = os.path.basename(path)
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def _abs_clean(path: str) -> str:
    if path == "":
        return path
    return os.path.abspath(path)


def _walk(root: str) -> Iterator[str]:
    """Yield ``root`` and everything below it in lexical order, without following links."""
    yield root
    if not stat.S_ISDIR(os.lstat(root).st_mode):
        return
    for name in sorted(os.listdir(root)):
        child = os.path.join(root, name)
        if stat.S_ISDIR(os.lstat(child).st_mode):
            yield from _walk(child)
        else:
            yield child


def _collect(abs_cwd: str, abs_path: str) -> list[ProtoFile]:
    if abs_path == "":
        os.lstat(abs_path)  # raises FileNotFoundError
    files = []
    for path in _walk(abs_path):
        if _ext(path) != _PROTO_EXT:
            continue
        try:
            display = os.path.relpath(path, abs_cwd)
        except ValueError:
            display = path
        files.append(ProtoFile(path, os.path.normpath(display)))
    return files


@dataclass(frozen=True)
class ProtoSet:
    """A non-empty set of .proto files found under target paths."""

    proto_files: tuple[ProtoFile, ...]

    @classmethod
    def from_paths(cls, target_paths: Iterable[str | os.PathLike]) -> ProtoSet:
        """Collect every .proto file under ``target_paths``.

        Raises ValueError when none is found and OSError when a path is missing.
        """
        targets = [os.fspath(p) for p in target_paths]
        abs_cwd = os.path.realpath(os.path.abspath(os.getcwd()))
        files: list[ProtoFile] = []
        for target in targets:
            files.extend(_collect(abs_cwd, _abs_clean(target)))
        if not files:
            raise ValueError(f"not found protocol buffer files in [{' '.join(targets)}]")
        return cls(tuple(files))