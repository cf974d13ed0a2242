"""Output formats for lint failures."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Iterable, Protocol, TextIO

from .report import Failure
from .rule import Severity

_PACKAGE_NAME = "net.protolint"
_TOOL_NAME = "protolint"
_TOOL_URI = "https://github.com/yoheimuta/protolint"
_SARIF_VERSION = "2.1.0"

_XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'
_XML_PREFIX = "  "
_XML_INDENT = "    "

_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)

_XML_ESCAPES = str.maketrans(
    {
        '"': "&#34;",
        "'": "&#39;",
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        "\t": "&#x9;",
        "\n": "&#xA;",
        "\r": "&#xD;",
    }
)

_SARIF_LEVELS = {
    Severity.ERROR.value: "error",
    Severity.WARNING.value: "warning",
    Severity.NOTE.value: "none",
}


class Reporter(Protocol):
    """Writes failures to a text stream in some format."""

    def report(self, w: TextIO, failures: Iterable[Failure]) -> None:
        ...


def _to_json(obj, *, sort_keys: bool = False) -> str:
    text = json.dumps(obj, indent=2, ensure_ascii=False, sort_keys=sort_keys)
    return text.translate(_JSON_ESCAPES)


class PlainReporter:
    """One ``[FILE:LINE:COL] MESSAGE`` line per failure."""

    def report(self, w: TextIO, failures: Iterable[Failure]) -> None:
        for failure in failures:
            w.write(f"{failure}\n")


class UnixReporter:
    """One ``FILE:LINE:COL: MESSAGE`` line per failure, as compilers print."""

    def report(self, w: TextIO, failures: Iterable[Failure]) -> None:
        for failure in failures:
            w.write(f"{failure.pos}: {failure.message}\n")


class JSONReporter:
    """A single JSON document holding a ``lints`` list."""

    def report(self, w: TextIO, failures: Iterable[Failure]) -> None:
        lints = [
            {
                "filename": f.pos.filename,
                "line": f.pos.line,
                "column": f.pos.column,
                "message": f.message,
                "rule": f.rule_id,
            }
            for f in failures
        ]
        w.write(_to_json({"lints": lints or None}) + "\n")


@dataclass
class _Element:
    name: str
    attrs: list[tuple[str, str]] = field(default_factory=list)
    children: list[_Element] = field(default_factory=list)
    text: str = ""
    cdata: bool = False

    def render(self, depth: int, out: list[str]) -> None:
        indent = _XML_PREFIX + _XML_INDENT * depth
        attrs = "".join(f' {k}="{v.translate(_XML_ESCAPES)}"' for k, v in self.attrs)
        start = f"<{self.name}{attrs}>"
        end = f"</{self.name}>"
        if self.children:
            out.append(indent + start)
            for child in self.children:
                child.render(depth + 1, out)
            out.append(indent + end)
            return
        if self.cdata:
            body = "<![CDATA[" + self.text.replace("]]>", "]]]]><![CDATA[>") + "]]>"
        else:
            body = self.text.translate(_XML_ESCAPES)
        out.append(indent + start + body + end)


def _testcase(classname: str, name: str, failure: _Element | None = None) -> _Element:
    return _Element(
        "testcase",
        attrs=[("classname", classname), ("name", name), ("time", "0")],
        children=[failure] if failure is not None else [],
    )


class JUnitReporter:
    """A JUnit XML document with one test case per failure."""

    def report(self, w: TextIO, failures: Iterable[Failure]) -> None:
        failures = list(failures)
        if failures:
            testcases = [
                _testcase(
                    f.filename_without_ext(),
                    f"{_PACKAGE_NAME}.{f.rule_id}",
                    _Element(
                        "failure",
                        attrs=[("message", f.message), ("type", "error")],
                        text=f"line {f.pos.line}, col {f.pos.column}",
                        cdata=True,
                    ),
                )
                for f in failures
            ]
            tests, failed = len(failures), len(failures)
        else:
            testcases = [_testcase(f"{_PACKAGE_NAME}.ALL_RULES", "All Rules")]
            tests, failed = 1, 0

        suite = _Element(
            "testsuite",
            attrs=[("tests", str(tests)), ("failures", str(failed)), ("time", "0")],
            children=[_Element("package", text=_PACKAGE_NAME), *testcases],
        )
        root = _Element("testsuites", children=[suite])
        lines: list[str] = []
        root.render(0, lines)
        w.write(_XML_HEADER + "\n".join(lines) + "\n")


class SarifReporter:
    """A SARIF 2.1.0 log with one run holding all failures."""

    def report(self, w: TextIO, failures: Iterable[Failure]) -> None:
        rules: dict[str, dict] = {}
        artifacts: list[str] = []
        results: list[dict] = []

        for f in failures:
            rules.setdefault(f.rule_id, {"id": f.rule_id, "helpUri": _TOOL_URI})
            filename = f.pos.filename
            if filename not in artifacts:
                artifacts.append(filename)

            region = {}
            if f.pos.line:
                region["startLine"] = f.pos.line
            if f.pos.column:
                region["startColumn"] = f.pos.column
            physical: dict = {"artifactLocation": {"uri": filename}}
            if region:
                physical["region"] = region
            result = {
                "ruleId": f.rule_id,
                "kind": "fail",
                "message": {"text": f.message},
                "locations": [{"physicalLocation": physical}],
            }
            level = _SARIF_LEVELS.get(f.severity)
            if level is not None:
                result["level"] = level
            results.append(result)

        driver: dict = {"name": _TOOL_NAME, "informationUri": _TOOL_URI}
        if rules:
            driver["rules"] = list(rules.values())
        run: dict = {"tool": {"driver": driver}}
        if artifacts:
            run["artifacts"] = [{"location": {"uri": uri}} for uri in artifacts]
        if results:
            run["results"] = results

        w.write(_to_json({"version": _SARIF_VERSION, "runs": [run]}, sort_keys=True))