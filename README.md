# protolint

Building blocks for a Protocol Buffer linter, usable as a library. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What it provides

- `protolint.osutil`: `ExitCode` (`SUCCESS`, `LINT_FAILURE`,
  `INTERNAL_FAILURE`), `read_all_lines`, `write_lines_to_existing_file`,
  `write_existing_file` and `detect_line_ending`. `detect_line_ending` raises
  `LineEndingError` when no line ending dominates.
- `protolint.strs`: naming checks and conversions such as `is_upper_camel_case`,
  `is_lower_snake_case`, `has_any_upper_case`, `to_upper_snake_case`,
  `to_lower_camel_case`, `split_camel_case_word` and `split_snake_case_word`.
- `protolint.pluralize`: `PluralizeClient` with `plural`, `singular` and
  `to_plural`. It also lets you add plural, singular, uncountable and irregular
  rules.
- `protolint.proto`: a syntax tree (`Proto`, `Syntax`, `Package`, `Import`,
  `Option`, `Message`, `Enum`, `EnumField`, `Field`, `MapField`, `GroupField`,
  `Oneof`, `OneofField`, `Extend`, `Extensions`, `Reserved`, `Service`, `RPC`,
  `EmptyStatement`, `Comment`, `Position`, `ProtoMeta`). It comes with a
  `BaseVisitor` whose `visit_*` methods all descend into children.
- `protolint.report`: `Failure`, created with `failuref` or
  `failure_with_severityf`, which take printf-style messages.
- `protolint.rule`: `Severity`, the `Rule` protocol, and `Rules`, a list with
  `default()` (official rules only) and `ids()`.
- `protolint.disablerule`: `Interpreter`. It understands the
  `protolint:disable`, `protolint:enable`, `protolint:disable:next` and
  `protolint:disable:this` comments.
- `protolint.linter`: `Linter.run`, which applies a sequence of rules and
  gathers their failures.
- `protolint.fixer`: `TextEdit`, `BaseFixing` and `NopFixing`, plus
  `new_fixing`. `BaseFixing` rewrites a file through line replacements and
  recorded edits.
- `protolint.autodisable`: `PlacementType` and `new_placement_strategy`. The
  strategies insert `disable:next` or `disable:this` comments into a file.
- `protolint.visitor`: `BaseAddVisitor`, `BaseFixableVisitor`, `run_visitor`
  and `run_visitor_auto_disable`.
- `protolint.reporters`: `PlainReporter`, `UnixReporter`, `JSONReporter`,
  `JUnitReporter` and `SarifReporter`. Each has a `report(w, failures)` method
  that writes to a text stream.
- `protolint.protofiles`: `ProtoFile`, and `ProtoSet.from_paths`, which
  collects the `.proto` files below the given paths.

## Example

```python
import io

from protolint.proto import Position
from protolint.report import failuref
from protolint.reporters import UnixReporter
from protolint.strs import is_upper_camel_case

name = "accountStatus"
failures = []
if not is_upper_camel_case(name):
    failures.append(
        failuref(
            Position(filename="example.proto", offset=0, line=3, column=9),
            "MESSAGE_NAMES_UPPER_CAMEL_CASE",
            'Message name "%s" must be UpperCamelCase',
            name,
        )
    )

out = io.StringIO()
UnixReporter().report(out, failures)
print(out.getvalue(), end="")
# example.proto:3:9: Message name "accountStatus" must be UpperCamelCase
```

### Disable comments

```python
from protolint.disablerule import Interpreter

interpreter = Interpreter("MAX_LINE_LENGTH")
lines = [
    "enum E {",
    "// protolint:disable:next MAX_LINE_LENGTH",
    "option allow_alias = true;",
    "}",
]
for index, line in interpreter.valid_lines(lines):
    print(index, line)
# 0 enum E {
# 1 // protolint:disable:next MAX_LINE_LENGTH
# 3 }
```

### Walking a tree

```python
from protolint.proto import Message, Position, Proto, ProtoMeta
from protolint.visitor import BaseAddVisitor, run_visitor


class MessageVisitor(BaseAddVisitor):
    def visit_message(self, node):
        self.add_failuref(node.pos, "Test Message")
        return True


proto = Proto(
    meta=ProtoMeta(filename=""),
    proto_body=[Message(pos=Position("example.proto", 100, 10, 5))],
)
failures = run_visitor(MessageVisitor("MESSAGE_NAMES_UPPER_CAMEL_CASE"), proto, "")
```

## What it does not do

- It does not parse `.proto` source text. You build trees with the classes in
  `protolint.proto`, or produce them with a parser of your own.
- It ships no lint rules of its own. Rules are objects that follow the `Rule`
  protocol.
- It has no command-line program.
- It does not read configuration files. The `protolint.config` package is
  present but holds no modules.