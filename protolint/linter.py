"""Runs a sequence of rules over a protocol buffer file."""

from __future__ import annotations

from typing import Callable, Iterable

from .proto import Proto
from .report import Failure


class Linter:
    """Applies rules to a proto tree and collects their failures."""

    def run(
        self,
        gen_proto: Callable[[Proto | None], Proto],
        has_applies: Iterable,
    ) -> list[Failure]:
        """Apply each rule to a tree from ``gen_proto`` and gather failures.

        ``gen_proto`` receives the previous tree (None the first time), so it
        can reuse it or parse afresh. Errors from it or from a rule propagate.
        """
        failures: list[Failure] = []
        proto: Proto | None = None
        for has_apply in has_applies:
            proto = gen_proto(proto)
            failures.extend(has_apply.apply(proto))
        return failures