from dataclasses import dataclass

from protolint.rule import Rule, Rules, Severity


@dataclass
class FakeRule:
    id: str
    is_official: bool
    purpose: str = "checks things"
    severity: Severity = Severity.ERROR

    def apply(self, proto):
        return []


def make_rules():
    return Rules(
        [
            FakeRule("A_RULE", True),
            FakeRule("B_RULE", False),
            FakeRule("C_RULE", True),
        ]
    )


def test_ids_in_order():
    assert make_rules().ids() == ["A_RULE", "B_RULE", "C_RULE"]


def test_default_keeps_only_official_rules_in_order():
    assert make_rules().default().ids() == ["A_RULE", "C_RULE"]


def test_default_of_unofficial_rules_is_empty():
    rules = Rules([FakeRule("X", False)])
    assert rules.default().ids() == []


def test_default_is_a_subset_of_all():
    rules = make_rules()
    assert set(rules.default().ids()) <= set(rules.ids())
    assert all(r.is_official for r in rules.default())


def test_fake_rule_satisfies_protocol_and_severity_lookup():
    assert isinstance(FakeRule("A", True), Rule)
    assert Severity("warning") is Severity.WARNING