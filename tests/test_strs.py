import pytest

from protolint.strs import (
    has_any_upper_case,
    is_lower_camel_case,
    is_lower_snake_case,
    is_upper_camel_case,
    is_upper_snake_case,
    split_camel_case_word,
    split_snake_case_word,
    to_lower_camel_case,
    to_lower_snake_case,
    to_upper_camel_case,
    to_upper_snake_case,
)


@pytest.mark.parametrize(
    "value, want",
    [
        ("hello", False),
        ("Hello_world", False),
        ("Hello.world", False),
        ("Hello", True),
        ("HelloWorld", True),
    ],
)
def test_is_upper_camel_case(value, want):
    assert is_upper_camel_case(value) is want


@pytest.mark.parametrize(
    "value, want",
    [
        ("Hello", False),
        ("hello_world", False),
        ("hello.world", False),
        ("hello", True),
        ("helloWorld", True),
    ],
)
def test_is_lower_camel_case(value, want):
    assert is_lower_camel_case(value) is want


@pytest.mark.parametrize(
    "value, want",
    [
        ("", False),
        ("hello", False),
        ("hELLO", False),
        ("HELLO", True),
        ("FIRST_VALUE", True),
        ("_FIRST", False),
        ("FIRST_", False),
    ],
)
def test_is_upper_snake_case(value, want):
    assert is_upper_snake_case(value) is want


@pytest.mark.parametrize(
    "value, want",
    [
        ("", False),
        ("HELLO", False),
        ("Hello", False),
        ("hello", True),
        ("song_name", True),
        ("song_", False),
    ],
)
def test_is_lower_snake_case(value, want):
    assert is_lower_snake_case(value) is want


@pytest.mark.parametrize(
    "value, want",
    [("hello", False), ("hEllo", True), ("", False), ("123_x", False)],
)
def test_has_any_upper_case(value, want):
    assert has_any_upper_case(value) is want


@pytest.mark.parametrize(
    "value, want",
    [
        ("", None),
        ("not_camel", None),
        ("Account", ["Account"]),
        ("AccountStatus", ["Account", "Status"]),
        ("accountStatus", ["account", "Status"]),
        ("ACCOUNTStatusException", ["ACCOUNTStatus", "Exception"]),
    ],
)
def test_split_camel_case_word(value, want):
    assert split_camel_case_word(value) == want


@pytest.mark.parametrize(
    "value, want",
    [
        ("not_camel", "NOT_CAMEL"),
        ("Account", "ACCOUNT"),
        ("AccountStatus", "ACCOUNT_STATUS"),
        ("accountStatus", "ACCOUNT_STATUS"),
    ],
)
def test_to_upper_snake_case(value, want):
    assert to_upper_snake_case(value) == want


@pytest.mark.parametrize(
    "value, want",
    [
        ("Account", "account"),
        ("AccountStatus", "account_status"),
        ("accountStatus", "account_status"),
    ],
)
def test_to_lower_snake_case(value, want):
    assert to_lower_snake_case(value) == want


@pytest.mark.parametrize(
    "value, want",
    [
        ("account", "Account"),
        ("AccountStatus", "AccountStatus"),
        ("accountStatus", "AccountStatus"),
        ("accountstatus", "Accountstatus"),
        ("account_status", "AccountStatus"),
        ("ACCOUNT_STATUS", "AccountStatus"),
    ],
)
def test_to_upper_camel_case(value, want):
    assert to_upper_camel_case(value) == want


def test_to_upper_camel_case_of_non_snake_is_empty():
    assert to_upper_camel_case("hello.world") == ""


@pytest.mark.parametrize(
    "value, want",
    [
        ("account", "account"),
        ("AccountStatus", "accountStatus"),
        ("accountStatus", "accountStatus"),
        ("accountstatus", "accountstatus"),
        ("account_status", "accountStatus"),
        ("ACCOUNT_STATUS", "accountStatus"),
    ],
)
def test_to_lower_camel_case(value, want):
    assert to_lower_camel_case(value) == want


@pytest.mark.parametrize(
    "value, want",
    [
        ("", None),
        ("_not_snake", None),
        ("HELLO", ["HELLO"]),
        ("REASON_FOR_ERROR", ["REASON", "FOR", "ERROR"]),
        ("reason_for_error", ["reason", "for", "error"]),
    ],
)
def test_split_snake_case_word(value, want):
    assert split_snake_case_word(value) == want