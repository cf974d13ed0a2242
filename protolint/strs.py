"""Case checks and case conversions for protocol buffer identifiers."""

from __future__ import annotations


def _is_lower(c: str) -> bool:
    return "a" <= c <= "z"


def _is_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_letter(c: str) -> bool:
    return _is_upper(c) or _is_lower(c)


def _has_edge_underscore(s: str) -> bool:
    return s[0] == "_" or s[-1] == "_"


def is_upper_camel_case(s: str) -> bool:
    """True if ``s`` is non-empty camel case with an initial capital."""
    return _is_capitalized(s) and _is_camel_case(s)


def is_lower_camel_case(s: str) -> bool:
    """True if ``s`` is non-empty camel case without an initial capital."""
    return not _is_capitalized(s) and _is_camel_case(s)


def is_upper_snake_case(s: str) -> bool:
    """True if ``s`` has only A-Z, digits and inner underscores."""
    if not s or _has_edge_underscore(s):
        return False
    return all(_is_upper(c) or _is_digit(c) or c == "_" for c in s)


def is_lower_snake_case(s: str) -> bool:
    """True if ``s`` has only a-z, digits and inner underscores."""
    if not s or _has_edge_underscore(s):
        return False
    return all(_is_lower(c) or _is_digit(c) or c == "_" for c in s)


def _is_capitalized(s: str) -> bool:
    return bool(s) and _is_upper(s[0])


def _is_camel_case(s: str) -> bool:
    return bool(s) and all(_is_letter(c) or _is_digit(c) for c in s)


def _is_snake(s: str) -> bool:
    if not s or _has_edge_underscore(s):
        return False
    return all(_is_letter(c) or _is_digit(c) or c == "_" for c in s)


def has_any_upper_case(s: str) -> bool:
    """True if ``s`` contains any character in A-Z."""
    return any(_is_upper(c) for c in s)


def to_upper_snake_case(s: str) -> str:
    """Convert ``s`` to UPPER_SNAKE_CASE."""
    words = split_camel_case_word(s) or [s]
    return "_".join(words).upper()


def to_lower_snake_case(s: str) -> str:
    """Convert ``s`` to lower_snake_case."""
    words = split_camel_case_word(s) or [s]
    return "_".join(words).lower()


def to_upper_camel_case(s: str) -> str:
    """Convert ``s`` to UpperCamelCase; "" if ``s`` is not snake-shaped."""
    if is_upper_snake_case(s):
        s = s.lower()
    words = split_snake_case_word(s) or []
    return "".join(w[:1].upper() + w[1:] for w in words)


def to_lower_camel_case(s: str) -> str:
    """Convert ``s`` to lowerCamelCase."""
    upper = to_upper_camel_case(s)
    return upper[:1].lower() + upper[1:]


def _to_snake(s: str) -> str:
    out = []
    prior_lower = False
    for c in s.strip():
        if prior_lower and _is_upper(c):
            out.append("_")
        out.append(c)
        prior_lower = _is_lower(c)
    return "".join(out)


def split_camel_case_word(s: str) -> list[str] | None:
    """Split a CamelCase word into parts; None if empty or not camel case."""
    if not s:
        return None
    s = s.strip()
    if not _is_camel_case(s):
        return None
    return split_snake_case_word(_to_snake(s))


def split_snake_case_word(s: str) -> list[str] | None:
    """Split a snake_case word into parts; None if empty or not snake case."""
    if not s:
        return None
    s = s.strip()
    if not _is_snake(s):
        return None
    return s.split("_")