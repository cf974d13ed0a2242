"""Rule-based English pluralization and singularization."""

from __future__ import annotations

import re
from typing import NamedTuple

_INTERPOLATE = re.compile(r"\$(\d{1,2})")

_IRREGULAR_RULES = [
    ("I", "we"),
    ("me", "us"),
    ("he", "they"),
    ("she", "they"),
    ("them", "them"),
    ("myself", "ourselves"),
    ("yourself", "yourselves"),
    ("itself", "themselves"),
    ("herself", "themselves"),
    ("himself", "themselves"),
    ("themself", "themselves"),
    ("is", "are"),
    ("was", "were"),
    ("has", "have"),
    ("this", "these"),
    ("that", "those"),
    ("echo", "echoes"),
    ("dingo", "dingoes"),
    ("volcano", "volcanoes"),
    ("tornado", "tornadoes"),
    ("torpedo", "torpedoes"),
    ("genus", "genera"),
    ("viscus", "viscera"),
    ("stigma", "stigmata"),
    ("stoma", "stomata"),
    ("dogma", "dogmata"),
    ("lemma", "lemmata"),
    ("schema", "schemata"),
    ("anathema", "anathemata"),
    ("ox", "oxen"),
    ("axe", "axes"),
    ("die", "dice"),
    ("yes", "yeses"),
    ("foot", "feet"),
    ("eave", "eaves"),
    ("goose", "geese"),
    ("tooth", "teeth"),
    ("quiz", "quizzes"),
    ("human", "humans"),
    ("proof", "proofs"),
    ("carve", "carves"),
    ("valve", "valves"),
    ("looey", "looies"),
    ("thief", "thieves"),
    ("groove", "grooves"),
    ("pickaxe", "pickaxes"),
    ("passerby", "passersby"),
]

_PLURAL_RULES = [
    (r"(?i)s?$", "s"),
    (r"(?i)[^\x00-\x7F]$", "$0"),
    (r"(?i)([^aeiou]ese)$", "$1"),
    (r"(?i)(ax|test)is$", "$1es"),
    (r"(?i)(alias|[^aou]us|t[lm]as|gas|ris)$", "$1es"),
    (r"(?i)(e[mn]u)s?$", "$1s"),
    (r"(?i)([^l]ias|[aeiou]las|[ejzr]as|[iu]am)$", "$1"),
    (
        r"(?i)(alumn|syllab|vir|radi|nucle|fung|cact|stimul|termin|bacill|foc|uter"
        r"|loc|strat)(?:us|i)$",
        "$1i",
    ),
    (r"(?i)(alumn|alg|vertebr)(?:a|ae)$", "$1ae"),
    (r"(?i)(cherub)(?:im)?$", "$1im"),
    (r"(?i)(her|at|gr)o$", "$1oes"),
    (
        r"(?i)(agend|addend|millenni|dat|extrem|bacteri|desiderat|strat|candelabr"
        r"|errat|ov|symposi|curricul|automat|quor)(?:a|um)$",
        "$1a",
    ),
    (
        r"(?i)(apheli|hyperbat|periheli|asyndet|noumen|phenomen|criteri|organ"
        r"|prolegomen|hedr|automat)(?:a|on)$",
        "$1a",
    ),
    (r"(?i)sis$", "ses"),
    (r"(?i)(?:(kni|wi|li)fe|(ar|l|ea|eo|oa|hoo)f)$", "$1$2ves"),
    (r"(?i)([^aeiouy]|qu)y$", "$1ies"),
    (r"(?i)([^ch][ieo][ln])ey$", "$1ies"),
    (r"(?i)(x|ch|ss|sh|zz)$", "$1es"),
    (r"(?i)(matr|cod|mur|sil|vert|ind|append)(?:ix|ex)$", "$1ices"),
    (r"(?i)\b((?:tit)?m|l)(?:ice|ouse)$", "$1ice"),
    (r"(?i)(pe)(?:rson|ople)$", "$1ople"),
    (r"(?i)(child)(?:ren)?$", "$1ren"),
    (r"(?i)eaux$", "$0"),
    (r"(?i)m[ae]n$", "men"),
    ("thou", "you"),
]

_SINGULAR_RULES = [
    (r"(?i)s$", ""),
    (r"(?i)(ss)$", "$1"),
    (r"(?i)(wi|kni|(?:after|half|high|low|mid|non|night|[^\w]|^)li)ves$", "$1fe"),
    (r"(?i)(ar|(?:wo|[ae])l|[eo][ao])ves$", "$1f"),
    (r"(?i)ies$", "y"),
    (r"(?i)(dg|ss|ois|lk|ok|wn|mb|th|ch|ec|oal|is|ck|ix|sser|ts|wb)ies$", "$1ie"),
    (
        r"(?i)\b(l|(?:neck|cross|hog|aun)?t|coll|faer|food|gen|goon|group|hipp|junk"
        r"|vegg|(?:pork)?p|charl|calor|cut)ies$",
        "$1ie",
    ),
    (r"(?i)\b(mon|smil)ies$", "$1ey"),
    (r"(?i)\b((?:tit)?m|l)ice$", "$1ouse"),
    (r"(?i)(seraph|cherub)im$", "$1"),
    (
        r"(?i)(x|ch|ss|sh|zz|tto|go|cho|alias|[^aou]us|t[lm]as|gas|(?:her|at|gr)o"
        r"|[aeiou]ris)(?:es)?$",
        "$1",
    ),
    (r"(?i)(analy|diagno|parenthe|progno|synop|the|empha|cri|ne)(?:sis|ses)$", "$1sis"),
    (r"(?i)(movie|twelve|abuse|e[mn]u)s$", "$1"),
    (r"(?i)(test)(?:is|es)$", "$1is"),
    (
        r"(?i)(alumn|syllab|vir|radi|nucle|fung|cact|stimul|termin|bacill|foc|uter"
        r"|loc|strat)(?:us|i)$",
        "$1us",
    ),
    (
        r"(?i)(agend|addend|millenni|dat|extrem|bacteri|desiderat|strat|candelabr"
        r"|errat|ov|symposi|curricul|quor)a$",
        "$1um",
    ),
    (
        r"(?i)(apheli|hyperbat|periheli|asyndet|noumen|phenomen|criteri|organ"
        r"|prolegomen|hedr|automat)a$",
        "$1on",
    ),
    (r"(?i)(alumn|alg|vertebr)ae$", "$1a"),
    (r"(?i)(cod|mur|sil|vert|ind)ices$", "$1ex"),
    (r"(?i)(matr|append)ices$", "$1ix"),
    (r"(?i)(pe)(rson|ople)$", "$1rson"),
    (r"(?i)(child)ren$", "$1"),
    (r"(?i)(eau)x?$", "$1"),
    (r"(?i)men$", "man"),
]

_UNCOUNTABLE_RULES = [
    "adulthood", "advice", "agenda", "aid", "aircraft", "alcohol", "ammo",
    "analytics", "anime", "athletics", "audio", "bison", "blood", "bream",
    "buffalo", "butter", "carp", "cash", "chassis", "chess", "clothing", "cod",
    "commerce", "cooperation", "corps", "debris", "diabetes", "digestion", "elk",
    "energy", "equipment", "excretion", "expertise", "firmware", "flounder", "fun",
    "gallows", "garbage", "graffiti", "hardware", "headquarters", "health",
    "herpes", "highjinks", "homework", "housework", "information", "jeans",
    "justice", "kudos", "labour", "literature", "machinery", "mackerel", "mail",
    "media", "mews", "moose", "music", "mud", "manga", "news", "only",
    "personnel", "pike", "plankton", "pliers", "police", "pollution", "premises",
    "rain", "research", "rice", "salmon", "scissors", "series", "sewage",
    "shambles", "shrimp", "software", "species", "staff", "swine", "tennis",
    "traffic", "transportation", "trout", "tuna", "wealth", "welfare", "whiting",
    "wildebeest", "wildlife", "you",
    "(?i)pok[eé]mon$",
    "(?i)[^aeiou]ese$",
    "(?i)deer$",
    "(?i)fish$",
    "(?i)measles$",
    "(?i)o[iu]s$",
    "(?i)pox$",
    "(?i)sheep$",
]


class _Rule(NamedTuple):
    expression: re.Pattern
    replacement: str


def _is_expr(rule: str) -> bool:
    return rule.startswith("(")


def _sanitize_rule(rule: str) -> re.Pattern:
    if _is_expr(rule):
        return re.compile(rule)
    return re.compile("(?i)^" + rule + "$")


def _restore_case(word: str, token: str) -> str:
    if word == token:
        return token
    if word == word.lower():
        return token.lower()
    if word == word.upper():
        return token.upper()
    if word[:1] == word[:1].upper():
        return token[:1].upper() + token[1:].lower()
    return token.lower()


def _interpolate(text: str, args: tuple) -> str:
    def lookup(m: re.Match) -> str:
        index = int(m.group(1))
        if index < len(args):
            return args[index] or ""
        return ""

    return _INTERPOLATE.sub(lookup, text)


class PluralizeClient:
    """Converts English words between singular and plural forms.

    ``uri`` and ``uris`` are registered as extra rules on top of the defaults.
    """

    def __init__(self) -> None:
        self._plural_rules: list[_Rule] = []
        self._singular_rules: list[_Rule] = []
        self._uncountables: set[str] = set()
        self._irregular_singles: dict[str, str] = {}
        self._irregular_plurals: dict[str, str] = {}

        for single, plural in _IRREGULAR_RULES:
            self.add_irregular_rule(single, plural)
        for rule, replacement in _PLURAL_RULES:
            self.add_plural_rule(rule, replacement)
        for rule, replacement in _SINGULAR_RULES:
            self.add_singular_rule(rule, replacement)
        for word in _UNCOUNTABLE_RULES:
            self.add_uncountable_rule(word)

        self.add_plural_rule("(?i)uri$", "uris")
        self.add_singular_rule("(?i)uris$", "uri")

    def plural(self, word: str) -> str:
        """Return the plural form of ``word``."""
        return self._replace_word(
            word, self._irregular_singles, self._irregular_plurals, self._plural_rules
        )

    def singular(self, word: str) -> str:
        """Return the singular form of ``word``."""
        return self._replace_word(
            word, self._irregular_plurals, self._irregular_singles, self._singular_rules
        )

    def to_plural(self, s: str) -> str:
        """Return the plural of ``s``, whatever form it is given in."""
        return self.plural(self.singular(s))

    def add_plural_rule(self, rule: str, replacement: str) -> None:
        """Add a pluralization rule; later rules take precedence."""
        self._plural_rules.append(_Rule(_sanitize_rule(rule), replacement))

    def add_singular_rule(self, rule: str, replacement: str) -> None:
        """Add a singularization rule; later rules take precedence."""
        self._singular_rules.append(_Rule(_sanitize_rule(rule), replacement))

    def add_uncountable_rule(self, word: str) -> None:
        """Mark a word, or a pattern starting with "(", as uncountable."""
        if not _is_expr(word):
            self._uncountables.add(word.lower())
            return
        self.add_plural_rule(word, "$0")
        self.add_singular_rule(word, "$0")

    def add_irregular_rule(self, single: str, plural: str) -> None:
        """Register an irregular singular/plural pair."""
        single, plural = single.lower(), plural.lower()
        self._irregular_singles[single] = plural
        self._irregular_plurals[plural] = single

    def _replace_word(
        self,
        word: str,
        replace_map: dict[str, str],
        keep_map: dict[str, str],
        rules: list[_Rule],
    ) -> str:
        token = word.lower()
        if token in keep_map:
            return _restore_case(word, token)
        if token in replace_map:
            return _restore_case(word, replace_map[token])
        return self._sanitize_word(token, word, rules)

    def _sanitize_word(self, token: str, word: str, rules: list[_Rule]) -> str:
        if not token or token in self._uncountables:
            return word
        for rule in reversed(rules):
            if rule.expression.search(word):
                return self._replace(word, rule)
        return word

    @staticmethod
    def _replace(word: str, rule: _Rule) -> str:
        def substitute(m: re.Match) -> str:
            args = (m.group(0),) + m.groups()
            result = _interpolate(rule.replacement, args)
            if m.group(0) == "":
                index = m.start()
                previous = word[index - 1:index] if index > 0 else ""
                return _restore_case(previous, result)
            return _restore_case(m.group(0), result)

        return rule.expression.sub(substitute, word, count=1)