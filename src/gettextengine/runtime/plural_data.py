"""Plural-form lookup tables for gettext catalogs.

Plural selection is table-driven: a catalog's ``Plural-Forms`` header is
matched against the expressions that translation tools actually emit, and
locales without a recognized header are matched against a table of
language families. Expressions are never parsed or evaluated.

Each family selector receives the count as given, negative values
included, and returns either an index or a bool (False -> 0, True -> 1),
mirroring the C expressions it stands for. Remainders truncate toward
zero as in C, so -21 % 10 is -1 rather than 9.

Sources for the expressions: GNU gettext manual ("Plural forms"),
Launchpad/Weblate templates and Babel's ``babel.messages.plurals`` table.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType

from gettextengine.types import Count

__all__ = [
    "DEFAULT_PLURAL_SELECTOR",
    "LOCALE_PLURAL_TABLE",
    "PLURAL_FORMS_TABLE",
    "PluralSelector",
    "compact_plural_forms",
]


@dataclass(frozen=True, slots=True)
class PluralSelector:
    """Plural-form selector: number of forms plus an index function.

    Attributes:
        plural_count: Number of msgstr slots the language uses (nplurals)
        select: Maps a count to an index or a bool
        name: Language-family name, for logs and repr
    """

    plural_count: int
    select: Callable[[Count], int | bool]
    name: str = "custom"

    def __post_init__(self) -> None:
        """Validate plural_count.

        Raises:
            ValueError: If plural_count is less than 1
        """
        if self.plural_count < 1:
            msg = f"plural_count must be >= 1, got {self.plural_count}"
            raise ValueError(msg)

    def index(self, count: Count) -> int:
        """Select the raw plural index for count.

        Applies the selector to count and normalizes a bool result.
        The result is not clamped to ``plural_count``.

        Example:
            >>> DEFAULT_PLURAL_SELECTOR.index(1)
            0
            >>> DEFAULT_PLURAL_SELECTOR.index(0)
            1
        """
        result = self.select(count)
        if isinstance(result, bool):
            return 1 if result else 0
        return int(result)


def compact_plural_forms(header: str) -> str:
    """Canonicalize a Plural-Forms header for table lookup.

    Removes all whitespace and guarantees a trailing semicolon, so that
    ``"nplurals=2; plural=(n != 1)"`` and ``"nplurals=2;plural=(n!=1);"``
    share one key.

    Example:
        >>> compact_plural_forms("nplurals=2; plural=(n != 1)")
        'nplurals=2;plural=(n!=1);'
    """
    compact = "".join(header.split())
    return compact if compact.endswith(";") else f"{compact};"


# ============================================================================
# LANGUAGE FAMILY SELECTORS
# ============================================================================


def _rem(n: Count, m: int) -> Count:
    # C remainder: the sign follows the dividend
    return -(-n % m) if n < 0 else n % m


def _one_form(n: Count) -> int:
    return 0


def _not_one(n: Count) -> bool:
    return n != 1


def _greater_than_one(n: Count) -> bool:
    return n > 1


def _east_slavic(n: Count) -> int:
    if _rem(n, 10) == 1 and _rem(n, 100) != 11:
        return 0
    if 2 <= _rem(n, 10) <= 4 and (_rem(n, 100) < 10 or _rem(n, 100) >= 20):
        return 1
    return 2


def _czech(n: Count) -> int:
    if n == 1:
        return 0
    if 2 <= n <= 4:
        return 1
    return 2


def _polish(n: Count) -> int:
    if n == 1:
        return 0
    if 2 <= _rem(n, 10) <= 4 and (_rem(n, 100) < 10 or _rem(n, 100) >= 20):
        return 1
    return 2


def _lithuanian(n: Count) -> int:
    if _rem(n, 10) == 1 and _rem(n, 100) != 11:
        return 0
    if _rem(n, 10) >= 2 and (_rem(n, 100) < 10 or _rem(n, 100) >= 20):
        return 1
    return 2


def _latvian(n: Count) -> int:
    if _rem(n, 10) == 1 and _rem(n, 100) != 11:
        return 0
    if n != 0:
        return 1
    return 2


def _romanian(n: Count) -> int:
    if n == 1:
        return 0
    if n == 0 or 0 < _rem(n, 100) < 20:
        return 1
    return 2


def _slovenian(n: Count) -> int:
    match _rem(n, 100):
        case 1:
            return 0
        case 2:
            return 1
        case 3 | 4:
            return 2
        case _:
            return 3


def _irish(n: Count) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    if 2 < n < 7:
        return 2
    if 6 < n < 11:
        return 3
    return 4


def _arabic(n: Count) -> int:
    if n == 0:
        return 0
    if n == 1:
        return 1
    if n == 2:
        return 2
    if 3 <= _rem(n, 100) <= 10:
        return 3
    if _rem(n, 100) >= 11:
        return 4
    return 5


def _ends_in_one(n: Count) -> bool:
    # Icelandic, Macedonian: 1, 21, 31... singular; 11 plural
    return _rem(n, 10) != 1 or _rem(n, 100) == 11


def _welsh(n: Count) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    if n not in (8, 11):
        return 2
    return 3


def _scottish_gaelic(n: Count) -> int:
    if n in (1, 11):
        return 0
    if n in (2, 12):
        return 1
    if 2 < n < 20:
        return 2
    return 3


def _maltese(n: Count) -> int:
    if n == 1:
        return 0
    if n == 0 or 1 < _rem(n, 100) < 11:
        return 1
    if 10 < _rem(n, 100) < 20:
        return 2
    return 3


ONE_FORM = PluralSelector(1, _one_form, "one-form")
TWO_FORMS_NOT_ONE = PluralSelector(2, _not_one, "two-forms-not-one")
TWO_FORMS_GREATER_THAN_ONE = PluralSelector(2, _greater_than_one, "two-forms-greater-than-one")
EAST_SLAVIC = PluralSelector(3, _east_slavic, "east-slavic")
CZECH = PluralSelector(3, _czech, "czech")
POLISH = PluralSelector(3, _polish, "polish")
LITHUANIAN = PluralSelector(3, _lithuanian, "lithuanian")
LATVIAN = PluralSelector(3, _latvian, "latvian")
ROMANIAN = PluralSelector(3, _romanian, "romanian")
SLOVENIAN = PluralSelector(4, _slovenian, "slovenian")
IRISH = PluralSelector(5, _irish, "irish")
ARABIC = PluralSelector(6, _arabic, "arabic")
ENDS_IN_ONE = PluralSelector(2, _ends_in_one, "ends-in-one")
WELSH = PluralSelector(4, _welsh, "welsh")
SCOTTISH_GAELIC = PluralSelector(4, _scottish_gaelic, "scottish-gaelic")
MALTESE = PluralSelector(4, _maltese, "maltese")

# Germanic two-form pattern used when nothing else matches.
DEFAULT_PLURAL_SELECTOR: PluralSelector = TWO_FORMS_NOT_ONE

# ============================================================================
# HEADER TABLE
# ============================================================================

# Expressions as emitted by msginit, Launchpad, Weblate/Pootle and Babel.
# Each is registered both bare and wrapped in parentheses.
_EXPRESSIONS: tuple[tuple[PluralSelector, tuple[str, ...]], ...] = (
    (ONE_FORM, ("0",)),
    (TWO_FORMS_NOT_ONE, ("n != 1",)),
    (TWO_FORMS_GREATER_THAN_ONE, ("n > 1", "n >= 2")),
    (
        EAST_SLAVIC,
        (
            "n%10==1 && n%100!=11 ? 0 : n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2",
            "n%10==1 && n%100!=11 ? 0 : n%10>=2 && n%10<=4 && (n%100<12 || n%100>14) ? 1 : 2",
            "(n%10==1 && n%100!=11) ? 0 : "
            "((n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20)) ? 1 : 2)",
        ),
    ),
    (CZECH, ("(n==1) ? 0 : (n>=2 && n<=4) ? 1 : 2", "n==1 ? 0 : n>=2 && n<=4 ? 1 : 2")),
    (
        POLISH,
        (
            "n==1 ? 0 : n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2",
            "n==1 ? 0 : n%10>=2 && n%10<=4 && (n%100<12 || n%100>14) ? 1 : 2",
            "(n==1 ? 0 : n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2)",
        ),
    ),
    (
        LITHUANIAN,
        (
            "n%10==1 && n%100!=11 ? 0 : n%10>=2 && (n%100<10 || n%100>=20) ? 1 : 2",
            "(n%10==1 && n%100!=11 ? 0 : n%10>=2 && (n%100<10 || n%100>=20) ? 1 : 2)",
        ),
    ),
    (LATVIAN, ("n%10==1 && n%100!=11 ? 0 : n != 0 ? 1 : 2",)),
    (
        ROMANIAN,
        (
            "n==1 ? 0 : (n==0 || (n%100 > 0 && n%100 < 20)) ? 1 : 2",
            "n==1 ? 0 : (n==0 || (n%100 && n%100 < 20)) ? 1 : 2",
        ),
    ),
    (
        SLOVENIAN,
        (
            "n%100==1 ? 0 : n%100==2 ? 1 : n%100==3 || n%100==4 ? 2 : 3",
            "(n%100==1 ? 0 : n%100==2 ? 1 : n%100==3 || n%100==4 ? 2 : 3)",
        ),
    ),
    (
        IRISH,
        (
            "n==1 ? 0 : n==2 ? 1 : (n>2 && n<7) ? 2 :(n>6 && n<11) ? 3 : 4",
            "n==1 ? 0 : n==2 ? 1 : n>=3 && n<=6 ? 2 : n>=7 && n<=10 ? 3 : 4",
        ),
    ),
    (
        ARABIC,
        (
            "n==0 ? 0 : n==1 ? 1 : n==2 ? 2 : n%100>=3 && n%100<=10 ? 3 : n%100>=11 ? 4 : 5",
            "n==0 ? 0 : n==1 ? 1 : n==2 ? 2 : "
            "n%100>=3 && n%100<=10 ? 3 : n%100>=11 && n%100<=99 ? 4 : 5",
        ),
    ),
    (ENDS_IN_ONE, ("n%10!=1 || n%100==11", "n % 10 == 1 && n % 100 != 11 ? 0 : 1")),
    (WELSH, ("(n==1) ? 0 : (n==2) ? 1 : (n != 8 && n != 11) ? 2 : 3",)),
    (SCOTTISH_GAELIC, ("(n==1 || n==11) ? 0 : (n==2 || n==12) ? 1 : (n > 2 && n < 20) ? 2 : 3",)),
    (
        MALTESE,
        (
            "n==1 ? 0 : n==0 || ( n%100>1 && n%100<11) ? 1 : (n%100>10 && n%100<20 ) ? 2 : 3",
        ),
    ),
)


def _build_header_table() -> dict[str, PluralSelector]:
    table: dict[str, PluralSelector] = {}
    for selector, expressions in _EXPRESSIONS:
        for expression in expressions:
            for variant in (expression, f"({expression})"):
                header = f"nplurals={selector.plural_count}; plural={variant};"
                table[compact_plural_forms(header)] = selector
    return table


PLURAL_FORMS_TABLE: MappingProxyType[str, PluralSelector] = MappingProxyType(
    _build_header_table()
)
"""Compacted Plural-Forms header -> selector. Look up via compact_plural_forms()."""

# ============================================================================
# LOCALE TABLE
# ============================================================================

_LOCALE_FAMILIES: tuple[tuple[PluralSelector, tuple[str, ...]], ...] = (
    (
        ONE_FORM,
        (
            "ay", "bo", "cgg", "dz", "id", "ja", "jbo", "ka", "km", "ko", "lo",
            "ms", "my", "sah", "su", "th", "tt", "ug", "vi", "wo", "yo", "zh",
        ),
    ),
    (
        TWO_FORMS_NOT_ONE,
        (
            "af", "an", "ast", "az", "bg", "ca", "da", "de", "el", "en", "eo",
            "es", "et", "eu", "fi", "fo", "fur", "fy", "gl", "gu", "ha", "he",
            "hu", "hy", "ia", "it", "kk", "kl", "ku", "ky", "lb", "ml", "mn",
            "mr", "nah", "nap", "nb", "ne", "nl", "nn", "no", "nso", "or", "pa",
            "pap", "pms", "ps", "pt", "rm", "sco", "si", "so", "son", "sq", "sv",
            "sw", "ta", "te", "tk", "tr", "ur", "zu",
        ),
    ),
    (
        TWO_FORMS_GREATER_THAN_ONE,
        (
            "ach", "ak", "am", "arn", "br", "fa", "fil", "fr", "gun", "hi", "ln",
            "mfe", "mg", "mi", "oc", "pt_BR", "tg", "ti", "tl", "uz", "wa",
        ),
    ),
    (EAST_SLAVIC, ("be", "bs", "hr", "ru", "sr", "uk")),
    (CZECH, ("cs", "sk")),
    (POLISH, ("pl",)),
    (LITHUANIAN, ("lt",)),
    (LATVIAN, ("lv",)),
    (ROMANIAN, ("ro",)),
    (SLOVENIAN, ("sl",)),
    (IRISH, ("ga",)),
    (ARABIC, ("ar",)),
    (ENDS_IN_ONE, ("is", "mk")),
    (WELSH, ("cy",)),
    (SCOTTISH_GAELIC, ("gd",)),
    (MALTESE, ("mt",)),
)

LOCALE_PLURAL_TABLE: MappingProxyType[str, PluralSelector] = MappingProxyType(
    {locale: selector for selector, locales in _LOCALE_FAMILIES for locale in locales}
)
"""Locale code (underscore separator) -> selector, for catalogs without a header."""
