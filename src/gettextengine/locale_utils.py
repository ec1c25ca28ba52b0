"""Locale utilities for catalog keys and environment-derived preferences.

Centralizes locale string handling used throughout the codebase:
separator normalization, language-prefix extraction and the POSIX
environment precedence used to build a locale preference list.

Nothing here reads ``os.environ``; callers pass the environment mapping
explicitly.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from gettextengine.types import LocaleCode

__all__ = [
    "get_language_code",
    "guess_env_locale",
    "is_posix_c_locale",
    "normalize_locale",
]

# Separators that may follow the language subtag: region, script,
# encoding and modifier.
_SUBTAG_SPLIT = re.compile(r"[-_.@]")

# Environment variables consulted after LANGUAGE, highest priority first.
_LOCALE_VARIABLES: tuple[str, ...] = ("LC_ALL", "LC_MESSAGES", "LANG")


def normalize_locale(locale_code: LocaleCode) -> LocaleCode:
    """Convert BCP-47 separators to the POSIX/gettext convention.

    BCP-47 uses hyphens (en-US), while GNU gettext catalogs and Babel use
    underscores (en_US).

    Args:
        locale_code: Locale code (e.g., "en-US", "pt-BR")

    Returns:
        Locale code with underscores (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("sr-Latn-RS")
        'sr_Latn_RS'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


def get_language_code(locale_code: LocaleCode) -> str:
    """Return the language-only prefix of a locale code.

    Strips region, script, encoding and modifier. Language subtags are two
    or three characters long, so longer leading segments are truncated.

    Args:
        locale_code: Case-insensitive locale string

    Returns:
        Lowercased language code, possibly empty

    Example:
        >>> get_language_code("sv-SE")
        'sv'
        >>> get_language_code("ab-cd_ef.utf-8")
        'ab'
        >>> get_language_code("fil_PH")
        'fil'
    """
    return _SUBTAG_SPLIT.split(locale_code, maxsplit=1)[0][:3].lower()


def is_posix_c_locale(value: str) -> bool:
    """Check whether a locale value names the untranslated C/POSIX locale.

    Example:
        >>> is_posix_c_locale("C.UTF-8")
        True
        >>> is_posix_c_locale("ca_ES")
        False
    """
    return value in ("C", "POSIX") or value.startswith("C.")


def _strip_encoding(value: str) -> str:
    # "de_DE.UTF-8" -> "de_DE", "sr_RS.UTF-8@latin" -> "sr_RS@latin"
    base, dot, rest = value.partition(".")
    if not dot:
        return value
    _, at, modifier = rest.partition("@")
    return f"{base}@{modifier}" if at else base


def guess_env_locale(env: Mapping[str, str | None]) -> list[LocaleCode]:
    """Build an ordered locale preference list from environment variables.

    Precedence, highest first: ``LANGUAGE`` (colon-separated list), then
    ``LC_ALL``, ``LC_MESSAGES`` and ``LANG``.

    If ``LANG`` is ``C``, ``C.<encoding>`` or ``POSIX`` and none of the
    higher-priority variables is set, the result is empty, meaning "show the
    source strings untranslated". C-like values are never returned as
    candidates. Encoding suffixes are stripped and duplicates removed while
    keeping the first occurrence.

    Args:
        env: Snapshot of the environment (e.g., ``dict(os.environ)``)

    Returns:
        Locale codes in preference order

    Example:
        >>> guess_env_locale({"LANGUAGE": "zh_TW:ja", "LANG": "en_US.UTF-8"})
        ['zh_TW', 'ja', 'en_US']
        >>> guess_env_locale({"LANG": "C.UTF-8"})
        []
    """
    language = env.get("LANGUAGE") or ""
    higher_set = bool(language) or any(env.get(var) for var in ("LC_ALL", "LC_MESSAGES"))
    lang = env.get("LANG") or ""
    if lang and not higher_set and is_posix_c_locale(lang):
        return []

    candidates: list[str] = [part for part in language.split(":") if part]
    candidates.extend(value for var in _LOCALE_VARIABLES if (value := env.get(var)))

    stripped = (
        _strip_encoding(value) for value in candidates if not is_posix_c_locale(value)
    )
    # dict.fromkeys() removes duplicates while maintaining insertion order
    return list(dict.fromkeys(value for value in stripped if value))
