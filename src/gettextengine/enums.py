"""Enumerations for gettextengine type-safe constants.

Uses StrEnum for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of loading a single catalog file.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """File parsed and converted into a DomainCatalog."""

    NOT_FOUND = "not_found"
    """File or directory does not exist."""

    ERROR = "error"
    """File exists but could not be read or parsed."""


__all__ = [
    "LoadStatus",
]
