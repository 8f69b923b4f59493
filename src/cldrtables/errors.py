"""Caller-facing exceptions for table access.

Missing keys are not errors: lookups return None and leave fallback policy
to the caller. These exceptions cover requests that cannot be answered at
all (unknown table, unusable locale identifier).

Data defects (malformed files) live in cldrtables.integrity instead.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cldrtables.enums import TableDomain

__all__ = [
    "InvalidLocaleError",
    "TableError",
    "TableNotFoundError",
]


class TableError(Exception):
    """Base exception for table access errors."""


class TableNotFoundError(TableError, LookupError):
    """No table exists for the requested locale and domain.

    Attributes:
        domain: Requested table domain
        locale: Requested locale (canonical form)
    """

    def __init__(self, domain: TableDomain, locale: str) -> None:
        """Initialize TableNotFoundError.

        Args:
            domain: Requested table domain
            locale: Requested locale (canonical form)
        """
        super().__init__(f"No {domain} table for locale '{locale}'")
        self.domain = domain
        self.locale = locale


class InvalidLocaleError(TableError, ValueError):
    """Locale identifier is empty, path-like or not a valid CLDR identifier."""
