"""Data integrity exceptions for locale tables.

These exceptions indicate DATA DEFECTS, not lookup misses. A table file
that violates the schema was produced by a broken generation step; it must
fail loudly at load time rather than be served partially.

Design:
    - NOT subclasses of TableError (different error domain)
    - Carry diagnostic context for post-mortem analysis
    - Immutable after construction

Hierarchy:
    DataIntegrityError (base - data defects)
    ├─ TableSchemaError (malformed document or value shape)
    │  └─ DuplicateKeyError (key repeated within one table)
    └─ ImmutabilityViolationError (mutation attempt on frozen object)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

__all__ = [
    "DataIntegrityError",
    "DuplicateKeyError",
    "ImmutabilityViolationError",
    "IntegrityContext",
    "TableSchemaError",
]


@dataclass(frozen=True, slots=True)
class IntegrityContext:
    """Context for integrity error diagnosis.

    Attributes:
        component: System component where error occurred (schema, codec, loader)
        operation: Operation being performed (decode, validate, mutate)
        key: Table file name, entry key or member name involved (optional)
        expected: Expected shape or value (optional)
        actual: Shape or value found (optional)
    """

    component: str
    operation: str
    key: str | None = None
    expected: str | None = None
    actual: str | None = None


class DataIntegrityError(Exception):
    """Base exception for all data integrity failures.

    This exception is immutable after construction to prevent
    tampering with error evidence.

    Attributes:
        context: Structured diagnostic context for post-mortem analysis
    """

    __slots__ = ("_context", "_frozen")

    _context: IntegrityContext | None
    _frozen: bool

    def __init__(
        self,
        message: str,
        context: IntegrityContext | None = None,
    ) -> None:
        """Initialize DataIntegrityError.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
        """
        super().__init__(message)
        object.__setattr__(self, "_context", context)
        object.__setattr__(self, "_frozen", True)

    # Python's exception handling sets these attributes when propagating exceptions.
    _PYTHON_EXCEPTION_ATTRS: frozenset[str] = frozenset(
        ("__traceback__", "__context__", "__cause__", "__suppress_context__", "__notes__")
    )

    def __setattr__(self, name: str, value: object) -> None:
        """Reject all attribute mutations after initialization.

        Raises:
            ImmutabilityViolationError: If attempting to modify after construction
        """
        if name in self._PYTHON_EXCEPTION_ATTRS:
            object.__setattr__(self, name, value)
            return
        if getattr(self, "_frozen", False):
            msg = f"Cannot modify integrity error attribute: {name}"
            raise ImmutabilityViolationError(msg)
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        """Reject all attribute deletions.

        Raises:
            ImmutabilityViolationError: Always
        """
        msg = f"Cannot delete integrity error attribute: {name}"
        raise ImmutabilityViolationError(msg)

    @property
    def context(self) -> IntegrityContext | None:
        """Structured diagnostic context."""
        return self._context

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.args[0]!r}, context={self._context!r})"


class TableSchemaError(DataIntegrityError):
    """Table document does not match the persisted table schema.

    Raised for unknown or missing members, domain/locale mismatches,
    values of the wrong shape (a timezone name set that is not six
    strings, for example) and references to undefined name sets.
    """


@final
class DuplicateKeyError(TableSchemaError):
    """A key occurs more than once in a single table."""


@final
class ImmutabilityViolationError(DataIntegrityError):
    """Attempt to mutate an immutable object.

    Raised when code attempts to modify a DataIntegrityError after
    construction.
    """
