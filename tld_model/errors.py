"""
tld_model/errors.py — error codes and exception types.

Every failure while reading a TLD is terminal: the exception propagates up
and aborts construction of the whole Taglib. Messages carry the node path
and the raw values so the offending source can be located directly.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable error identifiers, grouped by stage."""

    # Comment variables
    AMBIGUOUS_QUOTING            = "E_AMBIGUOUS_QUOTING"
    MULTIPLE_DECLARATIONS        = "E_MULTIPLE_DECLARATIONS"
    INVALID_ALLOW_ROBOTS         = "E_INVALID_ALLOW_ROBOTS"
    INVALID_DATE                 = "E_INVALID_DATE"

    # Generics reconciliation
    ORPHAN_ANNOTATION            = "E_ORPHAN_ANNOTATION"
    BARE_GENERICS_NOT_ALLOWED    = "E_BARE_GENERICS_NOT_ALLOWED"
    UNTERMINATED_GENERIC_SEGMENT = "E_UNTERMINATED_GENERIC_SEGMENT"
    MISMATCH                     = "E_MISMATCH"

    # Dates
    ORDERING_VIOLATION           = "E_ORDERING_VIOLATION"

    # Document structure
    INVALID_DOCUMENT             = "E_INVALID_DOCUMENT"
    DUPLICATE_CHILD              = "E_DUPLICATE_CHILD"
    DUPLICATE_NAME               = "E_DUPLICATE_NAME"
    UNSUPPORTED_ELEMENT          = "E_UNSUPPORTED_ELEMENT"
    SUMMARY_FAILED               = "E_SUMMARY_FAILED"


class TldError(ValueError):
    """
    Base class for all TLD errors.

    - code:    ErrorCode of the failure
    - message: readable description including path and raw values
    """

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def with_prefix(self, prefix: str) -> TldError:
        """Returns a copy of this error with ``prefix`` prepended to the message."""
        return type(self)(self.code, f"{prefix}: {self.message}")


class ExtractionError(TldError):
    """Malformed or conflicting comment variable."""


class ReconcileError(TldError):
    """Child element and variable-comment disagree."""


class OrderingError(TldError):
    """A child scope claims a date before its container."""


class DocumentError(TldError):
    """Structural problem in the TLD document itself."""
