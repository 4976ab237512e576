"""
tld_model — data structures of a parsed tag library descriptor (TLD).

Usage:
  from tld_model import Taglib, Tag, Dates, TldError, ...

Modules:
  dates  — Dates (four optional timestamps), merge / ordering rules
  nodes  — Taglib, Tag, Function, Attribute, DeferredMethod, DeferredValue
  errors — ErrorCode and the TldError exception family
"""

from .dates import (
    DATE_CREATED,
    DATE_PUBLISHED,
    DATE_MODIFIED,
    DATE_REVIEWED,
    DATE_VARIABLES,
    Dates,
    merge_all,
    newer,
    older,
)
from .errors import (
    ErrorCode,
    TldError,
    ExtractionError,
    ReconcileError,
    OrderingError,
    DocumentError,
)
from .nodes import (
    Taglib,
    Tag,
    Function,
    Attribute,
    DeferredMethod,
    DeferredValue,
)

__all__ = [
    # dates
    "DATE_CREATED",
    "DATE_PUBLISHED",
    "DATE_MODIFIED",
    "DATE_REVIEWED",
    "DATE_VARIABLES",
    "Dates",
    "merge_all",
    "newer",
    "older",
    # errors
    "ErrorCode",
    "TldError",
    "ExtractionError",
    "ReconcileError",
    "OrderingError",
    "DocumentError",
    # nodes
    "Taglib",
    "Tag",
    "Function",
    "Attribute",
    "DeferredMethod",
    "DeferredValue",
]
