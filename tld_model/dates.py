"""
tld_model/dates.py — effective dates of one node in the taglib hierarchy.

Dates carries four optional timezone-aware timestamps (created, published,
modified, reviewed). Instances are immutable; aggregation across siblings
is done with Dates.merge, folded strictly left-to-right.

Field names follow https://schema.org/ (dateCreated, datePublished,
dateModified); dateReviewed has no schema.org equivalent.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Iterable

from .errors import ErrorCode, OrderingError

# Comment variable names
DATE_CREATED   = "dateCreated"
DATE_PUBLISHED = "datePublished"
DATE_MODIFIED  = "dateModified"
DATE_REVIEWED  = "dateReviewed"

DATE_VARIABLES: tuple[str, ...] = (DATE_CREATED, DATE_PUBLISHED, DATE_MODIFIED, DATE_REVIEWED)


# ---------------------------------------------------------------------------
# Pairwise helpers
# ---------------------------------------------------------------------------

def older(dt1: datetime | None, dt2: datetime | None) -> datetime | None:
    """Older of two timestamps, or None when either is None."""
    if dt1 is None or dt2 is None:
        return None
    return dt1 if dt1 <= dt2 else dt2


def newer(dt1: datetime | None, dt2: datetime | None) -> datetime | None:
    """Newer of two timestamps, or None when either is None."""
    if dt1 is None or dt2 is None:
        return None
    return dt1 if dt1 >= dt2 else dt2


def _max_non_null(*values: datetime | None) -> datetime | None:
    present = [v for v in values if v is not None]
    return max(present) if present else None


def _check_not_before(
    field1: str,
    dt1: datetime | None,
    field2: str,
    dt2: datetime | None,
) -> None:
    if dt1 is not None and dt2 is not None and dt1 < dt2:
        raise OrderingError(
            ErrorCode.ORDERING_VIOLATION,
            f"{field1} < {field2}: {dt1.isoformat()} < {dt2.isoformat()}",
        )


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Dates:
    """
    Set of dates for one node (taglib, tag, function).

    - created:   https://schema.org/dateCreated
    - published: https://schema.org/datePublished; when created and published
                 are the same, prefer published
    - modified:  https://schema.org/dateModified
    - reviewed:  last time the content was checked for accuracy, even when
                 unmodified
    """

    created:   datetime | None = None
    published: datetime | None = None
    modified:  datetime | None = None
    reviewed:  datetime | None = None

    UNKNOWN: ClassVar[Dates]

    @classmethod
    def value_of(
        cls,
        created:   datetime | None = None,
        published: datetime | None = None,
        modified:  datetime | None = None,
        reviewed:  datetime | None = None,
    ) -> Dates:
        """Returns UNKNOWN when all four are None, a new instance otherwise."""
        if created is None and published is None and modified is None and reviewed is None:
            return cls.UNKNOWN
        return cls(created, published, modified, reviewed)

    @property
    def is_unknown(self) -> bool:
        return (
            self.created is None
            and self.published is None
            and self.modified is None
            and self.reviewed is None
        )

    def check_not_before(self, fields: str, other_fields: str, other: Dates) -> None:
        """
        Checks that created and published of this set are not before the same
        fields of ``other``. modified and reviewed are not compared.

        Raises:
            OrderingError: naming both labels and both timestamps.
        """
        _check_not_before(
            f"{fields}/{DATE_CREATED}", self.created,
            f"{other_fields}/{DATE_CREATED}", other.created,
        )
        _check_not_before(
            f"{fields}/{DATE_PUBLISHED}", self.published,
            f"{other_fields}/{DATE_PUBLISHED}", other.published,
        )

    @staticmethod
    def merge(d1: Dates | None, d2: Dates | None) -> Dates | None:
        """
        Merges two sets: older created, older published, newer modified,
        older reviewed.

        None on either side returns the other side unchanged. A field that is
        None on either side yields None, so an unknown date propagates as
        unknown. When at least one side has an explicit modified, a side
        without one falls back to the later of its own created/published.
        """
        if d1 is None:
            return d2
        if d2 is None:
            return d1
        modified1 = d1.modified
        modified2 = d2.modified
        if modified1 is not None or modified2 is not None:
            if modified1 is None:
                modified1 = _max_non_null(d1.created, d1.published)
            if modified2 is None:
                modified2 = _max_non_null(d2.created, d2.published)
        return Dates.value_of(
            older(d1.created,   d2.created),
            older(d1.published, d2.published),
            newer(modified1,    modified2),
            older(d1.reviewed,  d2.reviewed),
        )

    def to_dict(self) -> dict[str, str | None]:
        """Timestamps as ISO-8601 strings, keyed by comment variable name."""
        return {
            DATE_CREATED:   self.created.isoformat()   if self.created   else None,
            DATE_PUBLISHED: self.published.isoformat() if self.published else None,
            DATE_MODIFIED:  self.modified.isoformat()  if self.modified  else None,
            DATE_REVIEWED:  self.reviewed.isoformat()  if self.reviewed  else None,
        }


Dates.UNKNOWN = Dates()


def merge_all(dates: Iterable[Dates | None], initial: Dates | None = None) -> Dates | None:
    """Left-to-right fold of Dates.merge, in iteration order."""
    return functools.reduce(Dates.merge, dates, initial)
