from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from app.errors import InvalidRangeError


def to_naive_utc(value: datetime) -> datetime:
    """Payment dates are stored as naive UTC; convert aware datetimes to match."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


@dataclass(frozen=True, slots=True)
class ReportWindow:
    """A closed [start, end] interval of payment dates used by reports.

    Both ends are inclusive: a job paid exactly at ``end`` is counted.
    """

    start: datetime
    end: datetime

    @classmethod
    def build(cls, start: datetime, end: datetime) -> ReportWindow:
        start, end = to_naive_utc(start), to_naive_utc(end)
        if start > end:
            raise InvalidRangeError(
                f"Start ({start.isoformat()}) cannot be after end ({end.isoformat()})"
            )
        return cls(start=start, end=end)

    def sqlalchemy_predicate(self, *, date_col):
        """Build a SQLAlchemy predicate selecting rows whose date falls in the window."""
        return date_col.between(self.start, self.end)
