from datetime import datetime
from decimal import Decimal

from sqlalchemy.orm import Session

import app.repositories.report as report_repo
from app.core.config import settings
from app.domain.report_window import ReportWindow
from app.errors import DomainValidationError
from app.repositories.report import ClientEarnings


def best_profession(db: Session, start: datetime, end: datetime) -> dict[str, Decimal]:
    """
    Total earned per contractor profession for jobs paid within [start, end].

    Professions without paid jobs in the window are absent. No ranking is applied.

    Raises:
        InvalidRangeError: If start is after end
    """
    window = ReportWindow.build(start, end)
    return {
        row.profession: row.total
        for row in report_repo.get_earnings_by_profession(db, window)
    }


def best_clients(
    db: Session,
    start: datetime,
    end: datetime,
    limit: int | None = None,
) -> list[ClientEarnings]:
    """
    Clients who paid the most for jobs paid within [start, end], highest first.

    Raises:
        InvalidRangeError: If start is after end
        DomainValidationError: If limit is lower than 1
    """
    window = ReportWindow.build(start, end)
    if limit is None:
        limit = settings.best_clients_default_limit
    if limit < 1:
        raise DomainValidationError("Limit must be at least 1")
    return report_repo.get_earnings_by_client(db, window, limit)
