from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import func, true
from sqlalchemy.orm import Session

from app.db.models.contract import Contract as ContractModel
from app.db.models.job import Job as JobModel
from app.db.models.profile import Profile as ProfileModel
from app.domain.report_window import ReportWindow


@dataclass(frozen=True, slots=True)
class ProfessionEarnings:
    profession: str
    total: Decimal


@dataclass(frozen=True, slots=True)
class ClientEarnings:
    id: int
    full_name: str
    paid: Decimal


def _paid_jobs_in_window(db: Session, window: ReportWindow, *columns):
    """Base query over paid jobs in the window, joined to their contract."""
    return (
        db.query(*columns)
        .select_from(JobModel)
        .join(ContractModel, JobModel.contract_id == ContractModel.id)
        .filter(
            JobModel.paid == true(),
            window.sqlalchemy_predicate(date_col=JobModel.payment_date),
        )
    )


def get_earnings_by_profession(
    db: Session, window: ReportWindow
) -> list[ProfessionEarnings]:
    """Sum paid job prices per contractor profession."""
    total = func.sum(JobModel.price).label("total")
    rows = (
        _paid_jobs_in_window(db, window, ProfileModel.profession, total)
        .join(ProfileModel, ContractModel.contractor_id == ProfileModel.id)
        .group_by(ProfileModel.profession)
        .order_by(ProfileModel.profession)
        .all()
    )
    return [ProfessionEarnings(profession=row.profession, total=Decimal(row.total)) for row in rows]


def get_earnings_by_client(
    db: Session, window: ReportWindow, limit: int
) -> list[ClientEarnings]:
    """Sum paid job prices per client, highest payers first, at most limit rows."""
    paid = func.sum(JobModel.price).label("paid")
    rows = (
        _paid_jobs_in_window(
            db,
            window,
            ProfileModel.id,
            ProfileModel.first_name,
            ProfileModel.last_name,
            paid,
        )
        .join(ProfileModel, ContractModel.client_id == ProfileModel.id)
        .group_by(ProfileModel.id, ProfileModel.first_name, ProfileModel.last_name)
        .order_by(paid.desc(), ProfileModel.id.asc())
        .limit(limit)
        .all()
    )
    return [
        ClientEarnings(
            id=row.id,
            full_name=f"{row.first_name} {row.last_name}",
            paid=Decimal(row.paid),
        )
        for row in rows
    ]
