from datetime import datetime
from decimal import Decimal

from sqlalchemy import func, true, update
from sqlalchemy.orm import Session, contains_eager

from app.db.models.contract import TERMINATED, Contract as ContractModel
from app.db.models.job import Job as JobModel
from app.db.models.profile import Profile as ProfileModel
from app.repositories.contract import party_column
from app.errors import AlreadyPaidError, InsufficientFundsError


def get_unpaid_jobs_by_profile(
    db: Session, profile_id: int, profile_type: str
) -> list[JobModel]:
    """
    Get unpaid jobs of the profile's non-terminated contracts.

    Clients see jobs of contracts they hired, contractors jobs of contracts they work on.
    """
    return (
        db.query(JobModel)
        .join(ContractModel, JobModel.contract_id == ContractModel.id)
        .filter(
            JobModel.paid.is_(None),
            party_column(profile_type) == profile_id,
            ContractModel.status != TERMINATED,
        )
        .order_by(JobModel.id)
        .all()
    )


def get_total_owed_by_client_id(db: Session, client_id: int) -> Decimal:
    """Sum the prices of every unpaid job across all of the client's contracts."""
    total = (
        db.query(func.coalesce(func.sum(JobModel.price), 0))
        .select_from(JobModel)
        .join(ContractModel, JobModel.contract_id == ContractModel.id)
        .filter(ContractModel.client_id == client_id, JobModel.paid.is_(None))
        .scalar()
    )
    return Decimal(total or 0)


def get_payable_job_for_update(
    db: Session, job_id: int, client_id: int
) -> JobModel | None:
    """
    Get an unpaid job of one of the client's contracts, with the contract and
    both of its profiles loaded in the same query.

    The job row is locked (SELECT ... FOR UPDATE) on backends that support it.
    """
    return (
        db.query(JobModel)
        .join(ContractModel, JobModel.contract_id == ContractModel.id)
        .options(
            contains_eager(JobModel.contract).joinedload(
                ContractModel.client, innerjoin=True
            ),
            contains_eager(JobModel.contract).joinedload(
                ContractModel.contractor, innerjoin=True
            ),
        )
        .filter(
            JobModel.id == job_id,
            JobModel.paid.is_(None),
            ContractModel.client_id == client_id,
        )
        .with_for_update(of=JobModel)
        .populate_existing()
        .first()
    )


def commit_transfer(
    db: Session,
    job_id: int,
    client_id: int,
    contractor_id: int,
    amount: Decimal,
    paid_at: datetime,
) -> None:
    """
    Mark the job paid and move amount from client to contractor in one transaction.

    Every update is conditional, so a job paid concurrently or a balance spent
    concurrently rolls the whole transfer back instead of applying half of it.
    """
    try:
        marked = db.execute(
            update(JobModel)
            .where(JobModel.id == job_id, JobModel.paid.is_(None))
            .values(paid=true(), payment_date=paid_at)
            .execution_options(synchronize_session=False)
        )
        if marked.rowcount != 1:
            raise AlreadyPaidError("Job not found or already paid")

        debited = db.execute(
            update(ProfileModel)
            .where(ProfileModel.id == client_id, ProfileModel.balance >= amount)
            .values(balance=ProfileModel.balance - amount)
            .execution_options(synchronize_session=False)
        )
        if debited.rowcount != 1:
            raise InsufficientFundsError("Insufficient funds")

        db.execute(
            update(ProfileModel)
            .where(ProfileModel.id == contractor_id)
            .values(balance=ProfileModel.balance + amount)
            .execution_options(synchronize_session=False)
        )
        db.commit()
    except Exception:
        db.rollback()
        raise
