import logging
from datetime import datetime, timezone

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

import app.repositories.contract as contract_repo
import app.repositories.job as job_repo
from app.db.models.contract import Contract as ContractModel
from app.db.models.profile import CLIENT, Profile as ProfileModel
from app.errors import (
    ForbiddenError,
    InsufficientFundsError,
    NotFoundError,
    StorageError,
)

logger = logging.getLogger(__name__)

# One attempt plus a single retry on storage errors.
MAX_TRANSFER_ATTEMPTS = 2


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _pay_once(db: Session, client_id: int, job_id: int) -> int:
    job = job_repo.get_payable_job_for_update(db, job_id=job_id, client_id=client_id)
    if not job:
        db.rollback()
        raise NotFoundError("Job not found or already paid")

    contract = job.contract
    contract_id = contract.id
    contractor_id = contract.contractor_id
    price = job.price
    if price > contract.client.balance:
        db.rollback()
        logger.warning(
            "Client %s cannot pay job %s: balance %s is below price %s",
            client_id,
            job_id,
            contract.client.balance,
            price,
        )
        raise InsufficientFundsError(
            f"Insufficient funds: job {job_id} costs {price}"
        )

    job_repo.commit_transfer(
        db,
        job_id=job_id,
        client_id=client_id,
        contractor_id=contractor_id,
        amount=price,
        paid_at=_utcnow(),
    )
    logger.info(
        "Job %s paid: %s moved from client %s to contractor %s",
        job_id,
        price,
        client_id,
        contractor_id,
    )
    return contract_id


def pay_job(db: Session, actor: ProfileModel, job_id: int) -> ContractModel:
    """
    Pay for a job, moving its price from the client to the contractor.

    Business logic:
    - Only clients can pay
    - The job must belong to one of the actor's contracts and be unpaid
    - The client's balance must cover the job price
    - Marking the job paid and both balance updates commit together or not at all
    - A storage failure during the transfer is retried once, then surfaced as StorageError
    - Once the transfer is committed it is never retried; a failure reloading
      the contract is surfaced as StorageError

    Returns:
        The contract with its jobs, client and contractor reloaded after the payment

    Raises:
        ForbiddenError: If the actor is not a client
        NotFoundError: If the job does not exist, is not the actor's, or is already paid
        AlreadyPaidError: If another request paid the job in the meantime
        InsufficientFundsError: If the client's balance is lower than the price
        StorageError: If the database fails twice in a row, or after the payment
    """
    if actor.type != CLIENT:
        raise ForbiddenError("Only clients can pay for jobs")

    client_id = actor.id
    for attempt in range(1, MAX_TRANSFER_ATTEMPTS + 1):
        try:
            contract_id = _pay_once(db, client_id=client_id, job_id=job_id)
            break
        except OperationalError as e:
            db.rollback()
            if attempt == MAX_TRANSFER_ATTEMPTS:
                logger.error("Payment of job %s failed after %s attempts: %s", job_id, attempt, e)
                raise StorageError("Payment could not be completed, please try again") from e
            logger.warning("Storage error paying job %s, retrying: %s", job_id, e)

    try:
        return contract_repo.get_contract_with_parties(db, contract_id)
    except OperationalError as e:
        db.rollback()
        logger.error("Job %s was paid but contract %s could not be reloaded: %s", job_id, contract_id, e)
        raise StorageError(
            "Payment was completed but its result could not be loaded"
        ) from e
