import logging
from decimal import Decimal

from sqlalchemy.orm import Session

import app.repositories.job as job_repo
import app.repositories.profile as profile_repo
from app.core.config import settings
from app.db.models.profile import Profile as ProfileModel
from app.domain.deposit_limit import DepositLimitPolicy
from app.errors import DepositTooLargeError, DomainValidationError, NotFoundError

logger = logging.getLogger(__name__)


def deposit(db: Session, client_id: int, amount: Decimal) -> ProfileModel:
    """
    Deposit money into a client's balance.

    - Validates amount is greater than 0
    - Validates the target profile exists and is a client
    - Rejects deposits above the allowed share of the client's unpaid jobs total
      (see DepositLimitPolicy)
    """
    if amount <= 0:
        raise DomainValidationError("Deposit amount must be greater than 0")

    client = profile_repo.get_client_by_id(db, client_id)
    if not client:
        raise NotFoundError("Client not found")

    total_owed = job_repo.get_total_owed_by_client_id(db, client_id)
    policy = DepositLimitPolicy.from_ratio(settings.deposit_cap_ratio)
    if not policy.allows(amount=amount, total_owed=total_owed):
        logger.warning(
            "Deposit of %s rejected for client %s: unpaid jobs total %s",
            amount,
            client_id,
            total_owed,
        )
        raise DepositTooLargeError(
            f"The amount is higher than allowed: at most {policy.max_deposit(total_owed):.2f} can be deposited"
        )

    profile = profile_repo.increment_balance(db, client_id, amount)
    logger.info("Deposited %s into client %s", amount, client_id)
    return profile
