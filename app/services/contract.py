from sqlalchemy.orm import Session

import app.repositories.contract as contract_repo
from app.db.models.contract import Contract as ContractModel
from app.db.models.profile import Profile as ProfileModel
from app.errors import NotFoundError


def get_contract_for_profile(
    db: Session, profile: ProfileModel, contract_id: int
) -> ContractModel:
    """
    Get a contract by ID if the profile is one of its parties.

    Contracts of other profiles are reported as missing, not forbidden,
    so their existence isn't leaked.

    Raises:
        NotFoundError: If the contract does not exist or doesn't involve the profile.
    """
    contract = contract_repo.get_contract_for_profile(db, contract_id, profile.id)
    if not contract:
        raise NotFoundError("Contract not found")
    return contract


def list_active_contracts(db: Session, profile: ProfileModel) -> list[ContractModel]:
    """Non-terminated contracts of the profile, from its side (client or contractor)."""
    return contract_repo.get_active_contracts_by_profile(db, profile.id, profile.type)
