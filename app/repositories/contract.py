from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from app.db.models.contract import TERMINATED, Contract as ContractModel
from app.db.models.profile import CLIENT


def party_column(profile_type: str):
    """Column holding the profile's side of a contract, by profile type."""
    if profile_type == CLIENT:
        return ContractModel.client_id
    return ContractModel.contractor_id


def get_contract_for_profile(
    db: Session, contract_id: int, profile_id: int
) -> ContractModel | None:
    """Get a contract by ID if the profile is its client or its contractor."""
    return (
        db.query(ContractModel)
        .filter(
            ContractModel.id == contract_id,
            or_(
                ContractModel.client_id == profile_id,
                ContractModel.contractor_id == profile_id,
            ),
        )
        .first()
    )


def get_contract_with_parties(db: Session, contract_id: int) -> ContractModel | None:
    """Get a contract with its jobs, client and contractor loaded."""
    return (
        db.query(ContractModel)
        .options(
            joinedload(ContractModel.jobs),
            joinedload(ContractModel.client),
            joinedload(ContractModel.contractor),
        )
        .filter(ContractModel.id == contract_id)
        .first()
    )


def get_active_contracts_by_profile(
    db: Session, profile_id: int, profile_type: str
) -> list[ContractModel]:
    """Get all non-terminated contracts where the profile is the party for its type."""
    return (
        db.query(ContractModel)
        .filter(
            party_column(profile_type) == profile_id,
            ContractModel.status != TERMINATED,
        )
        .order_by(ContractModel.id)
        .all()
    )
