from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_profile
from app.db.models.profile import Profile
from app.schemas.contract import Contract
from app.services.contract import get_contract_for_profile, list_active_contracts

router = APIRouter(prefix="/contracts", tags=["contracts"])


@router.get("", response_model=list[Contract])
def get_active_contracts(
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
):
    """
    Get the non-terminated contracts of the current profile.
    - Client: contracts where it is the client
    - Contractor: contracts where it is the contractor
    """
    contracts = list_active_contracts(db, current_profile)
    return [Contract.model_validate(contract) for contract in contracts]


@router.get("/{contract_id}", response_model=Contract)
def get_contract_by_id(
    contract_id: int,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
):
    """
    Get a contract by ID. Only contracts where the current profile is the
    client or the contractor are visible.
    """
    contract = get_contract_for_profile(db, current_profile, contract_id)
    return Contract.model_validate(contract)
