from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_profile
from app.db.models.profile import Profile as ProfileModel
from app.schemas.deposit import DepositRequest
from app.schemas.profile import Profile
from app.services.deposit import deposit

router = APIRouter(prefix="/balances", tags=["balances"])


@router.post("/deposit/{user_id}", response_model=Profile)
def deposit_into_balance(
    user_id: int,
    deposit_data: DepositRequest,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """
    Deposit money into a client's balance.

    A client can't deposit more than 25% of the total of its unpaid jobs
    (the share is configurable with DEPOSIT_CAP_RATIO).
    """
    profile = deposit(db, user_id, deposit_data.amount)
    return Profile.model_validate(profile)
