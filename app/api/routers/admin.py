from datetime import datetime

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_profile
from app.db.models.profile import Profile
from app.schemas.money import Money
from app.schemas.report import ClientEarnings
from app.services.report import best_clients, best_profession

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/best-profession", response_model=dict[str, Money])
def get_best_profession(
    start: datetime = Query(..., description="Start of the payment window (inclusive)"),
    end: datetime = Query(..., description="End of the payment window (inclusive)"),
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
):
    """
    Get the total earned per contractor profession for jobs paid between start and end.
    """
    return best_profession(db, start, end)


@router.get("/best-clients", response_model=list[ClientEarnings])
def get_best_clients(
    start: datetime = Query(..., description="Start of the payment window (inclusive)"),
    end: datetime = Query(..., description="End of the payment window (inclusive)"),
    limit: int | None = Query(None, ge=1, description="Maximum number of clients (default 2)"),
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
):
    """
    Get the clients that paid the most for jobs paid between start and end, highest first.
    """
    clients = best_clients(db, start, end, limit=limit)
    return [ClientEarnings.model_validate(client) for client in clients]
