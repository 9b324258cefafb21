from decimal import Decimal

from sqlalchemy import update
from sqlalchemy.orm import Session

from app.db.models.profile import CLIENT, Profile as ProfileModel
from app.errors import NotFoundError


def get_profile_by_id(db: Session, profile_id: int) -> ProfileModel | None:
    """Get a profile by ID."""
    return db.query(ProfileModel).filter(ProfileModel.id == profile_id).first()


def get_client_by_id(db: Session, profile_id: int) -> ProfileModel | None:
    """Get a profile by ID only if it is a client."""
    return (
        db.query(ProfileModel)
        .filter(ProfileModel.id == profile_id, ProfileModel.type == CLIENT)
        .first()
    )


def increment_balance(db: Session, profile_id: int, amount: Decimal) -> ProfileModel:
    """
    Add amount to a profile's balance and commit. Pure data access - no business logic.

    The addition happens in SQL so concurrent deposits don't overwrite each other.
    """
    result = db.execute(
        update(ProfileModel)
        .where(ProfileModel.id == profile_id)
        .values(balance=ProfileModel.balance + amount)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount != 1:
        db.rollback()
        raise NotFoundError("Profile not found")

    db.commit()
    profile = get_profile_by_id(db, profile_id)
    db.refresh(profile)
    return profile
