from fastapi import Depends, Header
from sqlalchemy.orm import Session

from app.db import SessionLocal
from app.db.models.profile import Profile
import app.repositories.profile as profile_repo
from app.errors import ForbiddenError, UnauthorizedError


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_profile(
    profile_id: int | None = Header(None, convert_underscores=False),
    db: Session = Depends(get_db),
) -> Profile:
    """
    Resolve the acting profile from the ``profile_id`` header.

    Authentication happens upstream; this only maps the id to a profile.
    """
    if profile_id is None:
        raise UnauthorizedError("Missing profile_id header")

    profile = profile_repo.get_profile_by_id(db, profile_id)
    if profile is None:
        raise UnauthorizedError("Profile not found")

    return profile


def require_profile_types(*profile_types: str):
    """
    Create a dependency that requires the acting profile to be of one of the given types.

    Example:
        Depends(require_profile_types("client"))
    """
    def type_checker(current_profile: Profile = Depends(get_current_profile)) -> Profile:
        if current_profile.type not in profile_types:
            raise ForbiddenError("Not allowed")
        return current_profile

    return type_checker
