from sqlalchemy.orm import Session

import app.repositories.job as job_repo
from app.db.models.job import Job as JobModel
from app.db.models.profile import Profile as ProfileModel


def list_unpaid_jobs(db: Session, profile: ProfileModel) -> list[JobModel]:
    """Unpaid jobs of the profile's active contracts, from its side (client or contractor)."""
    return job_repo.get_unpaid_jobs_by_profile(db, profile.id, profile.type)
