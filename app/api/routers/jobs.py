from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_profile, require_profile_types
from app.db.models.profile import CLIENT, Profile
from app.schemas.contract import ContractDetail
from app.schemas.job import Job
from app.services.job import list_unpaid_jobs
from app.services.payment import pay_job

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("/unpaid", response_model=list[Job])
def get_unpaid_jobs(
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
):
    """
    Get unpaid jobs of the current profile's active (non-terminated) contracts.
    """
    jobs = list_unpaid_jobs(db, current_profile)
    return [Job.model_validate(job) for job in jobs]


@router.post("/{job_id}/pay", response_model=ContractDetail)
def pay_for_job(
    job_id: int,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(require_profile_types(CLIENT)),
):
    """
    Pay for a job. Only clients can pay, and only for unpaid jobs of their own contracts.

    The job price moves from the client's balance to the contractor's balance.
    Returns the contract with its jobs and both parties after the payment.
    """
    contract = pay_job(db, current_profile, job_id)
    return ContractDetail.model_validate(contract)
