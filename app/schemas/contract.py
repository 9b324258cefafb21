from pydantic import BaseModel, ConfigDict

from app.schemas.job import Job
from app.schemas.profile import Profile


class Contract(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    terms: str
    status: str
    client_id: int
    contractor_id: int


class ContractDetail(Contract):
    """Contract with its jobs and both parties, as returned after a payment."""

    jobs: list[Job] = []
    client: Profile | None = None
    contractor: Profile | None = None
