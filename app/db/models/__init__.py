from app.db.models.profile import Profile
from app.db.models.contract import Contract
from app.db.models.job import Job

__all__ = ["Profile", "Contract", "Job"]
