from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.db.base import Base

NEW = "new"
IN_PROGRESS = "in_progress"
TERMINATED = "terminated"
CONTRACT_STATUSES = (NEW, IN_PROGRESS, TERMINATED)


class Contract(Base):
    __tablename__ = "contracts"
    __table_args__ = (
        CheckConstraint(
            "status IN ('new', 'in_progress', 'terminated')",
            name="ck_contracts_status_valid",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    terms = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default=NEW)
    client_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    contractor_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)

    # Relationships
    client = relationship("Profile", foreign_keys=[client_id], backref="client_contracts")
    contractor = relationship(
        "Profile", foreign_keys=[contractor_id], backref="contractor_contracts"
    )
    jobs = relationship("Job", back_populates="contract", order_by="Job.id")
