from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    Text,
)
from sqlalchemy.orm import relationship

from app.db.base import Base


class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_jobs_price_positive"),
        # payment_date is set iff the job is paid
        CheckConstraint(
            "(paid IS NULL AND payment_date IS NULL) OR (paid AND payment_date IS NOT NULL)",
            name="ck_jobs_paid_payment_date",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    description = Column(Text, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    paid = Column(Boolean, nullable=True, default=None)
    payment_date = Column(DateTime, nullable=True, index=True)
    contract_id = Column(Integer, ForeignKey("contracts.id"), nullable=False, index=True)

    # Relationships
    contract = relationship("Contract", back_populates="jobs")
