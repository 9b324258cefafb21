from sqlalchemy import CheckConstraint, Column, Integer, Numeric, String

from app.db.base import Base

CLIENT = "client"
CONTRACTOR = "contractor"
PROFILE_TYPES = (CLIENT, CONTRACTOR)


class Profile(Base):
    __tablename__ = "profiles"
    __table_args__ = (
        CheckConstraint("balance >= 0", name="ck_profiles_balance_non_negative"),
        CheckConstraint(
            "type IN ('client', 'contractor')", name="ck_profiles_type_valid"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    profession = Column(String(255), nullable=False)
    balance = Column(Numeric(12, 2), nullable=False, default=0)
    type = Column(String(20), nullable=False)
