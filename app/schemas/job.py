from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.schemas.money import Money


class Job(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    description: str
    price: Money
    paid: bool | None = None
    payment_date: datetime | None = None
    contract_id: int
