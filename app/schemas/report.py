from pydantic import BaseModel, ConfigDict, Field

from app.schemas.money import Money


class ClientEarnings(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str = Field(..., serialization_alias="fullName")
    paid: Money
