from pydantic import BaseModel, ConfigDict

from app.schemas.money import Money


class Profile(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    profession: str
    balance: Money
    type: str
