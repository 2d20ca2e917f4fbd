from typing import Literal

from pydantic import BaseModel, ConfigDict

from catalog.schemas.product import ProductCreate


class PhoneCreate(ProductCreate):
    screen_size: str | None = None
    storage: str | None = None


class ElectricalProductRead(BaseModel):
    id: int
    type: Literal["ELECTRICAL"]
    name: str | None = None
    description: str | None = None

    model_config = ConfigDict(from_attributes=True)


class PhoneRead(BaseModel):
    id: int
    type: Literal["PHONE"]
    name: str | None = None
    description: str | None = None
    screen_size: str | None = None
    storage: str | None = None

    model_config = ConfigDict(from_attributes=True)
