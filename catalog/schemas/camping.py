from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from catalog.schemas.product import ProductCreate


class CampingStoveCreate(ProductCreate):
    fuel_type: str | None = None


class TentCreate(ProductCreate):
    weight: float | None = Field(default=None, gt=0)
    capacity: int | None = Field(default=None, ge=1)


class CampingProductRead(BaseModel):
    id: int
    type: Literal["CAMPING"]
    name: str | None = None
    description: str | None = None

    model_config = ConfigDict(from_attributes=True)


class CampingStoveRead(BaseModel):
    id: int
    type: Literal["STOVE"]
    name: str | None = None
    description: str | None = None
    fuel_type: str | None = None

    model_config = ConfigDict(from_attributes=True)


class TentRead(BaseModel):
    id: int
    type: Literal["TENT"]
    name: str | None = None
    description: str | None = None
    weight: float | None = None
    capacity: int | None = None

    model_config = ConfigDict(from_attributes=True)
