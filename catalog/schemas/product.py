from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ProductCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1024)


class RingProductCreate(ProductCreate):
    stone_type: str | None = None
    stone_size: str | None = None


class ProductRead(BaseModel):
    id: int
    dtype: Literal["Product"]
    name: str | None = None
    description: str | None = None

    model_config = ConfigDict(from_attributes=True)


class RingProductRead(BaseModel):
    id: int
    dtype: Literal["RingProduct"]
    name: str | None = None
    description: str | None = None
    stone_type: str | None = None
    stone_size: str | None = None

    model_config = ConfigDict(from_attributes=True)
