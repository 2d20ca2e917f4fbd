from pydantic import BaseModel, ConfigDict

from catalog.schemas.product import ProductCreate


class ChairCreate(ProductCreate):
    material: str | None = None


class ChairRead(BaseModel):
    id: int
    name: str | None = None
    description: str | None = None
    material: str | None = None

    model_config = ConfigDict(from_attributes=True)
