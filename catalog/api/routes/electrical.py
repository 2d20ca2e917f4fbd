from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from catalog import models
from catalog.api.deps import get_db
from catalog.schemas.electrical import ElectricalProductRead, PhoneCreate, PhoneRead
from catalog.services.catalog import list_polymorphic, save_products

router = APIRouter(prefix="/electrical-products", tags=["electrical-products"])


@router.get("/", response_model=list[ElectricalProductRead | PhoneRead])
def list_electrical_products(db: Session = Depends(get_db)) -> list[ElectricalProductRead | PhoneRead]:
    """Return electrical products, joining each subtype table onto the base row."""

    return list(list_polymorphic(db, models.ElectricalProduct))


@router.post("/phones", response_model=PhoneRead, status_code=status.HTTP_201_CREATED)
def create_phone(phone_in: PhoneCreate, db: Session = Depends(get_db)) -> PhoneRead:
    phone = models.Phone(**phone_in.model_dump())
    save_products(db, [phone])
    return phone
