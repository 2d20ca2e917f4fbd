from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from catalog import models
from catalog.api.deps import get_db
from catalog.schemas.camping import (
    CampingProductRead,
    CampingStoveCreate,
    CampingStoveRead,
    TentCreate,
    TentRead,
)
from catalog.services.catalog import list_polymorphic, save_products

router = APIRouter(prefix="/camping-products", tags=["camping-products"])

CampingRead = CampingProductRead | CampingStoveRead | TentRead


@router.get("/", response_model=list[CampingRead])
def list_camping_products(db: Session = Depends(get_db)) -> list[CampingRead]:
    """Return camping products from the shared table, typed by discriminator."""

    return list(list_polymorphic(db, models.CampingProduct))


@router.post("/stoves", response_model=CampingStoveRead, status_code=status.HTTP_201_CREATED)
def create_stove(stove_in: CampingStoveCreate, db: Session = Depends(get_db)) -> CampingStoveRead:
    stove = models.CampingStove(**stove_in.model_dump())
    save_products(db, [stove])
    return stove


@router.post("/tents", response_model=TentRead, status_code=status.HTTP_201_CREATED)
def create_tent(tent_in: TentCreate, db: Session = Depends(get_db)) -> TentRead:
    tent = models.Tent(**tent_in.model_dump())
    save_products(db, [tent])
    return tent
