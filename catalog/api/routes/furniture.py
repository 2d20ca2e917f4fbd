from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from catalog import models
from catalog.api.deps import get_db
from catalog.schemas.furniture import ChairCreate, ChairRead
from catalog.services.catalog import list_polymorphic, save_products

router = APIRouter(prefix="/furniture-products", tags=["furniture-products"])


@router.get("/", response_model=list[ChairRead])
def list_furniture_products(db: Session = Depends(get_db)) -> list[ChairRead]:
    """Return furniture from every concrete table via a UNION query."""

    return list(list_polymorphic(db, models.FurnitureProduct))


@router.post("/chairs", response_model=ChairRead, status_code=status.HTTP_201_CREATED)
def create_chair(chair_in: ChairCreate, db: Session = Depends(get_db)) -> ChairRead:
    chair = models.Chair(**chair_in.model_dump())
    save_products(db, [chair])
    return chair
