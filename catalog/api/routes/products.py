from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from catalog import models
from catalog.api.deps import get_db
from catalog.schemas.product import ProductCreate, ProductRead, RingProductCreate, RingProductRead
from catalog.services.catalog import list_polymorphic, save_products

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/", response_model=list[ProductRead | RingProductRead])
def list_products(db: Session = Depends(get_db)) -> list[ProductRead | RingProductRead]:
    """Return every product record; ring rows come back as rings."""

    return list(list_polymorphic(db, models.Product))


@router.post("/", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(product_in: ProductCreate, db: Session = Depends(get_db)) -> ProductRead:
    product = models.Product(**product_in.model_dump())
    save_products(db, [product])
    return product


@router.post("/rings", response_model=RingProductRead, status_code=status.HTTP_201_CREATED)
def create_ring(ring_in: RingProductCreate, db: Session = Depends(get_db)) -> RingProductRead:
    ring = models.RingProduct(**ring_in.model_dump())
    save_products(db, [ring])
    return ring
