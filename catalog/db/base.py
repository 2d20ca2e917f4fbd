# Import every model so Base.metadata knows about all catalog tables.
from catalog.db.base_class import Base  # noqa: F401
from catalog.models import (  # noqa: F401
    CampingProduct,
    CampingStove,
    Chair,
    ElectricalProduct,
    FurnitureProduct,
    Phone,
    Product,
    RingProduct,
    Tent,
)
