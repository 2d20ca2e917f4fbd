from sqlalchemy.orm import configure_mappers

from catalog.models.camping import CampingProduct, CampingStove, Tent
from catalog.models.electrical import ElectricalProduct, Phone
from catalog.models.furniture import Chair, FurnitureProduct
from catalog.models.product import Product, RingProduct

# FurnitureProduct only gets its UNION mapping once mappers are configured.
configure_mappers()

__all__ = [
    "Product",
    "RingProduct",
    "ElectricalProduct",
    "Phone",
    "CampingProduct",
    "CampingStove",
    "Tent",
    "FurnitureProduct",
    "Chair",
]
