from catalog.schemas.camping import (
	CampingProductRead,
	CampingStoveCreate,
	CampingStoveRead,
	TentCreate,
	TentRead,
)
from catalog.schemas.electrical import ElectricalProductRead, PhoneCreate, PhoneRead
from catalog.schemas.furniture import ChairCreate, ChairRead
from catalog.schemas.product import ProductCreate, ProductRead, RingProductCreate, RingProductRead
from catalog.schemas.schema import TableRowCount

__all__ = [
	"CampingProductRead",
	"CampingStoveCreate",
	"CampingStoveRead",
	"ChairCreate",
	"ChairRead",
	"ElectricalProductRead",
	"PhoneCreate",
	"PhoneRead",
	"ProductCreate",
	"ProductRead",
	"RingProductCreate",
	"RingProductRead",
	"TableRowCount",
	"TentCreate",
	"TentRead",
]
