from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.db.base_class import Base


class CampingProduct(Base):
    """Single table for the whole camping hierarchy.

    Every subtype column is nullable because any row may hold any subtype.
    """

    __tablename__ = "camping_product"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    type: Mapped[str] = mapped_column(String(31), nullable=False)

    __mapper_args__ = {
        "polymorphic_on": "type",
        "polymorphic_identity": "CAMPING",
        "with_polymorphic": "*",
    }


class CampingStove(CampingProduct):
    fuel_type: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "STOVE"}


class Tent(CampingProduct):
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    capacity: Mapped[int | None] = mapped_column(Integer, nullable=True)

    __mapper_args__ = {"polymorphic_identity": "TENT"}
