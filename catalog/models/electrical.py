from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.db.base_class import Base


class ElectricalProduct(Base):
    """Root of the joined hierarchy: shared columns live in ``electrical_product``."""

    __tablename__ = "electrical_product"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    type: Mapped[str] = mapped_column(String(31), nullable=False)

    __mapper_args__ = {
        "polymorphic_on": "type",
        "polymorphic_identity": "ELECTRICAL",
        "with_polymorphic": "*",
    }


class Phone(ElectricalProduct):
    """Phone columns are stored in ``phone``, joined to the base row on ``id``."""

    __tablename__ = "phone"

    id: Mapped[int] = mapped_column(ForeignKey("electrical_product.id"), primary_key=True)
    screen_size: Mapped[str | None] = mapped_column(String(255), nullable=True)
    storage: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "PHONE"}
