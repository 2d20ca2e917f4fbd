from sqlalchemy import String
from sqlalchemy.ext.declarative import AbstractConcreteBase
from sqlalchemy.orm import Mapped, mapped_column

from catalog.db.base_class import Base


class FurnitureProduct(AbstractConcreteBase, Base):
    """Abstract base with no table of its own.

    Each concrete subclass owns an independent table, so loading the base type
    reads through a UNION of those tables. Mappers must be configured before
    the first query.
    """

    strict_attrs = True

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(String(1024), nullable=True)


class Chair(FurnitureProduct):
    __tablename__ = "chair"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    material: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {
        "polymorphic_identity": "chair",
        "concrete": True,
    }
