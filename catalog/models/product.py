from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.db.base_class import Base


class Product(Base):
    """Generic catalog record.

    Subclasses that do not declare a table of their own are stored in
    ``product`` and told apart by the ``dtype`` column.
    """

    __tablename__ = "product"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    dtype: Mapped[str] = mapped_column(String(31), nullable=False)

    __mapper_args__ = {
        "polymorphic_on": "dtype",
        "polymorphic_identity": "Product",
        "with_polymorphic": "*",
    }


class RingProduct(Product):
    """Ring sold directly as a product; shares the ``product`` table."""

    stone_type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    stone_size: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "RingProduct"}
