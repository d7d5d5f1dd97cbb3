from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
)

from stockwatch.database.base import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)

    name = Column(String(255), nullable=False)
    sku = Column(String(100), nullable=False)
    # Numeric keeps prices as Decimal end to end.
    price = Column(Numeric(12, 2, asdecimal=True), nullable=False)
    is_bundle = Column(Boolean, nullable=False, default=False)
    low_stock_threshold = Column(Integer, nullable=False, default=10)

    primary_supplier_id = Column(Integer, ForeignKey("suppliers.id"))

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        UniqueConstraint("company_id", "sku", name="uq_products_company_sku"),
        Index("idx_products_sku", "sku"),
    )


__all__ = ["Product"]
