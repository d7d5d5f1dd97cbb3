from sqlalchemy import Column, Date, ForeignKey, Index, Integer

from stockwatch.database.base import Base


class Sales(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False)

    quantity_sold = Column(Integer, nullable=False)
    sale_date = Column(Date, nullable=False)

    __table_args__ = (
        Index("idx_sales_product_date", "product_id", "sale_date"),
    )


__all__ = ["Sales"]
