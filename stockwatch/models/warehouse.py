from sqlalchemy import Column, ForeignKey, Index, Integer, String

from stockwatch.database.base import Base


class Warehouse(Base):
    __tablename__ = "warehouses"

    id = Column(Integer, primary_key=True)
    company_id = Column(Integer, ForeignKey("companies.id"), nullable=False)

    name = Column(String(255), nullable=False)
    location = Column(String, nullable=False, default="")

    __table_args__ = (
        Index("idx_warehouses_company", "company_id"),
    )


__all__ = ["Warehouse"]
