from sqlalchemy import Column, Integer, String

from stockwatch.database.base import Base


class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    contact_email = Column(String(255))


__all__ = ["Supplier"]
