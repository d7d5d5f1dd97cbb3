from fastapi import Depends
from sqlalchemy.orm import Session

from stockwatch.database.session import get_db
from stockwatch.services.store import InventoryStore


def get_store(db: Session = Depends(get_db)) -> InventoryStore:
    return InventoryStore(db)


__all__ = ["get_db", "get_store"]
