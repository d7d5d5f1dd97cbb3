"""Tenant-scoped persistence for products, inventory and their lookups.

Every query takes ``company_id`` explicitly; nothing here reads tenant
identity from ambient state.
"""
import logging
from contextlib import contextmanager
from typing import List, Optional, Protocol, Sequence, Tuple

from sqlalchemy import Row, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from stockwatch.core.errors import PersistenceError
from stockwatch.models.inventory import Inventory
from stockwatch.models.product import Product
from stockwatch.models.supplier import Supplier
from stockwatch.models.warehouse import Warehouse

logger = logging.getLogger(__name__)


class TenantStore(Protocol):
    def sku_exists(self, company_id: int, sku: str, *, global_scope: bool = False) -> bool: ...

    def get_warehouse(self, company_id: int, warehouse_id: int) -> Optional[Warehouse]: ...

    def supplier_exists(self, supplier_id: int) -> bool: ...

    def save_product_with_inventory(self, product: Product, inventory: Inventory) -> int: ...

    def find_inventory_by_company(self, company_id: int) -> Sequence[Row]: ...

    def get_product(
        self, company_id: int, product_id: int
    ) -> Optional[Tuple[Product, List[Inventory]]]: ...


@contextmanager
def _read_errors(message: str):
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception(message)
        raise PersistenceError(message) from exc


class InventoryStore:
    def __init__(self, db: Session):
        self.db = db

    def sku_exists(self, company_id: int, sku: str, *, global_scope: bool = False) -> bool:
        stmt = select(Product.id).where(Product.sku == sku)
        if not global_scope:
            stmt = stmt.where(Product.company_id == company_id)
        with _read_errors("Failed to check SKU uniqueness"):
            return self.db.execute(stmt.limit(1)).first() is not None

    def get_warehouse(self, company_id: int, warehouse_id: int) -> Optional[Warehouse]:
        stmt = select(Warehouse).where(
            Warehouse.id == warehouse_id,
            Warehouse.company_id == company_id,
        )
        with _read_errors("Failed to load warehouse"):
            return self.db.execute(stmt).scalars().first()

    def supplier_exists(self, supplier_id: int) -> bool:
        stmt = select(Supplier.id).where(Supplier.id == supplier_id).limit(1)
        with _read_errors("Failed to load supplier"):
            return self.db.execute(stmt).first() is not None

    def save_product_with_inventory(self, product: Product, inventory: Inventory) -> int:
        """Insert ``product`` and its first ``inventory`` row in one transaction.

        The inventory row is linked to the freshly assigned product id before
        it is written. Any failure inside the unit of work rolls back both rows
        and is raised as an opaque :class:`PersistenceError`.
        """
        context = {"company_id": product.company_id, "sku": product.sku}
        try:
            self.db.add(product)
            self.db.flush()
            inventory.product_id = product.id
            self._add_inventory(inventory)
            self.db.commit()
        except Exception as exc:
            self.db.rollback()
            logger.exception("Rolled back product creation", extra=context)
            raise PersistenceError() from exc
        return product.id

    def _add_inventory(self, inventory: Inventory) -> None:
        self.db.add(inventory)
        self.db.flush()

    def find_inventory_by_company(self, company_id: int) -> Sequence[Row]:
        stmt = (
            select(Inventory, Product, Warehouse, Supplier)
            .join(Product, Product.id == Inventory.product_id)
            .outerjoin(Warehouse, Warehouse.id == Inventory.warehouse_id)
            .outerjoin(Supplier, Supplier.id == Product.primary_supplier_id)
            .where(Product.company_id == company_id)
        )
        with _read_errors("Failed to load inventory"):
            return self.db.execute(stmt).all()

    def get_product(
        self, company_id: int, product_id: int
    ) -> Optional[Tuple[Product, List[Inventory]]]:
        with _read_errors("Failed to load product"):
            product = (
                self.db.execute(
                    select(Product).where(
                        Product.id == product_id,
                        Product.company_id == company_id,
                    )
                )
                .scalars()
                .first()
            )
            if product is None:
                return None
            inventory = (
                self.db.execute(
                    select(Inventory)
                    .where(Inventory.product_id == product.id)
                    .order_by(Inventory.warehouse_id)
                )
                .scalars()
                .all()
            )
        return product, list(inventory)


__all__ = ["InventoryStore", "TenantStore"]
