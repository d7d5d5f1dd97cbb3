import logging
from dataclasses import dataclass
from typing import Optional

from stockwatch.config import Settings, get_settings
from stockwatch.core.errors import (
    ConflictError,
    NotFoundError,
    PersistenceError,
    ProvisioningError,
    ValidationError,
)
from stockwatch.core.money import parse_price
from stockwatch.models.inventory import Inventory
from stockwatch.models.product import Product
from stockwatch.schemas.product import InventoryLevel, ProductCreate, ProductRead
from stockwatch.services.store import TenantStore

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("name", "sku", "price", "warehouse_id")


@dataclass(frozen=True)
class ProvisionResult:
    product_id: Optional[int] = None
    error: Optional[ProvisioningError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _missing_fields(payload: ProductCreate) -> list[str]:
    missing = []
    for field in _REQUIRED_FIELDS:
        value = getattr(payload, field)
        if isinstance(value, str):
            value = _clean_text(value)
        if value is None:
            missing.append(field)
    return missing


def build_product(
    company_id: int,
    payload: ProductCreate,
    settings: Settings,
) -> tuple[Product, Inventory]:
    """Validate ``payload`` and return the unsaved product and inventory rows.

    Raises :class:`ValidationError` for anything the caller can fix. Nothing
    touches the database here.
    """
    missing = _missing_fields(payload)
    if missing:
        raise ValidationError("Missing required fields: {}".format(", ".join(missing)))

    price = parse_price(payload.price)
    if price is None:
        raise ValidationError(
            "price must be a non-negative amount with at most two decimal places."
        )

    initial_quantity = payload.initial_quantity if payload.initial_quantity is not None else 0
    if initial_quantity < 0 and not settings.ALLOW_NEGATIVE_INVENTORY:
        raise ValidationError("initial_quantity must be non-negative.")

    threshold = payload.low_stock_threshold
    if threshold is None:
        threshold = settings.DEFAULT_LOW_STOCK_THRESHOLD
    if threshold < 0:
        raise ValidationError("low_stock_threshold must be non-negative.")

    product = Product(
        company_id=company_id,
        name=_clean_text(payload.name),
        sku=_clean_text(payload.sku),
        price=price,
        is_bundle=bool(payload.is_bundle),
        low_stock_threshold=threshold,
        primary_supplier_id=payload.primary_supplier_id,
    )
    inventory = Inventory(
        warehouse_id=payload.warehouse_id,
        quantity=initial_quantity,
    )
    return product, inventory


def _check_references(store: TenantStore, company_id: int, payload: ProductCreate) -> None:
    if store.get_warehouse(company_id, payload.warehouse_id) is None:
        raise ValidationError(
            "warehouse_id {} does not belong to company {}.".format(
                payload.warehouse_id, company_id
            )
        )
    if payload.primary_supplier_id is not None and not store.supplier_exists(
        payload.primary_supplier_id
    ):
        raise ValidationError(
            "primary_supplier_id {} does not exist.".format(payload.primary_supplier_id)
        )


def provision_product(
    store: TenantStore,
    company_id: int,
    payload: ProductCreate,
    *,
    settings: Optional[Settings] = None,
) -> ProvisionResult:
    """Create a product and its first inventory row, all or nothing."""
    settings = settings or get_settings()
    try:
        product, inventory = build_product(company_id, payload, settings)
        _check_references(store, company_id, payload)
        if store.sku_exists(
            company_id,
            product.sku,
            global_scope=settings.SKU_SCOPE == "global",
        ):
            raise ConflictError("SKU '{}' already exists.".format(product.sku))
    except (ValidationError, ConflictError) as exc:
        logger.info(
            "Rejected product creation: %s",
            exc.message,
            extra={"company_id": company_id, "sku": payload.sku},
        )
        return ProvisionResult(error=exc)
    except PersistenceError as exc:
        return ProvisionResult(error=exc)

    try:
        product_id = store.save_product_with_inventory(product, inventory)
    except PersistenceError as exc:
        return ProvisionResult(error=exc)

    logger.info(
        "Created product %s with %s units in warehouse %s",
        product_id,
        inventory.quantity,
        inventory.warehouse_id,
        extra={"company_id": company_id, "product_id": product_id, "sku": product.sku},
    )
    return ProvisionResult(product_id=product_id)


def get_product(store: TenantStore, company_id: int, product_id: int) -> ProductRead:
    found = store.get_product(company_id, product_id)
    if found is None:
        raise NotFoundError("Product not found.")
    product, inventory = found
    base = ProductRead.model_validate(product).model_dump(exclude={"inventory"})
    base["inventory"] = [InventoryLevel.model_validate(row) for row in inventory]
    return ProductRead(**base)


__all__ = ["ProvisionResult", "build_product", "get_product", "provision_product"]
