import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from stockwatch.core.errors import PersistenceError
from stockwatch.schemas.alert import LowStockAlert, LowStockReport, SupplierSummary
from stockwatch.services.sales_service import SalesOracle, StockoutEstimatorProtocol
from stockwatch.services.store import TenantStore

logger = logging.getLogger(__name__)


def is_below_threshold(quantity: int, threshold: int) -> bool:
    # Strict: stock sitting exactly on the threshold is not low.
    return quantity < threshold


def _supplier_summary(supplier) -> Optional[SupplierSummary]:
    if supplier is None:
        return None
    return SupplierSummary.model_validate(supplier)


def _build_alert(row, days_until_stockout) -> LowStockAlert:
    inv = row.Inventory
    product = row.Product
    warehouse = row.Warehouse
    return LowStockAlert(
        product_id=product.id,
        product_name=product.name,
        sku=product.sku,
        warehouse_id=inv.warehouse_id,
        warehouse_name=warehouse.name if warehouse is not None else None,
        current_stock=inv.quantity,
        threshold=product.low_stock_threshold,
        days_until_stockout=days_until_stockout,
        supplier=_supplier_summary(row.Supplier),
    )


def evaluate_low_stock(
    store: TenantStore,
    sales: SalesOracle,
    estimator: StockoutEstimatorProtocol,
    company_id: int,
    *,
    window_days: int,
) -> LowStockReport:
    """Collect one alert per (product, warehouse) that sold recently and is low.

    Alerts follow the order rows come back from the store; callers that need
    a particular order sort them. Any read failure aborts the evaluation.
    """
    recent_sales: dict[int, bool] = {}
    stockout_days: dict[int, Optional[int]] = {}
    alerts = []
    try:
        rows = store.find_inventory_by_company(company_id)
        for row in rows:
            product = row.Product
            if product.company_id != company_id:
                continue

            if product.id not in recent_sales:
                recent_sales[product.id] = sales.has_recent_sales(product.id, window_days)
            if not recent_sales[product.id]:
                continue

            if not is_below_threshold(row.Inventory.quantity, product.low_stock_threshold):
                continue

            if product.id not in stockout_days:
                stockout_days[product.id] = estimator.estimated_days_until_stockout(product.id)
            alerts.append(_build_alert(row, stockout_days[product.id]))
    except SQLAlchemyError as exc:
        logger.exception("Low-stock evaluation failed", extra={"company_id": company_id})
        raise PersistenceError("Low-stock evaluation failed") from exc

    logger.info(
        "Evaluated %s inventory rows, %s low-stock alerts",
        len(rows),
        len(alerts),
        extra={"company_id": company_id},
    )
    return LowStockReport(alerts=alerts)


__all__ = ["evaluate_low_stock", "is_below_threshold"]
