from stockwatch.services.alert_service import evaluate_low_stock
from stockwatch.services.product_service import ProvisionResult, get_product, provision_product
from stockwatch.services.sales_service import SalesActivity, StockoutEstimator
from stockwatch.services.store import InventoryStore

__all__ = [
    "InventoryStore",
    "ProvisionResult",
    "SalesActivity",
    "StockoutEstimator",
    "evaluate_low_stock",
    "get_product",
    "provision_product",
]
