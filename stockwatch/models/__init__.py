import importlib

from stockwatch.models.company import Company
from stockwatch.models.inventory import Inventory
from stockwatch.models.product import Product
from stockwatch.models.sales import Sales
from stockwatch.models.supplier import Supplier
from stockwatch.models.warehouse import Warehouse


def import_all_models() -> None:
    for module_name in (
        "stockwatch.models.company",
        "stockwatch.models.inventory",
        "stockwatch.models.product",
        "stockwatch.models.sales",
        "stockwatch.models.supplier",
        "stockwatch.models.warehouse",
    ):
        importlib.import_module(module_name)


__all__ = [
    "Company",
    "Inventory",
    "Product",
    "Sales",
    "Supplier",
    "Warehouse",
    "import_all_models",
]
