import math
from datetime import date, timedelta
from typing import Optional, Protocol

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from stockwatch.models.inventory import Inventory
from stockwatch.models.sales import Sales


class SalesOracle(Protocol):
    def has_recent_sales(self, product_id: int, window_days: int) -> bool: ...


class StockoutEstimatorProtocol(Protocol):
    def estimated_days_until_stockout(self, product_id: int) -> Optional[int]: ...


def window_start(window_days: int, today: Optional[date] = None) -> date:
    today = today or date.today()
    return today - timedelta(days=window_days)


def in_window(window_days: int, today: Optional[date] = None):
    """Sale dates in ``[today - window_days, today]``, both ends inclusive.

    Rows dated after ``today`` are not counted.
    """
    today = today or date.today()
    return Sales.sale_date.between(window_start(window_days, today), today)


class SalesActivity:
    """Answers whether a product sold anything inside a trailing window."""

    def __init__(self, db: Session, *, today: Optional[date] = None):
        self.db = db
        self.today = today

    def has_recent_sales(self, product_id: int, window_days: int) -> bool:
        stmt = (
            select(Sales.id)
            .where(
                Sales.product_id == product_id,
                in_window(window_days, self.today),
                Sales.quantity_sold > 0,
            )
            .limit(1)
        )
        return self.db.execute(stmt).first() is not None


def calculate_days_until_stockout(current_stock, avg_daily_sales) -> Optional[int]:
    if avg_daily_sales is None or avg_daily_sales <= 0:
        return None
    if current_stock <= 0:
        return 0
    return math.floor(current_stock / avg_daily_sales)


class StockoutEstimator:
    """Projects days of cover from total on-hand stock and recent sell-through."""

    def __init__(self, db: Session, window_days: int, *, today: Optional[date] = None):
        self.db = db
        self.window_days = window_days
        self.today = today

    def average_daily_sales(self, product_id: int) -> float:
        total_sold = self.db.execute(
            select(func.coalesce(func.sum(Sales.quantity_sold), 0)).where(
                Sales.product_id == product_id,
                in_window(self.window_days, self.today),
            )
        ).scalar_one()
        return float(total_sold) / self.window_days

    def estimated_days_until_stockout(self, product_id: int) -> Optional[int]:
        on_hand = self.db.execute(
            select(func.coalesce(func.sum(Inventory.quantity), 0)).where(
                Inventory.product_id == product_id
            )
        ).scalar_one()
        return calculate_days_until_stockout(on_hand, self.average_daily_sales(product_id))


__all__ = [
    "SalesActivity",
    "SalesOracle",
    "StockoutEstimator",
    "StockoutEstimatorProtocol",
    "calculate_days_until_stockout",
    "in_window",
    "window_start",
]
