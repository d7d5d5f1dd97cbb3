from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from stockwatch.config import Settings, get_settings
from stockwatch.core.constants import MAX_WINDOW_DAYS, MIN_WINDOW_DAYS
from stockwatch.core.errors import PersistenceError
from stockwatch.dependencies import get_db
from stockwatch.schemas.alert import LowStockReport
from stockwatch.services.alert_service import evaluate_low_stock
from stockwatch.services.sales_service import SalesActivity, StockoutEstimator
from stockwatch.services.store import InventoryStore

router = APIRouter(prefix="/companies/{company_id}/alerts", tags=["Alerts"])


@router.get("/low-stock", response_model=LowStockReport)
def low_stock_alerts(
    company_id: int,
    window_days: Optional[int] = Query(
        None,
        ge=MIN_WINDOW_DAYS,
        le=MAX_WINDOW_DAYS,
        description="Sales recency window in days",
    ),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    window = window_days or settings.LOW_STOCK_WINDOW_DAYS
    try:
        return evaluate_low_stock(
            InventoryStore(db),
            SalesActivity(db),
            StockoutEstimator(db, window),
            company_id,
            window_days=window,
        )
    except PersistenceError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc


__all__ = ["router"]
