from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class SupplierSummary(BaseModel):
    id: int
    name: str
    contact_email: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class LowStockAlert(BaseModel):
    product_id: int
    product_name: str
    sku: str
    warehouse_id: int
    warehouse_name: Optional[str] = None
    current_stock: int
    threshold: int
    days_until_stockout: Optional[int] = None
    supplier: Optional[SupplierSummary] = None


class LowStockReport(BaseModel):
    alerts: List[LowStockAlert] = Field(default_factory=list)

    @computed_field
    @property
    def total_alerts(self) -> int:
        return len(self.alerts)
