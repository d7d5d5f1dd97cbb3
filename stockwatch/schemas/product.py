from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductCreate(BaseModel):
    # Required fields are optional here so missing values reach the service
    # and come back as a single 400 listing every absent field.
    name: Optional[str] = None
    sku: Optional[str] = None
    price: Optional[Decimal] = None
    warehouse_id: Optional[int] = None
    initial_quantity: Optional[int] = None
    is_bundle: bool = False
    low_stock_threshold: Optional[int] = None
    primary_supplier_id: Optional[int] = None


class ProductCreated(BaseModel):
    product_id: int
    success: bool = True


class InventoryLevel(BaseModel):
    warehouse_id: int
    quantity: int
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductRead(BaseModel):
    id: int
    company_id: int
    name: str
    sku: str
    price: Decimal
    is_bundle: bool
    low_stock_threshold: int
    primary_supplier_id: Optional[int] = None
    created_at: datetime
    inventory: List[InventoryLevel] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
