from fastapi import APIRouter, Depends, HTTPException, status

from stockwatch.config import Settings, get_settings
from stockwatch.core.errors import NotFoundError
from stockwatch.dependencies import get_store
from stockwatch.schemas.product import ProductCreate, ProductCreated, ProductRead
from stockwatch.services.product_service import get_product, provision_product
from stockwatch.services.store import InventoryStore

router = APIRouter(prefix="/companies/{company_id}/products", tags=["Products"])


@router.post("", response_model=ProductCreated, status_code=status.HTTP_201_CREATED)
def create_product(
    company_id: int,
    payload: ProductCreate,
    store: InventoryStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    result = provision_product(store, company_id, payload, settings=settings)
    if not result.ok:
        raise HTTPException(status_code=result.error.status_code, detail=result.error.message)
    return ProductCreated(product_id=result.product_id)


@router.get("/{product_id}", response_model=ProductRead)
def read_product(
    company_id: int,
    product_id: int,
    store: InventoryStore = Depends(get_store),
):
    try:
        return get_product(store, company_id, product_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc


__all__ = ["router"]
