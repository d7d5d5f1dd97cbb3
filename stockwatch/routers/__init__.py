from stockwatch.routers.alerts import router as alerts_router
from stockwatch.routers.health import router as health_router
from stockwatch.routers.products import router as products_router

__all__ = [
    "alerts_router",
    "health_router",
    "products_router",
]
