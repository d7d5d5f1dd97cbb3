from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from stockwatch.config import Settings, get_settings
from stockwatch.core.logging import setup_logging
from stockwatch.database import Base, engine
from stockwatch.models import import_all_models
from stockwatch.routers import alerts_router, health_router, products_router


setup_logging()
settings: Settings = get_settings()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    import_all_models()
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(_request: Request, exc: RequestValidationError):
    # Malformed bodies are client errors like any other missing field.
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


app.include_router(health_router)
app.include_router(products_router)
app.include_router(alerts_router)


__all__ = ["app"]
