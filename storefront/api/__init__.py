# storefront/api/__init__.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError
from requests import RequestException
from sqlalchemy.exc import SQLAlchemyError

from storefront.api.routers import auth, cart, health, orders, products, wishlist
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


async def _database_error(request: Request, exc: SQLAlchemyError):
    logger.exception(f"{request.method} {request.url.path} failed", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Operation failed"})


async def _auth_service_error(request: Request, exc: RequestException):
    logger.error(f"Auth service call failed on {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"detail": "Authentication service unavailable"})


async def _lock_service_error(request: Request, exc: RedisError):
    logger.error(f"Redis call failed on {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"detail": "Operation failed, try again"})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Storefront Service",
        version="1.0.0",
    )

    app.add_exception_handler(SQLAlchemyError, _database_error)
    app.add_exception_handler(RequestException, _auth_service_error)
    app.add_exception_handler(RedisError, _lock_service_error)

    # Include routers
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(products.router)
    app.include_router(cart.router)
    app.include_router(wishlist.router)
    app.include_router(orders.router)

    return app
