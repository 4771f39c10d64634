# storefront/main.py
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from storefront.api.deps import ensure_session_token
from storefront.api.routers import carts, health, orders, products
from storefront.core.error_handlers import setup_error_handlers
from storefront.data.database import Base, engine
from storefront.data import models  # noqa: F401  registers every table on Base.metadata
from storefront.utils.logging import get_logger, setup_logging
from storefront.utils.settings import (
    LOG_LEVEL,
    PORT,
    SESSION_COOKIE,
    SESSION_SECRET,
    SESSION_TTL_SECONDS,
    STATIC_DIR,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Creating tables: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=engine)
    yield


def create_app(static_dir: str | None = STATIC_DIR) -> FastAPI:
    setup_logging(LOG_LEVEL)

    app = FastAPI(
        title="Storefront",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        SessionMiddleware,
        secret_key=SESSION_SECRET,
        session_cookie=SESSION_COOKIE,
        max_age=SESSION_TTL_SECONDS,
        same_site="lax",
    )
    setup_error_handlers(app)

    # every /api response hands out the session cookie
    for module in (health, products, carts, orders):
        app.include_router(module.router, dependencies=[Depends(ensure_session_token)])

    # built client, served after every /api route
    if static_dir and os.path.isdir(static_dir):
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        logger.info(f"Serving static files from {static_dir}")

    return app


app = create_app()

if __name__ == "__main__":
    logger.info(f"Listening on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
