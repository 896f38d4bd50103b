"""FastAPI application."""

import logging

from fastapi import FastAPI

from farmstand.api.products import router as products_router
from farmstand.core.logging import configure_logging
from farmstand.core.middleware import MethodOverrideMiddleware
from farmstand.core.pipeline import install_error_handlers

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Farm Stand",
        description="Products catalog for a farm stand",
        version="0.1.0",
    )

    app.add_middleware(MethodOverrideMiddleware, param="_method")

    # Routes first, error pipeline last
    app.include_router(products_router, tags=["products"])
    install_error_handlers(app)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    logger.debug("Application configured")
    return app


app = create_app()
