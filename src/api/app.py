"""Application factory

Builds the FastAPI app from an explicit configuration object.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from src.api.auth import BasicAuthMiddleware
from src.api.error import register_error_handlers
from src.api.routes import health, invoices
from src.depends import create_engine, create_session_factory
from src.domain.invoice_row import InvoiceRecord  # noqa: F401  registers the table

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    engine = create_engine(config)
    logger.info(f"Connecting to database {engine.url}")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.DB_CREATE_TABLES:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        yield
        await engine.dispose()

    app = FastAPI(
        title="Invoice Service",
        description="Issue and list company invoices",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    if config.BASIC_AUTH_ENABLE:
        logger.info("Enable Basic Authentication")
        app.add_middleware(
            BasicAuthMiddleware,
            username=config.BASIC_AUTH_USERNAME,
            password=config.BASIC_AUTH_PASSWORD,
            protected_prefix=f"{config.API_PREFIX}/invoices",
        )

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(invoices.router, prefix=config.API_PREFIX)

    return app
