import logging
import time
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from repair_shop.api.error import ClientError, client_error_handler
from repair_shop.api.routes import clients, orders, statistics

logger = logging.getLogger(__name__)


def _init_sentry(config) -> None:
    sentry_sdk.init(
        dsn=config.DSN_SENTRY,
        environment=config.SENTRY_ENVIRONMENT,
        traces_sample_rate=0.1,
    )
    logger.info("Sentry initialized")


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    if config.ENABLE_SENTRY and config.DSN_SENTRY:
        _init_sentry(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.AUTO_CREATE_TABLES:
            from repair_shop.depends import engine

            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database tables ensured")
        yield

    app = FastAPI(
        title="Repair Shop Service",
        description="Service orders, abonos and statistics for a computer repair shop",
        version="1.0.0",
        lifespan=lifespan,
    )

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if config.ENABLE_LOGGING_MIDDLEWARE:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
            )
            return response

    app.add_exception_handler(ClientError, client_error_handler)

    app.include_router(clients.router, prefix=config.API_PREFIX)
    app.include_router(orders.router, prefix=config.API_PREFIX)
    app.include_router(statistics.router, prefix=config.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app
