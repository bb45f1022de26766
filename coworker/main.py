# coworker/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import RedirectResponse

from coworker import __version__
from coworker.adapters.configuration.config import Settings, settings
from coworker.adapters.inbound.api.deps import build_auth_middleware, build_token_maker
from coworker.adapters.inbound.api.v1.router import build_api_router
from coworker.adapters.outbound.persistence.database import AsyncSessionLocal, Base, engine
from coworker.adapters.outbound.persistence.repositories import SQLSessionStore
from coworker.application.ports.outbound import ITokenMaker
from coworker.domain.exceptions import ConfigurationException, CoworkerException
from coworker.shared.middleware import (
    AsyncExceptionMiddleware,
    AsyncRequestLoggingMiddleware,
    coworker_exception_handler,
    validation_exception_handler,
)

# ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────────
level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup and release the pool on shutdown."""
    logger.info("Application starting up...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield

    logger.info("Application shutting down...")
    await engine.dispose()


def create_app(app_settings: Settings = settings, token_maker: Optional[ITokenMaker] = None) -> FastAPI:
    """
    Build the application.

    Args:
        app_settings: Settings to build from
        token_maker: Maker to use instead of the one AUTH_MODE selects

    Raises:
        ConfigurationException: If the token maker cannot be built
            (for instance a symmetric key shorter than 32 bytes)
    """
    if token_maker is None:
        session_store = SQLSessionStore(AsyncSessionLocal) if app_settings.AUTH_MODE == "session" else None
        try:
            token_maker = build_token_maker(app_settings, session_store)
        except ConfigurationException as e:
            logger.critical(f"Cannot create token maker: {e}")
            raise

    auth = build_auth_middleware(app_settings, token_maker)
    logger.info(
        f"Authentication: {type(auth).__name__} with {type(token_maker).__name__} "
        f"(mode={app_settings.AUTH_MODE})"
    )

    app = FastAPI(
        title="Coworker",
        description="Member directory API with token or session authentication",
        version=__version__,
        debug=app_settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.token_maker = token_maker
    app.state.auth_gate = auth

    # Middlewares
    app.add_middleware(AsyncRequestLoggingMiddleware)
    app.add_middleware(AsyncExceptionMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(CoworkerException, coworker_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Routers
    app.include_router(build_api_router(app_settings, token_maker), prefix="/api/v1")

    @app.get("/", include_in_schema=False)
    async def redirect_to_docs():
        return RedirectResponse(url="/docs")

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )

        # Validation errors are answered with 400, not 422
        for schema in ("HTTPValidationError", "ValidationError"):
            openapi_schema.get("components", {}).get("schemas", {}).pop(schema, None)

        for path in openapi_schema.get("paths", {}).values():
            for op in path.values():
                op.get("responses", {}).pop("422", None)

        app.openapi_schema = openapi_schema
        return openapi_schema

    app.openapi = custom_openapi

    return app


app = create_app()


def run() -> None:
    uvicorn.run(
        "coworker.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
