"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_service import models  # noqa: F401  (registers tables on Base.metadata)
from blog_service.config import configure_logging, get_settings
from blog_service.database import Base, dispose_engine, get_engine, initialize_database
from blog_service.infrastructure.blogging.routers import posts
from blog_service.infrastructure.common.exception_handlers import register_exception_handlers
from blog_service.infrastructure.common.schemas import HealthResponse

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: logging, database engine, tables."""
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)

    initialize_database(settings)
    Base.metadata.create_all(bind=get_engine())
    logger.info("application_started", environment=settings.ENVIRONMENT)

    yield

    dispose_engine()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    api_router = APIRouter(prefix=settings.API_V1_PREFIX)

    @api_router.get("/")
    def api_root() -> dict[str, str]:
        return {
            "message": f"{settings.PROJECT_NAME} v1",
            "version": settings.VERSION,
            "docs": f"{settings.API_V1_PREFIX}/docs",
        }

    api_router.include_router(posts.router)
    app.include_router(api_router)

    @app.get("/")
    def root() -> dict[str, str]:
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(status="healthy")

    return app


app = create_app()
