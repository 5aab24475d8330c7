"""FastAPI application setup and configuration."""

from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skillpath.api.middleware.error_handler import setup_exception_handlers
from skillpath.api.middleware.logging import RequestLoggingMiddleware
from skillpath.shared.config import get_settings
from skillpath.shared.service_registry import get_service_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Builds the services up front so configuration problems surface at
    startup rather than on the first request.
    """
    registry = get_service_registry()
    registry.get_recommendation_service()
    logger.info(f"Services ready: {registry.get_service_info()}")
    yield
    logger.info("Shutting down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    application = FastAPI(
        title="SkillPath API",
        description="""
        E-learning catalog API for:
        - Course, learning path and project browsing
        - Skill assessment questions and results
        - AI-assisted learning path and project recommendations
        - Progress tracking and learner analytics
        """,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    cors_origins = settings.cors_origins_list
    if settings.is_production and not cors_origins:
        logger.warning(
            "No CORS_ORIGINS configured in production. "
            "API will not be accessible from browsers. "
            "Set CORS_ORIGINS env variable to allow frontend access."
        )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Authorization",
            "Accept",
            "Origin",
            "X-Requested-With",
            "X-Request-ID",
        ],
        max_age=600,
    )

    setup_exception_handlers(application)
    application.add_middleware(RequestLoggingMiddleware)

    from skillpath.api.routers import (
        ai_router,
        analytics_router,
        assessment_router,
        courses_router,
        health_router,
        learning_paths_router,
        preferences_router,
        progress_router,
        projects_router,
    )

    application.include_router(health_router, prefix="/health", tags=["Health"])
    application.include_router(courses_router, prefix="/api/courses", tags=["Courses"])
    application.include_router(
        learning_paths_router,
        prefix="/api/learning-paths",
        tags=["Learning Paths"],
    )
    application.include_router(
        assessment_router,
        prefix="/api/assessment",
        tags=["Assessment"],
    )
    application.include_router(progress_router, prefix="/api/progress", tags=["Progress"])
    application.include_router(projects_router, prefix="/api/projects", tags=["Projects"])
    application.include_router(analytics_router, prefix="/api/analytics", tags=["Analytics"])
    application.include_router(
        preferences_router,
        prefix="/api/preferences",
        tags=["Preferences"],
    )
    application.include_router(ai_router, prefix="/api/ai", tags=["AI"])

    return application


# Create app instance
app = create_app()
