"""API routers package."""

from skillpath.api.routers.ai import router as ai_router
from skillpath.api.routers.analytics import router as analytics_router
from skillpath.api.routers.assessment import router as assessment_router
from skillpath.api.routers.courses import router as courses_router
from skillpath.api.routers.health import router as health_router
from skillpath.api.routers.learning_paths import router as learning_paths_router
from skillpath.api.routers.preferences import router as preferences_router
from skillpath.api.routers.progress import router as progress_router
from skillpath.api.routers.projects import router as projects_router

__all__ = [
    "ai_router",
    "analytics_router",
    "assessment_router",
    "courses_router",
    "health_router",
    "learning_paths_router",
    "preferences_router",
    "progress_router",
    "projects_router",
]
