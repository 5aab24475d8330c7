"""Course progress API routes."""

from fastapi import APIRouter

from skillpath.api.dependencies import CatalogServiceDep
from skillpath.modules.catalog.schemas import ProgressUpdate, UserProgress

router = APIRouter()


@router.get(
    "",
    response_model=list[UserProgress],
    summary="List progress",
    description="Progress for every course the learner has started.",
)
async def list_progress(catalog_service: CatalogServiceDep) -> list[UserProgress]:
    return await catalog_service.list_progress()


@router.get(
    "/{course_id}",
    response_model=UserProgress | None,
    summary="Get course progress",
    description="Progress for one course, or null if it was never started.",
)
async def get_course_progress(
    course_id: str,
    catalog_service: CatalogServiceDep,
) -> UserProgress | None:
    return await catalog_service.get_course_progress(course_id)


@router.post(
    "/{course_id}",
    response_model=UserProgress,
    summary="Update course progress",
    description="Apply a partial update; the entry is created on first update.",
)
async def update_progress(
    course_id: str,
    update: ProgressUpdate,
    catalog_service: CatalogServiceDep,
) -> UserProgress:
    """Update progress for a course.

    Args:
        course_id: Course the progress belongs to
        update: Fields to change
        catalog_service: Catalog service instance

    Returns:
        The stored progress entry
    """
    return await catalog_service.update_progress(course_id, update)
