"""Course catalog API routes."""

from fastapi import APIRouter, Query

from skillpath.api.dependencies import CatalogServiceDep
from skillpath.modules.catalog.schemas import Course

router = APIRouter()


@router.get(
    "",
    response_model=list[Course],
    summary="List courses",
    description="List catalog courses. A filter value of 'all' disables that filter.",
)
async def list_courses(
    catalog_service: CatalogServiceDep,
    category: str | None = Query(default=None, description="Category value or 'all'"),
    difficulty: str | None = Query(default=None, description="Difficulty value or 'all'"),
    provider: str | None = Query(default=None, description="Provider value or 'all'"),
    search: str | None = Query(default=None, description="Case-insensitive text search"),
) -> list[Course]:
    """List courses matching the filters.

    Args:
        catalog_service: Catalog service instance
        category: Optional category filter
        difficulty: Optional difficulty filter
        provider: Optional provider filter
        search: Optional search over title, description and skills

    Returns:
        Matching courses in catalog order
    """
    return await catalog_service.list_courses(
        category=category,
        difficulty=difficulty,
        provider=provider,
        search=search,
    )


@router.get(
    "/{course_id}",
    response_model=Course,
    summary="Get course",
    description="Get a course by id.",
)
async def get_course(course_id: str, catalog_service: CatalogServiceDep) -> Course:
    return await catalog_service.get_course(course_id)
