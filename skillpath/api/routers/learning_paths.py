"""Learning path API routes."""

from fastapi import APIRouter

from skillpath.api.dependencies import CatalogServiceDep
from skillpath.modules.catalog.schemas import LearningPath

router = APIRouter()


@router.get(
    "",
    response_model=list[LearningPath],
    summary="List learning paths",
)
async def list_learning_paths(catalog_service: CatalogServiceDep) -> list[LearningPath]:
    return await catalog_service.list_learning_paths()


@router.get(
    "/{path_id}",
    response_model=LearningPath,
    summary="Get learning path",
    description="Get a learning path by id. Its course ids are not resolved.",
)
async def get_learning_path(path_id: str, catalog_service: CatalogServiceDep) -> LearningPath:
    return await catalog_service.get_learning_path(path_id)
