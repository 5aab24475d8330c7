"""Project gallery API routes."""

from fastapi import APIRouter, Query

from skillpath.api.dependencies import CatalogServiceDep
from skillpath.modules.catalog.schemas import Project

router = APIRouter()


@router.get(
    "",
    response_model=list[Project],
    summary="List projects",
)
async def list_projects(
    catalog_service: CatalogServiceDep,
    difficulty: str | None = Query(default=None, description="Difficulty value or 'all'"),
) -> list[Project]:
    return await catalog_service.list_projects(difficulty=difficulty)


@router.get(
    "/{project_id}",
    response_model=Project,
    summary="Get project",
)
async def get_project(project_id: str, catalog_service: CatalogServiceDep) -> Project:
    return await catalog_service.get_project(project_id)
