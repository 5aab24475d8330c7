"""User preferences API routes."""

from fastapi import APIRouter

from skillpath.api.dependencies import CatalogServiceDep
from skillpath.modules.catalog.schemas import UserPreferences

router = APIRouter()


@router.get(
    "",
    response_model=UserPreferences | None,
    summary="Get preferences",
    description="Stored learning preferences, or null before onboarding.",
)
async def get_preferences(catalog_service: CatalogServiceDep) -> UserPreferences | None:
    return await catalog_service.get_preferences()


@router.post(
    "",
    response_model=UserPreferences,
    summary="Save preferences",
)
async def save_preferences(
    preferences: UserPreferences,
    catalog_service: CatalogServiceDep,
) -> UserPreferences:
    return await catalog_service.save_preferences(preferences)
