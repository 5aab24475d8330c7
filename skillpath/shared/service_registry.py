"""Unified service registry for dependency injection.

This module provides a centralized service factory. All services share one
storage instance; the recommendation provider is chosen from settings and
feature flags.

Usage:
    from skillpath.shared.service_registry import get_service_registry

    registry = get_service_registry()
    catalog = registry.get_catalog_service()
    recommendations = registry.get_recommendation_service()

Provider selection:
- RECOMMENDATION_PROVIDER=fallback always uses the deterministic fallback
- RECOMMENDATION_PROVIDER=live always asks the live provider first
- RECOMMENDATION_PROVIDER=auto asks the live provider only when an
  ANTHROPIC_API_KEY is set and FF_ENABLE_AI_RECOMMENDATIONS is not false
"""

from functools import lru_cache
from typing import TYPE_CHECKING
import logging

from skillpath.shared.config import get_settings
from skillpath.shared.feature_flags import FeatureFlags, get_feature_flags

if TYPE_CHECKING:
    from skillpath.modules.analytics.service import AnalyticsService
    from skillpath.modules.assessment.service import AssessmentService
    from skillpath.modules.catalog.interface import ICatalogStorage
    from skillpath.modules.catalog.service import CatalogService
    from skillpath.modules.recommendation.interface import IRecommendationProvider
    from skillpath.modules.recommendation.service import RecommendationService

logger = logging.getLogger(__name__)


class ServiceRegistry:
    """Lazily builds and caches the application's services.

    Features:
    - Lazy service instantiation
    - Settings and feature flag based provider selection
    - Service instance caching
    """

    _instance: "ServiceRegistry | None" = None

    def __new__(cls) -> "ServiceRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        if self._initialized:
            return
        self._flags = get_feature_flags()
        self._storage: "ICatalogStorage | None" = None
        self._catalog_service: "CatalogService | None" = None
        self._assessment_service: "AssessmentService | None" = None
        self._analytics_service: "AnalyticsService | None" = None
        self._recommendation_service: "RecommendationService | None" = None
        self._initialized = True
        logger.info("ServiceRegistry initialized")

    def get_storage(self) -> "ICatalogStorage":
        """Get the storage collaborator shared by all services."""
        if self._storage is None:
            self._storage = self._create_storage()
        return self._storage

    def get_catalog_service(self) -> "CatalogService":
        if self._catalog_service is None:
            from skillpath.modules.catalog.service import CatalogService

            self._catalog_service = CatalogService(self.get_storage())
        return self._catalog_service

    def get_assessment_service(self) -> "AssessmentService":
        if self._assessment_service is None:
            from skillpath.modules.assessment.service import AssessmentService

            self._assessment_service = AssessmentService(self.get_storage())
        return self._assessment_service

    def get_analytics_service(self) -> "AnalyticsService":
        if self._analytics_service is None:
            from skillpath.modules.analytics.service import AnalyticsService

            self._analytics_service = AnalyticsService(self.get_storage())
        return self._analytics_service

    def get_recommendation_service(self) -> "RecommendationService":
        """Get the recommendation service, with the live provider if selected."""
        if self._recommendation_service is None:
            self._recommendation_service = self._create_recommendation_service()
        return self._recommendation_service

    def _create_storage(self) -> "ICatalogStorage":
        from skillpath.modules.catalog.storage import InMemoryStorage

        if self._flags.is_enabled(FeatureFlags.SEED_SAMPLE_CATALOG):
            return InMemoryStorage.with_sample_data()

        logger.info("Creating empty in-memory storage")
        return InMemoryStorage()

    def use_live_provider(self) -> bool:
        """Whether the live provider should be asked before the fallback."""
        settings = get_settings()
        if settings.recommendation_provider == "fallback":
            return False
        if settings.recommendation_provider == "live":
            return True
        return settings.has_ai_credential and self._flags.is_enabled(
            FeatureFlags.ENABLE_AI_RECOMMENDATIONS
        )

    def _create_recommendation_service(self) -> "RecommendationService":
        from skillpath.modules.recommendation.providers import (
            FallbackRecommendationProvider,
            LiveRecommendationProvider,
        )
        from skillpath.modules.recommendation.service import RecommendationService

        storage = self.get_storage()
        fallback = FallbackRecommendationProvider(storage)
        live: "IRecommendationProvider | None" = None

        if self.use_live_provider():
            from skillpath.modules.llm.service import get_llm_service

            logger.info("Creating RecommendationService with live provider")
            live = LiveRecommendationProvider(get_llm_service(), storage)
        else:
            logger.info("Creating RecommendationService with fallback provider only")

        return RecommendationService(
            fallback,
            live=live,
            live_projects=self._flags.is_enabled(FeatureFlags.ENABLE_AI_PROJECTS),
        )

    def clear_cache(self) -> None:
        """Clear all cached service instances, storage included.

        Use this when settings or feature flags change at runtime to force
        recreation of services with the new values.
        """
        self._storage = None
        self._catalog_service = None
        self._assessment_service = None
        self._analytics_service = None
        self._recommendation_service = None
        logger.info("ServiceRegistry cache cleared")

    def get_service_info(self) -> dict[str, str]:
        """Get information about currently instantiated services.

        Returns:
            Dictionary of service names to their implementation types
        """
        info = {}
        if self._storage:
            info["storage"] = type(self._storage).__name__
        if self._catalog_service:
            info["catalog"] = type(self._catalog_service).__name__
        if self._assessment_service:
            info["assessment"] = type(self._assessment_service).__name__
        if self._analytics_service:
            info["analytics"] = type(self._analytics_service).__name__
        if self._recommendation_service:
            info["recommendation"] = self._recommendation_service.provider_name
        return info

    def __repr__(self) -> str:
        return f"ServiceRegistry(live={self.use_live_provider()}, services={self.get_service_info()})"


@lru_cache
def get_service_registry() -> ServiceRegistry:
    """Get the singleton ServiceRegistry instance."""
    return ServiceRegistry()


# Convenience functions for common service access
def get_catalog_service() -> "CatalogService":
    return get_service_registry().get_catalog_service()


def get_assessment_service() -> "AssessmentService":
    return get_service_registry().get_assessment_service()


def get_analytics_service() -> "AnalyticsService":
    return get_service_registry().get_analytics_service()


def get_recommendation_service() -> "RecommendationService":
    """Get the recommendation service from the registry.

    This is the recommended way to get a recommendation service, as it
    respects settings and feature flags.
    """
    return get_service_registry().get_recommendation_service()
