"""Unit tests for service registry."""

import pytest

from skillpath.modules.catalog.storage import InMemoryStorage
from skillpath.shared.feature_flags import FeatureFlags, get_feature_flags
from skillpath.shared.service_registry import (
    ServiceRegistry,
    get_catalog_service,
    get_recommendation_service,
    get_service_registry,
)


@pytest.fixture
def no_credential(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "")


class TestServiceRegistry:
    """Tests for ServiceRegistry."""

    def test_singleton_pattern(self):
        assert ServiceRegistry() is ServiceRegistry()
        assert get_service_registry() is get_service_registry()

    def test_services_share_storage(self):
        registry = get_service_registry()
        catalog = registry.get_catalog_service()
        assessment = registry.get_assessment_service()
        assert catalog._storage is assessment._storage is registry.get_storage()

    def test_sample_catalog_seeded_by_default(self):
        storage = get_service_registry().get_storage()
        assert isinstance(storage, InMemoryStorage)
        assert len(storage._courses) == 8

    def test_seed_flag_off_gives_empty_storage(self):
        get_feature_flags().disable(FeatureFlags.SEED_SAMPLE_CATALOG)
        storage = get_service_registry().get_storage()
        assert storage._courses == {}

    def test_fallback_setting(self, monkeypatch):
        monkeypatch.setenv("RECOMMENDATION_PROVIDER", "fallback")
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
        registry = get_service_registry()
        assert registry.use_live_provider() is False
        assert registry.get_recommendation_service().provider_name == "FallbackRecommendationProvider"

    def test_auto_without_credential_uses_fallback(self, monkeypatch, no_credential):
        monkeypatch.setenv("RECOMMENDATION_PROVIDER", "auto")
        assert get_service_registry().use_live_provider() is False

    def test_auto_with_credential_uses_live(self, monkeypatch):
        monkeypatch.setenv("RECOMMENDATION_PROVIDER", "auto")
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
        service = get_recommendation_service()
        assert service.provider_name == "LiveRecommendationProvider"

    def test_auto_respects_disabled_flag(self, monkeypatch):
        monkeypatch.setenv("RECOMMENDATION_PROVIDER", "auto")
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
        get_feature_flags().disable(FeatureFlags.ENABLE_AI_RECOMMENDATIONS)
        assert get_service_registry().use_live_provider() is False

    def test_live_setting_forces_live(self, monkeypatch, no_credential):
        monkeypatch.setenv("RECOMMENDATION_PROVIDER", "live")
        assert get_service_registry().use_live_provider() is True

    def test_clear_cache(self):
        registry = get_service_registry()
        first = get_catalog_service()
        registry.clear_cache()
        assert registry.get_service_info() == {}
        assert get_catalog_service() is not first

    def test_service_info(self, monkeypatch):
        monkeypatch.setenv("RECOMMENDATION_PROVIDER", "fallback")
        registry = get_service_registry()
        registry.get_recommendation_service()
        info = registry.get_service_info()
        assert info["storage"] == "InMemoryStorage"
        assert info["recommendation"] == "FallbackRecommendationProvider"
