"""Feature flag management for safe feature rollout.

This module provides a centralized system for toggling features on/off
without code changes, enabling gradual rollout and quick rollback.

Usage:
    from skillpath.shared.feature_flags import get_feature_flags, FeatureFlags

    flags = get_feature_flags()
    if flags.is_enabled(FeatureFlags.ENABLE_AI_RECOMMENDATIONS):
        # Ask the generative provider
    else:
        # Use the deterministic fallback

Environment Variables:
    FF_ENABLE_AI_RECOMMENDATIONS: Allow the live learning-path provider (default: true)
    FF_ENABLE_AI_PROJECTS: Allow the live project-idea provider (default: true)
    FF_SEED_SAMPLE_CATALOG: Load the sample catalog into storage (default: true)
"""

from enum import Enum
from functools import lru_cache
import logging
import os

logger = logging.getLogger(__name__)

_DEFAULTS: dict[str, bool] = {
    "enable_ai_recommendations": True,
    "enable_ai_projects": True,
    "seed_sample_catalog": True,
}


class FeatureFlags(str, Enum):
    """Available feature flags.

    Each flag corresponds to an environment variable with FF_ prefix.
    """

    ENABLE_AI_RECOMMENDATIONS = "enable_ai_recommendations"
    ENABLE_AI_PROJECTS = "enable_ai_projects"
    SEED_SAMPLE_CATALOG = "seed_sample_catalog"

    @property
    def env_key(self) -> str:
        """Get the environment variable name for this flag."""
        return f"FF_{self.value.upper()}"

    @property
    def default(self) -> bool:
        return _DEFAULTS.get(self.value, False)


class FeatureFlagManager:
    """Manages feature flags with environment variable and runtime overrides."""

    _instance: "FeatureFlagManager | None" = None

    def __new__(cls) -> "FeatureFlagManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        if self._initialized:
            return
        self._overrides: dict[str, bool] = {}
        self._initialized = True
        logger.info("FeatureFlagManager initialized")

    def is_enabled(self, flag: FeatureFlags) -> bool:
        """Check if a feature flag is enabled.

        Priority:
        1. Runtime overrides (set via enable/disable methods)
        2. Environment variables (FF_<FLAG_NAME>=true/false)
        3. The flag's default

        Args:
            flag: The feature flag to check

        Returns:
            True if the flag is enabled, False otherwise
        """
        if flag.value in self._overrides:
            return self._overrides[flag.value]

        env_value = os.getenv(flag.env_key)
        if env_value is None:
            return flag.default
        return env_value.strip().lower() in ("true", "1", "yes", "on")

    def enable(self, flag: FeatureFlags) -> None:
        """Enable a feature flag at runtime."""
        self._overrides[flag.value] = True
        logger.info(f"Feature flag enabled: {flag.value}")

    def disable(self, flag: FeatureFlags) -> None:
        """Disable a feature flag at runtime."""
        self._overrides[flag.value] = False
        logger.info(f"Feature flag disabled: {flag.value}")

    def clear_override(self, flag: FeatureFlags) -> None:
        """Clear runtime override for a flag, reverting to environment variable."""
        if flag.value in self._overrides:
            del self._overrides[flag.value]
            logger.info(f"Feature flag override cleared: {flag.value}")

    def clear_all_overrides(self) -> None:
        """Clear all runtime overrides, reverting to environment variables."""
        self._overrides.clear()
        logger.info("All feature flag overrides cleared")

    def get_all_states(self) -> dict[str, bool]:
        """Get the current state of all feature flags.

        Useful for debugging and health endpoints.
        """
        return {flag.value: self.is_enabled(flag) for flag in FeatureFlags}

    def __repr__(self) -> str:
        states = self.get_all_states()
        enabled = [k for k, v in states.items() if v]
        return f"FeatureFlagManager(enabled={enabled})"


@lru_cache
def get_feature_flags() -> FeatureFlagManager:
    """Get the singleton FeatureFlagManager instance."""
    return FeatureFlagManager()


def is_ai_recommendations_enabled() -> bool:
    """Check if the live recommendation provider may be used."""
    return get_feature_flags().is_enabled(FeatureFlags.ENABLE_AI_RECOMMENDATIONS)


def is_ai_projects_enabled() -> bool:
    """Check if the live project-idea provider may be used."""
    return get_feature_flags().is_enabled(FeatureFlags.ENABLE_AI_PROJECTS)
