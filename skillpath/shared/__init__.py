"""Shared utilities and common code."""

from skillpath.shared.config import Settings, get_settings
from skillpath.shared.models import (
    BaseSchema,
    Category,
    CourseProvider,
    DifficultyLevel,
    FrozenSchema,
    category_color,
    category_label,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Models
    "BaseSchema",
    "FrozenSchema",
    # Enums
    "Category",
    "CourseProvider",
    "DifficultyLevel",
    "category_color",
    "category_label",
]
