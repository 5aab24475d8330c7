"""Shared exceptions for the SkillPath service.

This module defines a consistent exception hierarchy used across all modules
to standardize error handling and provide clear error semantics.
"""

from typing import Any


class SkillPathException(Exception):
    """Base exception for all application errors.

    All domain-specific exceptions should inherit from this class
    to enable consistent error handling at the API layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


# ===================
# Resource Errors
# ===================

class ResourceNotFoundError(SkillPathException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            {"resource_type": resource_type, "resource_id": str(resource_id)}
        )


class CourseNotFoundError(ResourceNotFoundError):
    """Raised when a course is not found."""

    def __init__(self, course_id: str) -> None:
        super().__init__("Course", course_id)


class LearningPathNotFoundError(ResourceNotFoundError):
    """Raised when a learning path is not found."""

    def __init__(self, path_id: str) -> None:
        super().__init__("LearningPath", path_id)


class ProjectNotFoundError(ResourceNotFoundError):
    """Raised when a project is not found."""

    def __init__(self, project_id: str) -> None:
        super().__init__("Project", project_id)


# ===================
# State Errors
# ===================

class InvalidStateError(SkillPathException):
    """Raised when an operation is invalid for the current state."""
    pass


class AssessmentStateError(InvalidStateError):
    """Raised when a quiz transition is not allowed in the current state."""

    def __init__(self, action: str, state: str, reason: str) -> None:
        super().__init__(
            f"Cannot {action} while assessment is '{state}': {reason}",
            {"action": action, "state": state}
        )


class RecommendationInFlightError(InvalidStateError):
    """Raised when a recommendation is requested while another is pending."""

    def __init__(self, session_id: str) -> None:
        super().__init__(
            "A recommendation request is already in flight for this assessment",
            {"session_id": session_id}
        )


# ===================
# Validation Errors
# ===================

class ValidationError(SkillPathException):
    """Raised when input validation fails."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(
            f"Validation error for '{field}': {message}",
            {"field": field}
        )


class InvalidAnswerError(ValidationError):
    """Raised when a selected option does not exist on the question."""

    def __init__(self, index: int, option_count: int) -> None:
        super().__init__(
            "selected_answer",
            f"Option index must be between 0 and {option_count - 1}, got {index}"
        )


# ===================
# Integration Errors
# ===================

class ExternalServiceError(SkillPathException):
    """Raised when an external service call fails."""

    def __init__(self, service: str, message: str) -> None:
        super().__init__(
            f"External service error ({service}): {message}",
            {"service": service}
        )


class LLMServiceError(ExternalServiceError):
    """Raised when the LLM service fails or returns an unusable response."""

    def __init__(self, message: str) -> None:
        super().__init__("LLM", message)


class StorageUnavailableError(ExternalServiceError):
    """Raised when the storage collaborator cannot be reached."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"Storage:{operation}", message)


class RecommendationRequestError(ExternalServiceError):
    """Raised when the recommendation endpoint cannot be reached or parsed."""

    def __init__(self, message: str) -> None:
        super().__init__("RecommendationAPI", message)


# ===================
# Configuration Errors
# ===================

class ConfigurationError(SkillPathException):
    """Raised when there's a configuration problem."""
    pass


class MissingCredentialError(ConfigurationError):
    """Raised when a live provider is requested without a credential."""

    def __init__(self, credential: str) -> None:
        super().__init__(
            f"Credential '{credential}' is not configured",
            {"credential": credential}
        )
