class ExternalServiceError(Exception):
    """Base exception for failures of third-party services."""


class AIServiceError(ExternalServiceError):
    """Raised when the AI provider returns an unusable response."""


class AIServiceNetworkError(AIServiceError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
