"""Domain-specific exceptions for AI services."""


class AIServiceError(Exception):
    """Base exception for AI services."""
    pass


class AIServiceNotConfiguredError(AIServiceError):
    """Raised when no LLM API key is configured."""
    pass


class UpstreamServiceError(AIServiceError):
    """Raised when the LLM request fails or returns an unusable answer."""
    pass
