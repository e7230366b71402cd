"""Error taxonomy for food resolution and estimation.

Pipeline and estimator errors surface to the immediate caller as a single
user-facing message. The recommendation engine catches its own errors and
substitutes the rule-based fallback instead.
"""

from __future__ import annotations


class FitTrackError(Exception):
    """Base exception for application errors."""


class ConfigurationError(FitTrackError):
    """Raised when a required setting (the Gemini API key) is missing.

    Raised before any network attempt is made.
    """


class NetworkError(FitTrackError):
    """Raised when every rung of the model ladder failed."""

    def __init__(self, message: str, attempts: list[str] | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Most specific underlying error message available.
            attempts: ``version/model`` identifiers that were tried, in order.
        """
        self.attempts = attempts or []
        super().__init__(message)


class ResponseFormatError(FitTrackError):
    """Raised when the model answered but no nutrition JSON could be read."""

    def __init__(self, message: str, excerpt: str = "") -> None:
        """Initialize the exception.

        Args:
            message: Error message, already including the excerpt.
            excerpt: Truncated raw model text for diagnosis.
        """
        self.excerpt = excerpt
        super().__init__(message)


class ValidationError(FitTrackError):
    """Raised when the caller supplied unusable input, such as a blank query."""
