"""Exceptions raised by the Prime webhook SDK."""

from typing import Optional


class PrimeWebhookError(Exception):
    """Base exception for the SDK."""
    pass


class ConfigurationError(PrimeWebhookError, ValueError):
    """Raised when a verifier is built with missing or invalid settings."""
    pass


class SignatureCalculationError(PrimeWebhookError):
    """Raised when a signature cannot be computed for a payload."""
    pass


class PayloadValidationError(SignatureCalculationError):
    """Raised when a field required for signing is missing or empty."""

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"Missing required field: {field}")
