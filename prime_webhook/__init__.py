"""Prime payment webhook signature verification SDK for Python."""

from .config import VerifierConfig
from .exceptions import (
    PrimeWebhookError,
    ConfigurationError,
    SignatureCalculationError,
    PayloadValidationError
)
from .types import (
    Payload,
    VerificationResult,
    FailureReason,
    SignatureResult
)
from .utils.signature import HashAlgorithm, SignatureCalculator
from .verifier import SignatureVerifier

__version__ = "1.0.0"
__all__ = [
    "SignatureVerifier",
    "SignatureCalculator",
    "HashAlgorithm",
    "VerifierConfig",
    "Payload",
    "VerificationResult",
    "FailureReason",
    "SignatureResult",
    "PrimeWebhookError",
    "ConfigurationError",
    "SignatureCalculationError",
    "PayloadValidationError"
]
