"""Prime webhook signature verifier."""

import contextlib
import hmac
import logging
from typing import Any, Dict, Mapping, Optional, Union

from .config import VerifierConfig
from .exceptions import ConfigurationError
from .types import FailureReason, Logger, Payload, VerificationResult
from .utils.headers import (
    API_KEY_HEADER,
    SIGNATURE_HEADER,
    get_header,
    normalize_headers,
)
from .utils.signature import HashAlgorithm, SignatureCalculator


def _constant_time_equals(provided: str, expected: str) -> bool:
    return hmac.compare_digest(
        provided.encode("utf-8"),
        expected.encode("utf-8")
    )


class SignatureVerifier:
    """
    Verifies callbacks sent by the Prime payment platform.

    A request is authentic when its ``x-api-key`` header equals the shared
    API key and its ``x-hmac-signature`` header equals the HMAC of
    ``statusPayment + primeClientPhone + amount``.

    Example:
        >>> verifier = SignatureVerifier(
        ...     hmac_key="prime_hmac_key_...",
        ...     api_key="prime_api_key_..."
        ... )
        >>> result = verifier.verify(request.headers, request.json())
        >>> if not result.valid:
        ...     abort(401, result.error)
    """

    def __init__(
        self,
        hmac_key: Union[str, bytes],
        api_key: str,
        algorithm: Union[str, HashAlgorithm] = HashAlgorithm.SHA256,
        logger: Optional[Logger] = None
    ):
        """
        Initialize SignatureVerifier.

        Args:
            hmac_key: Shared HMAC signing key
            api_key: Shared API key expected in ``x-api-key``
            algorithm: HMAC hash function, fixed per deployment (default: SHA256)
            logger: Custom logger instance

        Raises:
            ConfigurationError: If a key is missing or the algorithm is unknown
        """
        if not hmac_key:
            raise ConfigurationError("HMAC key is required")
        if not isinstance(hmac_key, (str, bytes)):
            raise ConfigurationError("HMAC key must be a string or bytes")
        if not api_key or not isinstance(api_key, str):
            raise ConfigurationError("API key is required and must be a string")

        self._api_key = api_key
        self._calculator = SignatureCalculator(hmac_key, algorithm)
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_config(
        cls,
        config: VerifierConfig,
        logger: Optional[Logger] = None
    ) -> "SignatureVerifier":
        """Create a verifier from a ``VerifierConfig``."""
        return cls(
            hmac_key=config.hmac_key,
            api_key=config.api_key,
            algorithm=config.algorithm,
            logger=logger
        )

    @classmethod
    def from_env(
        cls,
        env_file: Optional[str] = None,
        prefix: str = "",
        logger: Optional[Logger] = None,
        load_env_file: bool = True
    ) -> "SignatureVerifier":
        """
        Create a verifier from ``HMAC_KEY``, ``API_KEY`` and ``HMAC_ALGORITHM``.

        See ``VerifierConfig.from_env`` for how variables are resolved.
        """
        return cls.from_config(
            VerifierConfig.from_env(
                env_file=env_file,
                prefix=prefix,
                load_env_file=load_env_file
            ),
            logger=logger
        )

    @property
    def algorithm(self) -> HashAlgorithm:
        """HMAC hash function in effect for this verifier."""
        return self._calculator.algorithm

    def verify(
        self,
        headers: Mapping[str, str],
        payload: Union[Payload, Mapping[str, Any]]
    ) -> VerificationResult:
        """
        Verify request headers and payload signature.

        Checks run in a fixed order: API key, presence of the signature
        header, then signature computation and comparison. The first
        failing check decides the error.

        Args:
            headers: Request headers (names are matched case-insensitively)
            payload: Parsed payload, as a ``Payload`` or a wire-name mapping

        Returns:
            VerificationResult; this method does not raise
        """
        try:
            normalized = normalize_headers(headers)

            provided_api_key = get_header(normalized, API_KEY_HEADER)
            if provided_api_key is None or not _constant_time_equals(
                provided_api_key, self._api_key
            ):
                return self._reject(FailureReason.INVALID_API_KEY, "Invalid API key")

            provided_signature = get_header(normalized, SIGNATURE_HEADER)
            if provided_signature is None:
                return self._reject(
                    FailureReason.MISSING_SIGNATURE, "Missing HMAC signature"
                )

            if not isinstance(payload, Payload):
                payload = Payload.from_mapping(payload)

            computed = self._calculator.try_calculate(payload)
            if not computed.ok:
                return self._reject(
                    FailureReason.VERIFICATION_FAILED,
                    f"Verification failed: {computed.error}"
                )

            if not _constant_time_equals(provided_signature, computed.signature):
                return self._reject(FailureReason.INVALID_SIGNATURE, "Invalid signature")

            self._log("debug", "Webhook signature verified")
            return VerificationResult.success()

        except Exception as e:
            result = VerificationResult.failure(
                FailureReason.VERIFICATION_FAILED,
                f"Verification failed: {e}"
            )
            self._log("error", f"Webhook verification error: {e}")
            return result

    def calculate_signature(self, payload: Union[Payload, Mapping[str, Any]]) -> str:
        """
        Calculate the expected signature for a payload.

        Raises:
            SignatureCalculationError: If a signing field is missing or empty
        """
        if not isinstance(payload, Payload):
            payload = Payload.from_mapping(payload)
        return self._calculator.calculate_signature(payload)

    def sign_headers(self, payload: Union[Payload, Mapping[str, Any]]) -> Dict[str, str]:
        """
        Build the authentication headers a sender attaches to a callback.

        Returns:
            Mapping with ``x-api-key`` and ``x-hmac-signature``
        """
        return {
            API_KEY_HEADER: self._api_key,
            SIGNATURE_HEADER: self.calculate_signature(payload),
        }

    def _reject(self, reason: FailureReason, error: str) -> VerificationResult:
        result = VerificationResult.failure(reason, error)
        self._log("warning", f"Webhook rejected: {error}")
        return result

    def _log(self, level: str, msg: str):
        """Log through the configured logger; a failing logger never changes the verdict."""
        with contextlib.suppress(Exception):
            getattr(self.logger, level)(msg)

    def __repr__(self) -> str:
        return f"SignatureVerifier(algorithm={self.algorithm.value!r})"
