"""HMAC signature calculation utilities."""

import base64
import hashlib
import hmac
from enum import Enum
from typing import Union

from ..exceptions import (
    ConfigurationError,
    PayloadValidationError,
    SignatureCalculationError,
)
from ..types import Payload, SignatureResult


# Signing fields, in canonical order: (wire name, attribute)
SIGNED_FIELDS = (
    ("statusPayment", "status_payment"),
    ("primeClientPhone", "prime_client_phone"),
    ("amount", "amount"),
)


class HashAlgorithm(str, Enum):
    """Hash function used for the HMAC. Fixed per deployment."""
    SHA256 = "sha256"
    SHA512 = "sha512"

    @property
    def digestmod(self):
        return getattr(hashlib, self.value)

    @classmethod
    def parse(cls, value: Union[str, "HashAlgorithm"]) -> "HashAlgorithm":
        """
        Resolve an algorithm from an enum member or a name.

        Accepts names such as ``sha256``, ``SHA-512`` or ``HmacSHA256``.

        Raises:
            ConfigurationError: If the name is not a supported algorithm
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ConfigurationError(f"Unsupported HMAC algorithm: {value!r}")

        name = value.strip().lower().replace("-", "").replace("_", "")
        if name.startswith("hmac"):
            name = name[len("hmac"):]
        for member in cls:
            if member.value == name:
                return member
        raise ConfigurationError(f"Unsupported HMAC algorithm: {value!r}")


def build_canonical_message(payload: Payload) -> str:
    """
    Build the string that gets signed.

    The three signing fields are concatenated without a separator:
    ``statusPayment + primeClientPhone + amount``.

    Raises:
        PayloadValidationError: If a signing field is missing, empty or
            not a string
    """
    parts = []
    for wire_name, attr in SIGNED_FIELDS:
        value = getattr(payload, attr, None)
        if value is None or value == "":
            raise PayloadValidationError(wire_name)
        if not isinstance(value, str):
            raise PayloadValidationError(
                wire_name, f"Field {wire_name} must be a string"
            )
        parts.append(value)
    return "".join(parts)


def compute_signature(
    key: bytes,
    message: str,
    algorithm: HashAlgorithm = HashAlgorithm.SHA256
) -> str:
    """
    Compute a base64-encoded HMAC.

    Args:
        key: Signing key
        message: Canonical message (encoded as UTF-8)
        algorithm: Hash function for the HMAC

    Returns:
        Standard base64 (padded) of the raw MAC
    """
    digest = hmac.new(
        key,
        message.encode("utf-8"),
        algorithm.digestmod
    ).digest()
    return base64.b64encode(digest).decode("ascii")


class SignatureCalculator:
    """
    Derives the expected ``x-hmac-signature`` for a payload.

    Example:
        >>> calculator = SignatureCalculator("prime_hmac_key_...")
        >>> calculator.calculate_signature(payload)
        'X+o3GN/avoky0h1nEGDdqDuPBhmViuDDF4k3YNgyEto='
    """

    def __init__(
        self,
        hmac_key: Union[str, bytes],
        algorithm: Union[str, HashAlgorithm] = HashAlgorithm.SHA256
    ):
        """
        Initialize the calculator.

        Args:
            hmac_key: Shared signing key (str is encoded as UTF-8)
            algorithm: HMAC hash function (default: SHA256)
        """
        if isinstance(hmac_key, str):
            try:
                hmac_key = hmac_key.encode("utf-8")
            except UnicodeEncodeError as e:
                raise ConfigurationError(
                    f"hmac_key is not valid UTF-8 text: {e.reason}"
                ) from e
        if not isinstance(hmac_key, bytes) or not hmac_key:
            raise ConfigurationError("hmac_key is required")

        self._key = hmac_key
        self._algorithm = HashAlgorithm.parse(algorithm)

    @property
    def algorithm(self) -> HashAlgorithm:
        return self._algorithm

    def calculate_signature(self, payload: Payload) -> str:
        """
        Calculate the base64 HMAC for a payload.

        Raises:
            PayloadValidationError: If a signing field is missing or empty
            SignatureCalculationError: If the MAC cannot be computed
        """
        message = build_canonical_message(payload)
        try:
            return compute_signature(self._key, message, self._algorithm)
        except (TypeError, ValueError) as e:
            raise SignatureCalculationError(
                f"Failed to calculate signature: {e}"
            ) from e

    def try_calculate(self, payload: Payload) -> SignatureResult:
        """Calculate the signature, returning the failure instead of raising."""
        try:
            return SignatureResult(signature=self.calculate_signature(payload))
        except SignatureCalculationError as e:
            return SignatureResult(error=str(e))

    def __repr__(self) -> str:
        return f"SignatureCalculator(algorithm={self._algorithm.value!r})"
