"""Type definitions for Prime Webhook SDK."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Protocol


# Wire name (camelCase, as sent in the callback body) -> dataclass attribute
PAYLOAD_FIELDS = {
    "callbackUrl": "callback_url",
    "amount": "amount",
    "primeClientPhone": "prime_client_phone",
    "externalRefId": "external_ref_id",
    "statusPayment": "status_payment",
    "datePayment": "date_payment",
    "internalPaymentRef": "internal_payment_ref",
}

PAYLOAD_ALIASES = {
    "primeInternalPaymentRef": "internalPaymentRef",
}


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (Mapping, list, tuple, set)):
        raise TypeError(f"Expected a scalar value, got {type(value).__name__}")
    return str(value)


@dataclass(frozen=True)
class Payload:
    """Payment notification sent to the callback URL."""
    callback_url: Optional[str] = None
    amount: Optional[str] = None
    prime_client_phone: Optional[str] = None
    external_ref_id: Optional[str] = None
    status_payment: Optional[str] = None
    date_payment: Optional[str] = None
    internal_payment_ref: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Payload":
        """
        Build a payload from a parsed request body.

        Args:
            data: Mapping keyed by wire names (e.g. ``statusPayment``)

        Returns:
            Payload with unknown keys ignored and scalar values stringified

        Raises:
            TypeError: If ``data`` is not a mapping or a field is not a scalar
        """
        if not isinstance(data, Mapping):
            raise TypeError(
                f"Payload must be a mapping, got {type(data).__name__}"
            )

        values: Dict[str, Optional[str]] = {}
        for key, value in data.items():
            wire_name = PAYLOAD_ALIASES.get(key, key)
            attr = PAYLOAD_FIELDS.get(wire_name)
            if attr is None:
                continue
            # The canonical name wins over its alias
            if attr in values and key != wire_name:
                continue
            values[attr] = _as_text(value)

        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        """Return the payload keyed by wire names, skipping unset fields."""
        result = {}
        for wire_name, attr in PAYLOAD_FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                result[wire_name] = value
        return result


class FailureReason(str, Enum):
    """Why a request failed verification."""
    INVALID_API_KEY = "invalid_api_key"
    MISSING_SIGNATURE = "missing_signature"
    VERIFICATION_FAILED = "verification_failed"
    INVALID_SIGNATURE = "invalid_signature"


@dataclass(frozen=True)
class VerificationResult:
    """Verdict returned by ``SignatureVerifier.verify``."""
    valid: bool
    error: Optional[str] = None
    reason: Optional[FailureReason] = None

    def __post_init__(self):
        if self.valid and (self.error is not None or self.reason is not None):
            raise ValueError("A valid result cannot carry an error")
        if not self.valid and (not self.error or self.reason is None):
            raise ValueError("An invalid result needs an error and a reason")

    def __bool__(self) -> bool:
        return self.valid

    @classmethod
    def success(cls) -> "VerificationResult":
        return cls(valid=True)

    @classmethod
    def failure(cls, reason: FailureReason, error: str) -> "VerificationResult":
        return cls(valid=False, error=error, reason=reason)


@dataclass(frozen=True)
class SignatureResult:
    """Outcome of a signature computation that did not raise."""
    signature: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.signature is not None


class Logger(Protocol):
    """Logger protocol."""
    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
