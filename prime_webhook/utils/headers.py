"""Case-insensitive access to request headers."""

from typing import Any, Dict, Mapping, Optional

API_KEY_HEADER = "x-api-key"
SIGNATURE_HEADER = "x-hmac-signature"


def normalize_headers(headers: Any) -> Dict[str, Any]:
    """
    Return a copy of ``headers`` with lower-cased names.

    Accepts any object with an ``items()`` method, such as a dict or a
    framework header container (e.g. Werkzeug ``Headers``). For repeated
    headers the last value wins.

    Raises:
        TypeError: If ``headers`` has no ``items()`` method
    """
    items = getattr(headers, "items", None)
    if not callable(items):
        raise TypeError(
            f"Headers must be a mapping, got {type(headers).__name__}"
        )
    return {str(name).lower(): value for name, value in items()}


def get_header(headers: Mapping[str, Any], name: str) -> Optional[str]:
    """
    Look up a header from already-normalized headers.

    Returns:
        The header value, or None when absent

    Raises:
        TypeError: If the value present is not a string
    """
    value = headers.get(name.lower())
    if value is not None and not isinstance(value, str):
        raise TypeError(f"Header {name} must be a string")
    return value
