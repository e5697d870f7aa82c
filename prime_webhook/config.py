"""Verifier configuration."""

import os
from dataclasses import dataclass, field
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigurationError
from .utils.signature import HashAlgorithm


@dataclass(frozen=True)
class VerifierConfig:
    """
    Secrets and algorithm for a ``SignatureVerifier``.

    Example:
        >>> config = VerifierConfig.from_env()
        >>> verifier = SignatureVerifier.from_config(config)
    """
    hmac_key: Union[str, bytes] = field(repr=False)
    api_key: str = field(repr=False)
    algorithm: HashAlgorithm = HashAlgorithm.SHA256

    def __post_init__(self):
        if not self.hmac_key:
            raise ConfigurationError("HMAC key is required")
        if not self.api_key:
            raise ConfigurationError("API key is required")
        if not isinstance(self.hmac_key, (str, bytes)):
            raise ConfigurationError("HMAC key must be a string or bytes")
        if not isinstance(self.api_key, str):
            raise ConfigurationError("API key must be a string")
        object.__setattr__(self, "algorithm", HashAlgorithm.parse(self.algorithm))

    @classmethod
    def from_env(
        cls,
        env_file: Optional[str] = None,
        prefix: str = "",
        load_env_file: bool = True
    ) -> "VerifierConfig":
        """
        Load configuration from environment variables.

        Reads ``HMAC_KEY``, ``API_KEY`` and ``HMAC_ALGORITHM`` (default:
        sha256), each optionally prefixed. Variables already set in the
        process environment take precedence over the ``.env`` file.

        Args:
            env_file: Path to a .env file (default: search from cwd)
            prefix: Prefix for variable names (e.g. ``PRIME_``)
            load_env_file: Load the .env file before reading (default: True)

        Raises:
            ConfigurationError: If a secret is missing or the algorithm is unknown
        """
        if load_env_file:
            load_dotenv(env_file or find_dotenv(usecwd=True))

        hmac_key = os.getenv(f"{prefix}HMAC_KEY")
        api_key = os.getenv(f"{prefix}API_KEY")

        missing = [
            name for name, value in (
                (f"{prefix}HMAC_KEY", hmac_key),
                (f"{prefix}API_KEY", api_key),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        return cls(
            hmac_key=hmac_key,
            api_key=api_key,
            algorithm=os.getenv(f"{prefix}HMAC_ALGORITHM", HashAlgorithm.SHA256.value)
        )
