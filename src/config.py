"""Configuration module for Googlebot Verifier.

Loads and validates environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    # Resolver Configuration
    resolver_url: str
    resolver_timeout: int

    # Server Configuration
    listen_host: str
    listen_port: int

    # Operational Configuration
    verbose: bool

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Raises:
            ValueError: If variables are invalid.

        Returns:
            Config: Validated configuration instance.
        """
        # Resolver Configuration
        resolver_url = os.getenv("RESOLVER_URL", "https://dns.google.com/resolve")
        if not resolver_url.startswith("https://"):
            raise ValueError("RESOLVER_URL must be an HTTPS URL")

        resolver_timeout = cls._get_int_env("RESOLVER_TIMEOUT", "5")
        if not 1 <= resolver_timeout <= 60:
            raise ValueError("RESOLVER_TIMEOUT must be between 1 and 60 seconds")

        # Server Configuration
        listen_host = os.getenv("LISTEN_HOST", "0.0.0.0")
        if not listen_host:
            raise ValueError("LISTEN_HOST cannot be empty")

        listen_port = cls._get_int_env("LISTEN_PORT", "8080")
        if not 1 <= listen_port <= 65535:
            raise ValueError("LISTEN_PORT must be between 1 and 65535")

        # Operational Configuration
        verbose_str = os.getenv("VERBOSE", "false").lower()
        verbose = verbose_str in ("true", "1", "yes")

        return cls(
            resolver_url=resolver_url,
            resolver_timeout=resolver_timeout,
            listen_host=listen_host,
            listen_port=listen_port,
            verbose=verbose,
        )

    @staticmethod
    def _get_int_env(key: str, default: str) -> int:
        """Get integer environment variable or raise ValueError.

        Args:
            key: Environment variable name.
            default: Value used when the variable is unset.

        Returns:
            int: Parsed value.

        Raises:
            ValueError: If the value is not an integer.
        """
        value = os.getenv(key, default)
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"{key} must be an integer, got {value!r}") from None
