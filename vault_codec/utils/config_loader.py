"""
Configuration loader utility.

Loads the codec configuration from environment variables (and a ``.env`` file
when present) with sensible defaults.
"""

import logging
import os

from dotenv import load_dotenv
from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models.config import DEVELOPMENT_SECRET_KEY, VaultCodecConfig

logger = logging.getLogger(__name__)

_TRUTHY = ("true", "1", "yes")


def load_config() -> VaultCodecConfig:
    """
    Load configuration from environment variables with defaults.

    Required environment variables (production only):
    - VAULT_ENCRYPTION_KEY (or ENCRYPTION_KEY)

    Optional environment variables:
    - VAULT_ENV or APP_ENV (development, test, production; default: development)
    - VAULT_STRICT_INTEGRITY (true/1/yes)

    Returns:
        VaultCodecConfig instance

    Raises:
        ConfigurationError: If the secret key is missing, the development key or
            shorter than 32 bytes in production, or the environment name is unknown
    """
    load_dotenv()

    environment = (
        os.environ.get("VAULT_ENV") or os.environ.get("APP_ENV") or "development"
    ).lower()
    if environment not in ("development", "test", "production"):
        raise ConfigurationError(f"Unknown VAULT_ENV value: '{environment}'")

    secret_key = os.environ.get("VAULT_ENCRYPTION_KEY") or os.environ.get("ENCRYPTION_KEY") or ""
    if not secret_key:
        if environment == "production":
            raise ConfigurationError(
                "VAULT_ENCRYPTION_KEY environment variable is required in production"
            )
        logger.warning(
            "VAULT_ENCRYPTION_KEY not set; using the built-in development key. "
            "Never run production with this key."
        )
        secret_key = DEVELOPMENT_SECRET_KEY

    if len(secret_key.encode("utf-8")) < 32:
        logger.warning(
            "Secret key is shorter than 32 bytes; encode will fall back to base64 "
            "until a full-length key is configured."
        )

    strict_integrity = os.environ.get("VAULT_STRICT_INTEGRITY", "false").lower() in _TRUTHY

    try:
        return VaultCodecConfig(
            secret_key=secret_key,
            environment=environment,
            strict_integrity=strict_integrity,
        )
    except ValidationError as e:
        message = "; ".join(error["msg"] for error in e.errors())
        raise ConfigurationError(f"Invalid vault codec configuration: {message}") from e
