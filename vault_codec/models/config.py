"""
Configuration types for the vault codec.

This module contains the Pydantic model that carries the process-wide secret
key and codec tuning knobs. A codec instance is built from one of these and
never reads the environment itself.
"""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

DEFAULT_AAD = "vault-v1"
DEFAULT_MAX_INPUT_LENGTH = 100_000
DEFAULT_PBKDF2_ITERATIONS = 100_000

# Built-in key for development and tests only; refused in production.
DEVELOPMENT_SECRET_KEY = "your-32-character-secret-key-here!!"

Environment = Literal["development", "test", "production"]


class VaultCodecConfig(BaseModel):
    """Vault codec configuration.

    Required fields:
    - secret_key: Secret key string; the first 32 UTF-8 bytes form the AES key

    Optional fields:
    - environment: Deployment environment (development, test, production)
    - aad: Additional authenticated data bound into every V2 tag
    - max_input_length: Character cap applied to every input
    - pbkdf2_iterations: Iteration count for credential hashing
    - strict_integrity: Treat V2 authentication failure as terminal in decode
    """

    model_config = {"frozen": True}

    secret_key: str = Field(..., min_length=1, repr=False, description="Secret key string")
    environment: Environment = Field(default="development", description="Deployment environment")
    aad: str = Field(default=DEFAULT_AAD, description="Additional authenticated data label")
    max_input_length: int = Field(
        default=DEFAULT_MAX_INPUT_LENGTH, gt=0, description="Maximum input length in characters"
    )
    pbkdf2_iterations: int = Field(
        default=DEFAULT_PBKDF2_ITERATIONS, gt=0, description="PBKDF2 iteration count"
    )
    strict_integrity: bool = Field(
        default=False, description="Do not guess past a V2 authentication failure"
    )

    @model_validator(mode="after")
    def check_production_key(self) -> "VaultCodecConfig":
        if self.environment == "production":
            if self.uses_development_key:
                raise ValueError("The built-in development key cannot be used in production")
            if len(self.key_bytes) < 32:
                raise ValueError("Secret key must be at least 32 bytes in production")
        return self

    @property
    def key_bytes(self) -> bytes:
        """Get the AES key: the first 32 bytes of the UTF-8 secret key."""
        return self.secret_key.encode("utf-8")[:32]

    @property
    def aad_bytes(self) -> bytes:
        """Get the AAD label as bytes."""
        return self.aad.encode("utf-8")

    @property
    def uses_development_key(self) -> bool:
        """Check whether the built-in development key is configured."""
        return self.secret_key == DEVELOPMENT_SECRET_KEY
