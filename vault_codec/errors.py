"""
Codec exceptions and error handling.

This module defines custom exceptions for the vault codec. Messages never
carry plaintext or key material.
"""

from typing import Literal

VaultCodecErrorCode = Literal[
    "CONFIGURATION_INVALID",
    "INVALID_INPUT",
    "ENCODING_FAILED",
    "HASHING_FAILED",
]


class VaultCodecError(Exception):
    """Base exception for vault codec errors."""

    def __init__(self, message: str, code: str | None = None):
        """
        Initialize vault codec error.

        Args:
            message: Error message
            code: Machine-readable error code if applicable
        """
        super().__init__(message)
        self.message = message
        self.code = code


class ConfigurationError(VaultCodecError):
    """Raised when configuration is invalid or the secret key is missing."""

    def __init__(self, message: str, code: str | None = "CONFIGURATION_INVALID"):
        super().__init__(message, code=code)


class InvalidInputError(VaultCodecError):
    """Raised when input is missing, not a string, or exceeds the size cap."""

    def __init__(self, message: str, code: str | None = "INVALID_INPUT"):
        super().__init__(message, code=code)


class EncodingFailedError(VaultCodecError):
    """Raised when both the authenticated path and the base64 fallback fail."""

    def __init__(self, message: str, code: str | None = "ENCODING_FAILED"):
        super().__init__(message, code=code)


class HashingFailedError(VaultCodecError):
    """Raised when credential hashing fails. There is no fallback."""

    def __init__(self, message: str, code: str | None = "HASHING_FAILED"):
        super().__init__(message, code=code)
