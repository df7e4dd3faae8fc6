"""
vault-codec - versioned authenticated encryption for password-vault secrets.

This package encodes vault secrets with AES-256-GCM, keeps reading the legacy
AES-256-CBC and base64 formats, and hashes credentials with PBKDF2.
"""

from .errors import (
    ConfigurationError,
    EncodingFailedError,
    HashingFailedError,
    InvalidInputError,
    VaultCodecError,
)
from .models.config import VaultCodecConfig
from .models.decode_result import DecodeResult
from .models.vault_item import MigrationReport, VaultItem
from .services.secret_codec import SecretCodec
from .services.vault_items import VaultItemService
from .utils.config_loader import load_config

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "SecretCodec",
    "VaultItemService",
    "VaultCodecConfig",
    "DecodeResult",
    "VaultItem",
    "MigrationReport",
    "load_config",
    "VaultCodecError",
    "ConfigurationError",
    "InvalidInputError",
    "EncodingFailedError",
    "HashingFailedError",
]
