"""Service implementations for the vault codec."""

from .secret_codec import SecretCodec
from .vault_items import VaultItemService

__all__ = [
    "SecretCodec",
    "VaultItemService",
]
