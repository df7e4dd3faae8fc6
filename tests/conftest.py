"""
Shared pytest fixtures for vault codec tests.
"""

import pytest
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from vault_codec import SecretCodec, VaultCodecConfig, VaultItemService

TEST_SECRET_KEY = "0123456789abcdef0123456789abcdef"
LEGACY_IV = bytes.fromhex("000102030405060708090a0b0c0d0e0f")


@pytest.fixture
def config():
    """Test configuration with a full-length key."""
    return VaultCodecConfig(secret_key=TEST_SECRET_KEY, environment="test")


@pytest.fixture
def codec(config):
    """Secret codec fixture."""
    return SecretCodec(config)


@pytest.fixture
def strict_codec():
    """Secret codec that refuses to guess past a V2 authentication failure."""
    return SecretCodec(
        VaultCodecConfig(secret_key=TEST_SECRET_KEY, environment="test", strict_integrity=True)
    )


@pytest.fixture
def short_key_codec():
    """Secret codec whose key is too short for AES-256."""
    return SecretCodec(VaultCodecConfig(secret_key="too-short", environment="test"))


@pytest.fixture
def vault_items(codec):
    """Vault item service fixture."""
    return VaultItemService(codec)


@pytest.fixture
def legacy_v1_encrypt():
    """Produce legacy ``iv_hex:ciphertext_hex`` strings (AES-256-CBC, PKCS7)."""

    def _encrypt(plaintext: str, key: str = TEST_SECRET_KEY, iv: bytes = LEGACY_IV) -> str:
        padder = padding.PKCS7(128).padder()
        padded = padder.update(plaintext.encode("utf-8")) + padder.finalize()
        encryptor = Cipher(
            algorithms.AES(key.encode("utf-8")[:32]), modes.CBC(iv)
        ).encryptor()
        ciphertext = encryptor.update(padded) + encryptor.finalize()
        return f"{iv.hex()}:{ciphertext.hex()}"

    return _encrypt
