"""
Secret codec for vault secrets at rest.

Encodes plaintext secrets as AES-256-GCM ciphertext in the ``iv:tag:ciphertext``
hex format, and decodes that format, the legacy AES-256-CBC ``iv:ciphertext``
format, and plain base64. Also provides one-way PBKDF2 credential hashing.

Decoding is total: corrupted or foreign input yields a ``DecodeResult`` with
status ``degraded`` or ``failed`` instead of an exception.
"""

import base64
import hmac
import logging
import os
from typing import Any

from cryptography.hazmat.primitives import hashes, padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ..errors import EncodingFailedError, HashingFailedError
from ..models.config import VaultCodecConfig
from ..models.decode_result import DecodeResult
from ..models.wire_format import FallbackEnvelope, V1Envelope, V2Envelope
from ..utils.config_loader import load_config
from ..utils.input_validation import is_valid_text, validate_text
from ..utils.wire_format import (
    format_hashed_credential,
    format_v2,
    parse_hashed_credential,
    parse_wire_format,
)

logger = logging.getLogger(__name__)

IV_LENGTH = 16
TAG_LENGTH = 16
KEY_LENGTH = 32
SALT_LENGTH = 16
CREDENTIAL_HASH_LENGTH = 64


class SecretCodec:
    """
    Versioned authenticated-encryption codec with fallback decoding.

    Instances are stateless apart from the immutable configuration and are
    safe to share between threads.
    """

    def __init__(self, config: VaultCodecConfig):
        """
        Initialize secret codec.

        Args:
            config: Codec configuration containing the secret key
        """
        self.config = config
        if config.uses_development_key and config.environment != "test":
            logger.warning("SecretCodec is running with the built-in development key")

    @classmethod
    def from_env(cls) -> "SecretCodec":
        """Build a codec from environment configuration (see load_config)."""
        return cls(load_config())

    def _key(self) -> bytes:
        key = self.config.key_bytes
        if len(key) != KEY_LENGTH:
            raise ValueError(f"Invalid key length: expected {KEY_LENGTH} bytes, got {len(key)}")
        return key

    # ==================== ENCODING ====================

    def encode(self, plaintext: str) -> str:
        """
        Encode a plaintext secret for storage.

        The trimmed plaintext is encrypted with AES-256-GCM under a fresh IV,
        with the configured AAD bound into the tag. If that fails the original
        untrimmed plaintext is stored as base64 and a warning is logged.

        Args:
            plaintext: Secret to protect (non-blank, at most max_input_length characters)

        Returns:
            ``iv_hex:tag_hex:ciphertext_hex``, or base64 on the degraded path

        Raises:
            InvalidInputError: If plaintext is not a non-blank string within the cap
            EncodingFailedError: If neither encryption nor base64 encoding succeeds
        """
        validate_text(plaintext, self.config.max_input_length)
        try:
            return self._encrypt_v2(plaintext.strip())
        except Exception as e:
            logger.warning(
                f"Authenticated encryption failed ({type(e).__name__}); "
                "storing secret as unencrypted base64"
            )
        try:
            return base64.b64encode(plaintext.encode("utf-8")).decode("ascii")
        except UnicodeEncodeError as e:
            logger.error("Base64 fallback failed; secret could not be encoded")
            raise EncodingFailedError("Secret could not be encoded") from e

    def _encrypt_v2(self, plaintext: str) -> str:
        iv = os.urandom(IV_LENGTH)
        sealed = AESGCM(self._key()).encrypt(
            iv, plaintext.encode("utf-8"), self.config.aad_bytes
        )
        return format_v2(iv, sealed[-TAG_LENGTH:], sealed[:-TAG_LENGTH])

    # ==================== DECODING ====================

    def decode(self, encoded: str) -> str:
        """
        Decode a stored secret, always returning some string.

        Returns the recovered plaintext when any stage succeeds, otherwise the
        input unchanged. Use decode_result() to learn which stage produced the
        value.
        """
        result = self.decode_result(encoded)
        if result.plaintext is not None:
            return result.plaintext
        return encoded if isinstance(encoded, str) else ""

    def decode_result(self, encoded: str) -> DecodeResult:
        """
        Decode a stored secret into an explicit outcome.

        Stages run in order: format-specific decryption (V2 or V1), then the
        base64 fallback. With strict_integrity enabled a V2 authentication
        failure is terminal.

        Args:
            encoded: Stored secret string; other types yield a failed result

        Returns:
            DecodeResult with status ok, degraded or failed
        """
        if not is_valid_text(encoded, self.config.max_input_length):
            return DecodeResult.failed("input must be a non-empty string within the size limit")

        envelope = parse_wire_format(encoded)
        logger.debug(f"Decoding stored secret as {envelope.format}")

        if isinstance(envelope, FallbackEnvelope):
            return self._decode_base64(envelope, "no recognised wire format")

        try:
            if isinstance(envelope, V2Envelope):
                plaintext = self._decrypt_v2(envelope)
            else:
                plaintext = self._decrypt_v1(envelope)
        except Exception as e:
            reason = f"{envelope.format} decryption failed: {type(e).__name__}"
            if isinstance(envelope, V2Envelope) and self.config.strict_integrity:
                logger.warning(f"{reason}; strict integrity enabled, not guessing")
                return DecodeResult.failed(reason, envelope.format)
            logger.warning(f"{reason}; trying base64 fallback")
            return self._decode_base64(envelope, reason)
        return DecodeResult.ok(plaintext, envelope.format)

    def _decrypt_v2(self, envelope: V2Envelope) -> str:
        iv = envelope.iv_bytes
        tag = envelope.tag_bytes
        if len(iv) != IV_LENGTH or len(tag) != TAG_LENGTH:
            raise ValueError("Invalid IV or tag length")
        data = AESGCM(self._key()).decrypt(
            iv, envelope.ciphertext_bytes + tag, self.config.aad_bytes
        )
        return data.decode("utf-8")

    def _decrypt_v1(self, envelope: V1Envelope) -> str:
        decryptor = Cipher(algorithms.AES(self._key()), modes.CBC(envelope.iv_bytes)).decryptor()
        padded = decryptor.update(envelope.ciphertext_bytes) + decryptor.finalize()
        unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
        data = unpadder.update(padded) + unpadder.finalize()
        return data.decode("utf-8")

    def _decode_base64(self, envelope: Any, reason: str) -> DecodeResult:
        try:
            plaintext = base64.b64decode(envelope.raw, validate=True).decode("utf-8")
        except ValueError:
            return DecodeResult.failed(f"{reason}; base64 fallback failed", envelope.format)
        return DecodeResult.degraded(plaintext, envelope.format, reason)

    def needs_migration(self, encoded: str) -> bool:
        """Check whether a stored secret should be re-encoded in the current format."""
        return self.decode_result(encoded).needs_migration

    # ==================== CREDENTIAL HASHING ====================

    def _derive(self, credential: str, salt: bytes) -> bytes:
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA512(),
            length=CREDENTIAL_HASH_LENGTH,
            salt=salt,
            iterations=self.config.pbkdf2_iterations,
        )
        return kdf.derive(credential.encode("utf-8"))

    def hash_credential(self, credential: str) -> str:
        """
        Hash a credential for one-way storage.

        Args:
            credential: Password or other credential

        Returns:
            ``salt_hex:hash_hex`` with a fresh 16-byte salt and 64-byte digest

        Raises:
            InvalidInputError: If credential is not a non-blank string within the cap
            HashingFailedError: If the key derivation fails
        """
        validate_text(credential, self.config.max_input_length, field_name="credential")
        salt = os.urandom(SALT_LENGTH)
        try:
            digest = self._derive(credential, salt)
        except Exception as e:
            logger.error(f"Credential hashing failed ({type(e).__name__})")
            raise HashingFailedError("Credential hashing failed") from e
        return format_hashed_credential(salt, digest)

    def verify_credential(self, candidate: str, hashed: str) -> bool:
        """
        Check a candidate credential against a stored hash.

        Malformed input and a wrong candidate are indistinguishable: both
        return False.
        """
        if not is_valid_text(candidate, self.config.max_input_length):
            return False
        try:
            salt, expected = parse_hashed_credential(hashed)
            actual = self._derive(candidate, salt)
        except Exception:
            return False
        return hmac.compare_digest(actual, expected)
