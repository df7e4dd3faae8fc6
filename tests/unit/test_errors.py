"""
Unit tests for error types.
"""

from vault_codec.errors import (
    ConfigurationError,
    EncodingFailedError,
    HashingFailedError,
    InvalidInputError,
    VaultCodecError,
)


class TestErrors:
    """Test cases for error types."""

    def test_vault_codec_error(self):
        """Test base VaultCodecError."""
        error = VaultCodecError("Test error", code="ERR001")

        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.code == "ERR001"

    def test_vault_codec_error_minimal(self):
        """Test VaultCodecError with minimal args."""
        error = VaultCodecError("Simple error")

        assert str(error) == "Simple error"
        assert error.code is None

    def test_configuration_error(self):
        """Test ConfigurationError."""
        error = ConfigurationError("Config invalid")

        assert isinstance(error, VaultCodecError)
        assert error.code == "CONFIGURATION_INVALID"

    def test_invalid_input_error(self):
        """Test InvalidInputError."""
        error = InvalidInputError("plaintext must not be empty")

        assert isinstance(error, VaultCodecError)
        assert str(error) == "plaintext must not be empty"
        assert error.code == "INVALID_INPUT"

    def test_encoding_failed_error(self):
        """Test EncodingFailedError."""
        error = EncodingFailedError("Secret could not be encoded")

        assert isinstance(error, VaultCodecError)
        assert error.code == "ENCODING_FAILED"

    def test_hashing_failed_error(self):
        """Test HashingFailedError."""
        error = HashingFailedError("Credential hashing failed")

        assert isinstance(error, VaultCodecError)
        assert error.code == "HASHING_FAILED"

    def test_code_override(self):
        """Test subclasses accept a custom code."""
        error = InvalidInputError("Too long", code="INPUT_TOO_LONG")

        assert error.code == "INPUT_TOO_LONG"
