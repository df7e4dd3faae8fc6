"""
Wire format variants for stored secrets.

A stored secret is one of three shapes, told apart by how many colon-delimited
fields it has. The parser in ``vault_codec.utils.wire_format`` turns a raw
string into one of these variants; the codec then decodes the variant.
Hex fields are kept as text here and only converted to bytes on decode, so a
malformed field surfaces as a decode failure rather than a parse failure.
"""

from typing import Literal, Union

from pydantic import BaseModel, Field

WireFormatName = Literal["v2", "v1", "fallback"]


class V2Envelope(BaseModel):
    """Current authenticated format: ``iv_hex:tag_hex:ciphertext_hex``."""

    model_config = {"frozen": True}

    format: Literal["v2"] = "v2"
    raw: str = Field(..., description="Original stored string")
    iv: str = Field(..., description="Initialization vector (hex)")
    tag: str = Field(..., description="GCM authentication tag (hex)")
    ciphertext: str = Field(..., description="Ciphertext (hex)")

    @property
    def iv_bytes(self) -> bytes:
        return bytes.fromhex(self.iv)

    @property
    def tag_bytes(self) -> bytes:
        return bytes.fromhex(self.tag)

    @property
    def ciphertext_bytes(self) -> bytes:
        return bytes.fromhex(self.ciphertext)


class V1Envelope(BaseModel):
    """Legacy unauthenticated format: ``iv_hex:ciphertext_hex``."""

    model_config = {"frozen": True}

    format: Literal["v1"] = "v1"
    raw: str = Field(..., description="Original stored string")
    iv: str = Field(..., description="Initialization vector (hex)")
    ciphertext: str = Field(..., description="CBC ciphertext (hex)")

    @property
    def iv_bytes(self) -> bytes:
        return bytes.fromhex(self.iv)

    @property
    def ciphertext_bytes(self) -> bytes:
        return bytes.fromhex(self.ciphertext)


class FallbackEnvelope(BaseModel):
    """Anything else; treated as base64 of the plaintext."""

    model_config = {"frozen": True}

    format: Literal["fallback"] = "fallback"
    raw: str = Field(..., description="Original stored string")


WireFormat = Union[V2Envelope, V1Envelope, FallbackEnvelope]
