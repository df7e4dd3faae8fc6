"""
Decode outcome type.

``DecodeResult`` lets callers tell a verified decryption apart from a
best-effort base64 guess and from total failure, instead of receiving a bare
string in every case.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from .wire_format import WireFormatName

DecodeStatus = Literal["ok", "degraded", "failed"]


class DecodeResult(BaseModel):
    """Outcome of decoding a stored secret.

    - ok: V2 authenticated decryption or V1 legacy decryption succeeded
    - degraded: plaintext recovered only through the base64 fallback
    - failed: nothing could be recovered; plaintext is None
    """

    model_config = {"frozen": True}

    status: DecodeStatus = Field(..., description="Outcome of the decode pipeline")
    plaintext: Optional[str] = Field(default=None, description="Recovered plaintext, if any")
    wire_format: Optional[WireFormatName] = Field(
        default=None, description="Format the input was parsed as (None for invalid input)"
    )
    reason: Optional[str] = Field(default=None, description="Why the result is not ok")

    @classmethod
    def ok(cls, plaintext: str, wire_format: WireFormatName) -> "DecodeResult":
        return cls(status="ok", plaintext=plaintext, wire_format=wire_format)

    @classmethod
    def degraded(
        cls, plaintext: str, wire_format: WireFormatName, reason: str
    ) -> "DecodeResult":
        return cls(status="degraded", plaintext=plaintext, wire_format=wire_format, reason=reason)

    @classmethod
    def failed(cls, reason: str, wire_format: Optional[WireFormatName] = None) -> "DecodeResult":
        return cls(status="failed", wire_format=wire_format, reason=reason)

    @property
    def is_ok(self) -> bool:
        return self.status == "ok"

    @property
    def needs_migration(self) -> bool:
        """True unless the input was a V2 string that decrypted cleanly."""
        return not (self.status == "ok" and self.wire_format == "v2")
