"""Pydantic models for vault codec configuration and data types."""

from .config import VaultCodecConfig
from .decode_result import DecodeResult, DecodeStatus
from .vault_item import MigrationReport, VaultItem
from .wire_format import (
    FallbackEnvelope,
    V1Envelope,
    V2Envelope,
    WireFormat,
    WireFormatName,
)

__all__ = [
    "VaultCodecConfig",
    "DecodeResult",
    "DecodeStatus",
    "VaultItem",
    "MigrationReport",
    "V2Envelope",
    "V1Envelope",
    "FallbackEnvelope",
    "WireFormat",
    "WireFormatName",
]
