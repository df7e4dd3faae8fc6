"""Utility modules for the vault codec."""

from .config_loader import load_config
from .input_validation import is_valid_text, validate_text
from .wire_format import format_v2, parse_wire_format

__all__ = [
    "load_config",
    "validate_text",
    "is_valid_text",
    "parse_wire_format",
    "format_v2",
]
