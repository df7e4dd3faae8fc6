"""
Wire format parser and serializer.

Format detection is purely structural: the number of ``:``-delimited fields
picks the variant. Nothing here touches key material.
"""

from ..models.wire_format import FallbackEnvelope, V1Envelope, V2Envelope, WireFormat

SEPARATOR = ":"


def parse_wire_format(encoded: str) -> WireFormat:
    """
    Parse a stored string into its wire format variant.

    Args:
        encoded: Stored secret string

    Returns:
        V2Envelope for three fields, V1Envelope for two, FallbackEnvelope otherwise

    Examples:
        >>> parse_wire_format("aa:bb:cc").format
        'v2'
        >>> parse_wire_format("aa:bb").format
        'v1'
        >>> parse_wire_format("c2VjcmV0").format
        'fallback'
    """
    parts = encoded.split(SEPARATOR)
    if len(parts) == 3:
        return V2Envelope(raw=encoded, iv=parts[0], tag=parts[1], ciphertext=parts[2])
    if len(parts) == 2:
        return V1Envelope(raw=encoded, iv=parts[0], ciphertext=parts[1])
    return FallbackEnvelope(raw=encoded)


def format_v2(iv: bytes, tag: bytes, ciphertext: bytes) -> str:
    """Serialize V2 components as lower-case ``iv_hex:tag_hex:ciphertext_hex``."""
    return SEPARATOR.join((iv.hex(), tag.hex(), ciphertext.hex()))


def format_hashed_credential(salt: bytes, digest: bytes) -> str:
    """Serialize a credential hash as ``salt_hex:hash_hex``."""
    return SEPARATOR.join((salt.hex(), digest.hex()))


def parse_hashed_credential(hashed: str) -> tuple[bytes, bytes]:
    """
    Split a stored credential hash into salt and digest bytes.

    Raises:
        ValueError: If the string is not two hex fields
    """
    salt_hex, digest_hex = hashed.split(SEPARATOR)
    return bytes.fromhex(salt_hex), bytes.fromhex(digest_hex)
