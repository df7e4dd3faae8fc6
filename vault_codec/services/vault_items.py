"""
Vault item service.

Seals and opens the password field of vault records, and sweeps stored
secrets forward to the current wire format.
"""

import logging
from typing import Iterable, Optional

from ..errors import InvalidInputError
from ..models.vault_item import MigrationReport, VaultItem
from .secret_codec import SecretCodec

logger = logging.getLogger(__name__)


class VaultItemService:
    """Applies the secret codec to vault records."""

    def __init__(self, codec: SecretCodec):
        """
        Initialize vault item service.

        Args:
            codec: Secret codec used for the password field
        """
        self.codec = codec

    def seal(self, item: VaultItem) -> VaultItem:
        """
        Return a copy of the item with its password encoded for storage.

        Raises:
            InvalidInputError: If the password violates the input contract
            EncodingFailedError: If the password cannot be encoded at all
        """
        return item.model_copy(update={"password": self.codec.encode(item.password)})

    def open(self, item: VaultItem) -> VaultItem:
        """Return a copy of the item with its stored password decoded."""
        return item.model_copy(update={"password": self.codec.decode(item.password)})

    def _upgrade(self, encoded: str) -> tuple[str, Optional[bool]]:
        """Return (value, migrated); migrated is None when nothing was recovered."""
        result = self.codec.decode_result(encoded)
        if result.plaintext is None:
            return encoded, None
        if not result.needs_migration:
            return encoded, False
        try:
            return self.codec.encode(result.plaintext), True
        except InvalidInputError:
            # recovered plaintext is blank or oversized
            return encoded, None

    def reencode(self, encoded: str) -> str:
        """
        Re-encode a stored secret in the current format if it needs it.

        Clean V2 values and values that cannot be decoded at all are returned
        unchanged.
        """
        value, _ = self._upgrade(encoded)
        return value

    def migrate(self, encoded_values: Iterable[str]) -> MigrationReport:
        """
        Sweep stored secrets forward to the current wire format.

        Args:
            encoded_values: Stored secret strings

        Returns:
            MigrationReport with counts and the resulting values in input order
        """
        report = MigrationReport()
        for encoded in encoded_values:
            value, migrated = self._upgrade(encoded)
            report.total += 1
            if migrated is None:
                report.failed += 1
            elif migrated:
                report.migrated += 1
            else:
                report.unchanged += 1
            report.values.append(value)

        logger.info(
            f"Migration sweep finished: {report.migrated} migrated, "
            f"{report.unchanged} unchanged, {report.failed} failed"
        )
        return report
