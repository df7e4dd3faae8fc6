"""
Vault item types.

Mirrors the stored vault record as the HTTP layer hands it to the codec. Only
``password`` is ever sealed; the other fields pass through untouched.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class VaultItem(BaseModel):
    """A password-vault entry."""

    title: str = Field(..., min_length=1, description="Display title")
    username: Optional[str] = Field(default=None, description="Account username")
    password: str = Field(..., min_length=1, description="Password (plaintext or encoded)")
    url: Optional[str] = Field(default=None, description="Site URL")
    notes: Optional[str] = Field(default=None, description="Free-form notes")
    category: str = Field(default="general", description="Item category")


class MigrationReport(BaseModel):
    """Result of re-encoding a batch of stored secrets to the current format."""

    total: int = Field(default=0, description="Number of values examined")
    migrated: int = Field(default=0, description="Values re-encoded as V2")
    unchanged: int = Field(default=0, description="Values already in clean V2 form")
    failed: int = Field(default=0, description="Values that could not be decoded")
    values: List[str] = Field(default_factory=list, description="Resulting values in input order")
