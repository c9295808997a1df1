"""
Data models for container listing entries.

These Pydantic models validate the JSON entries returned by a container
listing (``?format=json``) before they are turned into data objects.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ObjectListingEntry(BaseModel):
    """
    One entry of a container listing.

    Either a real object (``name`` plus size/hash/type) or a pseudo-directory
    carrying only ``subdir``.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(default=None, description="Object name")
    subdir: Optional[str] = Field(default=None, description="Common prefix of a pseudo-directory")
    size: Optional[int] = Field(default=None, alias="bytes", ge=0, description="Content length in bytes")
    etag: Optional[str] = Field(default=None, alias="hash", description="MD5 ETag of the content")
    content_type: Optional[str] = Field(default=None, description="Content-Type of the object")
    last_modified: Optional[datetime] = Field(default=None, description="Last modification time (UTC)")

    @field_validator("last_modified")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        """Listings report naive UTC timestamps."""
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @model_validator(mode="after")
    def name_or_subdir(self) -> ObjectListingEntry:
        if not self.name and not self.subdir:
            raise ValueError("Listing entry needs either 'name' or 'subdir'")
        return self

    @property
    def is_directory(self) -> bool:
        return self.subdir is not None and self.name is None


__all__ = ["ObjectListingEntry"]
