"""URL mapping data models.

This module defines the URLMapping model for storing short code mappings in the database.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class URLMappingBase(SQLModel):
    """Base model for URL mapping data."""

    original: str = Field(
        unique=True,
        description="The original URL, stored exactly as submitted"
    )
    short: str = Field(
        unique=True,
        description="Unique short code identifying this mapping"
    )


class URLMapping(URLMappingBase, table=True):
    """
    URL mapping model.

    Each row pairs one original URL with one short code. Both columns carry a
    UNIQUE constraint, which is what arbitrates concurrent inserts. Rows are
    never updated or deleted.
    """

    __tablename__ = "urls"

    id: Optional[int] = Field(default=None, primary_key=True)


class URLMappingCreate(URLMappingBase):
    """Schema for creating a new mapping."""
    pass
