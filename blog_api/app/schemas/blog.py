"""
Pydantic models for blog data.

``BlogCreate`` and ``BlogUpdate`` describe request bodies.  Every
field is optional at the schema level: the create endpoint reports
missing fields itself so the error body keeps the ``{"error": ...}``
shape, and the update endpoint applies only the fields it receives.
``BlogRead`` is the response shape, serialised with the ``createdAt``
field name.  Numbers sent for a text field are accepted and stored as
their string form.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class BlogCreate(BaseModel):
    """Schema for creating a blog."""

    title: Optional[str] = Field(None, examples=["My first post"])
    content: Optional[str] = Field(None, examples=["Hello, world."])
    author: Optional[str] = Field(None, examples=["Jane Doe"])

    model_config = {
        "coerce_numbers_to_str": True,
    }

    def missing_fields(self) -> list[str]:
        """Return the names of required fields that are absent or empty."""
        return [name for name in ("title", "content", "author") if not getattr(self, name)]


class BlogUpdate(BaseModel):
    """Schema for updating a blog.

    All fields are optional; only provided, non‑empty values will be
    updated.
    """

    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None

    model_config = {
        "coerce_numbers_to_str": True,
    }


class BlogRead(BaseModel):
    """Schema for reading a blog from the API."""

    id: int
    title: str
    content: str
    author: str
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {
        "populate_by_name": True,
    }


class MessageRead(BaseModel):
    """Plain acknowledgement body, e.g. after a deletion."""

    message: str
