"""Pydantic models for archive entries fed to the tagging engine."""

import json
import math
from typing import Any

from pydantic import BaseModel, Field, field_validator


class EntryRecord(BaseModel):
    """Text fields of a single archive entry (history, quote, music or film)."""

    title: str | None = Field(default=None, description="Entry title.")
    description: str | None = Field(default=None, description="Free-text description or quote body.")
    creator: str | None = Field(default=None, description="Author, artist, director or performer.")
    metadata: str | None = Field(
        default=None,
        description=(
            "Category-specific metadata blob as JSON text (cast, album, year, ...). "
            "Scanned verbatim as text, never parsed."
        ),
    )
    tags: str | None = Field(
        default=None,
        description="Existing comma-separated tags. Not used for classification.",
    )

    @field_validator("title", "description", "creator", "tags", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if value is None:
            return None
        # pandas hands missing cells over as float NaN
        if isinstance(value, float) and math.isnan(value):
            return None
        return str(value)

    @field_validator("metadata", mode="before")
    @classmethod
    def _metadata_as_text(cls, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, float) and math.isnan(value):
            return None
        if isinstance(value, (dict, list)):
            return json.dumps(value, ensure_ascii=False)
        return str(value)

    def search_text(self) -> str:
        """Title, description, creator and metadata joined by single spaces."""
        return " ".join(
            [
                self.title or "",
                self.description or "",
                self.creator or "",
                self.metadata or "",
            ]
        )
