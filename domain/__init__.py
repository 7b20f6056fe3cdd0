"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic model for archive entries
- taxonomy: Canonical tag groups and legacy tag normalization
- tagging: Keyword/entity auto-tagger and merge policy
- reporting: Tag frequency tables
"""

from domain.schemas import EntryRecord

__all__ = [
    "EntryRecord",
]
