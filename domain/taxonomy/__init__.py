"""
Taxonomy management: canonical tag groups and legacy tag normalization.

All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.groups import (
    CANONICAL_TAGS,
    TAG_GROUPS,
    group_of,
    is_canonical,
    list_canonical_tags,
    tag_rank,
)
from domain.taxonomy.normalizer import (
    TAG_NORMALIZATION,
    build_normalization_map,
    normalize_tag,
    normalize_tags,
    split_tags,
)

__all__ = [
    "TAG_GROUPS",
    "CANONICAL_TAGS",
    "list_canonical_tags",
    "group_of",
    "is_canonical",
    "tag_rank",
    "TAG_NORMALIZATION",
    "build_normalization_map",
    "normalize_tag",
    "normalize_tags",
    "split_tags",
]
