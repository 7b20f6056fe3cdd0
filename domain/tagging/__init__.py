"""
Auto-tagging: keyword rules, entity tables, classifier and merge policy.

All functions in this module are pure (no file I/O); rule patterns are
compiled once at import.
"""

from domain.tagging.classifier import AUTO_TAG_LIMIT, auto_tag_entry, explain_entry
from domain.tagging.entities import EVENT_TAGS, ORG_TAGS, PEOPLE_TAGS, EntityMatcher
from domain.tagging.merge import DEFAULT_MAX_TAGS, merge_tags_with_existing
from domain.tagging.rules import TAG_RULES, TagRule, match_keyword_rules

__all__ = [
    "auto_tag_entry",
    "explain_entry",
    "merge_tags_with_existing",
    "AUTO_TAG_LIMIT",
    "DEFAULT_MAX_TAGS",
    "TagRule",
    "TAG_RULES",
    "match_keyword_rules",
    "EntityMatcher",
    "PEOPLE_TAGS",
    "EVENT_TAGS",
    "ORG_TAGS",
]
