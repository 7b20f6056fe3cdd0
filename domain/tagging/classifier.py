"""Rule-based auto-tagger for archive entries."""

import logging
from collections.abc import Mapping
from typing import Any

from domain.schemas import EntryRecord
from domain.tagging.entities import EVENTS, ORGANIZATIONS, PEOPLE
from domain.tagging.rules import TAG_RULES, match_keyword_rules
from domain.taxonomy.groups import tag_rank

logger = logging.getLogger(__name__)

AUTO_TAG_LIMIT = 5


def _as_record(entry: EntryRecord | Mapping[str, Any]) -> EntryRecord:
    if isinstance(entry, EntryRecord):
        return entry
    return EntryRecord.model_validate(dict(entry))


def auto_tag_entry(entry: EntryRecord | Mapping[str, Any], limit: int = AUTO_TAG_LIMIT) -> list[str]:
    """
    Infer canonical tags for an entry from its text.

    Keyword rules, notable people, events and organizations are matched against
    title + description + creator + metadata. The union of matched tags is
    ordered by taxonomy position (Theme, then Industry, then Social Dimension)
    and truncated to `limit`.

    Examples:
        >>> auto_tag_entry({"description": "Mother Jones led a strike of coal miners"})
        ['Strikes & Lockouts', 'Organizing', 'Child Labor', 'Mining']

    Args:
        entry: EntryRecord or a mapping with title/description/creator/metadata keys.
            An existing `tags` value is accepted but ignored.
        limit: Maximum number of tags returned

    Returns:
        Ordered list of at most `limit` canonical tags; empty when nothing matches
    """
    text = _as_record(entry).search_text()
    if not text.strip():
        return []

    matched = match_keyword_rules(text)
    matched |= PEOPLE.match(text)
    matched |= EVENTS.match(text)
    matched |= ORGANIZATIONS.match(text)

    ordered = sorted(matched, key=tag_rank)
    if len(ordered) > limit:
        logger.debug("Auto-tag cap reached: kept %s, dropped %s", ordered[:limit], ordered[limit:])
    return ordered[:limit]


def explain_entry(entry: EntryRecord | Mapping[str, Any]) -> dict[str, list[str]]:
    """
    Break down which layer matched what, for audit logs.

    Returns:
        Dict with keys keywords (rule tags), people, events and organizations
        (matched names), each in declaration order
    """
    text = _as_record(entry).search_text()
    if not text.strip():
        return {"keywords": [], "people": [], "events": [], "organizations": []}
    return {
        "keywords": [rule.tag for rule in TAG_RULES if rule.matches(text)],
        "people": PEOPLE.matched_names(text),
        "events": EVENTS.matched_names(text),
        "organizations": ORGANIZATIONS.matched_names(text),
    }
