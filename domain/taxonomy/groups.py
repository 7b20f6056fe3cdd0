"""Canonical labor-archive tag taxonomy.

Informed by Library of Congress labor subject headings, the Tamiment/Wagner
Labor Archives and the Labor Film Database.
"""

from types import MappingProxyType

THEME = "Theme"
INDUSTRY = "Industry"
SOCIAL_DIMENSION = "Social Dimension"

TAG_GROUPS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        THEME: (
            "Strikes & Lockouts",
            "Organizing",
            "Collective Bargaining",
            "Labor Law & Legislation",
            "Wages & Benefits",
            "Working Conditions",
            "Worker Safety & Health",
            "Child Labor",
            "Unemployment",
            "Automation & Technology",
            "Globalization & Outsourcing",
            "Labor Culture & Arts",
            "International Solidarity",
        ),
        INDUSTRY: (
            "Mining",
            "Steel & Manufacturing",
            "Textiles & Garment",
            "Agriculture & Farm Work",
            "Auto & Transportation",
            "Construction",
            "Public Sector",
            "Education & Teachers",
            "Healthcare",
            "Entertainment & Media",
            "Service & Retail",
            "Maritime & Dockworkers",
            "Domestic Workers",
        ),
        SOCIAL_DIMENSION: (
            "Civil Rights & Race",
            "Women & Gender",
            "Immigration",
            "War & Military",
            "Socialism & Left Politics",
            "Environment",
            "Working Class",
            "Politics & Elections",
        ),
    }
)


def _flatten(groups: MappingProxyType[str, tuple[str, ...]]) -> tuple[str, ...]:
    flat: list[str] = []
    for group, tags in groups.items():
        for tag in tags:
            if tag in flat:
                raise ValueError(f"Canonical tag {tag!r} declared more than once (second time in {group!r})")
            flat.append(tag)
    return tuple(flat)


CANONICAL_TAGS: tuple[str, ...] = _flatten(TAG_GROUPS)

_GROUP_BY_TAG: dict[str, str] = {tag: group for group, tags in TAG_GROUPS.items() for tag in tags}
_RANK_BY_TAG: dict[str, int] = {tag: idx for idx, tag in enumerate(CANONICAL_TAGS)}


def list_canonical_tags() -> list[str]:
    """Return all canonical tags in taxonomy order (a fresh list owned by the caller)."""
    return list(CANONICAL_TAGS)


def group_of(tag: str) -> str | None:
    """Return the group a canonical tag belongs to, or None for non-canonical tags."""
    return _GROUP_BY_TAG.get(tag)


def is_canonical(tag: str) -> bool:
    return tag in _RANK_BY_TAG


def tag_rank(tag: str) -> int:
    """
    Position of a tag in the flattened taxonomy.

    Theme tags rank before Industry tags, which rank before Social Dimension tags.
    Unknown tags rank after every canonical tag.
    """
    return _RANK_BY_TAG.get(tag, len(CANONICAL_TAGS))
