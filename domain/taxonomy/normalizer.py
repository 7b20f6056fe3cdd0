"""Legacy tag normalization onto the canonical taxonomy."""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from domain.taxonomy.groups import CANONICAL_TAGS

logger = logging.getLogger(__name__)

# Old WordPress / Labor Film Database tags -> canonical tag (None drops the tag)
LEGACY_TAG_OVERRIDES: tuple[tuple[str, str | None], ...] = (
    # Theme
    ("Strikes-Strikebreaking-Lockouts", "Strikes & Lockouts"),
    ("Strikebreaking", "Strikes & Lockouts"),
    ("strike", "Strikes & Lockouts"),
    ("Organizing", "Organizing"),
    ("organize", "Organizing"),
    ("Collective Bargaining", "Collective Bargaining"),
    ("Legal System", "Labor Law & Legislation"),
    ("Wages", "Wages & Benefits"),
    ("Unemployment-Wages", "Wages & Benefits"),
    ("Safety & Health", "Worker Safety & Health"),
    ("Health care", "Worker Safety & Health"),
    ("health", "Worker Safety & Health"),
    ("Children", "Child Labor"),
    ("working conditions", "Working Conditions"),
    ("Automation", "Automation & Technology"),
    ("Technology", "Automation & Technology"),
    ("Global Economy", "Globalization & Outsourcing"),
    ("Outsourcing", "Globalization & Outsourcing"),
    ("Arts/Culture", "Labor Culture & Arts"),
    ("Labor History", None),  # everything in the archive is labor history
    ("Philosophy", None),
    ("Consumerism", None),
    ("Whistleblowers", None),
    ("Zero hours work", "Working Conditions"),
    # Industry
    ("Mining", "Mining"),
    ("Industrial/Mine/Manufacturing", "Steel & Manufacturing"),
    ("Manufacturing", "Steel & Manufacturing"),
    ("Steel Industry", "Steel & Manufacturing"),
    ("Textile Industry", "Textiles & Garment"),
    ("Textile", "Textiles & Garment"),
    ("Farm & Food", "Agriculture & Farm Work"),
    ("Food Service Industry", "Service & Retail"),
    ("Transportation", "Auto & Transportation"),
    ("Trucking", "Auto & Transportation"),
    ("Railroads", "Auto & Transportation"),
    ("Construction Trades", "Construction"),
    ("Public Sector", "Public Sector"),
    ("Government", "Public Sector"),
    ("Education", "Education & Teachers"),
    ("Healthcare", "Healthcare"),
    ("Entertainment Industry", "Entertainment & Media"),
    ("Communications", "Entertainment & Media"),
    ("Journalism", "Entertainment & Media"),
    ("Service Workers", "Service & Retail"),
    ("Retail", "Service & Retail"),
    ("Boating and Shipping", "Maritime & Dockworkers"),
    ("White Collar", None),
    ("Self-Employed/Freelance", None),
    ("Temp/Precarious work", "Working Conditions"),
    ("Power Generation Industries", "Steel & Manufacturing"),
    ("Police/Fire", "Public Sector"),
    ("Finance", None),
    ("Housing", None),
    # Social dimension
    ("Blacks", "Civil Rights & Race"),
    ("black-history", "Civil Rights & Race"),
    ("race tension", "Civil Rights & Race"),
    ("Discrimination: Racism", "Civil Rights & Race"),
    ("Sexism", "Women & Gender"),
    ("etc", None),  # split artifact of "Discrimination: Racism, Sexism, etc"
    ("Women", "Women & Gender"),
    ("women", "Women & Gender"),
    ("womens rights", "Women & Gender"),
    ("rosie", "Women & Gender"),
    ("riveter", "Women & Gender"),
    ("Immigrants/Immigration", "Immigration"),
    ("immigration", "Immigration"),
    ("Migrant workers", "Immigration"),
    ("migrant worker", "Immigration"),
    ("War", "War & Military"),
    ("World War II", "War & Military"),
    ("Communism/Socialism", "Socialism & Left Politics"),
    ("Environment", "Environment"),
    ("Working Class", "Working Class"),
    ("blue collar", "Working Class"),
    ("Class", "Working Class"),
    ("Politics", "Politics & Elections"),
    ("Voting/Elections", "Politics & Elections"),
    ("Sports", None),
    ("Slavery", "Civil Rights & Race"),
    ("Sex Industry/Sexuality", None),
    ("Sex/Sexuality", None),
    ("sex workers", None),
    ("Cities-Urban", None),
    ("Biography", None),  # a format, not a topic
    # Platform, festival and listing tags
    ("2026 Shortlist", None),
    ("A: Highly Recommended Labor Films", None),
    ("A: Labor Film Festivals", None),
    ("A: Labor Film Festivals (Inactive)", None),
    ("AA: Global Labor Film Festival 2016", None),
    ("AB: Global Labor Film Festival 2015", None),
    ("AC: Global Labor Film Festival 2014", None),
    ("AD: Global Labor Film Festival 2013", None),
    ("Netflix Watch Instantly", None),
    ("Streaming Online (Youtube", None),
    ("Vimeo)", None),
    ("Available Online", None),
    ("DCLFF LIBRARY", None),
    ("Distributors", None),
    ("Resources", None),
    ("Video", None),
    ("Film", None),
    ("Music", None),
    # Genre tags live in entry metadata
    ("Genre", None),
    ("Themes", None),
    ("Occupation/Type of Work", None),
    ("Short", None),
    ("Classic", None),
    ("SciFi", None),
    ("Kids", None),
    ("Crime-Action", None),
    # Geography
    ("Afghanistan", None),
    ("Africa", None),
    ("Bangladesh", None),
    ("Canada", None),
    ("Middle East", None),
    ("Montreal", None),
    ("NYC", None),
    ("Pakistan", None),
    ("Turkey", None),
    ("USA", None),
    ("china", None),
    ("iraq", None),
    ("mexico", None),
    ("spain", None),
    ("wisconsin", None),
    ("united-states", None),
    # WordPress noise
    ("Anti-Union", None),
    ("Big Business/Corporations", "Globalization & Outsourcing"),
    ("Disability Employment", None),
    ("HIV", None),
    ("TWU", None),
    ("Noël Burch Film website", None),
    ("Allan Sekula", None),
    ("american dream", "Working Class"),
    ("apple", None),
    ("art", "Labor Culture & Arts"),
    ("baseball", None),
    ("books", None),
    ("car wash", None),
    ("labor", None),
    ("light", None),
    ("mark-wahlberg", None),
    ("movies", None),
    ("netflix", None),
    ("news", None),
    ("night shift", None),
    ("occupy", None),
    ("poverty", "Wages & Benefits"),
    ("reform", None),
    ("revolution", None),
    ("school bus", "Education & Teachers"),
    ("solidarity", "International Solidarity"),
    ("soup kitchen", None),
    ("streetvendor", None),
    ("the-union", None),
    ("union", None),
    ("unions", None),
    ("unite", None),
    ("workers", None),
    ("worker's rights", None),
    ("history", None),
)


def build_normalization_map(
    overrides: Iterable[tuple[str, str | None]],
    canonical_tags: Iterable[str],
) -> Mapping[str, str | None]:
    """
    Build the read-only raw-tag -> canonical-tag map.

    Declared overrides come first, in declaration order. Every canonical tag that is
    not already a key is then appended as an identity mapping, so canonical tags
    pass through unchanged.

    Args:
        overrides: (raw tag, canonical tag or None) pairs
        canonical_tags: The flattened canonical taxonomy

    Returns:
        Immutable mapping preserving insertion order
    """
    mapping: dict[str, str | None] = {}
    for raw, canonical in overrides:
        mapping.setdefault(raw, canonical)
    for tag in canonical_tags:
        mapping.setdefault(tag, tag)
    return MappingProxyType(mapping)


def _build_lowercase_lookup(mapping: Mapping[str, str | None]) -> Mapping[str, str | None]:
    # First key in map order wins for each lowercase form
    lookup: dict[str, str | None] = {}
    for raw, canonical in mapping.items():
        lookup.setdefault(raw.lower(), canonical)
    return MappingProxyType(lookup)


TAG_NORMALIZATION: Mapping[str, str | None] = build_normalization_map(LEGACY_TAG_OVERRIDES, CANONICAL_TAGS)
_LOWERCASE_LOOKUP: Mapping[str, str | None] = _build_lowercase_lookup(TAG_NORMALIZATION)


def split_tags(raw_tags: str | None) -> list[str]:
    """Split a comma-separated tag string, trimming whitespace and dropping empty entries."""
    if not raw_tags:
        return []
    return [t.strip() for t in raw_tags.split(",") if t.strip()]


def normalize_tag(raw: str) -> str | None:
    """
    Map a single raw tag to its canonical tag.

    Exact lookup first, then a case-insensitive lookup. Unknown tags and tags
    mapped to "drop" both return None.

    Examples:
        >>> normalize_tag("STRIKE")
        'Strikes & Lockouts'
        >>> normalize_tag("Film") is None
        True
    """
    if raw in TAG_NORMALIZATION:
        return TAG_NORMALIZATION[raw]
    return _LOWERCASE_LOOKUP.get(raw.lower())


def normalize_tags(raw_tags: str | None) -> str | None:
    """
    Normalize a comma-separated legacy tag string to canonical tags.

    Unknown tags are dropped; only canonical tags survive.

    Args:
        raw_tags: Comma-separated raw tags, or None

    Returns:
        Deduplicated, sorted canonical tags joined with ", ", or None if none remain
    """
    canonical: set[str] = set()
    for tag in split_tags(raw_tags):
        mapped = normalize_tag(tag)
        if mapped:
            canonical.add(mapped)
        elif tag not in TAG_NORMALIZATION and tag.lower() not in _LOWERCASE_LOOKUP:
            logger.debug("Dropping unknown tag %r", tag)

    if not canonical:
        return None
    return ", ".join(sorted(canonical))
