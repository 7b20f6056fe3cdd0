"""Merge auto-generated tags into an entry's existing tags."""

from collections.abc import Iterable

from domain.taxonomy.normalizer import split_tags

DEFAULT_MAX_TAGS = 5


def merge_tags_with_existing(
    existing_tags: str | None,
    new_tags: Iterable[str],
    max_tags: int = DEFAULT_MAX_TAGS,
) -> str | None:
    """
    Combine existing tags with newly inferred ones under a cap.

    Existing tags are kept verbatim and never evicted; new tags are added in the
    given order only while fewer than `max_tags` tags are held. A cap of zero
    or less admits nothing new.

    Examples:
        >>> merge_tags_with_existing("A", ["B", "C"])
        'A, B, C'
        >>> merge_tags_with_existing("A, B, C, D, E", ["F"])
        'A, B, C, D, E'

    Args:
        existing_tags: Comma-separated existing tags, or None
        new_tags: Candidate tags, highest priority first
        max_tags: Cap on the merged tag count

    Returns:
        Sorted tags joined with ", ", or None if there are none
    """
    merged: set[str] = set(split_tags(existing_tags))
    for tag in new_tags:
        if len(merged) >= max_tags:
            break
        merged.add(tag)

    if not merged:
        return None
    return ", ".join(sorted(merged))
