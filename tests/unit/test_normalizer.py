import pytest

from domain.taxonomy import (
    CANONICAL_TAGS,
    TAG_NORMALIZATION,
    build_normalization_map,
    normalize_tag,
    normalize_tags,
    split_tags,
)


def test_canonical_tags_pass_through_unchanged() -> None:
    for tag in CANONICAL_TAGS:
        assert normalize_tags(tag) == tag


def test_lookup_is_case_insensitive() -> None:
    assert normalize_tags("STRIKE") == "Strikes & Lockouts"
    assert normalize_tags("strike") == "Strikes & Lockouts"
    assert normalize_tags("mining") == "Mining"
    assert normalize_tag("BLUE COLLAR") == "Working Class"


def test_unknown_tags_are_dropped() -> None:
    assert normalize_tags("totally-unknown-xyz") is None
    assert normalize_tags("totally-unknown-xyz, strike") == "Strikes & Lockouts"


def test_tags_mapped_to_drop_produce_nothing() -> None:
    assert normalize_tags("Labor History, Film, Music, USA") is None
    assert normalize_tag("Film") is None


def test_empty_input_returns_none() -> None:
    assert normalize_tags(None) is None
    assert normalize_tags("") is None
    assert normalize_tags(" , ,, ") is None


def test_tags_normalizing_to_the_same_canonical_tag_collapse() -> None:
    assert normalize_tags("strike, Strikebreaking") == "Strikes & Lockouts"
    assert normalize_tags("Women, women, WOMEN, Sexism") == "Women & Gender"


def test_output_is_sorted_and_tolerates_stray_whitespace() -> None:
    raw = " Women ,, Textile Industry,   strike ,"
    assert normalize_tags(raw) == "Strikes & Lockouts, Textiles & Garment, Women & Gender"


def test_normalization_is_idempotent() -> None:
    samples = [
        "Labor History, strike",
        "Women, Textile Industry, A: Highly Recommended Labor Films",
        "Blacks, Philosophy, Slavery",
        "poverty, solidarity, art, school bus",
        "Mining, Strikes & Lockouts",
        "totally-unknown-xyz",
    ]
    for raw in samples:
        once = normalize_tags(raw)
        assert normalize_tags(once) == once


def test_override_keys_keep_their_declared_targets() -> None:
    mapping = build_normalization_map([("Organizing", None), ("Legacy", "Mining")], ["Organizing", "Mining"])
    assert list(mapping.items()) == [("Organizing", None), ("Legacy", "Mining"), ("Mining", "Mining")]


def test_normalization_map_is_read_only() -> None:
    with pytest.raises(TypeError):
        TAG_NORMALIZATION["new tag"] = "Mining"  # type: ignore[index]


def test_split_tags() -> None:
    assert split_tags(None) == []
    assert split_tags("A, B,,  C ") == ["A", "B", "C"]
