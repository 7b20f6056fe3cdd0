from domain.tagging import auto_tag_entry, merge_tags_with_existing


def test_existing_tags_at_cap_are_preserved() -> None:
    assert merge_tags_with_existing("A, B, C, D, E", ["F"], 5) == "A, B, C, D, E"


def test_new_tags_fill_up_to_cap_and_are_sorted() -> None:
    assert merge_tags_with_existing("A", ["C", "B"], 5) == "A, B, C"
    assert merge_tags_with_existing("A", ["B", "C", "D"], 2) == "A, B"


def test_existing_tags_over_cap_are_never_evicted() -> None:
    assert merge_tags_with_existing("F, E, D, C, B, A", ["G"], 3) == "A, B, C, D, E, F"


def test_existing_tags_are_kept_verbatim() -> None:
    # No re-normalization: legacy strings survive as given
    assert merge_tags_with_existing(" strike ,Custom", ["Mining"]) == "Custom, Mining, strike"


def test_duplicate_new_tags_do_not_use_up_the_cap() -> None:
    assert merge_tags_with_existing("A", ["A", "B"], 2) == "A, B"


def test_nothing_to_merge_returns_none() -> None:
    assert merge_tags_with_existing(None, []) is None
    assert merge_tags_with_existing("", []) is None
    assert merge_tags_with_existing(None, ["A"], 0) is None


def test_negative_cap_admits_nothing_new() -> None:
    assert merge_tags_with_existing("A", ["B"], -1) == "A"
    assert merge_tags_with_existing(None, ["B"], -3) is None


def test_classify_then_merge_end_to_end() -> None:
    tags = auto_tag_entry({"description": "Mother Jones led a strike of coal miners in West Virginia"})
    assert "Mining" in tags
    assert "Strikes & Lockouts" in tags

    merged = merge_tags_with_existing(None, tags, 5)
    assert merged is not None
    assert merged == ", ".join(sorted(tags))
    assert "Mining" in merged.split(", ")
    assert "Strikes & Lockouts" in merged.split(", ")
