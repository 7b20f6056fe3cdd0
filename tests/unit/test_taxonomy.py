from domain.tagging import EVENT_TAGS, ORG_TAGS, PEOPLE_TAGS, TAG_RULES
from domain.taxonomy import CANONICAL_TAGS, TAG_GROUPS, group_of, is_canonical, list_canonical_tags, tag_rank


def test_groups_are_declared_in_fixed_order() -> None:
    assert list(TAG_GROUPS.keys()) == ["Theme", "Industry", "Social Dimension"]
    assert [len(tags) for tags in TAG_GROUPS.values()] == [13, 13, 8]


def test_flattened_list_is_group_concatenation_without_duplicates() -> None:
    expected = [tag for tags in TAG_GROUPS.values() for tag in tags]
    assert list(CANONICAL_TAGS) == expected
    assert len(set(CANONICAL_TAGS)) == len(CANONICAL_TAGS)


def test_every_tag_belongs_to_exactly_one_group() -> None:
    for tag in CANONICAL_TAGS:
        owners = [group for group, tags in TAG_GROUPS.items() if tag in tags]
        assert owners == [group_of(tag)]


def test_list_canonical_tags_returns_a_fresh_copy() -> None:
    tags = list_canonical_tags()
    tags.append("Not A Tag")
    assert "Not A Tag" not in list_canonical_tags()
    assert list_canonical_tags()[0] == "Strikes & Lockouts"


def test_tag_rank_puts_themes_before_industries_before_social() -> None:
    assert tag_rank("Strikes & Lockouts") == 0
    assert tag_rank("Organizing") < tag_rank("Mining") < tag_rank("Civil Rights & Race")
    assert tag_rank("Not A Tag") == len(CANONICAL_TAGS)
    assert group_of("Not A Tag") is None
    assert not is_canonical("not a tag")


def test_rule_and_entity_tables_only_use_canonical_tags() -> None:
    for rule in TAG_RULES:
        assert is_canonical(rule.tag), rule.tag
    for table in (PEOPLE_TAGS, EVENT_TAGS, ORG_TAGS):
        for name, tags in table.items():
            assert tags, name
            for tag in tags:
                assert is_canonical(tag), (name, tag)


def test_every_canonical_tag_has_exactly_one_rule() -> None:
    rule_tags = [rule.tag for rule in TAG_RULES]
    assert sorted(rule_tags) == sorted(CANONICAL_TAGS)
