import pytest

from string_analyzer.services.filters import FilterSet, apply, matches


def values(records):
    return [record.value for record in records]


def test_empty_filter_set_returns_everything(seeded_store):
    records = seeded_store.list_all()

    assert apply(records, FilterSet()) == records


def test_conjunction_matches_independent_checks(seeded_store):
    records = seeded_store.list_all()
    filters = FilterSet(min_length=5, is_palindrome=True)

    expected = [
        r for r in records if r.properties.length >= 5 and r.properties.is_palindrome
    ]

    assert apply(records, filters) == expected
    assert values(expected) == [
        "racecar",
        "A man, a plan, a canal: Panama",
        "Was it a car or a cat I saw",
    ]


@pytest.mark.parametrize(
    "filters, expected",
    [
        (
            FilterSet(is_palindrome=True),
            ["racecar", "A man, a plan, a canal: Panama", "noon", "Was it a car or a cat I saw"],
        ),
        (FilterSet(is_palindrome=False), ["hello world", "pizza", "level up"]),
        (FilterSet(max_length=5), ["noon", "pizza"]),
        (FilterSet(min_length=11, max_length=11), ["hello world"]),
        (FilterSet(word_count=2), ["hello world", "level up"]),
        (FilterSet(contains_character="P"), ["A man, a plan, a canal: Panama"]),
        (FilterSet(contains_character=" ", word_count=1), []),
        (FilterSet(min_length=100), []),
    ],
)
def test_single_and_combined_predicates(seeded_store, filters, expected):
    assert values(apply(seeded_store.list_all(), filters)) == expected


def test_matches_on_single_record(store):
    record = store.insert("noon")

    assert matches(record, FilterSet(word_count=1, contains_character="n"))
    assert not matches(record, FilterSet(contains_character="a"))
    assert not matches(record, FilterSet(min_length=5))


def test_as_dict_only_includes_supplied_fields():
    filters = FilterSet(is_palindrome=False, min_length=0)

    assert filters.as_dict() == {"is_palindrome": False, "min_length": 0}
