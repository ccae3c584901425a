"""Tests for keyed list comparison."""

from neo_batch.features.comparison import KeyedComparison, compare_by_key


def test_classifies_found_and_not_found():
    source = [{"id": 1, "v": "a"}, {"id": 2, "v": "b"}]
    target = [{"id": 2}, {"id": 3}]

    result = compare_by_key(source, target, lambda s: s["id"], lambda t: t["id"])

    assert result.found == [{"id": 2, "v": "b"}]
    assert result.not_found == [{"id": 3}]
    assert result.found_count == 1
    assert result.not_found_count == 1
    assert not result.all_found


def test_transform_receives_source_and_target():
    source = [{"id": 1, "name": "alpha"}, {"id": 2, "name": "beta"}]
    target = [{"id": 2, "qty": 5}, {"id": 1, "qty": 7}]

    result = compare_by_key(
        source,
        target,
        lambda s: s["id"],
        lambda t: t["id"],
        lambda s, t: (s["name"], t["qty"]),
    )

    assert result.found == [("beta", 5), ("alpha", 7)]
    assert result.all_found


def test_outputs_follow_target_order():
    source = [{"id": i} for i in range(5)]
    target = [{"id": 4}, {"id": 9}, {"id": 0}, {"id": 7}, {"id": 2}]

    found, not_found = compare_by_key(source, target, lambda s: s["id"], lambda t: t["id"])

    assert [item["id"] for item in found] == [4, 0, 2]
    assert [item["id"] for item in not_found] == [9, 7]


def test_duplicate_source_keys_last_write_wins():
    source = [{"id": 1, "v": "first"}, {"id": 1, "v": "second"}]

    result = compare_by_key(source, [{"id": 1}], lambda s: s["id"], lambda t: t["id"])

    assert result.found == [{"id": 1, "v": "second"}]


def test_keys_are_string_coerced():
    result = compare_by_key([1, 2], ["1", "3"], lambda s: s, lambda t: t)

    assert result.found == [1]
    assert result.not_found == ["3"]


def test_falsy_source_items_still_match():
    result = compare_by_key([0, ""], [0, ""], lambda s: repr(s), lambda t: repr(t))

    assert result.found == [0, ""]
    assert result.not_found == []


def test_empty_lists():
    assert compare_by_key([], [], str, str) == KeyedComparison(found=[], not_found=[])
    assert compare_by_key([], [{"id": 1}], str, str).not_found == [{"id": 1}]
