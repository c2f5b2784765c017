import pytest

from harvest.domain.word_frequency import WordFrequency


def test_add_accumulates_counts():
    freq = WordFrequency()
    freq.add("fox")
    freq.add("fox")
    freq.add("quick", 3)
    assert freq["fox"] == 2
    assert freq["quick"] == 3
    assert freq["missing"] == 0
    assert "missing" not in freq


def test_add_rejects_negative_counts():
    freq = WordFrequency()
    with pytest.raises(ValueError):
        freq.add("fox", -1)


def test_merge_sums_per_token_and_returns_self():
    left = WordFrequency({"fox": 1, "quick": 2})
    right = WordFrequency({"fox": 1, "jumps": 1})
    merged = left.merge(right)
    assert merged is left
    assert left == {"fox": 2, "quick": 2, "jumps": 1}
    # the merged-in map is not touched
    assert right == {"fox": 1, "jumps": 1}


def test_merge_is_commutative():
    a = WordFrequency({"fox": 1, "quick": 2})
    b = WordFrequency({"fox": 4, "lazy": 1})
    assert a + b == b + a


def test_merge_is_associative():
    a = WordFrequency({"fox": 1})
    b = WordFrequency({"fox": 2, "dog": 1})
    c = WordFrequency({"dog": 5, "cat": 1})
    assert (a + b) + c == a + (b + c)


def test_plus_leaves_operands_untouched():
    a = WordFrequency({"fox": 1})
    b = WordFrequency({"fox": 2})
    total = a + b
    assert total["fox"] == 3
    assert a["fox"] == 1
    assert b["fox"] == 2


def test_ranked_orders_by_count_then_token():
    freq = WordFrequency({"beta": 2, "alpha": 2, "gamma": 5, "delta": 1})
    assert freq.ranked() == [("gamma", 5), ("alpha", 2), ("beta", 2), ("delta", 1)]


def test_ranked_applies_min_count():
    freq = WordFrequency({"beta": 2, "alpha": 3, "delta": 1})
    assert freq.ranked(min_count=2) == [("alpha", 3), ("beta", 2)]


def test_from_tokens():
    freq = WordFrequency.from_tokens(["quick", "quick", "fox"])
    assert freq.as_dict() == {"quick": 2, "fox": 1}
