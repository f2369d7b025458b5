"""
Tests for stability and progress accounting.
"""

import pytest

from elo_ranker import ConfigurationRangeError, ItemNotFoundError, Ranker


@pytest.fixture
def ranker():
    return Ranker(["item1", "item2", "item3", "item4"])


def test_empty_ranker_is_complete():
    assert Ranker().get_progress() == 1.0
    assert Ranker().get_progress(0.5, 1) == 1.0


def test_no_progress_without_comparisons(ranker):
    assert ranker.get_progress(5, 10) == 0.0


def test_progress_after_long_winning_streak(ranker):
    for i in range(30):
        ranker.record_match("item1", "item2", "win", timestamp=float(i))

    assert ranker.is_stable("item1", 5, 10)
    assert ranker.is_stable("item2", 5, 10)
    assert ranker.get_progress(5, 10) == 0.5


def test_early_streak_is_not_stable(ranker):
    for i in range(10):
        ranker.record_match("item1", "item2", "win", timestamp=float(i))

    assert not ranker.is_stable("item1", 5, 10)
    assert ranker.get_progress(5, 10) == 0.0


def test_needs_enough_comparisons():
    ranker = Ranker(["a", "b"])
    ranker.record_match("a", "b", "tie")
    ranker.record_match("a", "b", "tie")

    assert not ranker.is_stable("a", rating_change_threshold=1, stable_comparisons_threshold=3)
    assert ranker.is_stable("a", rating_change_threshold=1, stable_comparisons_threshold=2)


def test_ties_at_equal_ratings_are_stable():
    ranker = Ranker(["a", "b", "c"])
    for i in range(3):
        ranker.record_match("a", "b", "tie", timestamp=float(i))

    assert ranker.get_progress(rating_change_threshold=1, stable_comparisons_threshold=3) == pytest.approx(2 / 3)


def test_stability_is_recomputed():
    ranker = Ranker(["a", "b"])
    for i in range(3):
        ranker.record_match("a", "b", "tie", timestamp=float(i))
    assert ranker.get_progress(1, 3) == 1.0

    ranker.record_match("a", "b", "win", timestamp=3.0)

    assert not ranker.is_stable("a", 1, 3)
    assert ranker.get_progress(1, 3) == 0.0


def test_only_trailing_window_counts():
    ranker = Ranker(["a", "b"])
    ranker.record_match("a", "b", "win")
    ranker.record_match("a", "b", "win")
    ranker.record_match("a", "b", "tie")
    ranker.record_match("a", "b", "tie")

    # The second win moved a by ~14.5, the ties by less than 3 each
    assert ranker.is_stable("a", 5, 3)
    assert not ranker.is_stable("a", 5, 4)


def test_window_of_one_is_trivially_stable():
    ranker = Ranker(["a", "b"])
    ranker.record_match("a", "b", "win")

    assert ranker.get_progress(rating_change_threshold=0.001, stable_comparisons_threshold=1) == 1.0


def test_progress_is_bounded(ranker):
    outcomes = ["win", "loss", "tie"]
    pairs = [("item1", "item2"), ("item3", "item4"), ("item1", "item3"), ("item2", "item4")]
    for i in range(24):
        a, b = pairs[i % len(pairs)]
        ranker.record_match(a, b, outcomes[i % len(outcomes)], timestamp=float(i))
        for threshold in (0.5, 5, 50):
            assert 0.0 <= ranker.get_progress(threshold, 3) <= 1.0


def test_removed_items_leave_progress(ranker):
    for i in range(3):
        ranker.record_match("item1", "item2", "tie", timestamp=float(i))

    assert ranker.get_progress(1, 3) == 0.5
    ranker.remove_item("item3")
    ranker.remove_item("item4")
    assert ranker.get_progress(1, 3) == 1.0


def test_is_stable_unknown_item(ranker):
    with pytest.raises(ItemNotFoundError):
        ranker.is_stable("nonexistent")


@pytest.mark.parametrize("rating_change_threshold, stable_comparisons_threshold", [
    (0, 10),
    (-1, 10),
    (5, 0),
    (5, 2.5),
    (5, 3.0),
    (5, True),
])
def test_invalid_stability_parameters(ranker, rating_change_threshold, stable_comparisons_threshold):
    with pytest.raises(ConfigurationRangeError):
        ranker.get_progress(rating_change_threshold, stable_comparisons_threshold)


def test_invalid_window_leaves_no_trace():
    ranker = Ranker(["a", "b"])
    for i in range(3):
        ranker.record_match("a", "b", "tie", timestamp=float(i))

    with pytest.raises(ConfigurationRangeError, match="integer"):
        ranker.get_progress(5.0, 3.0)
    with pytest.raises(ConfigurationRangeError):
        ranker.is_stable("a", 5.0, 3.0)
    assert ranker.get_progress(5.0, 3) == 1.0
