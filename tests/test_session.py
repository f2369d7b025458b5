"""
Tests for judge-driven ranking sessions.
"""

import pytest
from unittest.mock import MagicMock

from elo_ranker import (
    BaseRankingSession,
    ConfigurationRangeError,
    DuplicateItemError,
    ItemNotFoundError,
    Outcome,
    Ranker,
    RankerConfig,
    RankingSession,
    SimpleJudge,
)

NOW = 1_700_000_000.0


@pytest.fixture
def session():
    """A session judged by length with three items."""
    session = BaseRankingSession(SimpleJudge().compare, config=RankerConfig(minimum_comparisons=2))
    session.add("short", "a")
    session.add("medium", "a" * 5)
    session.add("long", "a" * 10)
    return session


def test_add_registers_content_and_item(session):
    assert session.ranker.get_item_count() == 3
    assert session.contents["long"] == "a" * 10


def test_add_duplicate_keeps_content(session):
    with pytest.raises(DuplicateItemError):
        session.add("short", "replacement")

    assert session.contents["short"] == "a"


def test_remove(session):
    session.remove("medium")

    assert "medium" not in session.ranker
    assert "medium" not in session.contents


def test_step_records_judged_result(session):
    result = session.step(NOW)

    assert (result.item_a, result.item_b) == ("short", "medium")
    assert result.outcome is Outcome.LOSS
    assert result.timestamp == NOW
    assert result.metadata == {"winner": "B", "explanation": "B is longer (5 vs 1)"}
    assert session.results == [result]
    assert session.ranker.get_rating("medium") > 1500


def test_step_missing_content():
    ranker = Ranker(["a", "b"])
    session = BaseRankingSession(SimpleJudge().compare, ranker=ranker)

    with pytest.raises(ItemNotFoundError):
        session.step(NOW)
    assert ranker.get_item_stats("a").comparisons == 0


def test_run_until_saturated(session):
    results = session.run()

    assert results
    assert session.ranker.get_next_comparison() is None
    assert all(item.comparisons >= 2 for item in session.ranker.get_all_items())
    assert session.ranker.get_rating("long") > 1500
    assert session.ranker.get_rating("short") < 1500


def test_run_respects_max_comparisons(session):
    results = session.run(max_comparisons=1)

    assert len(results) == 1
    assert session.run(max_comparisons=0) == []


def test_run_stops_at_target_progress(session):
    judge_fn = MagicMock(side_effect=session.judge_fn)
    session.judge_fn = judge_fn

    assert session.run(target_progress=0.0) == []
    judge_fn.assert_not_called()


def test_run_rejects_invalid_limits(session):
    with pytest.raises(ConfigurationRangeError):
        session.run(max_comparisons=-1)
    with pytest.raises(ConfigurationRangeError):
        session.run(target_progress=1.5)


def test_rankings(session):
    session.run()

    rankings = session.rankings()
    assert [item_id for item_id, _ in rankings] == [item.id for item in session.ranker.get_rankings()]
    assert rankings[0][1] >= rankings[-1][1]


def test_ranking_session_uses_dspy_judge():
    session = RankingSession(criteria="Longer is better", config=RankerConfig(minimum_comparisons=1))

    def predict(**kwargs):
        result = MagicMock()
        result.winner = "A" if len(kwargs["item_a"]) >= len(kwargs["item_b"]) else "B"
        result.explanation = "length"
        return result

    session.judge.predictor = MagicMock(side_effect=predict)
    session.add("one", "x")
    session.add("two", "xx")

    results = session.run()

    assert len(results) == 1
    assert session.rankings()[0][0] == "two"
    session.judge.predictor.assert_called_once_with(item_a="x", item_b="xx", criteria="Longer is better")


def test_ranking_session_optimize():
    session = RankingSession(criteria="Test criteria")
    optimizer = MagicMock()

    assert session.optimize([], optimizer) is session
    assert session.judge.predictor is optimizer.compile.return_value
    assert session.judge_fn == session.judge.compare


@pytest.mark.parametrize("stable_comparisons_threshold", [2.5, 3.0, True, 0])
def test_run_rejects_invalid_stability_window(session, stable_comparisons_threshold):
    with pytest.raises(ConfigurationRangeError):
        session.run(target_progress=0.5, stable_comparisons_threshold=stable_comparisons_threshold)

    assert session.results == []
