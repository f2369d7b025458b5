"""
Elo Ranker - rank items from pairwise comparisons.
"""

from .core import (
    BaseRankingSession,
    ComparisonResult,
    ConfigurationRangeError,
    DuplicateItemError,
    ItemNotFoundError,
    NoOpponentError,
    Outcome,
    RankableItem,
    Ranker,
    RankerConfig,
    RankerError,
    RatingSnapshot,
    SelfComparisonError,
    expected_score,
    outcome_scores,
    update_elo,
)
from .core.simple_judge import SimpleJudge
from .judge import ItemJudge, OptimizedItemJudge
from .session import RankingSession

__all__ = [
    "Ranker",
    "RankerConfig",
    "RankableItem",
    "ComparisonResult",
    "Outcome",
    "RatingSnapshot",
    "expected_score",
    "update_elo",
    "outcome_scores",
    "RankerError",
    "DuplicateItemError",
    "ItemNotFoundError",
    "SelfComparisonError",
    "ConfigurationRangeError",
    "NoOpponentError",
    "SimpleJudge",
    "ItemJudge",
    "OptimizedItemJudge",
    "BaseRankingSession",
    "RankingSession",
]
