"""
Core ranking functionality that doesn't depend on DSPy.
"""

from .elo_rating import expected_score, outcome_scores, update_elo
from .errors import (
    ConfigurationRangeError,
    DuplicateItemError,
    ItemNotFoundError,
    NoOpponentError,
    RankerError,
    SelfComparisonError,
)
from .ranker import Ranker
from .session import BaseRankingSession
from .types import ComparisonResult, Outcome, RankableItem, RankerConfig, RatingSnapshot
