"""
Opponent scoring for the next-comparison selector.

Each candidate opponent gets a weighted composite of three scores in [0, 1]:
closeness in rating, closeness in number of comparisons, and time since the
opponent was last compared.
"""

from typing import Optional, Sequence

import numpy as np

from .elo_rating import ELO_SCALE
from .types import RankableItem

RATING_WEIGHT = 0.4
COMPARISON_WEIGHT = 0.4
RECENCY_WEIGHT = 0.2

# Opponents idle for this long get the full recency score
RECENCY_WINDOW = 7 * 24 * 60 * 60.0


def recency_score(last_comparison_time: Optional[float], now: float) -> float:
    """
    Score how long ago an item was last compared.

    Args:
        last_comparison_time: Timestamp of the item's last comparison, or None
        now: Current timestamp

    Returns:
        1.0 for items never compared, otherwise the elapsed fraction of the
        recency window, capped at 1.0
    """
    if last_comparison_time is None:
        return 1.0
    return float(np.clip((now - last_comparison_time) / RECENCY_WINDOW, 0.0, 1.0))


def opponent_scores(item: RankableItem, opponents: Sequence[RankableItem], now: float) -> np.ndarray:
    """
    Score every candidate opponent for an item.

    Args:
        item: The item that needs a comparison
        opponents: Candidate opponents, not including the item itself
        now: Current timestamp

    Returns:
        Array of composite scores aligned with opponents
    """
    ratings = np.array([o.current_rating for o in opponents], dtype=float)
    comparisons = np.array([o.comparisons for o in opponents], dtype=float)

    rating_score = 1.0 / (1.0 + np.abs(ratings - item.current_rating) / ELO_SCALE)
    comparison_score = 1.0 / (1.0 + np.abs(comparisons - item.comparisons))
    time_score = np.array([recency_score(o.last_comparison_time, now) for o in opponents], dtype=float)

    return (
        RATING_WEIGHT * rating_score
        + COMPARISON_WEIGHT * comparison_score
        + RECENCY_WEIGHT * time_score
    )


def best_opponent_index(scores: np.ndarray) -> int:
    """Index of the highest score; the earliest candidate wins ties."""
    return int(np.argmax(scores))
