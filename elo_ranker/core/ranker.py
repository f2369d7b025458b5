"""
Ranking engine: Elo updates from pairwise comparisons, next-pair selection
and stability tracking for a dynamic set of items.
"""

import logging
import math
import numbers
import time
from operator import attrgetter
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

import numpy as np

from .elo_rating import expected_score, outcome_scores, update_elo
from .errors import (
    ConfigurationRangeError,
    DuplicateItemError,
    ItemNotFoundError,
    NoOpponentError,
    SelfComparisonError,
)
from .selection import best_opponent_index, opponent_scores
from .types import ComparisonResult, Outcome, RankableItem, RankerConfig, RatingSnapshot

logger = logging.getLogger(__name__)

DEFAULT_RATING_CHANGE_THRESHOLD = 5.0
DEFAULT_STABLE_COMPARISONS_THRESHOLD = 10

InitialItem = Union[str, Tuple[str, Optional[float]], RankableItem]


class Ranker:
    """
    Ranks items from pairwise comparison outcomes using Elo ratings.

    The ranker owns its item registry. Every read accessor returns copies, so
    callers cannot change internal state through returned items.
    """

    def __init__(
        self,
        initial_items: Optional[Iterable[InitialItem]] = None,
        config: Optional[RankerConfig] = None,
    ):
        """
        Initialize a ranker.

        Args:
            initial_items: Ids, (id, initial_rating) pairs or RankableItem
                objects to register up front
            config: Engine configuration (defaults to RankerConfig())
        """
        self.config = config or RankerConfig()
        self._items: Dict[str, RankableItem] = {}

        for entry in initial_items or ():
            if isinstance(entry, RankableItem):
                self.add_item(entry.id, entry.initial_rating)
            elif isinstance(entry, str):
                self.add_item(entry)
            else:
                item_id, initial_rating = entry
                self.add_item(item_id, initial_rating)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def _get(self, item_id: str) -> RankableItem:
        try:
            return self._items[item_id]
        except KeyError:
            raise ItemNotFoundError(item_id) from None

    def add_item(self, item_id: str, initial_rating: Optional[float] = None) -> None:
        """
        Add a new item to the ranking.

        Args:
            item_id: Unique identifier for the item
            initial_rating: Starting rating (defaults to the configured default)

        Raises:
            DuplicateItemError: If an item with this id already exists
            ConfigurationRangeError: If the rating is not finite or below the floor
        """
        if item_id in self._items:
            raise DuplicateItemError(item_id)

        rating = self.config.default_initial_rating if initial_rating is None else float(initial_rating)
        if not math.isfinite(rating):
            raise ConfigurationRangeError(f"Initial rating for {item_id} must be finite, got {rating}")
        if rating < self.config.min_rating:
            raise ConfigurationRangeError(
                f"Initial rating {rating} for {item_id} is below min_rating {self.config.min_rating}"
            )

        self._items[item_id] = RankableItem(id=item_id, initial_rating=rating, current_rating=rating)
        logger.debug("Added item %s with rating %.2f", item_id, rating)

    def remove_item(self, item_id: str) -> None:
        """
        Remove an item and its history permanently.

        Raises:
            ItemNotFoundError: If the item is not registered
        """
        if item_id not in self._items:
            raise ItemNotFoundError(item_id)
        del self._items[item_id]
        logger.debug("Removed item %s", item_id)

    def record_comparison(self, result: ComparisonResult) -> float:
        """
        Apply a comparison result and update both items' ratings.

        Args:
            result: The comparison to record

        Returns:
            Total absolute rating change across both items

        Raises:
            SelfComparisonError: If both ids are the same
            ItemNotFoundError: If either item is not registered
        """
        if result.item_a == result.item_b:
            raise SelfComparisonError(result.item_a)

        item_a = self._get(result.item_a)
        item_b = self._get(result.item_b)

        old_a = item_a.current_rating
        old_b = item_b.current_rating

        expected_a = expected_score(old_a, old_b)
        expected_b = 1.0 - expected_a
        actual_a, actual_b = outcome_scores(result.outcome)

        if result.outcome is Outcome.WIN:
            item_a.wins += 1
            item_b.losses += 1
        elif result.outcome is Outcome.LOSS:
            item_a.losses += 1
            item_b.wins += 1
        else:
            item_a.ties += 1
            item_b.ties += 1

        floor = self.config.min_rating
        new_a = max(update_elo(old_a, expected_a, actual_a, self.config.k_factor), floor)
        new_b = max(update_elo(old_b, expected_b, actual_b, self.config.k_factor), floor)

        for item, new_rating in ((item_a, new_a), (item_b, new_b)):
            item.current_rating = new_rating
            item.comparisons += 1
            item.last_comparison_time = result.timestamp
            item.rating_history.append(RatingSnapshot(new_rating, result.timestamp))

        delta = abs(new_a - old_a) + abs(new_b - old_b)
        logger.debug(
            "Recorded %s %s %s: %.2f -> %.2f, %.2f -> %.2f (delta %.4f)",
            result.item_a, result.outcome.value, result.item_b,
            old_a, new_a, old_b, new_b, delta,
        )
        return delta

    def record_match(
        self,
        item_a: str,
        item_b: str,
        outcome: Union[Outcome, str],
        timestamp: Optional[float] = None,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> float:
        """
        Record the outcome of a comparison between two items.

        Args:
            item_a: Id of the first item
            item_b: Id of the second item
            outcome: Outcome from item_a's perspective ("win", "loss" or "tie")
            timestamp: When the comparison happened (defaults to now)
            metadata: Opaque caller data stored on the result

        Returns:
            Total absolute rating change across both items
        """
        result = ComparisonResult(
            item_a=item_a,
            item_b=item_b,
            outcome=outcome,
            timestamp=time.time() if timestamp is None else timestamp,
            metadata=metadata,
        )
        return self.record_comparison(result)

    def get_next_comparison(self, now: Optional[float] = None) -> Optional[Tuple[str, str]]:
        """
        Pick the next pair of items to compare.

        The least compared item is paired with the opponent that scores best on
        rating proximity, comparison-count proximity and time since its last
        comparison.

        Args:
            now: Current timestamp used for recency (defaults to now)

        Returns:
            (item id, opponent id), or None when fewer than two items exist or
            the least compared item already has enough comparisons
        """
        if len(self._items) < 2:
            return None

        # min() keeps the first of equal counts, i.e. insertion order
        item = min(self._items.values(), key=attrgetter("comparisons"))
        if item.comparisons >= self.config.minimum_comparisons:
            return None

        opponent = self._find_best_opponent(item, time.time() if now is None else now)
        logger.debug("Next comparison: %s vs %s", item.id, opponent.id)
        return item.id, opponent.id

    def _find_best_opponent(self, item: RankableItem, now: float) -> RankableItem:
        opponents = [o for o in self._items.values() if o.id != item.id]
        if not opponents:
            raise NoOpponentError(item.id)

        scores = opponent_scores(item, opponents, now)
        return opponents[best_opponent_index(scores)]

    @staticmethod
    def _check_stability_params(rating_change_threshold: float, stable_comparisons_threshold: int) -> None:
        if not rating_change_threshold > 0:
            raise ConfigurationRangeError("rating_change_threshold must be positive")
        if isinstance(stable_comparisons_threshold, bool) or not isinstance(stable_comparisons_threshold, numbers.Integral):
            raise ConfigurationRangeError("stable_comparisons_threshold must be an integer")
        if stable_comparisons_threshold < 1:
            raise ConfigurationRangeError("stable_comparisons_threshold must be at least 1")

    @staticmethod
    def _stable(item: RankableItem, rating_change_threshold: float, stable_comparisons_threshold: int) -> bool:
        if item.comparisons < stable_comparisons_threshold:
            return False

        window = np.array(
            [s.rating for s in item.rating_history[-stable_comparisons_threshold:]], dtype=float
        )
        return bool(np.all(np.abs(np.diff(window)) < rating_change_threshold))

    def is_stable(
        self,
        item_id: str,
        rating_change_threshold: float = DEFAULT_RATING_CHANGE_THRESHOLD,
        stable_comparisons_threshold: int = DEFAULT_STABLE_COMPARISONS_THRESHOLD,
    ) -> bool:
        """
        Check whether an item's rating has settled.

        An item is stable when it has at least stable_comparisons_threshold
        comparisons and no two consecutive ratings among its last
        stable_comparisons_threshold history entries differ by
        rating_change_threshold or more.
        """
        self._check_stability_params(rating_change_threshold, stable_comparisons_threshold)
        return self._stable(self._get(item_id), rating_change_threshold, stable_comparisons_threshold)

    def get_progress(
        self,
        rating_change_threshold: float = DEFAULT_RATING_CHANGE_THRESHOLD,
        stable_comparisons_threshold: int = DEFAULT_STABLE_COMPARISONS_THRESHOLD,
    ) -> float:
        """
        Fraction of items whose rating is currently stable.

        Returns:
            A number between 0 and 1; 1.0 when there are no items
        """
        self._check_stability_params(rating_change_threshold, stable_comparisons_threshold)
        if not self._items:
            return 1.0

        stable = sum(
            self._stable(item, rating_change_threshold, stable_comparisons_threshold)
            for item in self._items.values()
        )
        return stable / len(self._items)

    def get_item_stats(self, item_id: str) -> RankableItem:
        """
        Get a copy of an item's state.

        Raises:
            ItemNotFoundError: If the item is not registered
        """
        return self._get(item_id).copy()

    def get_rating(self, item_id: str) -> float:
        """Get the current rating of an item."""
        return self._get(item_id).current_rating

    def get_rating_history(self, item_id: str) -> List[RatingSnapshot]:
        """Get a copy of an item's rating history, oldest first."""
        return list(self._get(item_id).rating_history)

    def get_rankings(self) -> List[RankableItem]:
        """Get copies of all items sorted by descending rating; equal ratings keep insertion order."""
        return sorted(self.get_all_items(), key=attrgetter("current_rating"), reverse=True)

    def get_item_count(self) -> int:
        """Get the number of registered items."""
        return len(self._items)

    def get_all_items(self) -> List[RankableItem]:
        """Get copies of all items in insertion order."""
        return [item.copy() for item in self._items.values()]
