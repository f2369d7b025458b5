"""
Judge-driven ranking session without DSPy dependencies.
"""

import logging
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

from .errors import ConfigurationRangeError, ItemNotFoundError
from .ranker import DEFAULT_RATING_CHANGE_THRESHOLD, DEFAULT_STABLE_COMPARISONS_THRESHOLD, Ranker
from .types import ComparisonResult, Outcome, RankerConfig

logger = logging.getLogger(__name__)

JudgeFn = Callable[[Any, Any], Tuple[str, str, Outcome]]


class BaseRankingSession:
    """
    Drives a Ranker with a judge.

    Each step asks the ranker for the next pair, lets the judge decide the
    outcome for the two contents, and records the result.
    """

    def __init__(
        self,
        judge_fn: JudgeFn,
        ranker: Optional[Ranker] = None,
        config: Optional[RankerConfig] = None,
    ):
        """
        Initialize a BaseRankingSession.

        Args:
            judge_fn: Function that compares two contents and returns (winner, explanation, outcome)
            ranker: Ranker to drive (a new one is created when omitted)
            config: Configuration for the new ranker, ignored when ranker is given
        """
        self.judge_fn = judge_fn
        self.ranker = ranker if ranker is not None else Ranker(config=config)
        self.contents: Dict[str, Any] = {}
        self.results: List[ComparisonResult] = []

    def add(self, item_id: str, content: Any, initial_rating: Optional[float] = None) -> None:
        """Register an item's content and add it to the ranker."""
        self.ranker.add_item(item_id, initial_rating)
        self.contents[item_id] = content

    def remove(self, item_id: str) -> None:
        """Remove an item from the ranker and forget its content."""
        self.ranker.remove_item(item_id)
        self.contents.pop(item_id, None)

    def _content(self, item_id: str) -> Any:
        try:
            return self.contents[item_id]
        except KeyError:
            raise ItemNotFoundError(item_id) from None

    def step(self, now: Optional[float] = None) -> Optional[ComparisonResult]:
        """
        Judge and record the next comparison.

        Args:
            now: Current timestamp (defaults to now)

        Returns:
            The recorded result, or None when nothing is left to compare
        """
        now = time.time() if now is None else now
        pair = self.ranker.get_next_comparison(now)
        if pair is None:
            return None

        item_a, item_b = pair
        winner, explanation, outcome = self.judge_fn(self._content(item_a), self._content(item_b))

        result = ComparisonResult(
            item_a=item_a,
            item_b=item_b,
            outcome=outcome,
            timestamp=now,
            metadata={"winner": winner, "explanation": explanation},
        )
        self.ranker.record_comparison(result)
        self.results.append(result)
        return result

    def run(
        self,
        max_comparisons: Optional[int] = None,
        target_progress: Optional[float] = None,
        rating_change_threshold: float = DEFAULT_RATING_CHANGE_THRESHOLD,
        stable_comparisons_threshold: int = DEFAULT_STABLE_COMPARISONS_THRESHOLD,
    ) -> List[ComparisonResult]:
        """
        Keep comparing until the ranking is saturated or a stopping condition hits.

        Args:
            max_comparisons: Stop after this many comparisons
            target_progress: Stop once this fraction of items is stable
            rating_change_threshold: Stability threshold passed to get_progress
            stable_comparisons_threshold: Stability window passed to get_progress

        Returns:
            The results recorded during this run
        """
        if max_comparisons is not None and max_comparisons < 0:
            raise ConfigurationRangeError("max_comparisons must be non-negative")

        if target_progress is not None and not 0.0 <= target_progress <= 1.0:
            raise ConfigurationRangeError("target_progress must be between 0 and 1")

        recorded: List[ComparisonResult] = []
        reason = "saturated"
        while True:
            if max_comparisons is not None and len(recorded) >= max_comparisons:
                reason = "max_comparisons reached"
                break

            if target_progress is not None:
                progress = self.ranker.get_progress(rating_change_threshold, stable_comparisons_threshold)
                if progress >= target_progress:
                    reason = f"progress {progress:.2f} reached target"
                    break

            result = self.step()
            if result is None:
                break
            recorded.append(result)

        logger.info("Ranking run finished after %d comparisons (%s)", len(recorded), reason)
        return recorded

    def rankings(self) -> List[Tuple[str, float]]:
        """Current (item id, rating) pairs, best first."""
        return [(item.id, item.current_rating) for item in self.ranker.get_rankings()]
