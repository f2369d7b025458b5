"""
Data types shared by the ranking engine, the selector and the judges.
"""

import math
import numbers
import time
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, List, Mapping, NamedTuple, Optional

from .errors import ConfigurationRangeError


class Outcome(str, Enum):
    """Result of a comparison, from the perspective of the first item."""

    WIN = "win"
    LOSS = "loss"
    TIE = "tie"


class RatingSnapshot(NamedTuple):
    """Rating of an item right after one of its comparisons."""

    rating: float
    timestamp: float


@dataclass
class RankableItem:
    """
    State tracked for one participant of a ranking run.
    """

    id: str
    initial_rating: float
    current_rating: float
    comparisons: int = 0
    wins: int = 0
    losses: int = 0
    ties: int = 0
    last_comparison_time: Optional[float] = None
    rating_history: List[RatingSnapshot] = field(default_factory=list)

    def copy(self) -> "RankableItem":
        """Return an independent copy of this item."""
        return replace(self, rating_history=list(self.rating_history))


@dataclass(frozen=True)
class ComparisonResult:
    """
    Outcome of comparing two items.

    Args:
        item_a: Id of the first item
        item_b: Id of the second item
        outcome: Outcome from item_a's perspective ("win", "loss" or "tie")
        timestamp: When the comparison happened, in seconds since the epoch
        metadata: Caller data carried along with the result, never interpreted
    """

    item_a: str
    item_b: str
    outcome: Outcome
    timestamp: float = field(default_factory=time.time)
    metadata: Optional[Mapping[str, Any]] = None

    def __post_init__(self):
        object.__setattr__(self, "outcome", Outcome(self.outcome))


def _check_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise ConfigurationRangeError(f"{name} must be a finite number, got {value}")


@dataclass(frozen=True)
class RankerConfig:
    """
    Engine configuration.

    Args:
        k_factor: Maximum rating change per comparison
        minimum_comparisons: Comparisons the least compared item needs before
            the selector stops suggesting pairs
        default_initial_rating: Rating for items added without one
        min_rating: Floor no rating can drop below
    """

    k_factor: float = 32.0
    minimum_comparisons: int = 20
    default_initial_rating: float = 1500.0
    min_rating: float = 0.0

    def __post_init__(self):
        _check_finite("k_factor", self.k_factor)
        _check_finite("default_initial_rating", self.default_initial_rating)
        _check_finite("min_rating", self.min_rating)

        if self.k_factor <= 0:
            raise ConfigurationRangeError("k_factor must be positive")

        if isinstance(self.minimum_comparisons, bool) or not isinstance(self.minimum_comparisons, numbers.Integral):
            raise ConfigurationRangeError("minimum_comparisons must be an integer")

        if self.minimum_comparisons < 0:
            raise ConfigurationRangeError("minimum_comparisons must be non-negative")

        if self.default_initial_rating < self.min_rating:
            raise ConfigurationRangeError(
                "default_initial_rating must be greater than or equal to min_rating"
            )
