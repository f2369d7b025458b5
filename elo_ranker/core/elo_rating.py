"""
Elo rating arithmetic.
"""

import math
from typing import Tuple, Union

from .types import Outcome

# Rating gap at which the stronger item is expected to score ten times as often
ELO_SCALE = 400.0

_OUTCOME_SCORES = {
    Outcome.WIN: (1.0, 0.0),
    Outcome.LOSS: (0.0, 1.0),
    Outcome.TIE: (0.5, 0.5),
}


def expected_score(rating_a: float, rating_b: float) -> float:
    """
    Calculate the expected score for item A against item B.

    Args:
        rating_a: Elo rating of item A
        rating_b: Elo rating of item B

    Returns:
        Expected score for item A (between 0 and 1)
    """
    return 1.0 / (1.0 + math.pow(10, (rating_b - rating_a) / ELO_SCALE))


def update_elo(rating: float, expected: float, actual: float, k_factor: float = 32.0) -> float:
    """
    Update an Elo rating based on the expected and actual outcomes.

    Args:
        rating: Current Elo rating
        expected: Expected outcome (between 0 and 1)
        actual: Actual outcome (0 for loss, 0.5 for tie, 1 for win)
        k_factor: K-factor for Elo calculation (determines how much ratings change)

    Returns:
        Updated Elo rating
    """
    return rating + k_factor * (actual - expected)


def outcome_scores(outcome: Union[Outcome, str]) -> Tuple[float, float]:
    """Map an outcome to the actual scores of (item A, item B)."""
    return _OUTCOME_SCORES[Outcome(outcome)]
