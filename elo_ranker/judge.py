"""
DSPy-based judge for comparing items based on custom criteria.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import dspy

from .core.types import Outcome

logger = logging.getLogger(__name__)


class CompareItems(dspy.Signature):
    """
    Signature for comparing two items based on custom criteria.
    """
    item_a: str = dspy.InputField(desc="The first item to compare")
    item_b: str = dspy.InputField(desc="The second item to compare")
    criteria: str = dspy.InputField(desc="The criteria for comparing the items")

    winner: str = dspy.OutputField(desc="Which item is better: 'A', 'B', or 'TIE'")
    explanation: str = dspy.OutputField(desc="Explanation of why the chosen item is better")


class ItemJudge:
    """
    A DSPy-based judge for comparing items based on custom criteria.
    """

    def __init__(self, criteria: str):
        """
        Initialize the judge with custom criteria.

        Args:
            criteria: The criteria for comparing items
        """
        self.criteria = criteria
        self.predictor = dspy.Predict(CompareItems)

    def compare(self, item_a: Any, item_b: Any) -> Tuple[str, str, Outcome]:
        """
        Compare two items and determine which is better.

        Args:
            item_a: Content of the first item
            item_b: Content of the second item

        Returns:
            A tuple containing:
            - The winner ('A', 'B', or 'TIE')
            - The explanation for the decision
            - The outcome from item_a's perspective
        """
        result = self.predictor(
            item_a=str(item_a),
            item_b=str(item_b),
            criteria=self.criteria
        )

        winner = result.winner.strip().upper()
        explanation = result.explanation

        if winner == 'A':
            outcome = Outcome.WIN
        elif winner == 'B':
            outcome = Outcome.LOSS
        else:
            if winner != 'TIE':
                logger.warning("Judge returned unexpected winner %r, treating it as a tie", result.winner)
            winner = 'TIE'
            outcome = Outcome.TIE

        return winner, explanation, outcome


class OptimizedItemJudge(ItemJudge):
    """
    An ItemJudge whose predictor can be compiled with a DSPy optimizer.
    """

    def __init__(self, criteria: str, compiled_module: Optional[dspy.Module] = None):
        """
        Initialize the optimized judge.

        Args:
            criteria: The criteria for comparing items
            compiled_module: A pre-compiled DSPy module
        """
        super().__init__(criteria)

        if compiled_module is not None:
            self.predictor = compiled_module

    def compile(self, examples: List[Dict[str, Any]], optimizer: Any) -> 'OptimizedItemJudge':
        """
        Compile the judge using DSPy optimization.

        Args:
            examples: Training examples for the optimizer
            optimizer: DSPy optimizer (teleprompter) to use

        Returns:
            A new judge wrapping the compiled predictor
        """
        compiled_module = optimizer.compile(
            self.predictor,
            trainset=examples
        )

        return OptimizedItemJudge(self.criteria, compiled_module)
