"""
Ranking session that uses a DSPy judge to decide comparisons.
"""

from typing import Any, List, Optional

from .core.ranker import Ranker
from .core.session import BaseRankingSession
from .core.types import RankerConfig
from .judge import ItemJudge, OptimizedItemJudge


class RankingSession(BaseRankingSession):
    """
    A ranking session judged by a DSPy language model.
    This class extends BaseRankingSession with an ItemJudge built from criteria.
    """

    def __init__(
        self,
        criteria: str = "quality",
        ranker: Optional[Ranker] = None,
        config: Optional[RankerConfig] = None,
    ):
        """
        Initialize the session.

        Args:
            criteria: The criteria for comparing items
            ranker: Ranker to drive (a new one is created when omitted)
            config: Configuration for the new ranker
        """
        self.criteria = criteria
        self.judge = ItemJudge(criteria=criteria)
        super().__init__(judge_fn=self.judge.compare, ranker=ranker, config=config)

    def optimize(self, examples: List[Any], optimizer: Any) -> 'RankingSession':
        """
        Compile the judge with a DSPy optimizer and switch this session to it.

        Args:
            examples: Training examples for the optimizer
            optimizer: DSPy optimizer to use

        Returns:
            This session, now using the optimized judge
        """
        self.judge = OptimizedItemJudge(self.criteria).compile(examples, optimizer)
        self.judge_fn = self.judge.compare
        return self
