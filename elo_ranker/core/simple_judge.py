"""
Judge that decides comparisons locally, with no language model involved.
"""

from typing import Any, Callable, Optional, Tuple

from .types import Outcome

Verdict = Tuple[str, str, Outcome]


class SimpleJudge:
    """
    Local stand-in for ItemJudge.

    With a compare_fn it simply forwards to it, which makes it a thin adapter
    for hand-written rules. Without one it favours the item whose text
    rendering is longer, which is only good enough for demos and tests.
    """

    def __init__(self, compare_fn: Optional[Callable[[Any, Any], Verdict]] = None, criteria: str = "quality"):
        self.compare_fn = compare_fn
        self.criteria = criteria

    def compare(self, item_a: Any, item_b: Any) -> Verdict:
        """
        Decide between two items.

        Returns:
            (winner, explanation, outcome) where winner is "A", "B" or "TIE"
            and outcome is seen from item_a's side
        """
        if self.compare_fn is not None:
            return self.compare_fn(item_a, item_b)

        size_a = len(str(item_a))
        size_b = len(str(item_b))
        if size_a == size_b:
            return "TIE", "Both items have the same length", Outcome.TIE

        longer, shorter = max(size_a, size_b), min(size_a, size_b)
        if size_a > size_b:
            return "A", f"A is longer ({longer} vs {shorter})", Outcome.WIN
        return "B", f"B is longer ({longer} vs {shorter})", Outcome.LOSS
