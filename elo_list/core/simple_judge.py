"""
Judge implementation without DSPy dependencies.
"""

from typing import Callable, Optional, Tuple

from .items import Item

Verdict = Tuple[str, str, float]


class SimpleJudge:
    """
    A judge that defers to a caller-supplied chooser, such as a person picking
    one of two buttons, or falls back to the current ranking.
    """

    def __init__(self, compare_fn: Optional[Callable[[Item, Item], Verdict]] = None):
        """
        Initialize a SimpleJudge.

        Args:
            compare_fn: Optional function deciding between two items
        """
        self.compare_fn = compare_fn

    def compare(self, item_a: Item, item_b: Item) -> Verdict:
        """
        Decide which of two items is better.

        Args:
            item_a: First item
            item_b: Second item

        Returns:
            Tuple of (winner, explanation, outcome)
            winner: "A" or "B"
            explanation: Explanation of the decision
            outcome: 1.0 for A wins, 0.0 for B wins
        """
        if self.compare_fn:
            return self.compare_fn(item_a, item_b)

        if item_b.estimated_strength > item_a.estimated_strength:
            return "B", f"B is rated higher ({item_b.estimated_strength} vs {item_a.estimated_strength})", 0.0
        return "A", f"A is rated at least as high ({item_a.estimated_strength} vs {item_b.estimated_strength})", 1.0
