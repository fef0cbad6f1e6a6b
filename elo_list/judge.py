"""
DSPy-based judge for comparing list items based on custom criteria.
"""

import dspy
from typing import Tuple

from .core.items import Item


class CompareItems(dspy.Signature):
    """
    Signature for deciding which of two list items is better.
    """
    item_a: str = dspy.InputField(desc="The first item")
    item_b: str = dspy.InputField(desc="The second item")
    criteria: str = dspy.InputField(desc="The criteria for comparing the items")

    winner: str = dspy.OutputField(desc="Which item is better: 'A' or 'B'")
    explanation: str = dspy.OutputField(desc="Explanation of why the chosen item is better")


class ItemJudge:
    """
    A DSPy-based judge for ranking list items by custom criteria.
    """

    def __init__(self, criteria: str):
        """
        Initialize the judge with custom criteria.

        Args:
            criteria: The criteria for comparing items
        """
        self.criteria = criteria
        self.predictor = dspy.Predict(CompareItems)

    def compare(self, item_a: Item, item_b: Item) -> Tuple[str, str, float]:
        """
        Compare two items and determine which is better.

        Args:
            item_a: The first item
            item_b: The second item

        Returns:
            A tuple containing:
            - The winner ('A' or 'B')
            - The explanation for the decision
            - The outcome for item_a (1.0 for win, 0.0 for loss)
        """
        result = self.predictor(
            item_a=item_a.title,
            item_b=item_b.title,
            criteria=self.criteria
        )

        winner = result.winner.strip().upper()
        explanation = result.explanation

        if winner == 'A':
            outcome = 1.0
        elif winner == 'B':
            outcome = 0.0
        else:
            raise ValueError(f"Judge must pick 'A' or 'B', got {result.winner!r}")

        return winner, explanation, outcome
