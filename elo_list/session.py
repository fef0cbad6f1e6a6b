"""
Drives comparisons on an Elo list held by a host document.

The host supplies two callables: one returning the current list text and one
writing serialized text back. ``write_text`` may return ``False`` when the
host can no longer find the block; the session then keeps its in-memory list.
"""

import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .core.config import DEFAULT_CONFIG, EloListConfig
from .core.items import Item, parse_list, serialize_list
from .core.rating import record_comparison
from .utils.logging import get_logger

logger = get_logger(__name__)

JudgeFn = Callable[[Item, Item], Tuple[str, str, float]]


def select_pair(items: List[Item], rng: Optional[random.Random] = None) -> Tuple[int, int]:
    """
    Pick two distinct positions uniformly at random.

    Args:
        items: The current list
        rng: Random source, the ``random`` module if omitted

    Returns:
        Tuple of two different indices into ``items``
    """
    if len(items) < 2:
        raise ValueError("At least two items are needed for a comparison")

    rng = rng or random
    left, right = rng.sample(range(len(items)), 2)
    return left, right


@dataclass
class ComparisonResult:
    """
    Outcome of one comparison.

    ``winner`` and ``loser`` are the items as they were before the game; the
    updated items are in the session's list and in ``text``.
    """

    winner: Item
    loser: Item
    explanation: str
    text: str


class ComparisonSession:
    """
    Repeatedly compares random pairs of a list and writes the result back.
    """

    def __init__(
        self,
        read_text: Callable[[], str],
        write_text: Callable[[str], Optional[bool]],
        judge_fn: JudgeFn,
        config: EloListConfig = DEFAULT_CONFIG,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a session.

        Args:
            read_text: Returns the raw text of the list block
            write_text: Replaces the block's text; may return False on failure
            judge_fn: Decides between two items, returning (winner, explanation, outcome)
            config: Engine configuration
            rng: Random source for pair selection
        """
        self.read_text = read_text
        self.write_text = write_text
        self.judge_fn = judge_fn
        self.config = config
        self.rng = rng or random.Random()
        self.items: List[Item] = []

    def load(self) -> List[Item]:
        """Parse the host's current text into the session."""
        self.items = parse_list(self.read_text(), self.config)
        return self.items

    def compare_once(self) -> Optional[ComparisonResult]:
        """
        Judge one random pair, update both items and write the list back.

        Returns:
            The comparison result, or None if the list has fewer than two items
        """
        if len(self.items) < 2:
            return None

        left, right = select_pair(self.items, self.rng)
        _, explanation, outcome = self.judge_fn(self.items[left], self.items[right])
        winner_index, loser_index = (left, right) if outcome >= 0.5 else (right, left)
        winner, loser = self.items[winner_index], self.items[loser_index]

        self.items = record_comparison(self.items, winner_index, loser_index, self.config)
        text = serialize_list(self.items)

        if self.write_text(text) is False:
            logger.warning("Could not write the updated list back to the host")

        return ComparisonResult(winner=winner, loser=loser, explanation=explanation, text=text)

    def run(self, rounds: int) -> List[ComparisonResult]:
        """
        Load the list and perform several comparisons.

        Args:
            rounds: Number of comparisons to perform

        Returns:
            Results of the comparisons that took place
        """
        if rounds < 0:
            raise ValueError("rounds must be non-negative")

        self.load()
        results = []
        for _ in range(rounds):
            result = self.compare_once()
            if result is None:
                break
            results.append(result)
        return results
