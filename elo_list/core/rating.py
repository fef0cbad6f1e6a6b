"""
Rating updates after a pairwise comparison.

Settled items move by the classic Elo formula. Incubating items instead record
where the opponent would land after the game as a bound on their own strength,
and collapse into a settled item once enough bounds have been collected.
"""

import math
from dataclasses import replace
from typing import List, Sequence

from .config import DEFAULT_CONFIG, EloListConfig
from .estimator import estimate
from .items import Item, sort_items
from .relations import Relation
from ..utils.logging import get_logger

logger = get_logger(__name__)


def expected_score(rating_a: float, rating_b: float, scale: float = 400.0) -> float:
    """
    Calculate the expected score for player A against player B.

    Args:
        rating_a: Elo rating of player A
        rating_b: Elo rating of player B
        scale: Rating difference that multiplies the odds by ten

    Returns:
        Expected score for player A (between 0 and 1)
    """
    return 1.0 / (1.0 + math.pow(10, (rating_b - rating_a) / scale))


def update_elo(rating: float, expected: float, actual: float, k_factor: float = 32.0) -> float:
    """
    Update an Elo rating based on the expected and actual outcomes.

    Args:
        rating: Current Elo rating
        expected: Expected outcome (between 0 and 1)
        actual: Actual outcome (0 for loss, 1 for win)
        k_factor: K-factor for Elo calculation

    Returns:
        Updated Elo rating
    """
    return rating + k_factor * (actual - expected)


class RatingUpdate:
    """
    Updates for one item, given the opponent as it was before the game.

    Both methods return a new :class:`Item`; neither the item nor the
    opponent is modified.
    """

    def __init__(self, item: Item, config: EloListConfig = DEFAULT_CONFIG):
        self.item = item
        self.config = config

    def _expected(self, a: Item, b: Item) -> float:
        return expected_score(a.estimated_strength, b.estimated_strength, self.config.scale)

    def _settle(self, strength: float) -> Item:
        return replace(self.item, estimated_strength=strength, relations=(Relation.equal(strength),))

    def _incubate(self, relation: Relation) -> Item:
        relations = self.item.relations + (relation,)
        strength = estimate(relations, self.config)

        if len(relations) > self.config.incubation_limit:
            logger.debug("%r settles at %s after %d relations", self.item.title, strength, len(relations))
            relations = (Relation.equal(strength),)

        return replace(self.item, estimated_strength=strength, relations=relations)

    def after_win_against(self, loser: Item) -> Item:
        """
        Apply a win against ``loser``.

        Args:
            loser: The beaten item, with its strength from before this game

        Returns:
            The updated item
        """
        if self.item.is_settled:
            expected = self._expected(self.item, loser)
            return self._settle(update_elo(self.item.estimated_strength, expected, 1.0, self.config.k_factor))

        # Where the loser ends up after this game is a floor for us
        expected = self._expected(loser, self.item)
        loser_after = update_elo(loser.estimated_strength, expected, 0.0, self.config.k_factor)
        return self._incubate(Relation.greater_than(loser_after))

    def after_loss_against(self, winner: Item) -> Item:
        """
        Apply a loss against ``winner``.

        Args:
            winner: The winning item, with its strength from before this game

        Returns:
            The updated item
        """
        if self.item.is_settled:
            expected = self._expected(self.item, winner)
            return self._settle(update_elo(self.item.estimated_strength, expected, 0.0, self.config.k_factor))

        expected = self._expected(winner, self.item)
        winner_after = update_elo(winner.estimated_strength, expected, 1.0, self.config.k_factor)
        return self._incubate(Relation.less_than(winner_after))


def apply_win(item: Item, opponent: Item, config: EloListConfig = DEFAULT_CONFIG) -> Item:
    """Return ``item`` after beating ``opponent``."""
    return RatingUpdate(item, config).after_win_against(opponent)


def apply_loss(item: Item, opponent: Item, config: EloListConfig = DEFAULT_CONFIG) -> Item:
    """Return ``item`` after losing to ``opponent``."""
    return RatingUpdate(item, config).after_loss_against(opponent)


def record_comparison(
    items: Sequence[Item],
    winner_index: int,
    loser_index: int,
    config: EloListConfig = DEFAULT_CONFIG,
) -> List[Item]:
    """
    Record the outcome of a comparison between two items of a list.

    Both updates read the items as they were before the game.

    Args:
        items: The current list
        winner_index: Position of the winning item
        loser_index: Position of the losing item
        config: Engine configuration

    Returns:
        A new list with both items replaced, sorted by descending strength
    """
    positions = range(len(items))
    winner_index, loser_index = positions[winner_index], positions[loser_index]
    if winner_index == loser_index:
        raise ValueError("An item cannot be compared with itself")

    updated = list(items)
    winner = updated[winner_index]
    loser = updated[loser_index]

    updated[winner_index] = apply_win(winner, loser, config)
    updated[loser_index] = apply_loss(loser, winner, config)

    logger.debug(
        "%r beat %r: %s -> %s, %s -> %s",
        winner.title,
        loser.title,
        winner.estimated_strength,
        updated[winner_index].estimated_strength,
        loser.estimated_strength,
        updated[loser_index].estimated_strength,
    )
    return sort_items(updated)
