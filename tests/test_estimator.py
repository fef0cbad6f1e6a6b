"""
Tests for the strength estimator.
"""

import math
import random

import pytest

from elo_list.core import estimator
from elo_list.core.config import EloListConfig
from elo_list.core.estimator import estimate, search_window, squared_error
from elo_list.core.relations import Relation


def test_empty_relations_use_default():
    """Items without relations get the default strength."""
    assert estimate([]) == 600
    assert estimate([], EloListConfig(default_strength=1000)) == 1000


def test_only_unparseable_relations_use_default():
    assert estimate([Relation.unparseable(), Relation.unparseable()]) == 600


@pytest.mark.parametrize("value, expected", [(650, 650), (663.2, 663), (663.7, 664), (-20.4, -20)])
def test_single_equality(value, expected):
    """A single equality gives the nearest integer."""
    assert estimate([Relation.equal(value)]) == expected


def test_single_bounds():
    """Strict bounds are satisfied by the closest integer."""
    assert estimate([Relation.greater_than(600)]) == 601
    assert estimate([Relation.less_than(600)]) == 599


def test_conflicting_bounds_meet_in_the_middle():
    relations = [Relation.greater_than(600), Relation.less_than(600)]
    assert estimate(relations) == 600
    assert squared_error(relations, 600) == 2.0
    assert squared_error(relations, 599) == 4.0


def test_tie_keeps_lowest_candidate():
    """Equal errors resolve to the lowest candidate."""
    relations = [Relation.equal(600), Relation.equal(601)]
    assert squared_error(relations, 600) == squared_error(relations, 601)
    assert estimate(relations) == 600


def test_unparseable_relations_are_ignored():
    relations = [Relation.unparseable(), Relation.equal(650), Relation.unparseable()]
    assert search_window(relations) == (649, 651)
    assert estimate(relations) == 650
    assert squared_error(relations, 650) == 0.0


def test_search_window():
    relations = [Relation.equal(650), Relation.less_than(700), Relation.greater_than(500)]
    assert search_window(relations) == (649, 651)
    assert search_window([Relation.greater_than(580), Relation.greater_than(620)]) == (579, 621)
    assert search_window([Relation.unparseable()]) is None


@pytest.mark.parametrize(
    "relations",
    [
        [Relation.greater_than(584), Relation.less_than(616), Relation.greater_than(590.5)],
        [Relation.equal(610), Relation.greater_than(640), Relation.less_than(560)],
        [Relation.less_than(616), Relation.less_than(601.7), Relation.greater_than(584), Relation.equal(600)],
        [Relation.greater_than(700), Relation.greater_than(710.25), Relation.greater_than(650)],
    ],
)
def test_estimate_is_optimal_within_window(relations):
    """No integer in the search window scores better than the estimate."""
    best = estimate(relations)
    low, high = search_window(relations)
    best_error = squared_error(relations, best)

    assert math.ceil(low) <= best <= math.floor(high)
    for candidate in range(math.ceil(low), math.floor(high) + 1):
        assert best_error <= squared_error(relations, candidate) + 1e-9


def test_estimate_returns_int():
    assert isinstance(estimate([Relation.greater_than(584.3)]), int)


def test_wide_window_is_scanned_in_batches():
    """Far apart relations are scored batch by batch and still meet in the middle."""
    assert estimate([Relation.equal(0), Relation.equal(4_000_000)]) == 2_000_000


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 1000])
def test_batching_keeps_lowest_candidate_on_ties(monkeypatch, chunk_size):
    """A tie split across two batches still resolves to the lowest candidate."""
    monkeypatch.setattr(estimator, "CHUNK_SIZE", chunk_size)
    assert estimate([Relation.equal(600), Relation.equal(601)]) == 600
    assert estimate([Relation.greater_than(600), Relation.less_than(600)]) == 600


def _random_relations(rng):
    makers = [Relation.equal, Relation.less_than, Relation.greater_than]
    relations = []
    for _ in range(rng.randint(1, 6)):
        if rng.random() < 0.15:
            relations.append(Relation.unparseable())
        else:
            relations.append(rng.choice(makers)(round(rng.uniform(520, 680), 2)))
    return relations


@pytest.mark.parametrize("seed", range(40))
def test_random_relations_estimate_is_optimal(seed):
    """Any mix of relations yields a best integer within its window."""
    relations = _random_relations(random.Random(seed))
    window = search_window(relations)
    best = estimate(relations)

    if window is None:
        assert best == 600
        return

    low, high = window
    best_error = squared_error(relations, best)
    assert math.ceil(low) <= best <= math.floor(high)
    for candidate in range(math.ceil(low), math.floor(high) + 1):
        assert best_error <= squared_error(relations, candidate) + 1e-9


@pytest.mark.parametrize("seed", range(10))
def test_random_relations_batched_matches_single_batch(monkeypatch, seed):
    relations = _random_relations(random.Random(1000 + seed))
    expected = estimate(relations)

    monkeypatch.setattr(estimator, "CHUNK_SIZE", 4)
    assert estimate(relations) == expected
