"""
Elo List - a ranked list maintained through pairwise comparisons.
"""

from .core import (
    DEFAULT_CONFIG,
    EloListConfig,
    Item,
    RatingUpdate,
    Relation,
    RelationKind,
    apply_loss,
    apply_win,
    estimate,
    expected_score,
    parse_item,
    parse_list,
    parse_relation,
    record_comparison,
    serialize_list,
    update_elo,
)
from .core.simple_judge import SimpleJudge
from .judge import ItemJudge
from .session import ComparisonSession, select_pair

__all__ = [
    "DEFAULT_CONFIG",
    "EloListConfig",
    "Item",
    "RatingUpdate",
    "Relation",
    "RelationKind",
    "apply_loss",
    "apply_win",
    "estimate",
    "expected_score",
    "parse_item",
    "parse_list",
    "parse_relation",
    "record_comparison",
    "serialize_list",
    "update_elo",
    "SimpleJudge",
    "ItemJudge",
    "ComparisonSession",
    "select_pair",
]
