"""
Core Elo list functionality that doesn't depend on DSPy.
"""

from .config import EloListConfig, DEFAULT_CONFIG
from .relations import Relation, RelationKind, parse_relation, format_relation
from .estimator import estimate, squared_error, search_window
from .items import Item, parse_item, parse_list, sort_items, format_item, serialize_list
from .rating import (
    RatingUpdate,
    expected_score,
    update_elo,
    apply_win,
    apply_loss,
    record_comparison,
)
