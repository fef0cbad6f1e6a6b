"""
Items and the line-oriented text format of an Elo list.

Each line holds one item, ``Title`` or ``Title (r1, r2, ...)``, where every
relation is ``650``, ``<612.5`` or ``>580``.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .config import DEFAULT_CONFIG, EloListConfig
from .estimator import estimate
from .relations import Relation, RelationKind, format_relation, parse_relation

# Title, then the last parenthesised group closing the line
_ITEM_LINE = re.compile(r"^(.+)\((.*)\)$")


@dataclass(frozen=True)
class Item:
    """
    A ranked entry with its strength estimate and the relations behind it.

    ``estimated_strength`` is derived from ``relations`` and stored so that
    sorting and serialization see one consistent number.
    """

    title: str
    estimated_strength: float
    relations: Tuple[Relation, ...] = ()

    @classmethod
    def new(cls, title: str, config: EloListConfig = DEFAULT_CONFIG) -> "Item":
        """Create an item without any comparison history."""
        return cls(title=title.strip(), estimated_strength=config.default_strength)

    @classmethod
    def from_relations(
        cls, title: str, relations: Iterable[Relation], config: EloListConfig = DEFAULT_CONFIG
    ) -> "Item":
        """Create an item and estimate its strength from the given relations."""
        relations = tuple(relations)
        return cls(title=title, estimated_strength=estimate(relations, config), relations=relations)

    @property
    def is_settled(self) -> bool:
        return len(self.relations) == 1 and self.relations[0].kind is RelationKind.EQUAL

    @property
    def is_new(self) -> bool:
        return not self.relations


def parse_item(line: str, config: EloListConfig = DEFAULT_CONFIG) -> Item:
    """
    Parse one line of an Elo list.

    Args:
        line: ``Title`` or ``Title (relations)``
        config: Supplies the default strength

    Returns:
        The parsed item with its strength already estimated
    """
    line = line.strip()
    match = _ITEM_LINE.match(line)
    if not match:
        return Item.new(line, config)

    title, body = match.groups()
    return Item.from_relations(
        title.strip(), (parse_relation(token) for token in body.split(",")), config
    )


def sort_items(items: Iterable[Item]) -> List[Item]:
    """Order items by descending strength, keeping input order on ties."""
    return sorted(items, key=lambda item: item.estimated_strength, reverse=True)


def parse_list(text: str, config: EloListConfig = DEFAULT_CONFIG) -> List[Item]:
    """
    Parse a multi-line Elo list.

    Args:
        text: One item per line; blank lines are ignored
        config: Supplies the default strength

    Returns:
        Items sorted by descending strength
    """
    lines = (line.strip() for line in text.split("\n"))
    return sort_items(parse_item(line, config) for line in lines if line)


def format_relations(item: Item) -> str:
    # Unparseable relations are dropped
    return ", ".join(format_relation(r) for r in item.relations if r.kind.is_numeric)


def format_item(item: Item) -> str:
    """Render one item as a line of an Elo list."""
    if item.relations:
        return f"{item.title} ({format_relations(item)})"
    return item.title


def serialize_list(items: Iterable[Item]) -> str:
    """
    Render items back into the Elo list text format.

    Args:
        items: Items in the order they should appear

    Returns:
        One line per item, joined with newlines
    """
    return "\n".join(format_item(item) for item in items)
