"""
Relations: single pieces of evidence about an item's strength.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum


class RelationKind(Enum):
    """How a relation constrains the strength it refers to."""

    EQUAL = ""
    LESS_THAN = "<"
    GREATER_THAN = ">"
    UNPARSEABLE = "?"

    @property
    def is_numeric(self) -> bool:
        return self is not RelationKind.UNPARSEABLE


# Leading float literal, like a permissive parseFloat
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class Relation:
    """
    One constraint on an item's strength.

    ``LESS_THAN`` and ``GREATER_THAN`` are strict bounds taken from a past
    comparison. ``UNPARSEABLE`` keeps malformed input around and carries no
    numeric meaning.
    """

    kind: RelationKind
    value: float = math.nan

    @classmethod
    def equal(cls, value: float) -> "Relation":
        return cls(RelationKind.EQUAL, value)

    @classmethod
    def less_than(cls, value: float) -> "Relation":
        return cls(RelationKind.LESS_THAN, value)

    @classmethod
    def greater_than(cls, value: float) -> "Relation":
        return cls(RelationKind.GREATER_THAN, value)

    @classmethod
    def unparseable(cls) -> "Relation":
        return cls(RelationKind.UNPARSEABLE)


def parse_number_prefix(text: str) -> float:
    """
    Parse the leading numeric part of a string.

    Args:
        text: Text that may start with a number

    Returns:
        The parsed value, or NaN if the text does not start with a finite number
    """
    match = _NUMBER_PREFIX.match(text.strip())
    if not match:
        return math.nan

    value = float(match.group(0))
    if math.isinf(value):
        return math.nan
    return value


def parse_relation(token: str) -> Relation:
    """
    Parse one relation token such as ``650``, ``<612.5`` or ``>580``.

    Args:
        token: The token text, surrounding whitespace allowed

    Returns:
        The parsed relation; malformed tokens become ``UNPARSEABLE``
    """
    token = token.strip()
    kind = RelationKind.EQUAL
    if token.startswith("<"):
        kind = RelationKind.LESS_THAN
        token = token[1:]
    elif token.startswith(">"):
        kind = RelationKind.GREATER_THAN
        token = token[1:]

    value = parse_number_prefix(token)
    if math.isnan(value):
        return Relation.unparseable()

    return Relation(kind, value)


def format_value(value: float) -> str:
    """Truncate to two decimals and drop a trailing ``.0``."""
    truncated = math.floor(value * 100) / 100
    if truncated.is_integer():
        return str(int(truncated))
    return repr(truncated)


def format_relation(relation: Relation) -> str:
    """
    Render a relation as ``<op><value>``.

    Args:
        relation: A numeric relation

    Returns:
        The rendered token
    """
    if not relation.kind.is_numeric:
        raise ValueError("Unparseable relations have no text form")
    return f"{relation.kind.value}{format_value(relation.value)}"
