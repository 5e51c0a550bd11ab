"""Cardinality notations for each Mermaid diagram flavor."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Union


class Cardinality(str, Enum):
    ONE_TO_MANY = "one_to_many"
    MANY_TO_ONE = "many_to_one"
    ONE_TO_ONE = "one_to_one"
    MANY_TO_MANY = "many_to_many"
    ZERO_OR_ONE_TO_MANY = "zero_or_one_to_many"
    ONE_TO_ZERO_OR_MANY = "one_to_zero_or_many"
    ZERO_OR_ONE_TO_ONE = "zero_or_one_to_one"
    ONE_TO_ZERO_OR_ONE = "one_to_zero_or_one"


class CardinalityFormat(str, Enum):
    STANDARD = "standard"
    SIMPLE = "simple"


CardinalityLike = Union[Cardinality, str, None]

ERD_NOTATION: Dict[str, str] = {
    "one_to_many": "||--o{",
    "many_to_one": "}o--||",
    "one_to_one": "||--||",
    "many_to_many": "}o--o{",
    "zero_or_one_to_many": "|o--o{",
    "one_to_zero_or_many": "||--o{",
    "zero_or_one_to_one": "|o--||",
    "one_to_zero_or_one": "||--|o",
}

CLASS_NOTATION: Dict[str, str] = {
    "one_to_many": "1..*",
    "many_to_one": "*..*",
    "one_to_one": "1..1",
    "many_to_many": "*..*",
    "zero_or_one_to_many": "0..1..*",
    "one_to_zero_or_many": "1..0..*",
    "zero_or_one_to_one": "0..1..1",
    "one_to_zero_or_one": "1..0..1",
}

SIMPLE_NOTATION: Dict[str, str] = {
    "one_to_many": "1:N",
    "many_to_one": "N:1",
    "one_to_one": "1:1",
    "many_to_many": "N:N",
    "zero_or_one_to_many": "0,1:N",
    "one_to_zero_or_many": "1:0,N",
    "zero_or_one_to_one": "0,1:1",
    "one_to_zero_or_one": "1:0,1",
}

# Association kinds with an implied multiplicity.
ASSOCIATION_CARDINALITY: Dict[str, Cardinality] = {
    "has_many": Cardinality.ONE_TO_MANY,
    "belongs_to": Cardinality.MANY_TO_ONE,
    "has_one": Cardinality.ONE_TO_ONE,
    "has_and_belongs_to_many": Cardinality.MANY_TO_MANY,
}


def _key(cardinality: CardinalityLike) -> str:
    if isinstance(cardinality, Cardinality):
        return cardinality.value
    return str(cardinality) if cardinality is not None else ""


def parse_cardinality(value: CardinalityLike) -> Optional[Cardinality]:
    """Return the matching :class:`Cardinality` or ``None`` for unknown values."""
    try:
        return Cardinality(_key(value))
    except ValueError:
        return None


def to_erd(cardinality: CardinalityLike) -> str:
    return ERD_NOTATION.get(_key(cardinality), ERD_NOTATION["one_to_many"])


def to_class(
    cardinality: CardinalityLike,
    fmt: Union[CardinalityFormat, str] = CardinalityFormat.STANDARD,
) -> str:
    if fmt == CardinalityFormat.SIMPLE:
        return to_simple(cardinality)
    return CLASS_NOTATION.get(_key(cardinality), CLASS_NOTATION["one_to_many"])


def to_simple(cardinality: CardinalityLike) -> str:
    return SIMPLE_NOTATION.get(_key(cardinality), SIMPLE_NOTATION["one_to_many"])


def infer_cardinality(relationship_type: Optional[str]) -> Optional[Cardinality]:
    if not relationship_type:
        return None
    return ASSOCIATION_CARDINALITY.get(relationship_type)
