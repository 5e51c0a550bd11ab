"""Lookup table from diagram type names to strategies."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from .config import DiagramOptions
from .errors import UnknownDiagramTypeError
from .model import Dataset
from .strategies import (
    ClassDiagramStrategy,
    DiagramStrategy,
    ErdDiagramStrategy,
    FlowchartDiagramStrategy,
    GenerationResult,
)

logger = logging.getLogger(__name__)


class DiagramKind(Enum):
    ERD = "erd"
    CLASS = "class"
    FLOWCHART = "flowchart"


STRATEGY_BY_KIND: Dict[DiagramKind, Type[DiagramStrategy]] = {
    DiagramKind.ERD: ErdDiagramStrategy,
    DiagramKind.CLASS: ClassDiagramStrategy,
    DiagramKind.FLOWCHART: FlowchartDiagramStrategy,
}


@dataclass(frozen=True)
class DiagramType:
    kind: DiagramKind
    display_name: str
    description: str
    category: str

    @property
    def strategy_class(self) -> Type[DiagramStrategy]:
        return STRATEGY_BY_KIND[self.kind]

    @property
    def mermaid_type(self) -> str:
        return self.strategy_class.mermaid_type

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "display_name": self.display_name,
            "description": self.description,
            "category": self.category,
            "mermaid_type": self.mermaid_type,
        }


DEFAULT_DIAGRAM_TYPE = "database_tables"

DIAGRAM_TYPES: Dict[str, DiagramType] = {
    "database_tables": DiagramType(
        kind=DiagramKind.ERD,
        display_name="Database Schema (ERD)",
        description="Entity relationship diagram showing database tables and relationships",
        category="schema",
    ),
    "model_associations": DiagramType(
        kind=DiagramKind.FLOWCHART,
        display_name="Model Associations",
        description="Flowchart showing model relationships",
        category="models",
    ),
    "model_associations_class": DiagramType(
        kind=DiagramKind.CLASS,
        display_name="Model Associations (Class Diagram)",
        description="Class diagram showing model attributes, methods and relationships",
        category="models",
    ),
}


def available_types() -> List[str]:
    return list(DIAGRAM_TYPES)


def available_types_with_metadata() -> Dict[str, Dict[str, Any]]:
    return {name: diagram_type.to_dict() for name, diagram_type in DIAGRAM_TYPES.items()}


def type_exists(name: str) -> bool:
    return name in DIAGRAM_TYPES


def find_type(name: str) -> DiagramType:
    try:
        return DIAGRAM_TYPES[name]
    except KeyError:
        raise UnknownDiagramTypeError(
            f"Unknown diagram type: {name}. Available: {', '.join(DIAGRAM_TYPES)}"
        ) from None


def type_metadata(name: str) -> Dict[str, Any]:
    return find_type(name).to_dict()


def types_by_category() -> Dict[str, Dict[str, Dict[str, Any]]]:
    grouped: Dict[str, Dict[str, Dict[str, Any]]] = {}
    for name, diagram_type in DIAGRAM_TYPES.items():
        grouped.setdefault(diagram_type.category, {})[name] = diagram_type.to_dict()
    return grouped


def create_strategy(name: str, options: Optional[DiagramOptions] = None) -> DiagramStrategy:
    diagram_type = find_type(name)
    logger.debug("Creating strategy for type %s: %s", name, diagram_type.strategy_class.__name__)
    return diagram_type.strategy_class(options)


def generate(name: str, dataset: Dataset, options: Optional[DiagramOptions] = None) -> GenerationResult:
    return create_strategy(name, options).generate_from_dataset(dataset)
