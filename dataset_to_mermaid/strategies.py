"""Diagram strategies: choose the rendering path and wrap the outcome.

A strategy owns one builder. For each dataset it picks the empty-state,
isolated-entities or full rendering, measures how long that took and returns
a :class:`GenerationResult`. Rendering failures never escape a strategy; they
are logged and reported through ``success=False`` instead.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, Optional, Type

from .config import DiagramOptions
from .model import Dataset
from .render_base import BaseBuilder
from .render_class import ClassDiagramBuilder
from .render_er import ErdBuilder
from .render_flow import FlowchartBuilder


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class GenerationResult:
    success: bool
    content: Optional[str]
    type: Optional[str]
    error: Optional[str] = None
    generated_at: datetime = field(default_factory=_utcnow)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "content": self.content,
            "type": self.type,
            "error": self.error,
            "generated_at": self.generated_at.isoformat(),
            "metadata": dict(self.metadata),
        }


class DiagramStrategy:
    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    mermaid_type: ClassVar[str] = ""
    empty_message: ClassVar[str] = "No data available for diagram"
    supports_isolated_entities: ClassVar[bool] = False
    builder_class: ClassVar[Type[BaseBuilder]]

    def __init__(
        self,
        options: Optional[DiagramOptions] = None,
        builder: Optional[BaseBuilder] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.options = options or DiagramOptions()
        self.builder = builder or self.builder_class(self.options)
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def metadata(cls) -> Dict[str, str]:
        return {"name": cls.name, "description": cls.description, "mermaid_type": cls.mermaid_type}

    def generate_from_dataset(self, dataset: Dataset) -> GenerationResult:
        context = {
            "diagram_type": self.mermaid_type,
            "entities_count": len(dataset.entities),
            "relationships_count": len(dataset.relationships),
        }
        self.logger.info("Generating diagram from dataset", extra=context)
        started = time.perf_counter()
        try:
            content = self._render(dataset)
        except Exception as exc:
            self.logger.exception(
                "Diagram generation failed: %s: %s",
                type(exc).__name__,
                exc,
                extra={**context, "duration_ms": _elapsed_ms(started)},
            )
            return self._error_result(f"Diagram generation failed: {exc}")
        self.logger.info(
            "Strategy operation completed: diagram generation by %s",
            type(self).__name__,
            extra={**context, "duration_ms": _elapsed_ms(started)},
        )
        return self._success_result(content)

    def _render(self, dataset: Dataset) -> str:
        if not dataset.relationships and not dataset.entities:
            return self.builder.build_empty(self.empty_message)
        if not dataset.relationships and self.supports_isolated_entities:
            return self.builder.build_with_entities(dataset.entities.values())
        return self.builder.build_from_dataset(dataset)

    def _success_result(self, content: str) -> GenerationResult:
        return GenerationResult(
            success=True,
            content=content,
            type=self.mermaid_type,
            metadata={"strategy": type(self).__name__},
        )

    def _error_result(self, message: str) -> GenerationResult:
        return GenerationResult(
            success=False,
            content=None,
            type=self.mermaid_type,
            error=message,
            metadata={"strategy": type(self).__name__},
        )


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class ErdDiagramStrategy(DiagramStrategy):
    name = "Database Schema (ERD)"
    description = "Entity relationship diagram showing database tables and foreign key relationships"
    mermaid_type = "erDiagram"
    empty_message = "No database relationships or tables found"
    supports_isolated_entities = True
    builder_class = ErdBuilder


class ClassDiagramStrategy(DiagramStrategy):
    name = "Model Associations (Class Diagram)"
    description = "Class diagram showing model relationships and methods"
    mermaid_type = "classDiagram"
    empty_message = "No model associations or entities found"
    builder_class = ClassDiagramBuilder


class FlowchartDiagramStrategy(DiagramStrategy):
    name = "Model Associations"
    description = "Flowchart diagram showing model relationships and associations"
    mermaid_type = "flowchart"
    empty_message = "No model associations or entities found"
    supports_isolated_entities = True
    builder_class = FlowchartBuilder
