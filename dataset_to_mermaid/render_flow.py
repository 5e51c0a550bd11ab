"""Mermaid flowchart renderer."""
from __future__ import annotations

from typing import List, Sequence

from . import sanitizer
from .cardinality import to_simple
from .model import Dataset, Entity, Relationship, entity_name_or_id
from .render_base import INDENT, BaseBuilder

LINE_BREAK = "<br/>"


def _summarize(names: Sequence[str], noun: str, limit: int) -> List[str]:
    """Count line plus a comma-joined list capped at ``limit`` names."""
    listed = ", ".join(names[:limit])
    if len(names) > limit:
        overflow = f"... {len(names) - limit} more"
        listed = f"{listed}, {overflow}" if listed else overflow
    return [f"{len(names)} {noun}", listed]


class FlowchartBuilder(BaseBuilder):
    mermaid_type = "flowchart"

    def build_from_dataset(self, dataset: Dataset) -> str:
        lines: List[str] = [f"flowchart {self.options.direction}"]
        for entity in dataset.entities.values():
            lines.append(self._render_node(entity))
        if dataset.relationships:
            lines.append("")
            for relationship in dataset.relationships:
                lines.append(self._render_edge(relationship, dataset))
        return self._join(lines)

    def build_empty(self, message: str) -> str:
        return self._join(
            [
                f"flowchart {self.options.direction}",
                f"{INDENT}EmptyState[\"{sanitizer.text(message)}\"]",
            ]
        )

    def _render_node(self, entity: Entity) -> str:
        parts = [sanitizer.text(entity.name)]
        if self.options.show_attributes and entity.attributes:
            names = [sanitizer.text(attribute.name) for attribute in entity.attributes]
            parts.extend(_summarize(names, "attributes", self.options.max_attributes))
        if self.options.show_methods and entity.methods:
            names = [sanitizer.method_name(method.name) for method in entity.methods]
            parts.extend(_summarize(names, "methods", self.options.max_methods))
        content = LINE_BREAK.join(part for part in parts if part)
        return f"{INDENT}{sanitizer.node_id(entity.name)}[\"{content}\"]"

    def _render_edge(self, relationship: Relationship, dataset: Dataset) -> str:
        source = sanitizer.node_id(entity_name_or_id(dataset, relationship.source_id))
        target = sanitizer.node_id(entity_name_or_id(dataset, relationship.target_id))
        label = sanitizer.label(relationship.label)
        if self.options.show_cardinality and relationship.cardinality:
            card = to_simple(relationship.cardinality)
            label = f"{label} ({card})" if label else card
        if label:
            return f"{INDENT}{source} -->|\"{label}\"| {target}"
        return f"{INDENT}{source} --> {target}"
