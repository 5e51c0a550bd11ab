"""Class diagram renderer for model-centric datasets."""
from __future__ import annotations

from typing import List

from . import sanitizer
from .cardinality import to_class
from .model import Dataset, Entity, Relationship, entity_name_or_id
from .render_base import INDENT, BaseBuilder

MEMBER_INDENT = INDENT * 2


class ClassDiagramBuilder(BaseBuilder):
    mermaid_type = "classDiagram"

    def build_from_dataset(self, dataset: Dataset) -> str:
        lines: List[str] = ["classDiagram", f"{INDENT}direction {self.options.direction}"]
        for entity in dataset.entities.values():
            lines.extend(self._render_class(entity))
        if dataset.relationships:
            lines.append("")
            lines.append(f"{INDENT}%% Relationships")
            for relationship in dataset.relationships:
                lines.append(self._render_relationship(relationship, dataset))
        return self._join(lines)

    def build_empty(self, message: str) -> str:
        return self._join(
            [
                "classDiagram",
                f"{INDENT}direction {self.options.direction}",
                f"{INDENT}class EmptyState {{",
                f"{MEMBER_INDENT}+string message",
                f"{INDENT}}}",
                f"{INDENT}note for EmptyState \"{sanitizer.text(message)}\"",
            ]
        )

    def _render_class(self, entity: Entity) -> List[str]:
        lines = [f"{INDENT}class {sanitizer.class_name(entity.name)} {{"]
        lines.extend(self._render_attributes(entity))
        lines.extend(self._render_methods(entity))
        lines.append(f"{INDENT}}}")
        lines.append("")
        return lines

    def _render_attributes(self, entity: Entity) -> List[str]:
        attributes = entity.attributes
        if not attributes:
            return []
        lines = [f"{MEMBER_INDENT}+Stats: {len(attributes)} attributes"]
        if not self.options.show_attributes:
            return lines
        limit = self.options.max_attributes
        lines.append(f"{MEMBER_INDENT}%% Attributes")
        for attribute in attributes[:limit]:
            lines.append(
                f"{MEMBER_INDENT}{attribute.display_visibility}{attribute.display_type} {attribute.name}"
            )
        if len(attributes) > limit:
            lines.append(f"{MEMBER_INDENT}%% ... {len(attributes) - limit} more attributes")
        return lines

    def _render_methods(self, entity: Entity) -> List[str]:
        methods = entity.methods
        if not methods:
            return []
        lines = [f"{MEMBER_INDENT}+Methods: {len(methods)} methods"]
        if not self.options.show_methods:
            return lines
        limit = self.options.max_methods
        lines.append(f"{MEMBER_INDENT}%% Methods")
        for method in methods[:limit]:
            lines.append(f"{MEMBER_INDENT}{method.visibility or '+'}{sanitizer.method_name(method.name)}")
        if len(methods) > limit:
            lines.append(f"{MEMBER_INDENT}%% ... {len(methods) - limit} more methods")
        return lines

    def _render_relationship(self, relationship: Relationship, dataset: Dataset) -> str:
        source = sanitizer.class_name(entity_name_or_id(dataset, relationship.source_id))
        target = sanitizer.class_name(entity_name_or_id(dataset, relationship.target_id))
        label = sanitizer.label(relationship.label)
        if self.options.show_cardinality and relationship.cardinality:
            card = to_class(relationship.cardinality, self.options.cardinality_format)
            arrow = f"{source} \"{card}\" --> {target}"
        else:
            arrow = f"{source} --> {target}"
        if label:
            return f"{INDENT}{arrow} : {label}"
        return f"{INDENT}{arrow}"
