"""ER renderer for table-centric datasets."""
from __future__ import annotations

from typing import List

from . import sanitizer
from .cardinality import to_erd
from .model import Dataset, Entity, Relationship, entity_name_or_id
from .render_base import INDENT, BaseBuilder


class ErdBuilder(BaseBuilder):
    mermaid_type = "erDiagram"

    def build_from_dataset(self, dataset: Dataset) -> str:
        lines: List[str] = ["erDiagram"]
        for entity in dataset.entities.values():
            lines.extend(self._render_entity(entity))
        if dataset.relationships:
            lines.append("")
            for relationship in dataset.relationships:
                lines.append(self._render_relationship(relationship, dataset))
        return self._join(lines)

    def build_empty(self, message: str) -> str:
        return self._join(
            [
                "erDiagram",
                f"{INDENT}EMPTY_STATE {{",
                f"{INDENT * 2}string message \"{sanitizer.text(message)}\"",
                f"{INDENT}}}",
            ]
        )

    def _table(self, name: str) -> str:
        return sanitizer.table_name(name, self.options.preserve_table_case)

    def _render_entity(self, entity: Entity) -> List[str]:
        lines = [f"{INDENT}{self._table(entity.name)} {{"]
        if self.options.show_attributes:
            # Extra attributes are dropped without an overflow marker.
            for attribute in entity.attributes[: self.options.max_attributes]:
                suffix = ""
                if attribute.is_primary_key:
                    suffix = " PK"
                elif attribute.is_foreign_key:
                    suffix = " FK"
                lines.append(f"{INDENT * 2}{attribute.display_type} {attribute.name}{suffix}")
        lines.append(f"{INDENT}}}")
        lines.append("")
        return lines

    def _render_relationship(self, relationship: Relationship, dataset: Dataset) -> str:
        source = self._table(entity_name_or_id(dataset, relationship.source_id))
        target = self._table(entity_name_or_id(dataset, relationship.target_id))
        card = to_erd(relationship.cardinality)
        return f"{INDENT}{source} {card} {target} : \"{sanitizer.label(relationship.label)}\""
