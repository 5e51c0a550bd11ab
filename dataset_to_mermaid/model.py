"""Domain objects for the syntax-independent diagram dataset."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .cardinality import Cardinality, infer_cardinality, parse_cardinality

RELATIONSHIP_DIRECTIONS = ("outgoing", "incoming", "all")


@dataclass(frozen=True)
class MethodInfo:
    name: str
    visibility: str = "+"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MethodInfo":
        return cls(name=str(data.get("name") or ""), visibility=data.get("visibility") or "+")

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "visibility": self.visibility}


@dataclass(frozen=True)
class Attribute:
    name: str
    type: str = ""
    nullable: bool = True
    default: Any = None
    primary_key: bool = False
    foreign_key: bool = False
    visibility: Optional[str] = None

    @property
    def is_primary_key(self) -> bool:
        return self.primary_key

    @property
    def is_foreign_key(self) -> bool:
        return self.foreign_key or self.name.endswith("_id")

    @property
    def display_type(self) -> str:
        return self.type or "any"

    @property
    def display_visibility(self) -> str:
        return self.visibility or "+"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Attribute":
        metadata = data.get("metadata") or {}
        return cls(
            name=str(data.get("name") or ""),
            type=str(data.get("type") or ""),
            nullable=data.get("nullable", True) is not False,
            default=data.get("default"),
            primary_key=bool(metadata.get("primary_key", False)),
            foreign_key=bool(metadata.get("foreign_key", False)),
            visibility=metadata.get("visibility"),
        )

    def to_dict(self) -> Dict[str, Any]:
        metadata: Dict[str, Any] = {}
        if self.primary_key:
            metadata["primary_key"] = True
        if self.foreign_key:
            metadata["foreign_key"] = True
        if self.visibility:
            metadata["visibility"] = self.visibility
        return {
            "name": self.name,
            "type": self.type,
            "nullable": self.nullable,
            "default": self.default,
            "metadata": metadata,
        }


@dataclass
class Entity:
    id: str
    name: str
    type: str = "default"
    attributes: List[Attribute] = field(default_factory=list)
    methods: List[MethodInfo] = field(default_factory=list)
    description: Optional[str] = None

    def add_attribute(self, attribute: Attribute) -> Attribute:
        self.attributes.append(attribute)
        return attribute

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], entity_id: Optional[str] = None) -> "Entity":
        metadata = data.get("metadata") or {}
        identifier = str(entity_id or data.get("id") or "")
        return cls(
            id=identifier,
            name=str(data.get("name") or identifier),
            type=str(data.get("type") or "default"),
            attributes=[Attribute.from_dict(item) for item in data.get("attributes") or []],
            methods=[MethodInfo.from_dict(item) for item in metadata.get("methods") or []],
            description=data.get("description"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "attributes": [attribute.to_dict() for attribute in self.attributes],
            "metadata": {},
        }
        if self.methods:
            data["metadata"]["methods"] = [method.to_dict() for method in self.methods]
        if self.description:
            data["description"] = self.description
        return data


@dataclass
class Relationship:
    source_id: str
    target_id: str
    type: str = ""
    label: str = ""
    cardinality: Optional[str] = None
    self_referential: bool = False

    @property
    def effective_cardinality(self) -> Optional[Cardinality]:
        """Explicit cardinality when recognised, else the one implied by the type."""
        return parse_cardinality(self.cardinality) or infer_cardinality(self.type)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Relationship":
        metadata = data.get("metadata") or {}
        cardinality = data.get("cardinality")
        return cls(
            source_id=str(data.get("source_id") or ""),
            target_id=str(data.get("target_id") or ""),
            type=str(data.get("type") or ""),
            label=str(data.get("label") or ""),
            cardinality=str(cardinality) if cardinality else None,
            self_referential=bool(metadata.get("self_referential", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source_id": self.source_id,
            "target_id": self.target_id,
            "type": self.type,
            "label": self.label,
            "cardinality": self.cardinality,
            "metadata": {"self_referential": True} if self.self_referential else {},
        }


@dataclass
class Dataset:
    entities: Dict[str, Entity] = field(default_factory=dict)
    relationships: List[Relationship] = field(default_factory=list)

    @classmethod
    def build(cls, entities: Iterable[Entity] = (), relationships: Iterable[Relationship] = ()) -> "Dataset":
        dataset = cls()
        for entity in entities:
            dataset.add_entity(entity)
        for relationship in relationships:
            dataset.add_relationship(relationship)
        return dataset

    def add_entity(self, entity: Entity) -> Entity:
        self.entities[entity.id] = entity
        return entity

    def add_relationship(self, relationship: Relationship) -> Relationship:
        self.relationships.append(relationship)
        return relationship

    def get_entity(self, entity_id: str) -> Optional[Entity]:
        return self.entities.get(str(entity_id))

    def has_entity(self, entity_id: str) -> bool:
        return str(entity_id) in self.entities

    @property
    def is_empty(self) -> bool:
        return not self.entities and not self.relationships

    def relationships_for(self, entity_id: str, direction: str = "all") -> List[Relationship]:
        if direction not in RELATIONSHIP_DIRECTIONS:
            raise ValueError(f"Direction must be one of {', '.join(RELATIONSHIP_DIRECTIONS)}")
        entity_id = str(entity_id)
        outgoing = direction in ("outgoing", "all")
        incoming = direction in ("incoming", "all")
        return [
            rel
            for rel in self.relationships
            if (outgoing and rel.source_id == entity_id) or (incoming and rel.target_id == entity_id)
        ]

    def _connected_ids(self) -> set:
        ids = set()
        for rel in self.relationships:
            ids.add(rel.source_id)
            ids.add(rel.target_id)
        return ids

    def isolated_entities(self) -> List[Entity]:
        connected = self._connected_ids()
        return [entity for entity in self.entities.values() if entity.id not in connected]

    def connected_entities(self) -> List[Entity]:
        connected = self._connected_ids()
        return [entity for entity in self.entities.values() if entity.id in connected]

    def stats(self) -> Dict[str, Any]:
        return {
            "entity_count": len(self.entities),
            "relationship_count": len(self.relationships),
            "entity_types": sorted({entity.type for entity in self.entities.values()}),
            "relationship_types": sorted({rel.type for rel in self.relationships}),
            "isolated_entities": [entity.id for entity in self.isolated_entities()],
            "connected_entities": [entity.id for entity in self.connected_entities()],
        }

    def validation_errors(self) -> List[str]:
        """Describe structural problems; rendering tolerates all of them."""
        errors: List[str] = []
        for key, entity in self.entities.items():
            if not entity.id.strip():
                errors.append(f"Entity {key!r} has a blank id")
            if not entity.name.strip():
                errors.append(f"Entity {key!r} has a blank name")
            for attribute in entity.attributes:
                if not attribute.name.strip():
                    errors.append(f"Entity {key!r} has an attribute with a blank name")
        for index, rel in enumerate(self.relationships):
            if not rel.source_id.strip():
                errors.append(f"Relationship {index} has a blank source id")
            elif not self.has_entity(rel.source_id):
                errors.append(f"Relationship {index} references non-existent source entity: {rel.source_id}")
            if not rel.target_id.strip():
                errors.append(f"Relationship {index} has a blank target id")
            elif not self.has_entity(rel.target_id):
                errors.append(f"Relationship {index} references non-existent target entity: {rel.target_id}")
            if rel.source_id == rel.target_id and not rel.self_referential:
                errors.append(f"Relationship {index} points at its own source without self_referential")
            if rel.cardinality and parse_cardinality(rel.cardinality) is None:
                errors.append(f"Relationship {index} has unknown cardinality: {rel.cardinality}")
        return errors

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Dataset":
        dataset = cls()
        raw_entities = data.get("entities") or {}
        if isinstance(raw_entities, Mapping):
            for entity_id, item in raw_entities.items():
                dataset.add_entity(Entity.from_dict(item or {}, entity_id=str(entity_id)))
        else:
            for item in raw_entities:
                dataset.add_entity(Entity.from_dict(item))
        for item in data.get("relationships") or []:
            dataset.add_relationship(Relationship.from_dict(item))
        return dataset

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entities": {entity_id: entity.to_dict() for entity_id, entity in self.entities.items()},
            "relationships": [rel.to_dict() for rel in self.relationships],
            "stats": self.stats(),
        }


def entity_name_or_id(dataset: Dataset, entity_id: str) -> str:
    """Display name for a relationship endpoint; the raw id when the entity is missing."""
    entity = dataset.get_entity(entity_id)
    return entity.name if entity is not None else entity_id
