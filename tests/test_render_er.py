from __future__ import annotations

import pytest

from dataset_to_mermaid.config import DiagramOptions
from dataset_to_mermaid.model import Attribute, Dataset, Entity, Relationship
from dataset_to_mermaid.render_er import ErdBuilder


@pytest.fixture
def dataset() -> Dataset:
    users = Entity(id="users", name="users", type="table")
    users.add_attribute(Attribute(name="id", type="integer", primary_key=True))
    users.add_attribute(Attribute(name="name", type="string"))
    posts = Entity(id="posts", name="posts", type="table")
    posts.add_attribute(Attribute(name="id", type="integer", primary_key=True))
    posts.add_attribute(Attribute(name="user_id", type="integer", foreign_key=True))
    return Dataset.build(
        [users, posts],
        [Relationship(source_id="users", target_id="posts", type="foreign_key", label="user_id", cardinality="one_to_many")],
    )


def test_full_output(dataset: Dataset) -> None:
    expected = "\n".join(
        [
            "erDiagram",
            "    users {",
            "        integer id PK",
            "        string name",
            "    }",
            "",
            "    posts {",
            "        integer id PK",
            "        integer user_id FK",
            "    }",
            "",
            "",
            '    users ||--o{ posts : "user_id"',
        ]
    )
    assert ErdBuilder().build_from_dataset(dataset) == expected


def test_primary_key_wins_over_foreign_key() -> None:
    entity = Entity(id="memberships", name="memberships")
    entity.add_attribute(Attribute(name="user_id", type="integer", primary_key=True, foreign_key=True))
    content = ErdBuilder().build_from_dataset(Dataset.build([entity]))
    assert "        integer user_id PK" in content.splitlines()


def test_upper_cases_tables_when_case_not_preserved() -> None:
    entity = Entity(id="user", name="User")
    entity.add_attribute(Attribute(name="id", type="integer", primary_key=True))
    content = ErdBuilder(DiagramOptions(preserve_table_case=False)).build_from_dataset(Dataset.build([entity]))
    lines = content.splitlines()
    assert lines[1] == "    USER {"
    assert lines[2] == "        integer id PK"


def test_attributes_hidden_or_truncated_silently(dataset: Dataset) -> None:
    hidden = ErdBuilder(DiagramOptions(show_attributes=False)).build_from_dataset(dataset)
    assert "integer id PK" not in hidden
    assert "    users {\n    }" in hidden

    truncated = ErdBuilder(DiagramOptions(max_attributes=1)).build_from_dataset(dataset)
    assert "string name" not in truncated
    assert "more" not in truncated


def test_blank_type_renders_as_any() -> None:
    entity = Entity(id="t", name="t")
    entity.add_attribute(Attribute(name="payload"))
    assert "        any payload" in ErdBuilder().build_from_dataset(Dataset.build([entity]))


def test_missing_endpoint_and_empty_label_fall_back(dataset: Dataset) -> None:
    dataset.add_relationship(Relationship(source_id="posts", target_id="comments", cardinality="mystery"))
    content = ErdBuilder().build_from_dataset(dataset)
    assert content.splitlines()[-1] == '    posts ||--o{ comments : ""'


def test_cardinality_ignores_format_option(dataset: Dataset) -> None:
    dataset.relationships[0].cardinality = "many_to_many"
    content = ErdBuilder(DiagramOptions(cardinality_format="standard")).build_from_dataset(dataset)
    assert '    users }o--o{ posts : "user_id"' in content


def test_empty_dataset_and_empty_state() -> None:
    builder = ErdBuilder()
    assert builder.build_from_dataset(Dataset()) == "erDiagram"
    assert builder.build_empty('No "data"\navailable') == "\n".join(
        [
            "erDiagram",
            "    EMPTY_STATE {",
            '        string message "No  data  available"',
            "    }",
        ]
    )


def test_build_with_entities_matches_relationship_free_dataset(dataset: Dataset) -> None:
    builder = ErdBuilder()
    entities = list(dataset.entities.values())
    assert builder.build_with_entities(entities) == builder.build_from_dataset(Dataset.build(entities))
