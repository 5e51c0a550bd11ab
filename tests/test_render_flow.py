from __future__ import annotations

import pytest

from dataset_to_mermaid.config import DiagramOptions
from dataset_to_mermaid.model import Attribute, Dataset, Entity, MethodInfo, Relationship
from dataset_to_mermaid.render_flow import FlowchartBuilder


@pytest.fixture
def dataset() -> Dataset:
    return Dataset.build(
        [Entity(id="user", name="User", type="model"), Entity(id="post", name="Post", type="model")],
        [Relationship(source_id="user", target_id="post", type="has_many", label="posts", cardinality="one_to_many")],
    )


def test_full_output_with_defaults(dataset: Dataset) -> None:
    expected = "\n".join(
        [
            "flowchart LR",
            '    User["User"]',
            '    Post["Post"]',
            "",
            '    User -->|"posts (1:N)"| Post',
        ]
    )
    assert FlowchartBuilder().build_from_dataset(dataset) == expected


def test_direction_option(dataset: Dataset) -> None:
    assert FlowchartBuilder(DiagramOptions(direction="TD")).build_from_dataset(dataset).startswith("flowchart TD\n")


@pytest.mark.parametrize(
    "relationship, expected",
    [
        (Relationship("user", "post", label="posts", cardinality="one_to_many"), '    User -->|"posts (1:N)"| Post'),
        (Relationship("user", "post", cardinality="many_to_many"), '    User -->|"N:N"| Post'),
        (Relationship("user", "post", label="posts"), '    User -->|"posts"| Post'),
        (Relationship("user", "post"), "    User --> Post"),
    ],
)
def test_edge_labels(dataset: Dataset, relationship: Relationship, expected: str) -> None:
    dataset.relationships[0] = relationship
    assert FlowchartBuilder().build_from_dataset(dataset).splitlines()[-1] == expected


def test_hidden_cardinality(dataset: Dataset) -> None:
    content = FlowchartBuilder(DiagramOptions(show_cardinality=False)).build_from_dataset(dataset)
    assert content.splitlines()[-1] == '    User -->|"posts"| Post'


def test_missing_target_uses_raw_id() -> None:
    dataset = Dataset.build(
        [Entity(id="user", name="User")],
        [Relationship(source_id="user", target_id="post", label="posts", cardinality="one_to_many")],
    )
    assert FlowchartBuilder().build_from_dataset(dataset).splitlines()[-1] == '    User -->|"posts (1:N)"| post'


def test_node_content_lists_attributes_and_methods() -> None:
    entity = Entity(id="user", name="User", methods=[MethodInfo("save"), MethodInfo("purge")])
    for name in ("id", "email", "name"):
        entity.add_attribute(Attribute(name=name, type="string"))
    options = DiagramOptions(show_methods=True, max_attributes=2, max_methods=5)
    content = FlowchartBuilder(options).build_from_dataset(Dataset.build([entity]))
    assert content.splitlines()[1] == (
        '    User["User<br/>3 attributes<br/>id, email, ... 1 more<br/>2 methods<br/>save(), purge()"]'
    )


def test_namespaced_node_ids() -> None:
    content = FlowchartBuilder().build_from_dataset(Dataset.build([Entity(id="p", name="Blog::Post")]))
    assert content.splitlines()[1] == '    Blog__Post["Blog::Post"]'


def test_empty_dataset_and_empty_state() -> None:
    builder = FlowchartBuilder()
    assert builder.build_from_dataset(Dataset()) == "flowchart LR"
    assert builder.build_empty("No data available") == 'flowchart LR\n    EmptyState["No data available"]'
