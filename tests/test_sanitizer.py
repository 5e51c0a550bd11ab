from __future__ import annotations

import pytest

from dataset_to_mermaid import sanitizer


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("User", "User"),
        ("Blog::Post", "Blog__Post"),
        ("A::B::C::D::E", "A__B__C__D__E"),
        ("User-Model", "User_Model"),
        ("User Model", "User_Model"),
        ("My::Super-Model", "My__Super_Model"),
    ],
)
def test_class_name(raw: str, expected: str) -> None:
    assert sanitizer.class_name(raw) == expected


@pytest.mark.parametrize("blank", ["", None, 42])
def test_class_name_blank_falls_back(blank) -> None:
    assert sanitizer.class_name(blank) == "UnknownClass"


def test_node_id_and_node_name() -> None:
    assert sanitizer.node_id("User::Profile") == "User__Profile"
    assert sanitizer.node_name("user-profile") == "user_profile"
    assert sanitizer.node_id("") == "unknown_node"
    assert sanitizer.node_name(None) == "unknown_node"


def test_table_name_case_handling() -> None:
    assert sanitizer.table_name("user_profiles") == "user_profiles"
    assert sanitizer.table_name("UserProfiles", preserve_case=True) == "UserProfiles"
    assert sanitizer.table_name("user-profiles", preserve_case=True) == "user_profiles"
    assert sanitizer.table_name("user profiles", preserve_case=False) == "USER_PROFILES"
    assert sanitizer.table_name("", preserve_case=False) == "UNKNOWN_TABLE"
    assert sanitizer.table_name(None) == "UNKNOWN_TABLE"


def test_method_name() -> None:
    assert sanitizer.method_name("save") == "save()"
    assert sanitizer.method_name("calculate_total()") == "calculate_total()"
    assert sanitizer.method_name("user-info") == "user_info()"
    assert sanitizer.method_name("") == "unknown_method()"


def test_label_escapes_quotes_and_backslashes() -> None:
    assert sanitizer.label('a"b') == 'a\\"b'
    assert sanitizer.label('has "many" items') == 'has \\"many\\" items'
    assert sanitizer.label("test\\path") == "test\\\\path"
    assert sanitizer.label("line\nbreak\r") == "line break"
    assert sanitizer.label("") == ""
    assert sanitizer.label(None) == ""


def test_attribute_type() -> None:
    assert sanitizer.attribute_type("integer") == "integer"
    assert sanitizer.attribute_type("decimal(10,2)") == "decimal_10_2_"
    assert sanitizer.attribute_type("") == "string"
    assert sanitizer.attribute_type(None) == "string"


def test_display_name_keeps_namespaces() -> None:
    assert sanitizer.display_name("DoubleEntry::LineMetadata") == "DoubleEntry::LineMetadata"
    assert sanitizer.display_name("") == "UnknownClass"


def test_text_replaces_quotes_and_newlines() -> None:
    assert sanitizer.text(' say "hi"\nnow ') == "say  hi  now"
    assert sanitizer.text(None) == ""
