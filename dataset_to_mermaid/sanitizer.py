"""Turn free-text names and labels into tokens that Mermaid accepts.

Every function is total: blank or non-string input yields a fixed fallback
token instead of raising, so a dataset with odd names still renders.
"""
from __future__ import annotations

import re
from typing import Any

_WORD_RE = re.compile(r"[^A-Za-z0-9_]")
_UPPER_WORD_RE = re.compile(r"[^A-Z0-9_]")
_METHOD_RE = re.compile(r"[^A-Za-z0-9_()]")
_NEWLINE_RE = re.compile(r"[\n\r]")
_TEXT_RE = re.compile(r"[\"\n\r]")

UNKNOWN_CLASS = "UnknownClass"
UNKNOWN_NODE = "unknown_node"
UNKNOWN_TABLE = "UNKNOWN_TABLE"
UNKNOWN_METHOD = "unknown_method()"
DEFAULT_ATTRIBUTE_TYPE = "string"


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value


def class_name(name: Any) -> str:
    """Class identifier; ``Blog::Post`` becomes ``Blog__Post``."""
    if _is_blank(name):
        return UNKNOWN_CLASS
    return _WORD_RE.sub("_", name.replace("::", "__"))


def node_id(name: Any) -> str:
    if _is_blank(name):
        return UNKNOWN_NODE
    return _WORD_RE.sub("_", name)


def node_name(name: Any) -> str:
    return node_id(name)


def table_name(name: Any, preserve_case: bool = True) -> str:
    if _is_blank(name):
        return UNKNOWN_TABLE
    if preserve_case:
        return _WORD_RE.sub("_", name)
    return _UPPER_WORD_RE.sub("_", name.upper())


def method_name(name: Any) -> str:
    if _is_blank(name):
        return UNKNOWN_METHOD
    method = _METHOD_RE.sub("_", name)
    if "(" not in method:
        method += "()"
    return method


def label(text: Any) -> str:
    """Edge label safe inside double quotes."""
    if _is_blank(text):
        return ""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return _NEWLINE_RE.sub(" ", escaped).strip()


def attribute_type(type_name: Any) -> str:
    if _is_blank(type_name):
        return DEFAULT_ATTRIBUTE_TYPE
    return _WORD_RE.sub("_", type_name)


def display_name(name: Any) -> str:
    if _is_blank(name):
        return UNKNOWN_CLASS
    return name


def text(value: Any) -> str:
    """Free text for node captions and empty-state notes."""
    if value is None:
        return ""
    return _TEXT_RE.sub(" ", str(value)).strip()
