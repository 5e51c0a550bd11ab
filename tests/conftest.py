from __future__ import annotations

import logging

import pytest

from dataset_to_mermaid.logging import JsonFormatter, PlainFormatter, setup_logging


@pytest.fixture
def fresh_logging(monkeypatch):
    """Let setup_logging run again and drop its handler afterwards."""
    root = logging.getLogger()
    level = root.level
    monkeypatch.setattr(setup_logging, "_configured", False, raising=False)
    monkeypatch.delenv("DIAGRAM_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DIAGRAM_JSON_LOGS", raising=False)
    yield root
    root.handlers = [
        handler for handler in root.handlers if not isinstance(handler.formatter, (PlainFormatter, JsonFormatter))
    ]
    root.setLevel(level)
