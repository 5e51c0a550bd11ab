"""Shared contract for the Mermaid renderers."""
from __future__ import annotations

import abc
import logging
from typing import Iterable, List, Optional

from .config import DiagramOptions
from .model import Dataset, Entity

INDENT = "    "

logger = logging.getLogger(__name__)


class BaseBuilder(abc.ABC):
    """Render a :class:`Dataset` into one Mermaid diagram flavor.

    Builders are pure: the same dataset and options always give the same
    text. Lines are joined with ``\\n`` without a trailing newline.
    """

    mermaid_type: str = ""

    def __init__(self, options: Optional[DiagramOptions] = None) -> None:
        self.options = options or DiagramOptions()

    @abc.abstractmethod
    def build_from_dataset(self, dataset: Dataset) -> str:
        """Render every entity and relationship of ``dataset``."""

    @abc.abstractmethod
    def build_empty(self, message: str) -> str:
        """Render a placeholder diagram that shows ``message``."""

    def build_with_entities(self, entities: Iterable[Entity]) -> str:
        """Render entities without any relationships."""
        entities = list(entities)
        logger.debug("Building %s with %d isolated entities", self.mermaid_type, len(entities))
        return self.build_from_dataset(Dataset.build(entities))

    @staticmethod
    def _join(lines: List[str]) -> str:
        return "\n".join(lines)
