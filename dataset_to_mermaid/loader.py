"""YAML loader that builds the diagram dataset."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml
from jsonschema import Draft202012Validator

from .errors import DatasetLoadError
from .model import Dataset

SCHEMA_PATH = Path(__file__).resolve().parent / "schema" / "dataset.schema.yaml"

logger = logging.getLogger(__name__)


class DatasetLoader:
    """Load YAML (or JSON) files into :class:`Dataset`."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> Dataset:
        document = self._read_yaml()
        validate_against_schema(document)
        dataset = Dataset.from_dict(document)
        for problem in dataset.validation_errors():
            logger.warning("Dataset %s: %s", self.path, problem)
        logger.debug(
            "Loaded dataset from %s",
            self.path,
            extra={
                "entities_count": len(dataset.entities),
                "relationships_count": len(dataset.relationships),
            },
        )
        return dataset

    def _read_yaml(self) -> Dict[str, Any]:
        if not self.path.exists():
            raise DatasetLoadError(f"Input file not found: {self.path}")
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise DatasetLoadError(f"Failed to parse YAML: {exc}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise DatasetLoadError(f"Failed to read {self.path}: {exc}") from exc

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise DatasetLoadError("Top level YAML structure must be a mapping/object.")
        return data


def validate_against_schema(document: Dict[str, Any]) -> None:
    schema = yaml.safe_load(SCHEMA_PATH.read_text(encoding="utf-8"))
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(document), key=lambda e: [str(s) for s in e.absolute_path])
    if not errors:
        return

    details = []
    for error in errors:
        path = "$" + "".join(f"/{segment}" for segment in error.absolute_path)
        details.append(f"- {path}: {error.message}")
        for sub_error in error.context or []:
            sub_path = "$" + "".join(f"/{segment}" for segment in sub_error.absolute_path)
            details.append(f"    * {sub_path}: {sub_error.message}")
    raise DatasetLoadError("Schema validation failed:\n" + "\n".join(details))
