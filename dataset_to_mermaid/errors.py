from __future__ import annotations


class DiagramError(RuntimeError):
    """Base error for dataset loading and diagram generation."""


class ConfigError(DiagramError):
    """Raised for invalid diagram options or configuration files."""


class DatasetLoadError(DiagramError):
    """Raised when a dataset file cannot be read or fails validation."""


class UnknownDiagramTypeError(DiagramError):
    """Raised when a diagram type name is not registered."""
