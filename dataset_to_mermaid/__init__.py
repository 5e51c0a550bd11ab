"""Render entity/relationship datasets as Mermaid diagrams."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("dataset-to-mermaid")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]
