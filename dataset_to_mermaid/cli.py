"""Command line interface for dataset → Mermaid conversions."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from . import registry
from .config import DIRECTIONS, DiagramOptions, load_diagram_options
from .errors import DiagramError
from .loader import DatasetLoader
from .logging import LogConfig, setup_logging
from .strategies import GenerationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CliOptions:
    input_path: Optional[Path]
    output_path: Optional[Path]
    diagram_type: str
    diagram_options: DiagramOptions
    list_types: bool = False
    debug: bool = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--input", type=Path, help="Path to the dataset YAML/JSON file")
    parser.add_argument("--output", default="-", help="Where to write the Mermaid diagram (.mmd). '-' for stdout")
    parser.add_argument(
        "--diagram-type",
        choices=registry.available_types(),
        default=registry.DEFAULT_DIAGRAM_TYPE,
        help="Diagram type to generate (default: %(default)s)",
    )
    parser.add_argument("--config", type=Path, help="YAML file with diagram options")
    parser.add_argument("--direction", choices=sorted(DIRECTIONS), help="Layout direction for class diagrams and flowcharts")
    parser.add_argument("--max-attributes", type=int, help="Maximum attributes shown per entity")
    parser.add_argument("--max-methods", type=int, help="Maximum methods shown per entity")
    parser.add_argument("--show-methods", action="store_true", default=None, help="Include entity methods")
    parser.add_argument(
        "--hide-attributes", dest="show_attributes", action="store_false", default=None, help="Omit entity attributes"
    )
    parser.add_argument(
        "--hide-cardinality", dest="show_cardinality", action="store_false", default=None, help="Omit cardinality notation"
    )
    parser.add_argument(
        "--upper-case-tables",
        dest="preserve_table_case",
        action="store_false",
        default=None,
        help="Upper-case table names in ER diagrams",
    )
    parser.add_argument("--cardinality-format", choices=["standard", "simple"], help="Class diagram multiplicity style")
    parser.add_argument("--list-types", action="store_true", help="Print the available diagram types and exit")
    parser.add_argument("--log-level", default=None, help="Log level (default: INFO, or DIAGRAM_LOG_LEVEL)")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines")
    parser.add_argument("--debug", action="store_true", help="Print extra debug information")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> CliOptions:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    setup_logging(LogConfig(level=args.log_level or ("DEBUG" if args.debug else None), json_logs=args.json_logs))

    if not args.list_types and args.input is None:
        raise DiagramError("--input is required unless --list-types is given")

    overrides: Dict[str, Any] = {
        "direction": args.direction,
        "max_attributes": args.max_attributes,
        "max_methods": args.max_methods,
        "show_methods": args.show_methods,
        "show_attributes": args.show_attributes,
        "show_cardinality": args.show_cardinality,
        "preserve_table_case": args.preserve_table_case,
        "cardinality_format": args.cardinality_format,
    }
    return CliOptions(
        input_path=args.input,
        output_path=None if args.output == "-" else Path(args.output),
        diagram_type=args.diagram_type,
        diagram_options=load_diagram_options(args.config, overrides),
        list_types=args.list_types,
        debug=args.debug,
    )


def run(options: CliOptions) -> GenerationResult:
    if options.input_path is None:
        raise DiagramError("No input file given")
    dataset = DatasetLoader(options.input_path).load()
    strategy = registry.create_strategy(options.diagram_type, options.diagram_options)
    return strategy.generate_from_dataset(dataset)


def write_output(serialized: str, output_path: Optional[Path]) -> None:
    if output_path is None:
        sys.stdout.write(serialized)
        if not serialized.endswith("\n"):
            sys.stdout.write("\n")
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(serialized + "\n", encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        options = parse_args(argv)
        if options.list_types:
            write_output(json.dumps(registry.available_types_with_metadata(), indent=2), None)
            return 0
        result = run(options)
        if not result.success:
            print(f"Error: {result.error}", file=sys.stderr)
            return 1
        if options.debug:
            logger.debug("Generated %s diagram:\n%s", result.type, result.content)
        write_output(result.content or "", options.output_path)
        return 0
    except DiagramError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
