#!/usr/bin/env python3
"""
Command-line interface for the diagram creator.

Reads diagram data from a JSON file (or a bundled example) and prints the
generated Mermaid definition, or the complete diagram record as JSON.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from diagram_creator import __version__
from diagram_creator.core.config import settings
from diagram_creator.core.exceptions import DiagramCreatorError
from diagram_creator.core.logging import setup_logging
from diagram_creator.examples import EXAMPLES
from diagram_creator.models.render_config import RenderConfig
from diagram_creator.services.diagram_service import DiagramService


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="diagram-creator",
        description="Generate Mermaid diagram definitions from structured JSON diagram data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  diagram-creator diagram.json
  diagram-creator diagram.json --output diagram.mmd
  diagram-creator diagram.json --json
  diagram-creator --example mindmap
        """
    )

    parser.add_argument(
        "input_file",
        type=Path,
        nargs="?",
        help="Path to a JSON file holding diagram data"
    )

    parser.add_argument(
        "-e", "--example",
        choices=sorted(EXAMPLES),
        help="Use a bundled example instead of an input file"
    )

    parser.add_argument(
        "--list-examples",
        action="store_true",
        help="List the bundled examples and exit"
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output file path (default: stdout)"
    )

    parser.add_argument(
        "-j", "--json",
        action="store_true",
        help="Output the complete diagram record as JSON"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args(argv)
    if not args.list_examples and args.input_file is None and args.example is None:
        parser.error("an input file or --example is required")
    return args


def load_json_file(file_path: Path) -> dict:
    """Load and parse JSON file."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        print(f"Error: File '{file_path}' not found", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in '{file_path}': {e}", file=sys.stderr)
        sys.exit(1)


def write_output(content: str, output_path: Optional[Path]) -> None:
    """Write content to a file or stdout."""
    if output_path:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(content)
        print(f"Output written to: {output_path}", file=sys.stderr)
    else:
        print(content, end="" if content.endswith("\n") else "\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")

    if args.list_examples:
        for name in sorted(EXAMPLES):
            example = EXAMPLES[name]
            print(f"{name:<10} {example['type']:<16} {example.get('title', '')}")
        return 0

    diagram_data = EXAMPLES[args.example] if args.example else load_json_file(args.input_file)
    overrides = {}
    if isinstance(diagram_data, dict):
        overrides = diagram_data.get("config") or {}

    service = DiagramService(
        base_config=RenderConfig.from_settings(settings),
        version=settings.metadata_version,
    )

    try:
        result = service.create(diagram_data, overrides)
    except DiagramCreatorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for warning in result.warnings:
        print(f"Warning: {warning}", file=sys.stderr)

    if args.json:
        write_output(json.dumps(result.to_dict(), indent=2) + "\n", args.output)
    else:
        write_output(result.definition, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
