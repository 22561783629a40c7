#!/usr/bin/env python3
"""
CLI script to generate graph element data.
Adapts CLI arguments to the Generation Service.
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path if running from bin/
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from graph_elements.config import Settings
from graph_elements.export import export_elements_json
from graph_elements.generation import (
    GenerationService,
    GraphConfig,
    SCALE_PRESETS,
    load_config,
)

logger = logging.getLogger("generate_graph")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate Graph Element Data",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    config_group = parser.add_mutually_exclusive_group()
    config_group.add_argument(
        "--scale",
        default=None,
        choices=list(SCALE_PRESETS),
        help="Scale of the graph to generate (preset)",
    )
    config_group.add_argument(
        "--config",
        type=Path,
        help="Path to graph configuration YAML file",
    )
    config_group.add_argument(
        "--nodes",
        type=int,
        help="Explicit number of nodes (use with --complexity)",
    )

    parser.add_argument(
        "--complexity",
        type=int,
        default=None,
        help="Complexity factor; only valid with --nodes (default 1)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Path to output JSON file (defaults to GRAPH_ELEMENTS_OUTPUT_DIR/graph.json)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility; overrides the seed of --config (defaults to GRAPH_ELEMENTS_SEED)",
    )
    parser.add_argument(
        "--with-metadata",
        action="store_true",
        help="Wrap elements with generation metadata",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only print errors")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for graph generation CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    if args.complexity is not None and args.nodes is None:
        parser.error("--complexity requires --nodes")

    try:
        settings = Settings.from_env()

        if args.verbose:
            log_level = logging.DEBUG
        elif args.quiet:
            log_level = logging.ERROR
        else:
            log_level = getattr(logging, settings.log_level, logging.WARNING)
        logging.basicConfig(level=log_level, format='%(levelname)s: %(message)s')

        seed = args.seed if args.seed is not None else settings.seed

        if args.config:
            if not args.quiet:
                print(f"Loading configuration from {args.config}...")
            config = load_config(args.config)
            if args.seed is not None:
                config = dataclasses.replace(config, seed=args.seed)
            service = GenerationService(config=config)
        elif args.nodes is not None:
            config = GraphConfig(
                number_of_nodes=args.nodes,
                complexity=args.complexity if args.complexity is not None else 1,
                seed=seed,
            )
            service = GenerationService(config=config)
        else:
            scale = args.scale or settings.scale
            if not args.quiet:
                print(f"Generating {scale} graph with seed {seed}...")
            service = GenerationService(scale=scale, seed=seed)

        if args.with_metadata:
            graph_data = service.generate_with_metadata()
            elements = graph_data["elements"]
        else:
            graph_data = service.generate()
            elements = graph_data

        output = args.output or Path(settings.output_dir) / "graph.json"
        export_elements_json(graph_data, output)

        if not args.quiet:
            print(f"Graph generated successfully: {output}")
            element_counts = {
                "nodes": sum(1 for e in elements if e["group"] == "nodes"),
                "edges": sum(1 for e in elements if e["group"] == "edges"),
            }
            print(f"Elements: {element_counts}")
        return 0

    except Exception as e:
        logger.exception("Graph generation failed")
        print(f"Error generating graph: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
