from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from config import LOG_LEVELS, RunConfig, load_config
from graph import PathResult, UnknownNodeError, find_minimal_weight_path, format_path
from loader import GraphFormatError, GraphNotFoundError, load_edges
from logger import setup_logger


EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_BAD_FORMAT = 2
EXIT_UNKNOWN_NODE = 3

logger = logging.getLogger("pathfinder.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minimal-weight-path",
        description="Find the minimal weight path between two nodes of a weighted directed graph.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Optional YAML file with defaults for the options below.",
    )
    parser.add_argument("--graph", help="Edge-list file: one '<source> <weight> <destination>' per line.")
    parser.add_argument("--start", help="Start node (prompted for when omitted).")
    parser.add_argument("--end", help="End node (prompted for when omitted).")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level for diagnostics written to stderr (default: WARNING).",
    )
    parser.add_argument(
        "--plot-out",
        help="Save a picture of the graph with the path highlighted to this file.",
    )
    return parser


def print_result(result: PathResult) -> None:
    if not result.found:
        print("No path found.")
        return
    print("Minimal weight path:")
    print(f"Total weight: {result.weight}")
    print(f"Path: {format_path(result.path)}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config(args.config) if args.config else RunConfig()
    config = config.merged(
        graph_file=args.graph,
        start_node=args.start,
        end_node=args.end,
        log_level=args.log_level,
        plot_out=args.plot_out,
    )
    setup_logger(level=config.level)

    filename = config.graph_file
    if filename is None:
        filename = input("Enter the path of the graph file: ")

    try:
        edges = load_edges(filename)
    except GraphNotFoundError:
        print(f"File not found: {filename}")
        return EXIT_NOT_FOUND
    except GraphFormatError as exc:
        print(f"Invalid graph file: {exc}")
        return EXIT_BAD_FORMAT

    start_node = config.start_node
    if start_node is None:
        start_node = input("Enter start node: ").strip()
    end_node = config.end_node
    if end_node is None:
        end_node = input("Enter end node: ").strip()

    try:
        result = find_minimal_weight_path(edges, start_node, end_node)
    except UnknownNodeError as exc:
        print(exc)
        return EXIT_UNKNOWN_NODE

    print_result(result)

    if config.plot_out:
        from visualize import draw_path

        draw_path(edges, result, output=Path(config.plot_out))
        logger.info("Plot stored at: %s", config.plot_out)

    return EXIT_OK


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
