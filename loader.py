from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, List, Union

from graph import Edge


logger = logging.getLogger("pathfinder.loader")


class GraphLoadError(Exception):
    """Base class for failures while reading an edge-list file."""


class GraphNotFoundError(GraphLoadError, FileNotFoundError):
    def __init__(self, filename: str) -> None:
        super().__init__(f"File not found: {filename}")
        self.filename = filename


class GraphFormatError(GraphLoadError, ValueError):
    def __init__(self, message: str, source: str, line_number: int) -> None:
        super().__init__(f"{source}, line {line_number}: {message}")
        self.source = source
        self.line_number = line_number


def _strip_quotes(token: str) -> str:
    return token.replace('"', "")


def parse_line(line: str, line_number: int = 1, source: str = "<input>") -> Edge:
    """Parse ``<source> <weight> <destination>``; extra tokens are ignored."""
    parts = line.split()
    if len(parts) < 3:
        raise GraphFormatError(
            f"expected '<source> <weight> <destination>', got {line.strip()!r}",
            source,
            line_number,
        )

    try:
        # float() also takes digit separators like 1_000
        if "_" in parts[1]:
            raise ValueError(parts[1])
        weight = float(parts[1])
    except ValueError:
        raise GraphFormatError(f"invalid weight {parts[1]!r}", source, line_number) from None
    if not math.isfinite(weight):
        raise GraphFormatError(f"weight must be finite, got {parts[1]!r}", source, line_number)

    return Edge(_strip_quotes(parts[0]), weight, _strip_quotes(parts[2]))


def parse_edges(lines: Iterable[str], source: str = "<input>") -> List[Edge]:
    edges: List[Edge] = []
    for line_number, line in enumerate(lines, start=1):
        edge = parse_line(line.rstrip("\r\n"), line_number, source)
        if edge.weight < 0:
            logger.warning(
                "%s, line %d: negative weight %s is not supported; results may be wrong",
                source,
                line_number,
                edge.weight,
            )
        edges.append(edge)
    return edges


def _decoded_lines(handle: BinaryIO, source: str) -> Iterator[str]:
    for line_number, raw in enumerate(handle, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise GraphFormatError(f"not valid UTF-8 ({exc.reason})", source, line_number) from None


def load_edges(path: Union[str, Path]) -> List[Edge]:
    """Read a whole edge-list file; any malformed line aborts the load."""
    path = Path(path)
    try:
        with path.open("rb") as handle:
            edges = parse_edges(_decoded_lines(handle, str(path)), source=str(path))
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError, PermissionError):
        raise GraphNotFoundError(str(path)) from None

    logger.debug("Loaded %d edges from %s", len(edges), path)
    return edges
