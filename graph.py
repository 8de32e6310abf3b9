from __future__ import annotations

import logging
from dataclasses import dataclass, field
from heapq import heappop, heappush
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple


logger = logging.getLogger("pathfinder.graph")


@dataclass(frozen=True)
class Edge:
    source: str
    weight: float
    destination: str


@dataclass(frozen=True)
class PathResult:
    """Outcome of one query; ``weight`` is None when the end is unreachable."""

    weight: Optional[float]
    path: List[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.weight is not None


class UnknownNodeError(ValueError):
    """Raised when a query names a node that is not an endpoint of any edge."""

    def __init__(self, node: str) -> None:
        super().__init__(f"Unknown node: {node}")
        self.node = node


def known_nodes(edges: Iterable[Edge]) -> Set[str]:
    nodes: Set[str] = set()
    for edge in edges:
        nodes.add(edge.source)
        nodes.add(edge.destination)
    return nodes


def build_adjacency(edges: Iterable[Edge]) -> Dict[str, List[Edge]]:
    """Index outgoing edges by source node, keeping input order."""
    adjacency: Dict[str, List[Edge]] = {}
    for edge in edges:
        adjacency.setdefault(edge.source, []).append(edge)
    return adjacency


def find_minimal_weight_path(
    edges: Sequence[Edge], start_node: str, end_node: str
) -> PathResult:
    """Compute the cheapest directed path from start_node to end_node.

    distances[v] holds the best-known total weight from start_node to v; a
    node missing from it has no known distance yet. predecessors[v] is the
    node preceding v on that best route. The frontier may hold stale entries,
    which are skipped when popped.
    """
    nodes = known_nodes(edges)
    for node in (start_node, end_node):
        if node not in nodes:
            raise UnknownNodeError(node)

    adjacency = build_adjacency(edges)
    distances: Dict[str, float] = {start_node: 0.0}
    predecessors: Dict[str, str] = {}

    frontier: List[Tuple[float, str]] = [(0.0, start_node)]

    while frontier:
        distance_u, u = heappop(frontier)
        if distance_u > distances[u]:
            continue

        for edge in adjacency.get(u, []):
            candidate = distance_u + edge.weight
            best = distances.get(edge.destination)
            if best is None or candidate < best:
                distances[edge.destination] = candidate
                predecessors[edge.destination] = u
                heappush(frontier, (candidate, edge.destination))

    if end_node not in distances:
        logger.debug("No path from %s to %s", start_node, end_node)
        return PathResult(None, [])

    path: List[str] = [end_node]
    while path[-1] != start_node:
        previous = predecessors.get(path[-1])
        if previous is None:
            return PathResult(None, [])
        path.append(previous)
    path.reverse()

    logger.debug(
        "Settled %d of %d nodes; %s -> %s costs %s",
        len(distances),
        len(nodes),
        start_node,
        end_node,
        distances[end_node],
    )
    return PathResult(distances[end_node], path)


def path_weight(edges: Iterable[Edge], path: Sequence[str]) -> float:
    """Return the total weight of walking along the given node sequence.

    Parallel edges are resolved to the cheapest one between each pair.
    """
    if len(path) < 2:
        return 0.0

    adjacency = build_adjacency(edges)
    total = 0.0
    for u, v in zip(path[:-1], path[1:]):
        weights = [edge.weight for edge in adjacency.get(u, []) if edge.destination == v]
        if not weights:
            raise ValueError(f"Edge {u}->{v} not present in graph.")
        total += min(weights)
    return total


def format_path(path: Sequence[str]) -> str:
    return " -> ".join(path)
