from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from graph import Edge, PathResult


def build_networkx_graph(edges: Sequence[Edge]) -> nx.DiGraph:
    """Directed view of the edge list; parallel edges keep the cheapest weight."""
    g = nx.DiGraph()
    for edge in edges:
        existing = g.get_edge_data(edge.source, edge.destination)
        if existing is None or edge.weight < existing["weight"]:
            g.add_edge(edge.source, edge.destination, weight=edge.weight)
    return g


def compute_layout(graph: nx.DiGraph) -> Dict[str, Tuple[float, float]]:
    return nx.spring_layout(graph, seed=42)


def route_edges(path: Sequence[str]) -> List[Tuple[str, str]]:
    return list(zip(path[:-1], path[1:]))


def draw_path(
    edges: Sequence[Edge],
    result: PathResult,
    output: Path | None = None,
    show: bool = False,
) -> None:
    graph_nx = build_networkx_graph(edges)
    layout = compute_layout(graph_nx)

    fig, ax = plt.subplots(figsize=(10, 8))

    nx.draw_networkx_edges(graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0)

    path_edges = route_edges(result.path)
    if path_edges:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=path_edges,
            edge_color="#d62728",
            width=2.5,
            ax=ax,
        )

    on_path = set(result.path)
    node_colors = ["#d62728" if node in on_path else "#1f77b4" for node in graph_nx.nodes]
    nx.draw_networkx_nodes(graph_nx, layout, node_color=node_colors, node_size=600, ax=ax)
    nx.draw_networkx_labels(graph_nx, layout, font_size=9, font_color="white", ax=ax)

    edge_labels = {(u, v): f"{data['weight']:g}" for u, v, data in graph_nx.edges(data=True)}
    nx.draw_networkx_edge_labels(graph_nx, layout, edge_labels=edge_labels, font_size=8, ax=ax)

    if result.found:
        title = f"{result.path[0]} -> {result.path[-1]}: total weight {result.weight:g}"
    else:
        title = "No path found"
    ax.set_title(title)
    ax.set_axis_off()

    if output:
        fig.savefig(output, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)
