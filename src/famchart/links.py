"""
Link collection from a positioned family graph.

The host keeps its family tree in a networkx DiGraph whose nodes have
already been positioned:

- node attributes: x, y, family (default 0), person (default None);
- spouse edges (kind="spouse") u -> v, v being a partner of u, with an
  optional "between" list of the partners drawn between v and u;
- child edges (kind="child") u -> c, with an optional "spouse" attribute
  naming the co-parent of c.

collect_links turns these edges into the LinkDatum stream the connector
builder consumes.
"""

import logging
from typing import Any, Hashable, Iterator, List, Optional, Tuple

import networkx as nx

from .config import DEFAULT_CONFIG, GeometryConfig
from .elbow import build_path
from .models import LinkDatum, TreeNode
from .orientation import Orientation

logger = logging.getLogger(__name__)

SPOUSE = "spouse"
CHILD = "child"


def tree_node(graph: nx.DiGraph, node: Hashable) -> TreeNode:
    """Build the TreeNode for a graph node from its attributes."""
    if node not in graph:
        raise KeyError(f"Node {node!r} is not part of the family graph")

    attrs = graph.nodes[node]
    return TreeNode(
        x=attrs.get("x"),
        y=attrs.get("y"),
        family=attrs.get("family", 0),
        person=attrs.get("person"),
        node_id=str(node),
    )


def _node_order(graph: nx.DiGraph) -> List[Hashable]:
    try:
        return list(nx.topological_sort(graph))
    except nx.NetworkXUnfeasible:
        logger.warning("Family graph contains a cycle, using insertion order")
        return list(graph.nodes)


def collect_links(graph: nx.DiGraph) -> Iterator[LinkDatum]:
    """
    Yield one LinkDatum per spouse and child edge.

    Spouse links come first so that they are painted below the child
    connectors. Within each group, edges follow the topological order of
    their source nodes.

    Raises:
        ValueError: If an edge has an unknown kind.
    """
    spouse_links: List[LinkDatum] = []
    child_links: List[LinkDatum] = []

    for node in _node_order(graph):
        source = tree_node(graph, node)

        for _, other, attrs in graph.out_edges(node, data=True):
            kind = attrs.get("kind", CHILD)

            if kind == SPOUSE:
                between = attrs.get("between")
                spouse_links.append(
                    LinkDatum(
                        source=source,
                        spouse=tree_node(graph, other),
                        coords=(
                            None
                            if between is None
                            else [tree_node(graph, n) for n in between]
                        ),
                    )
                )
            elif kind == CHILD:
                spouse = attrs.get("spouse")
                child_links.append(
                    LinkDatum(
                        source=source,
                        target=tree_node(graph, other),
                        spouse=None if spouse is None else tree_node(graph, spouse),
                    )
                )
            else:
                raise ValueError(f"Unknown edge kind {kind!r} on {node!r} -> {other!r}")

    logger.debug(
        "Collected %d spouse and %d child links", len(spouse_links), len(child_links)
    )
    yield from spouse_links
    yield from child_links


def build_paths(
    graph: nx.DiGraph,
    orientation: Orientation,
    config: GeometryConfig = DEFAULT_CONFIG,
) -> List[Tuple[LinkDatum, str]]:
    """Return each collected link together with its connector path."""
    return [
        (link, build_path(link, orientation, config)) for link in collect_links(graph)
    ]


def add_person(graph: nx.DiGraph, node: Hashable, x: float, y: float, **attrs: Any) -> None:
    """Add a positioned person node to a family graph."""
    graph.add_node(node, x=x, y=y, **attrs)


def add_spouse(
    graph: nx.DiGraph,
    person: Hashable,
    spouse: Hashable,
    between: Optional[List[Hashable]] = None,
) -> None:
    """Link a person to a spouse, optionally across further partners."""
    graph.add_edge(person, spouse, kind=SPOUSE, between=between)


def add_child(
    graph: nx.DiGraph,
    parent: Hashable,
    child: Hashable,
    spouse: Optional[Hashable] = None,
) -> None:
    """Link a parent (and optional co-parent) to a child."""
    graph.add_edge(parent, child, kind=CHILD, spouse=spouse)
