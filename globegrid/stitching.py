"""Stitching roots together along their seams.

Code that keeps per-root data (chunks, height maps) needs to know which cells
on the edges of different roots are the same physical cell, so that it stores
or generates them only once. This module enumerates the edge points of every
root and groups them by physical location using a NetworkX graph whose
connected components are the equivalence classes.
"""

from collections.abc import Iterator

import networkx as nx

from globegrid.globe import GlobeSpec
from globegrid.globegrid_logging import create_module_logger, function_logger
from globegrid.grid import ROOTS, GridPoint3, sort_key

__all__ = ["boundary_points", "equivalence_classes", "equivalence_graph"]

_globegrid_logger = create_module_logger()


def boundary_points(spec: GlobeSpec, z: int = 0) -> Iterator[GridPoint3]:
    """Yield every point on the edge of every root, one root at a time.

    Args:
        spec: the globe to walk
        z: layer coordinate of the yielded points

    """
    x_res, y_res = spec.root_resolution
    for root in ROOTS:
        for y in range(y_res + 1):
            if y in (0, y_res):
                for x in range(x_res + 1):
                    yield GridPoint3(root, x, y, z)
            else:
                yield GridPoint3(root, 0, y, z)
                yield GridPoint3(root, x_res, y, z)


@function_logger(__name__)
def equivalence_graph(spec: GlobeSpec, z: int = 0) -> nx.Graph:
    """Build a graph linking every edge point to its equivalents.

    Args:
        spec: the globe to stitch
        z: layer coordinate of the points

    Returns:
        nx.Graph: nodes are ``GridPoint3`` on root edges, each node carrying its
        ``region``; an edge joins two representations of the same location

    """
    graph = nx.Graph()
    for point in boundary_points(spec, z):
        equivalents = spec.equivalent_points(point)
        graph.add_node(point, region=equivalents.region)
        graph.add_edges_from(
            (point, other) for other in equivalents if other != point
        )

    _globegrid_logger.debug(
        "stitched %d boundary points with %d seam links",
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph


def equivalence_classes(spec: GlobeSpec, z: int = 0) -> list[frozenset[GridPoint3]]:
    """Group the edge points of every root by physical location.

    Args:
        spec: the globe to stitch
        z: layer coordinate of the points

    Returns:
        list[frozenset[GridPoint3]]: one set per physical location, ordered by
        the smallest member of each set

    """
    graph = equivalence_graph(spec, z)
    classes = [frozenset(component) for component in nx.connected_components(graph)]
    classes.sort(key=lambda members: sort_key(min(members, key=sort_key)))
    return classes
