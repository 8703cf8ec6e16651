"""Tests for stitching roots together along their seams."""

import networkx as nx
import pytest

from globegrid import (
    ROOT_COUNT,
    GlobeSpec,
    GridPoint3,
    Region,
    boundary_points,
    equivalence_classes,
    equivalence_graph,
)


@pytest.mark.parametrize("x_resolution", [1, 2, 8])
def test_boundary_points(x_resolution):
    """Test every edge point of every root is visited once."""
    spec = GlobeSpec.from_x_resolution(x_resolution)
    points = list(boundary_points(spec, z=3))
    x_res, y_res = spec.root_resolution

    assert len(points) == len(set(points)) == ROOT_COUNT * 6 * x_res
    for point in points:
        assert point.z == 3
        assert point.x in (0, x_res) or point.y in (0, y_res)


def test_equivalence_graph():
    """Test the graph links seam partners and all pole representations."""
    spec = GlobeSpec((2, 4))
    graph = equivalence_graph(spec)

    assert graph.number_of_nodes() == 60
    # one link per seam pair, plus a complete graph on each pole
    assert graph.number_of_edges() == 25 + 2 * 10
    assert graph.has_edge(GridPoint3(0, 0, 1), GridPoint3(1, 1, 0))
    assert graph.has_edge(GridPoint3(0, 0, 0), GridPoint3(3, 0, 0))
    assert not graph.has_edge(GridPoint3(0, 0, 1), GridPoint3(0, 0, 2))
    assert graph.nodes[GridPoint3(2, 2, 4)]["region"] is Region.SOUTH_POLE
    assert graph.nodes[GridPoint3(2, 0, 3)]["region"] is Region.EAST_TROPICS


@pytest.mark.parametrize("x_resolution", [1, 2, 8])
def test_equivalence_classes(x_resolution):
    """Test the classes are exactly the sets of equivalent points."""
    spec = GlobeSpec.from_x_resolution(x_resolution)
    classes = equivalence_classes(spec, z=5)

    assert len(classes) == 15 * x_resolution - 3
    assert sorted(len(members) for members in classes).count(ROOT_COUNT) == 2
    for members in classes:
        for point in members:
            assert set(spec.equivalent_points(point)) == members


def test_equivalence_classes_order():
    """Test classes are ordered by their smallest member."""
    classes = equivalence_classes(GlobeSpec((2, 4)))
    assert GridPoint3(0, 0, 0) in classes[0]
    assert classes[1] == {GridPoint3(0, 0, 1), GridPoint3(1, 1, 0)}


def test_equivalence_classes_cover_graph():
    """Test every boundary point belongs to exactly one class."""
    spec = GlobeSpec((2, 4))
    classes = equivalence_classes(spec)
    members = [point for cls in classes for point in cls]
    assert len(members) == len(set(members)) == 60
    assert nx.number_connected_components(equivalence_graph(spec)) == len(classes)
