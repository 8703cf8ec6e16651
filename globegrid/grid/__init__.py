"""Coordinates on the globe grid and their equivalence across roots.

The globe is tiled by a ring of ``ROOT_COUNT`` roots. Points are addressed
per root (``GridPoint2`` / ``GridPoint3``); points on the edges of a root are
shared with its neighbours, and the two poles with every root. This package
provides:

- ``Root``: cyclic root identifier with east/west neighbours
- ``GridPoint2`` / ``GridPoint3``: immutable grid points
- ``Region`` / ``classify``: where on its root a point lies
- ``equivalent_points``: every representation of the same physical point
"""

from globegrid.grid.equivalent_points import (
    EquivalentPoints,
    are_equivalent,
    canonical_point,
    equivalent_points,
)
from globegrid.grid.point import (
    GridCoord,
    GridPoint2,
    GridPoint3,
    RootResolution,
    check_bounds,
    in_bounds,
    sort_key,
    validate_root_resolution,
)
from globegrid.grid.region import Region, classify, classify_array
from globegrid.grid.root import ROOT_COUNT, ROOTS, Root

__all__ = [
    "ROOTS",
    "ROOT_COUNT",
    "EquivalentPoints",
    "GridCoord",
    "GridPoint2",
    "GridPoint3",
    "Region",
    "Root",
    "RootResolution",
    "are_equivalent",
    "canonical_point",
    "check_bounds",
    "classify",
    "classify_array",
    "equivalent_points",
    "in_bounds",
    "sort_key",
    "validate_root_resolution",
]
