"""globegrid: coordinates on a ring of roots tiling a globe.

Core Objects: Root, GridPoint2, GridPoint3, Region, EquivalentPoints, GlobeSpec
"""

from globegrid.globe import GlobeSpec
from globegrid.grid import (
    ROOT_COUNT,
    ROOTS,
    EquivalentPoints,
    GridPoint2,
    GridPoint3,
    Region,
    Root,
    are_equivalent,
    canonical_point,
    classify,
    classify_array,
    equivalent_points,
    sort_key,
)
from globegrid.stitching import (
    boundary_points,
    equivalence_classes,
    equivalence_graph,
)

__all__ = [
    "ROOTS",
    "ROOT_COUNT",
    "EquivalentPoints",
    "GlobeSpec",
    "GridPoint2",
    "GridPoint3",
    "Region",
    "Root",
    "are_equivalent",
    "boundary_points",
    "canonical_point",
    "classify",
    "classify_array",
    "equivalence_classes",
    "equivalence_graph",
    "equivalent_points",
    "sort_key",
]

__title__ = "globegrid"
__version__ = "0.1.0"
__license__ = "Apache 2.0"
