"""Grid points on the globe.

A point is addressed by the root it lies in and its integer coordinates
within that root. Every root spans ``x_res`` cells along x and
``y_res = 2 * x_res`` cells along y, so the coordinates of a well-formed point
satisfy ``0 <= x <= x_res`` and ``0 <= y <= y_res``. Points on the edges of a
root also have a representation in a neighbouring root; see
:mod:`globegrid.grid.equivalent_points`.

Points are immutable, hashable and ordered by ``(root, x, y, z)``.
"""

from __future__ import annotations

import operator
from collections.abc import Sequence
from dataclasses import dataclass

from globegrid.errors import GridResolutionError, OutOfBoundsError
from globegrid.grid.root import Root

GridCoord = int
RootResolution = tuple[GridCoord, GridCoord]


def _coord(name: str, value) -> GridCoord:
    if isinstance(value, bool):
        raise ValueError(f"Coordinate {name} must be an integer, got {value!r}.")
    try:
        value = operator.index(value)
    except TypeError:
        raise ValueError(
            f"Coordinate {name} must be an integer, got {value!r}."
        ) from None
    if value < 0:
        raise ValueError(f"Coordinate {name} must be non-negative, got {value}.")
    return value


@dataclass(frozen=True, order=True, slots=True)
class GridPoint2:
    """A location within the coordinate space of a single root.

    Attributes:
        root: the root the point lies in
        x: coordinate along the short axis of the root
        y: coordinate along the long axis of the root

    """

    root: Root
    x: GridCoord
    y: GridCoord

    def __post_init__(self):  # noqa: D105
        object.__setattr__(self, "root", Root.coerce(self.root))
        object.__setattr__(self, "x", _coord("x", self.x))
        object.__setattr__(self, "y", _coord("y", self.y))

    def with_z(self, z: GridCoord) -> GridPoint3:
        """Lift this point into a layer."""
        return GridPoint3(self.root, self.x, self.y, z)


@dataclass(frozen=True, order=True, slots=True)
class GridPoint3:
    """A GridPoint2 plus a layer coordinate.

    ``z`` plays no part in equivalence resolution; it is copied unchanged into
    every equivalent point.

    Attributes:
        root: the root the point lies in
        x: coordinate along the short axis of the root
        y: coordinate along the long axis of the root
        z: layer coordinate

    """

    root: Root
    x: GridCoord
    y: GridCoord
    z: GridCoord = 0

    def __post_init__(self):  # noqa: D105
        object.__setattr__(self, "root", Root.coerce(self.root))
        object.__setattr__(self, "x", _coord("x", self.x))
        object.__setattr__(self, "y", _coord("y", self.y))
        object.__setattr__(self, "z", _coord("z", self.z))

    @property
    def rxy(self) -> GridPoint2:
        """The point without its layer coordinate."""
        return GridPoint2(self.root, self.x, self.y)

    def with_root(self, root: Root | int) -> GridPoint3:
        """Return the same coordinates in a different root."""
        return GridPoint3(root, self.x, self.y, self.z)

    def with_xy(self, x: GridCoord, y: GridCoord) -> GridPoint3:
        """Return a point in the same root and layer at ``(x, y)``."""
        return GridPoint3(self.root, x, y, self.z)


def sort_key(point: GridPoint3) -> tuple[int, int, int, int]:
    """Key for sorting points into a stable, if arbitrary, order.

    Equivalent points are produced in no particular order; sort them with
    ``sorted(points, key=sort_key)`` to compare against an expected list.
    """
    return point.root.index, point.x, point.y, point.z


def validate_root_resolution(root_resolution: Sequence[int]) -> RootResolution:
    """Check a root resolution and return it as a tuple.

    Args:
        root_resolution: ``[x_res, y_res]``

    Returns:
        ``(x_res, y_res)``

    Raises:
        GridResolutionError: if the resolution is not a pair of integers with
            ``x_res >= 1`` and ``y_res == 2 * x_res``

    """
    if len(root_resolution) != 2:
        raise GridResolutionError(
            "root_resolution", f"expected [x_res, y_res], got {root_resolution!r}"
        )
    try:
        x_res, y_res = (operator.index(value) for value in root_resolution)
    except TypeError:
        raise GridResolutionError(
            "root_resolution", f"must contain integers, got {root_resolution!r}"
        ) from None
    if x_res < 1:
        raise GridResolutionError(
            "root_resolution", f"x resolution must be at least 1, got {x_res}"
        )
    if y_res != 2 * x_res:
        raise GridResolutionError(
            "root_resolution",
            f"y resolution must be twice the x resolution, got {x_res} and {y_res}",
        )
    return x_res, y_res


def in_bounds(point: GridPoint2 | GridPoint3, root_resolution: Sequence[int]) -> bool:
    """Return whether the point lies within the extents of its root."""
    x_res, y_res = root_resolution
    return point.x <= x_res and point.y <= y_res


def check_bounds(point: GridPoint2 | GridPoint3, root_resolution: Sequence[int]) -> None:
    """Raise OutOfBoundsError if the point lies outside its root."""
    if not in_bounds(point, root_resolution):
        raise OutOfBoundsError(point, tuple(root_resolution))
