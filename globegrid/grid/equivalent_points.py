"""Points in all roots that are equivalent to a given point.

Roots share their edges. A point on the edge of one root therefore has a
second set of coordinates in the neighbouring root, and the two poles have one
set of coordinates in every root. ``equivalent_points`` yields all
representations of the same physical point, including the given one.

Each region of a root (see :mod:`globegrid.grid.region`) has its own producer.
Producers for seams and interior points return a tuple of at most two points;
producers for the poles walk the ring of roots lazily.

The order of points yielded is arbitrary. Sort with
:func:`globegrid.grid.point.sort_key` when a stable order is needed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence

from globegrid.globegrid_logging import function_logger
from globegrid.grid.point import (
    GridPoint3,
    RootResolution,
    check_bounds,
    sort_key,
    validate_root_resolution,
)
from globegrid.grid.region import Region, classify
from globegrid.grid.root import ROOTS

__all__ = [
    "EquivalentPoints",
    "are_equivalent",
    "canonical_point",
    "equivalent_points",
]

Producer = Callable[[GridPoint3, RootResolution], Iterable[GridPoint3]]


def _north_pole_points(
    point: GridPoint3, root_resolution: RootResolution
) -> Iterator[GridPoint3]:
    z = point.z
    for root in ROOTS:
        yield GridPoint3(root, 0, 0, z)


def _south_pole_points(
    point: GridPoint3, root_resolution: RootResolution
) -> Iterator[GridPoint3]:
    x_res, y_res = root_resolution
    z = point.z
    for root in ROOTS:
        yield GridPoint3(root, x_res, y_res, z)


def _east_arctic_points(
    point: GridPoint3, root_resolution: RootResolution
) -> tuple[GridPoint3, GridPoint3]:
    # y-axis in the arctic maps to the x-axis of the next root east
    return point, GridPoint3(point.root.next_east(), point.y, 0, point.z)


def _west_arctic_points(
    point: GridPoint3, root_resolution: RootResolution
) -> tuple[GridPoint3, GridPoint3]:
    # x-axis in the arctic maps to the y-axis of the next root west
    return point, GridPoint3(point.root.next_west(), 0, point.x, point.z)


def _east_tropics_points(
    point: GridPoint3, root_resolution: RootResolution
) -> tuple[GridPoint3, GridPoint3]:
    x_res, _ = root_resolution
    # y-axis at min-x maps to the y-axis at max-x of the next root east,
    # shifted north by one x resolution
    return point, GridPoint3(
        point.root.next_east(), x_res, point.y - x_res, point.z
    )


def _west_tropics_points(
    point: GridPoint3, root_resolution: RootResolution
) -> tuple[GridPoint3, GridPoint3]:
    x_res, _ = root_resolution
    # y-axis at max-x maps to the y-axis at min-x of the next root west,
    # shifted south by one x resolution
    return point, GridPoint3(
        point.root.next_west(), 0, point.y + x_res, point.z
    )


def _east_antarctic_points(
    point: GridPoint3, root_resolution: RootResolution
) -> tuple[GridPoint3, GridPoint3]:
    x_res, _ = root_resolution
    # x-axis at max-y maps to the y-axis at max-x of the next root east
    return point, GridPoint3(
        point.root.next_east(), x_res, point.x + x_res, point.z
    )


def _west_antarctic_points(
    point: GridPoint3, root_resolution: RootResolution
) -> tuple[GridPoint3, GridPoint3]:
    x_res, y_res = root_resolution
    # y-axis at max-x maps to the x-axis at max-y of the next root west
    return point, GridPoint3(
        point.root.next_west(), point.y - x_res, y_res, point.z
    )


def _interior_points(
    point: GridPoint3, root_resolution: RootResolution
) -> tuple[GridPoint3]:
    return (point,)


_PRODUCERS: dict[Region, Producer] = {
    Region.NORTH_POLE: _north_pole_points,
    Region.SOUTH_POLE: _south_pole_points,
    Region.EAST_ARCTIC: _east_arctic_points,
    Region.WEST_ARCTIC: _west_arctic_points,
    Region.EAST_TROPICS: _east_tropics_points,
    Region.WEST_TROPICS: _west_tropics_points,
    Region.EAST_ANTARCTIC: _east_antarctic_points,
    Region.WEST_ANTARCTIC: _west_antarctic_points,
    Region.INTERIOR: _interior_points,
}


class EquivalentPoints:
    """All representations of one physical point, across every root.

    This includes the given point, not just the *other* points that are
    equivalent to it. For most points (those not on the edge of a root) this
    therefore holds a single item: the given point itself.

    Iterating is lazy and can be repeated; every iteration starts afresh.

    Attributes:
        point: the point the equivalents were requested for
        root_resolution: ``(x_res, y_res)`` of every root
        region: the region ``point`` was classified into

    """

    __slots__ = ("point", "region", "root_resolution")

    def __init__(self, point: GridPoint3, root_resolution: Sequence[int]) -> None:
        """Classify a point and prepare its equivalents.

        Args:
            point: a point within its root
            root_resolution: ``[x_res, y_res]`` of every root

        Raises:
            GridResolutionError: if ``root_resolution`` is not valid
            OutOfBoundsError: if ``point`` lies outside its root

        """
        self.root_resolution = validate_root_resolution(root_resolution)
        check_bounds(point, self.root_resolution)
        self.point = point
        self.region = classify(point, self.root_resolution)

    def __iter__(self) -> Iterator[GridPoint3]:  # noqa: D105
        return iter(_PRODUCERS[self.region](self.point, self.root_resolution))

    def __len__(self) -> int:  # noqa: D105
        return self.region.cardinality

    def __contains__(self, other: object) -> bool:  # noqa: D105
        return any(other == candidate for candidate in self)

    def __repr__(self) -> str:  # noqa: D105
        return (
            f"{self.__class__.__name__}({self.point!r}, "
            f"root_resolution={self.root_resolution!r}, region={self.region.name})"
        )


@function_logger(__name__)
def equivalent_points(
    point: GridPoint3, root_resolution: Sequence[int]
) -> EquivalentPoints:
    """Return every representation of ``point`` across all roots.

    Args:
        point: a point within its root
        root_resolution: ``[x_res, y_res]`` of every root

    Returns:
        EquivalentPoints: a restartable iterable with 1, 2 or ``ROOT_COUNT`` points

    Raises:
        GridResolutionError: if ``root_resolution`` is not valid
        OutOfBoundsError: if ``point`` lies outside its root

    """
    return EquivalentPoints(point, root_resolution)


def are_equivalent(
    a: GridPoint3, b: GridPoint3, root_resolution: Sequence[int]
) -> bool:
    """Return whether two points denote the same physical location.

    Raises:
        GridResolutionError: if ``root_resolution`` is not valid
        OutOfBoundsError: if either point lies outside its root

    """
    equivalents = EquivalentPoints(a, root_resolution)
    check_bounds(b, equivalents.root_resolution)
    return b in equivalents


def canonical_point(point: GridPoint3, root_resolution: Sequence[int]) -> GridPoint3:
    """Return the representation of ``point`` that sorts first.

    All members of an equivalence class share the same canonical point, which
    makes it usable as a dictionary key when merging seam data.
    """
    return min(EquivalentPoints(point, root_resolution), key=sort_key)
