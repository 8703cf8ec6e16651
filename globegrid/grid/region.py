r"""Classification of grid points by where they sit on their root.

Every point of a root falls into exactly one of nine regions. Two are the
poles, shared by all roots; six are stretches of the root's edges, each glued
to one neighbouring root; the rest of the root is interior. The numbers are
the ``Region`` values of one root's boundary::

               1
         o     *     o
        / \  4/ \3  / \
       /   \ /   \ /   \
      o     *     *     o
       \     \  9  \5    \
        \    6\     \     \
         o     *     *     o
          \   / \8 7/ \   /
           \ /   \ /   \ /
            o     *     o
                  2

The predicates below overlap at the corners of a root, so they are evaluated
in a fixed order and the first match wins. ``classify`` and
``classify_array`` implement the same order.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

import numpy as np

from globegrid.grid.point import GridPoint2, GridPoint3
from globegrid.grid.root import ROOT_COUNT

__all__ = ["Region", "classify", "classify_array"]


class Region(IntEnum):
    """The nine regions of a root, in classification order."""

    NORTH_POLE = 1
    SOUTH_POLE = 2
    EAST_ARCTIC = 3
    WEST_ARCTIC = 4
    EAST_TROPICS = 5
    WEST_TROPICS = 6
    EAST_ANTARCTIC = 7
    WEST_ANTARCTIC = 8
    INTERIOR = 9

    @property
    def is_pole(self) -> bool:
        """Whether points in this region are shared by every root."""
        return self in (Region.NORTH_POLE, Region.SOUTH_POLE)

    @property
    def is_seam(self) -> bool:
        """Whether points in this region are shared with exactly one other root."""
        return not self.is_pole and self is not Region.INTERIOR

    @property
    def is_east(self) -> bool:
        """Whether this seam is glued to the next root east."""
        return self in (
            Region.EAST_ARCTIC,
            Region.EAST_TROPICS,
            Region.EAST_ANTARCTIC,
        )

    @property
    def is_west(self) -> bool:
        """Whether this seam is glued to the next root west."""
        return self in (
            Region.WEST_ARCTIC,
            Region.WEST_TROPICS,
            Region.WEST_ANTARCTIC,
        )

    @property
    def cardinality(self) -> int:
        """Number of representations of a point in this region."""
        if self.is_pole:
            return ROOT_COUNT
        if self.is_seam:
            return 2
        return 1


def classify(
    point: GridPoint2 | GridPoint3, root_resolution: Sequence[int]
) -> Region:
    """Return the region of a point.

    Args:
        point: the point to classify; it is assumed to lie within its root
        root_resolution: ``[x_res, y_res]`` of every root

    Returns:
        Region: the first region whose predicate matches

    """
    x, y = point.x, point.y
    x_res, y_res = root_resolution

    if x == 0 and y == 0:
        return Region.NORTH_POLE
    if x == x_res and y == y_res:
        return Region.SOUTH_POLE
    # x resolution is half the y resolution, so x_res is also the
    # y coordinate at which the arctic gives way to the tropics.
    if x == 0 and y < x_res:
        return Region.EAST_ARCTIC
    if y == 0:
        return Region.WEST_ARCTIC
    if x == 0:
        return Region.EAST_TROPICS
    if x == x_res and y < x_res:
        return Region.WEST_TROPICS
    if y == y_res:
        return Region.EAST_ANTARCTIC
    if x == x_res:
        return Region.WEST_ANTARCTIC
    return Region.INTERIOR


def classify_array(x, y, root_resolution: Sequence[int]) -> np.ndarray:
    """Classify arrays of coordinates in one go.

    Args:
        x: array-like of x coordinates
        y: array-like of y coordinates, broadcastable against ``x``
        root_resolution: ``[x_res, y_res]`` of every root

    Returns:
        np.ndarray: integer array of ``Region`` values with the broadcast shape
        of ``x`` and ``y``

    """
    x = np.asarray(x)
    y = np.asarray(y)
    x_res, y_res = root_resolution

    min_x = x == 0
    max_x = x == x_res
    arctic = y < x_res

    # np.select picks the first matching condition, same as classify
    conditions = [
        min_x & (y == 0),
        max_x & (y == y_res),
        min_x & arctic,
        y == 0,
        min_x,
        max_x & arctic,
        y == y_res,
        max_x,
    ]
    choices = [
        Region.NORTH_POLE,
        Region.SOUTH_POLE,
        Region.EAST_ARCTIC,
        Region.WEST_ARCTIC,
        Region.EAST_TROPICS,
        Region.WEST_TROPICS,
        Region.EAST_ANTARCTIC,
        Region.WEST_ANTARCTIC,
    ]
    return np.select(
        conditions, [int(c) for c in choices], default=int(Region.INTERIOR)
    )
