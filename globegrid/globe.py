"""Configuration of a globe grid.

``GlobeSpec`` holds the resolutions shared by every root of a globe, validates
them once, and exposes the equivalence resolver with the globe's resolution
already bound. Points handed to a ``GlobeSpec`` are checked against the root
extents before they reach the resolver.
"""

from __future__ import annotations

import operator
from collections.abc import Sequence

from globegrid.errors import GridResolutionError
from globegrid.globegrid_logging import create_module_logger, method_logger
from globegrid.grid import (
    EquivalentPoints,
    GridPoint2,
    GridPoint3,
    Region,
    RootResolution,
    canonical_point,
    check_bounds,
    classify,
    in_bounds,
    validate_root_resolution,
)

_globegrid_logger = create_module_logger()


class GlobeSpec:
    """Resolutions of a globe grid.

    Attributes:
        root_resolution (tuple[int, int]): ``(x_res, y_res)`` of every root
        chunk_resolution (int | None): edge length of a chunk in grid cells, if the
            globe is split into chunks

    Notes:
        Every root is twice as tall as it is wide, so ``y_res == 2 * x_res``.
        Chunks are square and must tile a root exactly.

    """

    @method_logger(__name__)
    def __init__(
        self,
        root_resolution: Sequence[int],
        chunk_resolution: int | None = None,
    ) -> None:
        """Create a new globe spec.

        Args:
            root_resolution: ``[x_res, y_res]`` of every root
            chunk_resolution: edge length of a chunk in grid cells

        Raises:
            GridResolutionError: if either resolution is invalid

        """
        self.root_resolution: RootResolution = validate_root_resolution(
            root_resolution
        )
        self.chunk_resolution = chunk_resolution
        self._validate_parameters()
        _globegrid_logger.debug(
            "created globe spec with root resolution %s and chunk resolution %s",
            self.root_resolution,
            self.chunk_resolution,
        )

    @classmethod
    def from_x_resolution(
        cls, x_resolution: int, chunk_resolution: int | None = None
    ) -> GlobeSpec:
        """Create a spec from the x resolution alone."""
        return cls((x_resolution, 2 * x_resolution), chunk_resolution)

    @property
    def x_resolution(self) -> int:
        """Convenience access to the x resolution of a root."""
        return self.root_resolution[0]

    @property
    def y_resolution(self) -> int:
        """Convenience access to the y resolution of a root."""
        return self.root_resolution[1]

    @property
    def chunks_per_root_side(self) -> int | None:
        """Number of chunks along the x axis of a root."""
        if self.chunk_resolution is None:
            return None
        return self.x_resolution // self.chunk_resolution

    def _validate_parameters(self):
        if self.chunk_resolution is None:
            return
        if isinstance(self.chunk_resolution, bool):
            raise GridResolutionError(
                "chunk_resolution",
                f"must be an integer, got {self.chunk_resolution!r}",
            )
        try:
            self.chunk_resolution = operator.index(self.chunk_resolution)
        except TypeError:
            raise GridResolutionError(
                "chunk_resolution",
                f"must be an integer, got {self.chunk_resolution!r}",
            ) from None
        if self.chunk_resolution < 1:
            raise GridResolutionError(
                "chunk_resolution", f"must be at least 1, got {self.chunk_resolution}"
            )
        if self.x_resolution % self.chunk_resolution:
            raise GridResolutionError(
                "chunk_resolution",
                f"{self.chunk_resolution} does not divide root x resolution "
                f"{self.x_resolution}",
            )

    def contains(self, point: GridPoint2 | GridPoint3) -> bool:
        """Return whether the point lies within the extents of its root."""
        return in_bounds(point, self.root_resolution)

    def classify(self, point: GridPoint2 | GridPoint3) -> Region:
        """Return the region of a point on this globe.

        Raises:
            OutOfBoundsError: if the point lies outside its root

        """
        check_bounds(point, self.root_resolution)
        return classify(point, self.root_resolution)

    def equivalent_points(self, point: GridPoint3) -> EquivalentPoints:
        """Return every representation of ``point`` on this globe."""
        return EquivalentPoints(point, self.root_resolution)

    def are_equivalent(self, a: GridPoint3, b: GridPoint3) -> bool:
        """Return whether two points denote the same location on this globe."""
        check_bounds(b, self.root_resolution)
        return b in self.equivalent_points(a)

    def canonical_point(self, point: GridPoint3) -> GridPoint3:
        """Return the representation of ``point`` that sorts first."""
        return canonical_point(point, self.root_resolution)

    def __eq__(self, other: object) -> bool:  # noqa: D105
        if not isinstance(other, GlobeSpec):
            return NotImplemented
        return (self.root_resolution, self.chunk_resolution) == (
            other.root_resolution,
            other.chunk_resolution,
        )

    def __hash__(self) -> int:  # noqa: D105
        return hash((self.root_resolution, self.chunk_resolution))

    def __repr__(self) -> str:  # noqa: D105
        return (
            f"GlobeSpec(root_resolution={self.root_resolution!r}, "
            f"chunk_resolution={self.chunk_resolution!r})"
        )
