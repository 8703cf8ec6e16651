"""The ring of roots that tile the globe.

The globe is covered by ``ROOT_COUNT`` roots, quadrilateral panels arranged in
a ring around the equatorial band. Each root has exactly one neighbour to the
east and one to the west; stepping five times in either direction comes back
to the starting root.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass

from globegrid.errors import RootIndexError

ROOT_COUNT = 5


@dataclass(frozen=True, order=True, slots=True)
class Root:
    """Identifier of a single root in the ring.

    Attributes:
        index: position of the root in the ring, ``0 <= index < ROOT_COUNT``

    """

    index: int

    def __post_init__(self):
        """Validate the index, accepting any integral type (e.g. numpy integers)."""
        if isinstance(self.index, bool):
            raise RootIndexError(self.index, ROOT_COUNT)
        try:
            index = operator.index(self.index)
        except TypeError:
            raise RootIndexError(self.index, ROOT_COUNT) from None
        if not 0 <= index < ROOT_COUNT:
            raise RootIndexError(index, ROOT_COUNT)
        object.__setattr__(self, "index", index)

    def next_east(self) -> Root:
        """Return the neighbouring root to the east."""
        return Root((self.index + 1) % ROOT_COUNT)

    def next_west(self) -> Root:
        """Return the neighbouring root to the west."""
        return Root((self.index + ROOT_COUNT - 1) % ROOT_COUNT)

    @classmethod
    def coerce(cls, root: Root | int) -> Root:
        """Return ``root`` as a Root, converting plain integers."""
        if isinstance(root, cls):
            return root
        return cls(root)

    def __int__(self) -> int:  # noqa: D105
        return self.index

    def __index__(self) -> int:  # noqa: D105
        return self.index

    def __repr__(self) -> str:  # noqa: D105
        return f"Root({self.index})"


ROOTS: tuple[Root, ...] = tuple(Root(index) for index in range(ROOT_COUNT))
