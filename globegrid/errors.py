"""Exception hierarchy for globegrid.

Every error raised on purpose by globegrid derives from ``GlobeGridError``.
Bad configuration (resolutions) raises a ``ConfigurationError``; a point or
root that does not exist on the globe raises a ``SpaceError``. Both signal a
bug in the calling code, there is nothing to retry.
"""

import globegrid


class GlobeGridError(Exception):
    """Base class for all globegrid-specific exceptions.

    It automatically prepends the globegrid version to help with debugging reports.
    """

    def __init__(self, message: str):
        self.globegrid_version = getattr(globegrid, "__version__", "unknown")
        self.original_message = message
        full_message = f"[globegrid {self.globegrid_version}] {message}"
        super().__init__(full_message)


# Configuration Errors
class ConfigurationError(GlobeGridError):
    """Raised when globe parameters are invalid or missing."""

    def __init__(self, param_name: str | None = None, reason: str | None = None):
        # raise ConfigurationError("Generic message")
        # or raise ConfigurationError("root_resolution", "must be positive")
        if param_name and reason:
            message = f"Invalid configuration for '{param_name}': {reason}"
            self.param_name = param_name
        else:
            message = param_name if param_name else "Invalid configuration"
            self.param_name = None

        super().__init__(message)


class GridResolutionError(ConfigurationError):
    """Raised when a root or chunk resolution is invalid.

    Examples: a zero or negative x-resolution, a y-resolution that is not
    twice the x-resolution, or a chunk resolution that does not divide the
    root resolution.
    """


# Space Errors
class SpaceError(GlobeGridError):
    """Generic errors related to grid points and roots."""


class OutOfBoundsError(SpaceError):
    """Raised when a point lies outside the extents of its root."""

    def __init__(self, pos, dimensions):
        self.pos = pos
        self.dimensions = dimensions
        message = f"Position {pos} is out of bounds for root resolution {dimensions}."
        super().__init__(message)


class RootIndexError(SpaceError, ValueError):
    """Raised when a root index is not part of the root ring."""

    def __init__(self, index, root_count):
        self.index = index
        self.root_count = root_count
        message = f"Root index {index!r} is not in the range 0..{root_count - 1}."
        super().__init__(message)
