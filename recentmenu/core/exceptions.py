"""recentmenu exceptions."""


class RecentMenuError(Exception):
    """Base exception for recentmenu."""


class ConfigError(RecentMenuError, ValueError):
    """Invalid configuration value (unknown display mode, non-positive item cap)."""


class ProjectionError(RecentMenuError):
    """Projection cannot proceed against the host menu tree."""


class ProjectionIntegrityError(ProjectionError):
    """A recorded splice position no longer holds the node that was inserted there."""

    def __init__(self, index, expected, found):
        self.index = index
        self.expected = expected
        self.found = found
        super().__init__(
            "Managed menu range was modified externally: index %d holds %r, expected %r"
            % (index, found, expected)
        )
