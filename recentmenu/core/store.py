"""
Ordered, bounded, deduplicating list of recent items.
Most recent first. No dependency on the menu tree; RecentFilesMenu re-projects after each mutation.
"""
from typing import Callable, Iterator, Optional

from .exceptions import ConfigError
from .items import RecentItem, file_exists, path_key
from .logger import get_logger

logger = get_logger("store")

DEFAULT_MAX_DISPLAY_ITEMS = 10


def validate_max_display_items(value) -> int:
    """Return value if it is a positive int, else raise ConfigError."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError("max_display_items must be a positive integer, got %r" % (value,))
    return value


class RecentItemStore:
    """
    Recent items, index 0 = most recent.
    Invariants: no two entries share a path (case-insensitive); len <= max_display_items.
    """

    def __init__(
        self,
        max_display_items: int = DEFAULT_MAX_DISPLAY_ITEMS,
        exists: Optional[Callable[[str], bool]] = None,
    ):
        self._max_display_items = validate_max_display_items(max_display_items)
        self._exists = exists or file_exists
        self._items: list[RecentItem] = []

    @property
    def items(self) -> tuple:
        """Read-only snapshot of the current order."""
        return tuple(self._items)

    @property
    def max_display_items(self) -> int:
        return self._max_display_items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[RecentItem]:
        return iter(tuple(self._items))

    def __contains__(self, item) -> bool:
        return any(x is item for x in self._items)

    def paths(self) -> list[str]:
        return [x.path for x in self._items]

    def find(self, path) -> Optional[RecentItem]:
        """Return the entry whose path matches (case-insensitive), or None."""
        key = path_key(path)
        for x in self._items:
            if x.key == key:
                return x
        return None

    def add(self, item: RecentItem) -> bool:
        """
        Insert item at index 0. Returns False (no-op) if the file does not exist.
        An entry with the same path is dropped first (promote); the tail is evicted at capacity.
        """
        if not self._exists(item.path):
            logger.debug("Ignoring missing file: %s", item.path)
            return False

        key = item.key
        self._items = [x for x in self._items if x.key != key and x is not item]

        if len(self._items) >= self._max_display_items:
            evicted = self._items[self._max_display_items - 1:]
            del self._items[self._max_display_items - 1:]
            for x in evicted:
                logger.debug("Evicted: %s", x.path)

        self._items.insert(0, item)
        return True

    def remove(self, item: RecentItem, remove_existing_files: bool = False) -> bool:
        """
        Remove item by identity. With remove_existing_files, also drop every
        entry with the same path (case-insensitive). Returns True if anything was removed.
        """
        before = len(self._items)
        self._items = [x for x in self._items if x is not item]
        if remove_existing_files:
            key = item.key
            self._items = [x for x in self._items if x.key != key]
        removed = before - len(self._items)
        if not removed:
            logger.debug("Not in store: %s", item.path)
        return removed > 0

    def clear(self) -> None:
        self._items.clear()

    def set_max_display_items(self, n: int) -> None:
        """Update the cap; drop least-recently-used entries beyond it."""
        self._max_display_items = validate_max_display_items(n)
        if len(self._items) > n:
            del self._items[n:]
