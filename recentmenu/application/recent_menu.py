"""RecentFilesMenu: the recent-items control. Owns store, config and projector; re-projects on every change."""

from typing import Callable, Optional

from recentmenu.core.events import (
    CLEAR_ALL_ACTIVATED,
    ITEM_ACTIVATED,
    OPEN_ALL_ACTIVATED,
    EventEmitter,
)
from recentmenu.core.items import RecentItem
from recentmenu.core.logger import get_logger
from recentmenu.core.projector import DisplayMode, MenuProjector, ProjectionConfig
from recentmenu.core.store import RecentItemStore
from recentmenu.core.tree import MenuFactory, MenuNode

logger = get_logger("recent_menu")

DEFAULT_TITLE = "Recent Files"


class RecentFilesMenu:
    """
    Recent-items control plugged into a host menu tree.

    The control's node (``node``) is a submenu in nested mode and a hidden anchor in
    inline mode; attach it to a host menu before (or after, then call refresh()) use.
    Events: item_activated(item=...), open_all_activated(items=...), clear_all_activated().
    Not thread-safe; call from the UI thread only.
    """

    def __init__(
        self,
        factory: MenuFactory,
        config: Optional[ProjectionConfig] = None,
        title: str = DEFAULT_TITLE,
        exists: Optional[Callable[[str], bool]] = None,
        node: Optional[MenuNode] = None,
    ):
        self._config = config or ProjectionConfig.from_config()
        self.events = EventEmitter()
        self._store = RecentItemStore(self._config.max_display_items, exists=exists)
        self.node = node or factory.create_node(title, submenu=True)
        self.projector = MenuProjector(self.node, factory, on_item_activated=self._on_item_node_activated)
        self.projector.open_all_node.on_activated(self._on_open_all_activated)
        self.projector.clear_all_node.on_activated(self._on_clear_all_activated)
        self.refresh()

    # ------------------------------------------------------------------
    # Store operations
    # ------------------------------------------------------------------
    @property
    def items(self) -> tuple:
        return self._store.items

    @property
    def labels(self) -> list[str]:
        """Current label of every stored item, in store order."""
        return list(self.projector.labels)

    def add(self, item) -> bool:
        """Add a RecentItem (or path). Missing files are ignored. Re-projects once."""
        if not isinstance(item, RecentItem):
            item = RecentItem(item)
        accepted = self._store.add(item)
        if accepted:
            logger.info("Added recent item: %s", item.path)
        self.refresh()
        return accepted

    def remove(self, item: RecentItem, remove_existing_files: bool = False, repopulate: bool = True) -> bool:
        """Remove item; remove_existing_files also drops entries with the same path."""
        removed = self._store.remove(item, remove_existing_files)
        if removed:
            logger.info("Removed recent item: %s", item.path)
        if repopulate:
            self.refresh()
        return removed

    def clear(self) -> None:
        """Empty the store and retract every generated node."""
        self._store.clear()
        self.projector.retract()
        self.projector.labels = []
        logger.info("Cleared recent items")

    def refresh(self) -> int:
        """Re-project the current items. Returns the number of generated nodes."""
        return self.projector.project(self._store.items, self._config)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def config(self) -> ProjectionConfig:
        return self._config

    @config.setter
    def config(self, config: ProjectionConfig) -> None:
        self._config = config
        if self._store.max_display_items != config.max_display_items:
            self._store.set_max_display_items(config.max_display_items)
        self.refresh()

    def _update(self, **changes) -> None:
        self.config = self._config.with_changes(**changes)

    @property
    def display_mode(self) -> DisplayMode:
        return self._config.display_mode

    @display_mode.setter
    def display_mode(self, value) -> None:
        self._update(display_mode=DisplayMode.parse(value))

    @property
    def max_display_items(self) -> int:
        return self._config.max_display_items

    @max_display_items.setter
    def max_display_items(self, value: int) -> None:
        self._update(max_display_items=value)

    @property
    def prepend_numbers(self) -> bool:
        return self._config.prepend_numbers

    @prepend_numbers.setter
    def prepend_numbers(self, value: bool) -> None:
        self._update(prepend_numbers=bool(value))

    @property
    def show_open_all(self) -> bool:
        return self._config.show_open_all

    @show_open_all.setter
    def show_open_all(self, value: bool) -> None:
        self._update(show_open_all=bool(value))

    @property
    def show_clear_all(self) -> bool:
        return self._config.show_clear_all

    @show_clear_all.setter
    def show_clear_all(self, value: bool) -> None:
        self._update(show_clear_all=bool(value))

    @property
    def open_all_label(self) -> str:
        return self._config.open_all_label

    @open_all_label.setter
    def open_all_label(self, value: str) -> None:
        self._update(open_all_label=value)

    @property
    def clear_all_label(self) -> str:
        return self._config.clear_all_label

    @clear_all_label.setter
    def clear_all_label(self, value: str) -> None:
        self._update(clear_all_label=value)

    # ------------------------------------------------------------------
    # Activation
    # ------------------------------------------------------------------
    def _on_item_node_activated(self, item: RecentItem) -> None:
        self.events.emit(ITEM_ACTIVATED, item=item)

    def _on_open_all_activated(self) -> None:
        self.events.emit(OPEN_ALL_ACTIVATED, items=self._store.items)

    def _on_clear_all_activated(self) -> None:
        self.clear()
        self.events.emit(CLEAR_ALL_ACTIVATED)
