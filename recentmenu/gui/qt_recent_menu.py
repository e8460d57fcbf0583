"""Qt adapter for RecentFilesMenu: builds Qt nodes and re-emits control events as Qt signals."""

from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer, Signal
from PySide6.QtWidgets import QMenu

from recentmenu.application.recent_menu import DEFAULT_TITLE, RecentFilesMenu
from recentmenu.core.events import CLEAR_ALL_ACTIVATED, ITEM_ACTIVATED, OPEN_ALL_ACTIVATED
from recentmenu.core.projector import ProjectionConfig
from recentmenu.gui.qt_tree import QtMenuContainer, QtMenuFactory


class QtRecentFilesMenu(QObject, RecentFilesMenu):
    """
    RecentFilesMenu hosted in a QMenu. Adapter only: no business logic.
    Call attach(parent_menu, index) to put the control's submenu into a host menu.
    """

    itemActivated = Signal(object)      # RecentItem
    openAllActivated = Signal(object)   # tuple of RecentItem
    clearAllActivated = Signal()

    def __init__(
        self,
        parent: Optional[QObject] = None,
        config: Optional[ProjectionConfig] = None,
        title: str = DEFAULT_TITLE,
        exists: Optional[Callable[[str], bool]] = None,
    ):
        # QObject.__init__ forwards keyword arguments to RecentFilesMenu.__init__ (next in the MRO).
        super().__init__(parent, factory=QtMenuFactory(parent), config=config, title=title, exists=exists)
        # Delivered on the next event-loop turn: handlers may re-project and drop the
        # QAction whose triggered signal is still being dispatched.
        self.events.on(ITEM_ACTIVATED, lambda item: QTimer.singleShot(0, lambda: self.itemActivated.emit(item)))
        self.events.on(OPEN_ALL_ACTIVATED, lambda items: QTimer.singleShot(0, lambda: self.openAllActivated.emit(items)))
        self.events.on(CLEAR_ALL_ACTIVATED, lambda: QTimer.singleShot(0, self.clearAllActivated.emit))

    @property
    def menu(self) -> QMenu:
        """The control's own submenu (empty in inline mode)."""
        return self.node.submenu

    def attach(self, parent_menu: QMenu, index: Optional[int] = None) -> None:
        """Insert the control's node into parent_menu (appended when index is None) and re-project."""
        container = QtMenuContainer.of(parent_menu)
        self.projector.retract()
        container.insert_at(container.count() if index is None else index, self.node)
        self.refresh()
