# Qt host: menu-tree adapter, recent-files control adapter, demo window

from recentmenu.gui.qt_tree import QtMenuContainer, QtMenuNode, QtMenuFactory
from recentmenu.gui.qt_recent_menu import QtRecentFilesMenu

__all__ = ["QtMenuContainer", "QtMenuNode", "QtMenuFactory", "QtRecentFilesMenu"]
