"""
Qt host for the menu-tree contract: QMenu action lists as containers, QActions as nodes.

QMenu has no positional insert, so insert_at(i) inserts before the action currently at i.
Containers keep a reference to every node they hold; removed actions are released with it.
"""
from typing import Callable, Optional

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMenu, QWidget

from recentmenu.core.tree import MenuContainer, MenuFactory, MenuNode

_CONTAINER_ATTR = "_recentmenu_container"
_NODE_ATTR = "_recentmenu_node"


class QtMenuContainer(MenuContainer):
    """Action list of one QMenu. Use QtMenuContainer.of(menu) to get the shared wrapper."""

    def __init__(self, menu: QMenu):
        self.menu = menu
        self._held: list[QtMenuNode] = []
        setattr(menu, _CONTAINER_ATTR, self)

    @classmethod
    def of(cls, menu: QMenu) -> "QtMenuContainer":
        existing = getattr(menu, _CONTAINER_ATTR, None)
        return existing if existing is not None else cls(menu)

    def _actions(self) -> list:
        return list(self.menu.actions())

    def count(self) -> int:
        return len(self._actions())

    def insert_at(self, index: int, node: "QtMenuNode") -> None:
        actions = self._actions()
        if not 0 <= index <= len(actions):
            raise IndexError("insert index %d out of range 0..%d" % (index, len(actions)))
        if node.parent is not None:
            node.parent.remove_at(node.parent.index_of(node))
            actions = self._actions()
        before = actions[index] if index < len(actions) else None
        if before is None:
            self.menu.addAction(node.action)
        else:
            self.menu.insertAction(before, node.action)
        self._held.append(node)
        node._parent = self

    def remove_at(self, index: int) -> None:
        action = self._actions()[index]
        self.menu.removeAction(action)
        node = getattr(action, _NODE_ATTR, None)
        if node is not None:
            node._parent = None
            self._held = [n for n in self._held if n is not node]

    def index_of(self, node: MenuNode) -> int:
        action = getattr(node, "action", None)
        for i, a in enumerate(self._actions()):
            if a is action:
                return i
        return -1

    def node_at(self, index: int) -> "QtMenuNode":
        action = self._actions()[index]
        node = getattr(action, _NODE_ATTR, None)
        return node if node is not None else QtMenuNode(action)


class QtMenuNode(MenuNode):
    """QAction wrapper; submenu nodes also own the QMenu their action opens."""

    def __init__(self, action: QAction, submenu: Optional[QMenu] = None):
        self.action = action
        self.submenu = submenu
        self._parent: Optional[QtMenuContainer] = None
        self._children = QtMenuContainer.of(submenu) if submenu is not None else None
        setattr(action, _NODE_ATTR, self)

    def __repr__(self):
        return "<QtMenuNode %r>" % self.label

    @property
    def is_separator(self) -> bool:
        return self.action.isSeparator()

    @property
    def label(self) -> str:
        return self.action.text()

    @label.setter
    def label(self, value: str) -> None:
        if self.submenu is not None:
            self.submenu.setTitle(value)
        else:
            self.action.setText(value)

    @property
    def visible(self) -> bool:
        return self.action.isVisible()

    @visible.setter
    def visible(self, value: bool) -> None:
        self.action.setVisible(bool(value))

    @property
    def enabled(self) -> bool:
        return self.action.isEnabled()

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self.action.setEnabled(bool(value))

    @property
    def parent(self) -> Optional[QtMenuContainer]:
        if self._parent is not None:
            return self._parent
        # attached directly with QMenu.addAction / addMenu
        for obj in self.action.associatedObjects():
            if isinstance(obj, QMenu) and obj is not self.submenu:
                return QtMenuContainer.of(obj)
        return None

    @property
    def children(self) -> Optional[QtMenuContainer]:
        return self._children

    def on_activated(self, callback: Callable[[], None]) -> None:
        self.action.triggered.connect(lambda checked=False: callback())


class QtMenuFactory(MenuFactory):
    """Creates QActions/QMenus for the projector. A QWidget parent owns the submenus."""

    def __init__(self, parent=None):
        self._parent = parent

    def create_node(self, label: str = "", submenu: bool = False) -> QtMenuNode:
        if submenu:
            menu = QMenu(label, self._parent) if isinstance(self._parent, QWidget) else QMenu(label)
            return QtMenuNode(menu.menuAction(), submenu=menu)
        return QtMenuNode(QAction(label))

    def create_separator(self) -> QtMenuNode:
        action = QAction()
        action.setSeparator(True)
        return QtMenuNode(action)
