"""
Host menu-tree contract and an in-memory implementation.

The projector only talks to MenuNode / MenuContainer / MenuFactory. Hosts provide
concrete classes: TreeNode/TreeContainer/TreeFactory below (tests, CLI) and the
Qt adapter in recentmenu.gui.qt_tree.
"""
from typing import Callable, Optional

from .config import SEPARATOR_TEXT


class MenuContainer:
    """Ordered child/sibling sequence of a menu."""

    def count(self) -> int:
        raise NotImplementedError

    def insert_at(self, index: int, node: "MenuNode") -> None:
        raise NotImplementedError

    def remove_at(self, index: int) -> None:
        raise NotImplementedError

    def index_of(self, node: "MenuNode") -> int:
        """Position of node, or -1 if absent."""
        raise NotImplementedError

    def node_at(self, index: int) -> "MenuNode":
        raise NotImplementedError

    def append(self, node: "MenuNode") -> None:
        self.insert_at(self.count(), node)

    def clear(self) -> None:
        for i in range(self.count() - 1, -1, -1):
            self.remove_at(i)

    def nodes(self) -> list:
        return [self.node_at(i) for i in range(self.count())]


class MenuNode:
    """
    Generic menu entry. Hosts expose:
      label, visible, enabled  -- mutable properties
      parent                   -- MenuContainer holding the node, or None when detached
      children                 -- MenuContainer for submenu nodes, None for plain entries
      on_activated(callback)   -- subscribe to click/activation
    """

    is_separator = False

    @property
    def parent(self) -> Optional[MenuContainer]:
        raise NotImplementedError

    @property
    def children(self) -> Optional[MenuContainer]:
        raise NotImplementedError

    def on_activated(self, callback: Callable[[], None]) -> None:
        raise NotImplementedError


class MenuFactory:
    """Creates host nodes on behalf of the projector."""

    def create_node(self, label: str = "", submenu: bool = False) -> MenuNode:
        raise NotImplementedError

    def create_separator(self) -> MenuNode:
        raise NotImplementedError


# ---------------------------------------------------------------------------
# In-memory tree
# ---------------------------------------------------------------------------
class TreeContainer(MenuContainer):
    """List-backed child sequence that keeps each child's parent link up to date."""

    def __init__(self):
        self._nodes: list[TreeNode] = []

    def count(self) -> int:
        return len(self._nodes)

    def insert_at(self, index: int, node: "TreeNode") -> None:
        if not 0 <= index <= len(self._nodes):
            raise IndexError("insert index %d out of range 0..%d" % (index, len(self._nodes)))
        if node.parent is not None:
            node.parent.remove_at(node.parent.index_of(node))
        self._nodes.insert(index, node)
        node._parent = self

    def remove_at(self, index: int) -> None:
        node = self._nodes.pop(index)
        node._parent = None

    def index_of(self, node: MenuNode) -> int:
        for i, n in enumerate(self._nodes):
            if n is node:
                return i
        return -1

    def node_at(self, index: int) -> "TreeNode":
        return self._nodes[index]


class TreeNode(MenuNode):
    def __init__(self, label: str = "", submenu: bool = False):
        self._label = label
        self._visible = True
        self._enabled = True
        self._parent: Optional[TreeContainer] = None
        self._children = TreeContainer() if submenu else None
        self._callbacks = []

    def __repr__(self):
        return "<%s %r>" % (type(self).__name__, self._label)

    @property
    def label(self) -> str:
        return self._label

    @label.setter
    def label(self, value: str) -> None:
        self._label = value

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        self._visible = bool(value)

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = bool(value)

    @property
    def parent(self) -> Optional[TreeContainer]:
        return self._parent

    @property
    def children(self) -> Optional[TreeContainer]:
        return self._children

    def on_activated(self, callback: Callable[[], None]) -> None:
        self._callbacks.append(callback)

    def activate(self) -> None:
        """Simulate a click (host click dispatch)."""
        if not self._enabled or self.is_separator:
            return
        for cb in list(self._callbacks):
            cb()


class TreeSeparator(TreeNode):
    is_separator = True

    def __init__(self):
        super().__init__(SEPARATOR_TEXT)


class TreeFactory(MenuFactory):
    def create_node(self, label: str = "", submenu: bool = False) -> TreeNode:
        return TreeNode(label, submenu=submenu)

    def create_separator(self) -> TreeSeparator:
        return TreeSeparator()


def render_tree(container: MenuContainer, indent: str = "  ", show_hidden: bool = False) -> str:
    """Text outline of a container: one line per node, submenus indented, disabled marked."""
    lines = []

    def walk(c: MenuContainer, depth: int):
        for node in c.nodes():
            if not node.visible and not show_hidden:
                continue
            text = SEPARATOR_TEXT * 8 if node.is_separator else node.label
            if not node.enabled and not node.is_separator:
                text += " (disabled)"
            if not node.visible:
                text += " (hidden)"
            lines.append(indent * depth + text)
            if node.children is not None:
                walk(node.children, depth + 1)

    walk(container, 0)
    return "\n".join(lines)
