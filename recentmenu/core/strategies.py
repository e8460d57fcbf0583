"""
Display strategies: where generated nodes go in the host tree.

NestedStrategy fills the control's own submenu. InlineStrategy splices nodes into
the parent's sibling sequence at the control's position and records every insertion
as an (index, node) token so it can be undone back to front.
"""
from typing import Optional

from .config import DISPLAY_MODE_INLINE, DISPLAY_MODE_NESTED
from .exceptions import ProjectionError, ProjectionIntegrityError
from .logger import get_logger, get_mode_logger
from .tree import MenuContainer, MenuFactory, MenuNode

_logger = get_logger("strategies")


class ProjectionPlan:
    """What to show: item nodes (already capped and labelled) and the enabled auxiliary nodes."""

    def __init__(self, item_nodes: list, auxiliary_nodes: list):
        self.item_nodes = list(item_nodes)
        self.auxiliary_nodes = list(auxiliary_nodes)

    @property
    def is_empty(self) -> bool:
        return not self.item_nodes


class DisplayStrategy:
    mode = ""

    def __init__(self, owner: MenuNode, factory: MenuFactory):
        self.owner = owner
        self.factory = factory
        self.log = get_mode_logger(_logger, self.mode)

    def populate(self, plan: ProjectionPlan) -> int:
        """Place plan's nodes in the tree. Returns the number of nodes generated."""
        raise NotImplementedError

    def retract(self) -> None:
        """Remove everything populate() placed. Idempotent."""
        raise NotImplementedError


class NestedStrategy(DisplayStrategy):
    """The control's own node is a submenu; items are its children, most recent on top."""

    mode = DISPLAY_MODE_NESTED

    def _children(self) -> MenuContainer:
        children = self.owner.children
        if children is None:
            raise ProjectionError("nested display needs a submenu node, got %r" % (self.owner,))
        return children

    def populate(self, plan: ProjectionPlan) -> int:
        children = self._children()
        children.clear()
        self.owner.visible = True

        if not plan.is_empty:
            for node in plan.item_nodes:
                children.append(node)
            if plan.auxiliary_nodes:
                children.append(self.factory.create_separator())
                for node in plan.auxiliary_nodes:
                    children.append(node)

        self.owner.enabled = children.count() > 0
        self.log.debug("Populated %d child node(s)", children.count())
        return children.count()

    def retract(self) -> None:
        children = self.owner.children
        if children is not None:
            children.clear()
        self.owner.enabled = False


class InlineStrategy(DisplayStrategy):
    """
    Nodes are inserted into the parent's sequence starting at the control's own index;
    the control's node is hidden and ends up right after the generated range.
    """

    mode = DISPLAY_MODE_INLINE

    def __init__(self, owner: MenuNode, factory: MenuFactory):
        super().__init__(owner, factory)
        self._container: Optional[MenuContainer] = None
        self._tokens: list[tuple[int, MenuNode]] = []

    @property
    def recorded_indexes(self) -> list[int]:
        return [index for index, _ in self._tokens]

    def _insert(self, index: int, node: MenuNode) -> None:
        self._container.insert_at(index, node)
        self._tokens.append((index, node))

    def populate(self, plan: ProjectionPlan) -> int:
        self.owner.visible = False

        if plan.is_empty:
            return 0

        parent = self.owner.parent
        if parent is None:
            self.log.warning("Control node is not attached to a menu; nothing spliced")
            return 0
        self._container = parent

        base = parent.index_of(self.owner)
        if base < 0:
            raise ProjectionError("control node %r not found in its parent" % (self.owner,))

        self._insert(base, self.factory.create_separator())
        cursor = base + 1
        for node in plan.item_nodes:
            self._insert(cursor, node)
            cursor += 1

        if plan.auxiliary_nodes:
            self._insert(cursor, self.factory.create_separator())
            cursor += 1
            for node in plan.auxiliary_nodes:
                self._insert(cursor, node)
                cursor += 1

        self._insert(cursor, self.factory.create_separator())
        self.log.debug("Spliced %d node(s) at %d..%d", len(self._tokens), base, cursor)
        return len(self._tokens)

    def retract(self) -> None:
        if not self._tokens:
            return
        container = self._container
        # highest index first so earlier tokens stay valid
        for index, node in reversed(self._tokens):
            found = container.node_at(index) if index < container.count() else None
            if found is not node:
                raise ProjectionIntegrityError(index, node, found)
            container.remove_at(index)
        self.log.debug("Retracted %d node(s)", len(self._tokens))
        self._tokens.clear()
        self._container = None
