"""
MenuProjector: derive the generated menu nodes from (items, config).

Every call to project() retracts what the previous call generated and rebuilds from
scratch; nothing is diffed. The open-all / clear-all nodes are created once and
re-parented on each projection so handlers attached to them survive.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional, Sequence

from .config import DISPLAY_MODE_INLINE, DISPLAY_MODE_NESTED, load_config
from .exceptions import ConfigError
from .items import RecentItem
from .logger import get_logger
from .store import DEFAULT_MAX_DISPLAY_ITEMS, validate_max_display_items
from .strategies import InlineStrategy, NestedStrategy, ProjectionPlan
from .tree import MenuFactory, MenuNode

logger = get_logger("projector")


class DisplayMode(Enum):
    NESTED = DISPLAY_MODE_NESTED   # items are children of the control's submenu
    INLINE = DISPLAY_MODE_INLINE   # items are spliced in after the control, which is hidden

    @classmethod
    def parse(cls, value) -> "DisplayMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigError(
                "display_mode must be one of %s, got %r" % ([m.value for m in cls], value)
            ) from None


@dataclass(frozen=True)
class ProjectionConfig:
    display_mode: DisplayMode = DisplayMode.NESTED
    max_display_items: int = DEFAULT_MAX_DISPLAY_ITEMS
    prepend_numbers: bool = True
    show_open_all: bool = False
    show_clear_all: bool = True
    open_all_label: str = "Open All Recent Items"
    clear_all_label: str = "Clear All Recent Items"

    def __post_init__(self):
        object.__setattr__(self, "display_mode", DisplayMode.parse(self.display_mode))
        validate_max_display_items(self.max_display_items)

    @property
    def has_auxiliary(self) -> bool:
        return self.show_open_all or self.show_clear_all

    def with_changes(self, **changes) -> "ProjectionConfig":
        return replace(self, **changes)

    @classmethod
    def from_config(cls, cfg: Optional[dict] = None) -> "ProjectionConfig":
        """Build from the 'recent_menu' section of load_config() (or the given dict)."""
        if cfg is None:
            cfg = load_config()
        section = cfg.get("recent_menu") or {}
        known = {k: section[k] for k in cls.__dataclass_fields__ if k in section}
        unknown = sorted(set(section) - set(known))
        if unknown:
            logger.warning("Ignoring unknown recent_menu keys: %s", ", ".join(unknown))
        return cls(**known)


def format_label(index: int, item: RecentItem, prepend_numbers: bool) -> str:
    """Menu text for the item at 0-based index."""
    return "%d: %s" % (index + 1, item.label) if prepend_numbers else item.label


class MenuProjector:
    """
    Keeps the host tree in sync with the recent items.
    owner is the control's own node: a submenu in nested mode, a hidden anchor in inline mode.
    """

    def __init__(
        self,
        owner: MenuNode,
        factory: MenuFactory,
        on_item_activated: Optional[Callable[[RecentItem], None]] = None,
    ):
        self.owner = owner
        self.factory = factory
        self._on_item_activated = on_item_activated
        self.open_all_node = factory.create_node()
        self.clear_all_node = factory.create_node()
        self.nested = NestedStrategy(owner, factory)
        self.inline = InlineStrategy(owner, factory)
        self.labels: list[str] = []
        self.item_nodes: list[MenuNode] = []

    def _strategy(self, mode: DisplayMode):
        return self.inline if mode is DisplayMode.INLINE else self.nested

    def _make_item_node(self, item: RecentItem, label: str) -> MenuNode:
        node = self.factory.create_node(label)
        if self._on_item_activated is not None:
            node.on_activated(lambda item=item: self._on_item_activated(item))
        return node

    def build_plan(self, items: Sequence[RecentItem], config: ProjectionConfig) -> ProjectionPlan:
        self.labels = [format_label(i, item, config.prepend_numbers) for i, item in enumerate(items)]
        shown = list(items)[: config.max_display_items]
        self.item_nodes = [self._make_item_node(item, self.labels[i]) for i, item in enumerate(shown)]

        self.open_all_node.label = config.open_all_label
        self.clear_all_node.label = config.clear_all_label
        auxiliary = []
        if config.show_open_all:
            auxiliary.append(self.open_all_node)
        if config.show_clear_all:
            auxiliary.append(self.clear_all_node)
        return ProjectionPlan(self.item_nodes, auxiliary)

    def project(self, items: Sequence[RecentItem], config: ProjectionConfig) -> int:
        """Retract, then populate with the active strategy. Returns the number of generated nodes."""
        plan = self.build_plan(items, config)
        self.retract()
        generated = self._strategy(config.display_mode).populate(plan)
        logger.debug(
            "Projected %d item(s) as %s: %d node(s)",
            len(plan.item_nodes), config.display_mode.value, generated,
        )
        return generated

    def retract(self) -> None:
        """Remove every generated node from both strategies."""
        self.nested.retract()
        self.inline.retract()
