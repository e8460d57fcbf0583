from .config import DISPLAY_MODES, load_config, get_config, reset_config
from .events import EventEmitter, ITEM_ACTIVATED, OPEN_ALL_ACTIVATED, CLEAR_ALL_ACTIVATED
from .exceptions import RecentMenuError, ConfigError, ProjectionError, ProjectionIntegrityError
from .items import RecentItem, file_exists, path_key
from .store import RecentItemStore
from .tree import MenuContainer, MenuNode, MenuFactory, TreeContainer, TreeNode, TreeFactory, render_tree
from .strategies import NestedStrategy, InlineStrategy, ProjectionPlan
from .projector import DisplayMode, ProjectionConfig, MenuProjector, format_label
from .logger import get_logger, get_mode_logger, setup_logging

__all__ = [
    "DISPLAY_MODES", "load_config", "get_config", "reset_config",
    "EventEmitter", "ITEM_ACTIVATED", "OPEN_ALL_ACTIVATED", "CLEAR_ALL_ACTIVATED",
    "RecentMenuError", "ConfigError", "ProjectionError", "ProjectionIntegrityError",
    "RecentItem", "file_exists", "path_key",
    "RecentItemStore",
    "MenuContainer", "MenuNode", "MenuFactory", "TreeContainer", "TreeNode", "TreeFactory", "render_tree",
    "NestedStrategy", "InlineStrategy", "ProjectionPlan",
    "DisplayMode", "ProjectionConfig", "MenuProjector", "format_label",
    "get_logger", "get_mode_logger", "setup_logging",
]
