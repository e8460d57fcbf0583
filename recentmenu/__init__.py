"""recentmenu: recent-files menu control for host menu trees."""

__version__ = "0.1.0"

from recentmenu.application.recent_menu import RecentFilesMenu
from recentmenu.core.events import EventEmitter
from recentmenu.core.items import RecentItem
from recentmenu.core.projector import DisplayMode, ProjectionConfig
from recentmenu.core.store import RecentItemStore

__all__ = [
    "__version__",
    "RecentFilesMenu",
    "EventEmitter",
    "RecentItem",
    "DisplayMode",
    "ProjectionConfig",
    "RecentItemStore",
]
