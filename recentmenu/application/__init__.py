# Application layer: the recent-items control

from recentmenu.application.recent_menu import RecentFilesMenu

__all__ = ["RecentFilesMenu"]
