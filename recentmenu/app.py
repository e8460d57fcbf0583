"""PySide6 demo entry point."""

import sys

from recentmenu.core.logger import setup_logging
from recentmenu.core.projector import ProjectionConfig
from recentmenu.gui.main_window import run


def main():
    setup_logging()
    sys.exit(run(ProjectionConfig.from_config()))


if __name__ == "__main__":
    main()
