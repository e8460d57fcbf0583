"""
Pytest configuration and shared fixtures.

Headless Qt on Linux: set QT_QPA_PLATFORM=offscreen so QMenu/QAction tests run in CI
without a display. Where offscreen is not available, run under Xvfb:

  xvfb-run -a pytest tests/test_qt_recent_menu.py -v
"""
import os
import sys

# Must set before any PySide6/Qt import
if sys.platform.startswith("linux"):
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import logging

import pytest

from recentmenu.core import logger as logger_module
from recentmenu.core.config import ENV_CONFIG, reset_config
from recentmenu.core.tree import TreeContainer, TreeFactory


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Every test starts from the packaged default.yaml only."""
    monkeypatch.delenv(ENV_CONFIG, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def isolate_logging():
    """Undo handlers that setup_logging() (e.g. via the CLI) attaches during a test."""
    root = logging.getLogger(logger_module.ROOT_NAME)
    handlers = list(root.handlers)
    level = root.level
    setup_done = logger_module._setup_done
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    logger_module._setup_done = setup_done


def always_exists(path):
    return True


@pytest.fixture
def factory():
    return TreeFactory()


@pytest.fixture
def file_menu(factory):
    """Host menu with unrelated siblings around the slot where the control goes (index 2)."""
    menu = TreeContainer()
    menu.append(factory.create_node("Open..."))
    menu.append(factory.create_node("Save"))
    menu.append(factory.create_separator())
    menu.append(factory.create_node("Exit"))
    return menu
