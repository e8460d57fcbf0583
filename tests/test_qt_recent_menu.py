"""
Qt host tests. Require headless Qt (conftest sets QT_QPA_PLATFORM=offscreen on Linux;
or run with: xvfb-run -a pytest ...).
"""
import pytest

from PySide6.QtWidgets import QApplication, QMenu, QWidget

from recentmenu.core.projector import DisplayMode, ProjectionConfig
from recentmenu.gui.qt_recent_menu import QtRecentFilesMenu
from recentmenu.gui.qt_tree import QtMenuContainer, QtMenuFactory


@pytest.fixture(scope="module")
def qapp():
    """Single QApplication for the module."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def file_menu(qapp):
    menu = QMenu("File")
    menu.addAction("Open")
    yield menu
    menu.deleteLater()


@pytest.fixture
def recent(qapp, file_menu):
    control = QtRecentFilesMenu(
        config=ProjectionConfig(show_open_all=True, show_clear_all=True),
        exists=lambda path: True,
    )
    control.attach(file_menu)
    file_menu.addAction("Exit")
    return control


def _pump(app):
    for _ in range(3):
        app.processEvents()


def test_container_positional_insert_and_remove(qapp):
    menu = QMenu()
    container = QtMenuContainer.of(menu)
    factory = QtMenuFactory()
    a, b, c = factory.create_node("a"), factory.create_node("b"), factory.create_node("c")
    container.append(a)
    container.append(c)
    container.insert_at(1, b)
    assert [act.text() for act in menu.actions()] == ["a", "b", "c"]
    assert container.index_of(b) == 1
    assert container.node_at(2) is c
    assert b.parent is container
    container.remove_at(1)
    assert [act.text() for act in menu.actions()] == ["a", "c"]
    assert b.parent is None
    assert QtMenuContainer.of(menu) is container


def test_nested_submenu(qapp, recent, file_menu):
    recent.add("A")
    recent.add("B")
    actions = recent.menu.actions()
    assert [a.text() for a in actions[:2]] == ["1: B", "2: A"]
    assert actions[2].isSeparator()
    assert [a.text() for a in actions[3:]] == ["Open All Recent Items", "Clear All Recent Items"]
    assert [a.text() for a in file_menu.actions()] == ["Open", "Recent Files", "Exit"]
    assert recent.node.action.isEnabled()


def test_nested_empty_is_disabled(qapp, recent):
    assert recent.menu.actions() == []
    assert recent.node.action.isVisible()
    assert not recent.node.action.isEnabled()


def test_inline_splice_and_restore(qapp, recent, file_menu):
    recent.add("A")
    recent.add("B")
    recent.display_mode = DisplayMode.INLINE
    actions = file_menu.actions()
    assert len(actions) == 3 + 1 + 2 + 1 + 2 + 1
    assert actions[0].text() == "Open"
    assert actions[1].isSeparator()
    assert [a.text() for a in actions[2:4]] == ["1: B", "2: A"]
    assert actions[4].isSeparator()
    assert actions[7].isSeparator()
    assert actions[8] is recent.node.action
    assert not recent.node.action.isVisible()
    assert actions[9].text() == "Exit"

    recent.display_mode = DisplayMode.NESTED
    assert [a.text() for a in file_menu.actions()] == ["Open", "Recent Files", "Exit"]
    assert recent.node.action.isVisible()


def test_item_signal(qapp, recent):
    got = []
    recent.itemActivated.connect(got.append)
    recent.add("A")
    recent.add("B")
    recent.menu.actions()[1].trigger()
    _pump(qapp)
    assert [item.path for item in got] == ["A"]


def test_clear_all_signal(qapp, recent):
    fired = []
    recent.clearAllActivated.connect(lambda: fired.append(True))
    recent.add("A")
    recent.menu.actions()[-1].trigger()
    _pump(qapp)
    assert fired == [True]
    assert recent.items == ()
    assert recent.menu.actions() == []


def test_open_all_signal(qapp, recent):
    got = []
    recent.openAllActivated.connect(got.append)
    recent.add("A")
    recent.add("B")
    recent.menu.actions()[-2].trigger()
    _pump(qapp)
    assert [[i.path for i in items] for items in got] == [["B", "A"]]
    assert len(recent.items) == 2


def test_widget_parent_owns_control_and_submenu(qapp):
    window = QWidget()
    control = QtRecentFilesMenu(window, config=ProjectionConfig(), exists=lambda path: True)
    assert control.parent() is window
    assert control.menu.parent() is window
    assert control.max_display_items == 10
    got = []
    control.itemActivated.connect(got.append)
    control.add("A")
    control.menu.actions()[0].trigger()
    _pump(qapp)
    assert [item.path for item in got] == ["A"]
    window.deleteLater()
