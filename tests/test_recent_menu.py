"""RecentFilesMenu: events, configuration surface, projection triggers."""
import logging

import pytest

from recentmenu.application.recent_menu import RecentFilesMenu
from recentmenu.core.events import (
    CLEAR_ALL_ACTIVATED,
    ITEM_ACTIVATED,
    OPEN_ALL_ACTIVATED,
    EventEmitter,
)
from recentmenu.core.exceptions import ConfigError
from recentmenu.core.items import RecentItem
from recentmenu.core.projector import DisplayMode, ProjectionConfig

from conftest import always_exists


@pytest.fixture
def recent(factory, file_menu):
    control = RecentFilesMenu(
        factory,
        config=ProjectionConfig(show_open_all=True, show_clear_all=True),
        exists=always_exists,
    )
    file_menu.insert_at(2, control.node)
    return control


def test_item_activation_emits_item(recent):
    got = []
    recent.events.on(ITEM_ACTIVATED, lambda item: got.append(item))
    a = RecentItem("A")
    recent.add(a)
    recent.add("B")
    recent.node.children.node_at(1).activate()
    assert got == [a]


def test_clear_all_clears_then_notifies(recent):
    seen = []
    recent.events.on(CLEAR_ALL_ACTIVATED, lambda: seen.append(len(recent.items)))
    recent.add("A")
    recent.projector.clear_all_node.activate()
    assert seen == [0]
    assert recent.node.children.count() == 0


def test_open_all_leaves_store_untouched(recent):
    seen = []
    recent.events.on(OPEN_ALL_ACTIVATED, lambda items: seen.append(items))
    recent.add("A")
    recent.add("B")
    recent.projector.open_all_node.activate()
    assert [[i.path for i in items] for items in seen] == [["B", "A"]]
    assert len(recent.items) == 2


def test_auxiliary_nodes_are_reused(recent):
    open_all = recent.projector.open_all_node
    clear_all = recent.projector.clear_all_node
    recent.add("A")
    recent.add("B")
    children = recent.node.children.nodes()
    assert children[-2] is open_all
    assert children[-1] is clear_all


def test_label_change_reprojects(recent):
    recent.add("A")
    recent.clear_all_label = "Forget"
    recent.open_all_label = "Open everything"
    labels = [n.label for n in recent.node.children.nodes()]
    assert labels[-2:] == ["Open everything", "Forget"]


def test_toggle_options(recent):
    recent.add("A")
    recent.show_open_all = False
    recent.show_clear_all = False
    assert recent.node.children.count() == 1
    recent.prepend_numbers = False
    assert recent.node.children.node_at(0).label == "A"


def test_max_display_items_truncates_store(recent):
    for p in ("A", "B", "C", "D"):
        recent.add(p)
    recent.max_display_items = 2
    assert [i.path for i in recent.items] == ["D", "C"]
    assert recent.labels == ["1: D", "2: C"]


def test_replacing_config_caps_items(recent):
    for p in ("A", "B", "C"):
        recent.add(p)
    recent.config = recent.config.with_changes(max_display_items=1)
    assert recent.max_display_items == 1
    assert [i.path for i in recent.items] == ["C"]
    assert recent.labels == ["1: C"]
    recent.add("D")
    assert [i.path for i in recent.items] == ["D"]
    assert not hasattr(recent, "store")


def test_invalid_configuration_rejected(recent):
    with pytest.raises(ConfigError):
        recent.max_display_items = 0
    with pytest.raises(ConfigError):
        recent.display_mode = "sideways"
    assert recent.max_display_items == 10
    assert recent.display_mode is DisplayMode.NESTED


def test_add_missing_file_still_projects(factory, file_menu):
    present = {"A"}
    recent = RecentFilesMenu(factory, config=ProjectionConfig(show_clear_all=False),
                             exists=lambda path: path in present)
    file_menu.insert_at(2, recent.node)
    assert recent.add("A") is True
    assert recent.add("ghost") is False
    assert [n.label for n in recent.node.children.nodes()] == ["1: A"]


def test_promote_projects_once(recent, monkeypatch):
    recent.add("A")
    recent.add("B")
    calls = []
    original = recent.projector.project
    monkeypatch.setattr(recent.projector, "project", lambda *a: calls.append(1) or original(*a))
    recent.add("a")
    assert calls == [1]
    assert recent.labels == ["1: a", "2: B"]


def test_remove_without_repopulate(recent):
    a = RecentItem("A")
    recent.add(a)
    recent.add("B")
    assert recent.remove(a, repopulate=False) is True
    assert recent.node.children.count() == 2 + 1 + 2
    recent.refresh()
    assert recent.node.children.count() == 1 + 1 + 2


def test_remove_existing_files(recent):
    recent.add("/x/Doc.txt")
    assert recent.remove(RecentItem("/X/doc.TXT"), remove_existing_files=True) is True
    assert recent.items == ()
    assert recent.node.children.count() == 0


def test_default_config_from_yaml(factory):
    recent = RecentFilesMenu(factory, exists=always_exists)
    assert recent.config == ProjectionConfig.from_config()
    assert recent.display_mode is DisplayMode.NESTED
    assert recent.node.label == "Recent Files"


def test_emitter_handler_error_is_logged(caplog):
    emitter = EventEmitter()
    got = []

    def broken(**payload):
        raise RuntimeError("boom")

    emitter.on("ping", broken)
    emitter.on("ping", lambda **payload: got.append(payload))
    with caplog.at_level(logging.ERROR, logger="recentmenu"):
        emitter.emit("ping", value=1)
    assert got == [{"value": 1}]
    assert any("boom" in r.getMessage() for r in caplog.records)

    emitter.off("ping")
    emitter.emit("ping", value=2)
    assert got == [{"value": 1}]
