"""Demo window: a File menu hosting the recent-files control."""

from pathlib import Path

from PySide6.QtWidgets import (
    QApplication,
    QFileDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
)
from PySide6.QtCore import Qt

from recentmenu.core.logger import get_logger
from recentmenu.core.projector import DisplayMode, ProjectionConfig
from recentmenu.gui.qt_recent_menu import QtRecentFilesMenu

logger = get_logger("gui")


class MainWindow(QMainWindow):
    """File menu: Open, recent files (nested or inline), Exit. View menu toggles the display mode."""

    def __init__(self, config: ProjectionConfig | None = None):
        super().__init__()
        self.setWindowTitle("Recent Files Demo")
        self.setMinimumSize(640, 400)
        self._label = QLabel("Open a file to add it to File > Recent Files.")
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setCentralWidget(self._label)
        self._recent = QtRecentFilesMenu(self, config=config)
        self._setup_menubar()
        self._connect_recent_signals()

    @property
    def recent(self) -> QtRecentFilesMenu:
        return self._recent

    def _setup_menubar(self):
        menubar = self.menuBar()

        self._file_menu = menubar.addMenu("&File")
        self._file_menu.addAction("&Open...", self._on_open)
        self._file_menu.addSeparator()
        self._recent.attach(self._file_menu)
        self._file_menu.addSeparator()
        self._file_menu.addAction("E&xit", self.close)

        view_menu = menubar.addMenu("&View")
        self._inline_action = view_menu.addAction("Show Recent Files &Inline")
        self._inline_action.setCheckable(True)
        self._inline_action.setChecked(self._recent.display_mode is DisplayMode.INLINE)
        self._inline_action.toggled.connect(self._on_inline_toggled)
        numbers_action = view_menu.addAction("&Number Recent Files")
        numbers_action.setCheckable(True)
        numbers_action.setChecked(self._recent.prepend_numbers)
        numbers_action.toggled.connect(self._on_numbers_toggled)

    def _connect_recent_signals(self):
        self._recent.itemActivated.connect(self._on_recent_item)
        self._recent.openAllActivated.connect(self._on_open_all)
        self._recent.clearAllActivated.connect(lambda: self.statusBar().showMessage("Recent files cleared."))

    def _on_open(self):
        path, _ = QFileDialog.getOpenFileName(self, "Open File")
        if path:
            self._open_path(path)

    def _open_path(self, path: str):
        if not self._recent.add(path):
            QMessageBox.warning(self, "Open File", "File not found:\n%s" % path)
            return
        self._label.setText(str(Path(path)))
        self.statusBar().showMessage("Opened %s" % Path(path).name)

    def _on_recent_item(self, item):
        logger.info("Recent item activated: %s", item.path)
        if not item.exists():
            self._recent.remove(item, remove_existing_files=True)
            QMessageBox.warning(self, "Open Recent", "File no longer exists:\n%s" % item.path)
            return
        self._open_path(item.path)

    def _on_open_all(self, items):
        for item in reversed(items):
            if item.exists():
                self._open_path(item.path)

    def _on_inline_toggled(self, checked: bool):
        self._recent.display_mode = DisplayMode.INLINE if checked else DisplayMode.NESTED

    def _on_numbers_toggled(self, checked: bool):
        self._recent.prepend_numbers = checked


def run(config: ProjectionConfig | None = None) -> int:
    app = QApplication.instance() or QApplication([])
    window = MainWindow(config=config)
    window.show()
    return app.exec()
