"""
Logging for the recentmenu package.

All loggers live under the "recentmenu" root. setup_logging() is called once by the
CLI and GUI entry points; library code only calls get_logger() / get_mode_logger().
"""
import logging
import os
from pathlib import Path
from typing import Optional

from .config import ENV_LOG_DIR, ENV_LOG_LEVEL

ROOT_NAME = "recentmenu"
LOG_FILE_NAME = "recentmenu.log"
_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s%(mode)s %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_setup_done = False


class RecentMenuFormatter(logging.Formatter):
    """Adds the display-mode tag written by ModeAdapter; empty for plain records."""

    def __init__(self, fmt: Optional[str] = None):
        super().__init__(fmt=fmt or _DEFAULT_FORMAT, datefmt=_DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "mode"):
            record.mode = ""
        return super().format(record)


class ModeAdapter(logging.LoggerAdapter):
    """Tags every record with the projection strategy, e.g. [inline]."""

    def process(self, msg, kwargs):
        mode = self.extra.get("mode")
        kwargs["extra"] = dict(kwargs.get("extra") or {}, mode=" [%s]" % mode if mode else "")
        return msg, kwargs


def _level_from_env() -> int:
    name = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    return getattr(logging, name, logging.INFO)


def default_log_file() -> Optional[Path]:
    """$RECENTMENU_LOG_DIR/recentmenu.log, or None when the variable is unset."""
    log_dir = os.environ.get(ENV_LOG_DIR)
    return Path(log_dir) / LOG_FILE_NAME if log_dir else None


def setup_logging(level: Optional[int] = None, log_file: Optional[os.PathLike | str] = None) -> None:
    """
    Configure the recentmenu root logger once: a console handler, plus a file handler
    when log_file is given or RECENTMENU_LOG_DIR is set. Level defaults to
    RECENTMENU_LOG_LEVEL (INFO when unset). Later calls are no-ops.
    """
    global _setup_done
    if _setup_done:
        return

    if level is None:
        level = _level_from_env()
    root = logging.getLogger(ROOT_NAME)
    root.setLevel(level)
    formatter = RecentMenuFormatter()

    handlers = [logging.StreamHandler()]
    path = Path(log_file) if log_file is not None else default_log_file()
    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    _setup_done = True


def get_logger(name: str) -> logging.Logger:
    """Logger under recentmenu.* (get_logger("cli") -> recentmenu.cli)."""
    if not name.startswith(ROOT_NAME + "."):
        name = "%s.%s" % (ROOT_NAME, name)
    return logging.getLogger(name)


def get_mode_logger(logger: logging.Logger, mode: str) -> ModeAdapter:
    """Adapter over logger whose lines carry [mode]; unwraps an existing ModeAdapter."""
    if isinstance(logger, ModeAdapter):
        logger = logger.logger
    return ModeAdapter(logger, {"mode": mode})
