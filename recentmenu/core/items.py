"""Recent item record and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def file_exists(path: os.PathLike | str) -> bool:
    """Default existence check used by RecentItemStore.add()."""
    return Path(path).exists()


def path_key(path: os.PathLike | str) -> str:
    """Case-insensitive dedup key: absolute path, lower-cased."""
    return str(Path(path).expanduser().absolute()).lower()


@dataclass(eq=False)
class RecentItem:
    """
    One recently-used file reference.
    Compares by identity; use matches() for the case-insensitive path comparison.
    """

    path: str
    display_text: Optional[str] = None

    def __post_init__(self):
        self.path = os.fspath(self.path)

    @property
    def label(self) -> str:
        """Human-readable text: display_text if set, else the path."""
        return self.display_text or self.path

    @property
    def key(self) -> str:
        return path_key(self.path)

    def matches(self, other) -> bool:
        """True if other (RecentItem or path) refers to the same file, ignoring case."""
        other_path = other.path if isinstance(other, RecentItem) else other
        return self.key == path_key(other_path)

    def exists(self) -> bool:
        return file_exists(self.path)
