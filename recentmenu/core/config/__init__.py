"""
Load configuration from YAML.
Default: recentmenu/core/config/default.yaml. Override: --config <file> or RECENTMENU_CONFIG.
"""
import os
from pathlib import Path
from typing import Any

import yaml

_CACHE: dict[str, Any] | None = None
_CONFIG_DIR = Path(__file__).resolve().parent


def _deep_merge(base: dict, override: dict) -> dict:
    """Merge override into base (recursive). base is not mutated."""
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _load_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def _defaults() -> dict:
    """Built-in defaults (no file)."""
    return {
        "recent_menu": {
            "display_mode": "nested",
            "max_display_items": 10,
            "prepend_numbers": True,
            "show_open_all": False,
            "show_clear_all": True,
            "open_all_label": "Open All Recent Items",
            "clear_all_label": "Clear All Recent Items",
        },
    }


def load_config(override_path: str | Path | None = None) -> dict:
    """
    Load config: default.yaml + env RECENTMENU_CONFIG + optional override file.
    Returns merged dict. Cached after first call unless override_path is given.
    """
    global _CACHE
    if override_path is not None:
        _CACHE = None

    if _CACHE is not None:
        return _CACHE

    base = _defaults()
    default_file = _CONFIG_DIR / "default.yaml"
    if default_file.exists():
        base = _deep_merge(base, _load_yaml(default_file))

    env_path = os.environ.get(ENV_CONFIG)
    if env_path and Path(env_path).exists():
        base = _deep_merge(base, _load_yaml(Path(env_path)))

    if override_path is not None:
        p = Path(override_path)
        if p.exists():
            base = _deep_merge(base, _load_yaml(p))

    # Display mode is matched case-insensitively; anything unknown is left for ProjectionConfig to reject
    section = base.get("recent_menu") or {}
    mode = section.get("display_mode")
    if isinstance(mode, str):
        section["display_mode"] = mode.strip().lower()
    base["recent_menu"] = section

    _CACHE = base
    return base


def get_config(override_path: str | Path | None = None) -> dict:
    """Alias for load_config; use for read-only access."""
    return load_config(override_path)


def reset_config() -> None:
    """Clear cache (e.g. for tests)."""
    global _CACHE
    _CACHE = None


# ---------------------------------------------------------------------------
# Display modes
# ---------------------------------------------------------------------------
DISPLAY_MODE_NESTED = "nested"
DISPLAY_MODE_INLINE = "inline"
DISPLAY_MODES = (DISPLAY_MODE_NESTED, DISPLAY_MODE_INLINE)

# ---------------------------------------------------------------------------
# Env var names
# ---------------------------------------------------------------------------
ENV_CONFIG = "RECENTMENU_CONFIG"
ENV_LOG_LEVEL = "RECENTMENU_LOG_LEVEL"
ENV_LOG_DIR = "RECENTMENU_LOG_DIR"

# Text used for separator nodes in text renderings
SEPARATOR_TEXT = "-"
