"""JSON-based settings for the printable month sheets."""

import json
import os

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".grid-calendar.json")

_DEFAULT_COLORS = {
    "background": "white",
    "text": "black",
    "muted": "#AAAAAA",
    "weekend": "#CC0000",
    "event": "#0078D4",
    "grid": "#CCCCCC",
    "header_bg": "#F3F3F3",
}

_DEFAULTS = {
    "cell_width": 120,
    "cell_height": 80,
    "font_size": 14,
    "font_path": None,
    "colors": _DEFAULT_COLORS,
}


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    settings["colors"] = dict(_DEFAULT_COLORS)
    try:
        with open(path or _SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
        if not isinstance(stored, dict):
            return settings
        for key in ("cell_width", "cell_height", "font_size"):
            value = stored.get(key)
            if isinstance(value, int) and not isinstance(value, bool) and value > 0:
                settings[key] = value
        if isinstance(stored.get("font_path"), str):
            settings["font_path"] = stored["font_path"]
        if isinstance(stored.get("colors"), dict):
            settings["colors"].update(
                (k, v) for k, v in stored["colors"].items()
                if k in _DEFAULT_COLORS and isinstance(v, str)
            )
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        pass
    return settings
