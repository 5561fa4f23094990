"""Pre-storage bootstrap configuration. Zero imports from the rest of the app.

Stores user preferences that must be known before opening the storage file
(data folder, log level) plus a few display preferences.
Config lives in ~/.coinkeeper/config.json to avoid a bootstrapping problem.
"""
import json
import os
from pathlib import Path

CONFIG_DIR = Path.home() / ".coinkeeper"
CONFIG_FILE = CONFIG_DIR / "config.json"


def load_config() -> dict:
    """Returns {} on missing or corrupt file — never raises."""
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict) -> None:
    """Creates the config folder if needed; atomic write via .tmp + os.replace()."""
    tmp = CONFIG_FILE.with_suffix(".tmp")
    try:
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, CONFIG_FILE)
    except OSError:
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            pass


def get_setting(key: str, default=None):
    return load_config().get(key, default)


def set_setting(key: str, value) -> None:
    """Update a single key and save. None removes the key."""
    config = load_config()
    if value is None:
        config.pop(key, None)
    else:
        config[key] = value
    save_config(config)


def get_data_folder() -> Path:
    """Return config["data_folder"], or the config folder itself when unset."""
    folder = load_config().get("data_folder")
    return Path(folder).expanduser() if folder else CONFIG_FILE.parent
