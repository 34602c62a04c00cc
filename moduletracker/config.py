"""
User preferences and default locations.

All user state lives in the package's data/ folder unless told otherwise:

    data/moduletracker.json   the modules
    data/preferences.json     this file's settings
    data/logs/                rotating log file

preferences.json is optional. A missing or broken file simply means
"use the defaults"; command line flags override whatever is stored there.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

log = logging.getLogger(__name__)


def default_data_dir() -> Path:
    """
    Return the default data directory inside the package.
    """
    return Path(__file__).resolve().parent / "data"


def default_preferences_path() -> Path:
    return default_data_dir() / "preferences.json"


@dataclass
class Preferences:
    module_tracker_file: str = str(Path("data") / "moduletracker.json")
    log_level: str = "WARNING"

    def module_tracker_path(self, base_dir: Path | None = None) -> Path:
        """
        Resolve the data file. Relative paths are taken relative to the package.
        """
        p = Path(self.module_tracker_file).expanduser()
        if p.is_absolute():
            return p
        base = base_dir if base_dir is not None else default_data_dir().parent
        return base / p


def load_preferences(path: str | Path | None = None) -> Preferences:
    prefs_path = Path(path) if path is not None else default_preferences_path()

    if not prefs_path.exists():
        return Preferences()

    try:
        data = json.loads(prefs_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        log.warning("Ignoring unreadable preferences file %s: %s", prefs_path, e)
        return Preferences()

    if not isinstance(data, dict):
        log.warning("Ignoring preferences file %s: expected a JSON object", prefs_path)
        return Preferences()

    prefs = Preferences()
    for key in ("module_tracker_file", "log_level"):
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            setattr(prefs, key, value.strip())
    return prefs


def save_preferences(prefs: Preferences, path: str | Path | None = None) -> None:
    prefs_path = Path(path) if path is not None else default_preferences_path()
    prefs_path.parent.mkdir(parents=True, exist_ok=True)
    prefs_path.write_text(json.dumps(asdict(prefs), indent=2, ensure_ascii=False), encoding="utf-8")
