"""core.config
Configuration core: load/save helpers for config.ini.

This module provides a tiny ConfigManager used by the process to read and
persist the settings that are not part of a scan request: log level, the
websocket listen address, the export directory and the default game.
Scan options themselves come from the command line (see ``core.cli``).
"""

import os
from configparser import ConfigParser
from pathlib import Path
from typing import Optional

DEFAULTS = {
    "log_level": "INFO",
    "listen": "127.0.0.1:2022",
    "output_dir": ".",
    "game": "genshin",
    "verbose": "False",
}


def default_config_path() -> Path:
    """Per-user config.ini: %APPDATA%/RelicScan on Windows, XDG elsewhere."""
    if os.name == "nt":
        base = os.getenv("APPDATA") or Path.home() / "AppData" / "Roaming"
    else:
        base = os.getenv("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "RelicScan" / "config.ini"


class ConfigManager:
    """INI-backed settings; every key lives in the DEFAULT section.

    The file is only written by save(), or by load() when an existing file
    lacks some of DEFAULTS.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        self.config_path = Path(config_path) if config_path else default_config_path()
        self.config = ConfigParser()
        self.load()

    def load(self) -> None:
        """Load configuration from disk, filling in missing defaults."""
        if self.config_path.exists():
            self.config.read(self.config_path, encoding="utf-8")

        missing = [key for key in DEFAULTS if key not in self.config["DEFAULT"]]
        for key in missing:
            self.config["DEFAULT"][key] = DEFAULTS[key]

        # Persist defaults added to an existing file
        if self.config_path.exists() and missing:
            self.save()

    def get(self, key: str, fallback=None):
        """Get a configuration value.

        Precedence is env (RS_<KEY>) > config.ini > fallback.
        """
        val = os.environ.get(f"RS_{str(key).upper()}")
        if val is not None and val != "":
            return val
        return self.config["DEFAULT"].get(key, fallback)

    def get_bool(self, key: str, fallback: bool = False) -> bool:
        val = self.get(key)
        if val is None:
            return fallback
        return str(val).strip().lower() in {"1", "true", "yes", "on"}

    def set(self, key: str, value) -> None:
        self.config["DEFAULT"][key] = str(value)

    def save(self) -> None:
        """Persist current configuration to disk (creates parent directories)."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with self.config_path.open("w", encoding="utf-8") as fh:
            self.config.write(fh)
