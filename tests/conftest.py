"""Pytest configuration.

Ensures src/ is on sys.path so tests can import ``relicscan`` without an
install, and provides a few shared fixtures.
"""

import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
for p in (str(PROJECT_ROOT), str(SRC_DIR)):
    if p not in sys.path:
        sys.path.insert(0, p)


@pytest.fixture
def restore_root_logging():
    """Undo setup_logging() changes to the root logger after the test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)


@pytest.fixture
def user_config_dir(tmp_path, monkeypatch):
    """Point the default config.ini location at a temp dir."""
    monkeypatch.setenv("APPDATA", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    for key in ("LOG_LEVEL", "LISTEN", "OUTPUT_DIR", "GAME", "VERBOSE"):
        monkeypatch.delenv(f"RS_{key}", raising=False)
    return tmp_path / "RelicScan"
