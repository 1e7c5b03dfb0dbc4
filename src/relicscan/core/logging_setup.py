"""Process-wide logging for relicscan.

Each run gets its own directory ``logs/session-YYYYmmdd_HHMMSS`` next to
config.ini, holding ``relicscan.log`` and a short ``session_info.txt``. Only
the newest sessions are kept. A console handler mirrors INFO and above.

Usage:
    session_dir = setup_logging(config_manager)           # level from config.ini
    session_dir = setup_logging(config_manager, "DEBUG")  # --verbose
"""
from __future__ import annotations

import logging
import os
import platform
import shutil
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "relicscan.log"
SESSION_PREFIX = "session-"
SESSIONS_KEPT = 3

_LEVEL_NAMES = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def _resolve_level(value: Union[str, int, None]) -> int:
    """Unknown or empty names fall back to INFO."""
    if isinstance(value, int):
        return value
    return _LEVEL_NAMES.get(str(value or "").strip().upper(), logging.INFO)


def get_log_dir(config_manager) -> Path:
    """``logs/`` beside config.ini, created on demand."""
    log_dir = Path(config_manager.config_path).parent / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def get_session_dir(config_manager) -> Path:
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session = get_log_dir(config_manager) / f"{SESSION_PREFIX}{stamp}"
    session.mkdir(parents=True, exist_ok=True)
    return session


def prune_old_sessions(log_dir: Path, keep: int = SESSIONS_KEPT) -> None:
    """Delete all but the ``keep`` newest session directories."""
    sessions = sorted(
        (p for p in log_dir.iterdir() if p.is_dir() and p.name.startswith(SESSION_PREFIX)),
        key=lambda p: p.name,
        reverse=True,
    )
    for old in sessions[keep:]:
        shutil.rmtree(old, ignore_errors=True)


def _write_session_info(session_dir: Path, config_manager) -> None:
    lines: List[str] = [
        "relicscan session",
        f"started: {datetime.now():%Y-%m-%d %H:%M:%S}",
        f"os: {platform.system()} {platform.release()}",
        f"python: {sys.version.split()[0]}",
        f"config: {config_manager.config_path}",
    ]
    lines += [f"{key}: {config_manager.get(key)}" for key in ("log_level", "listen", "output_dir", "game")]
    try:
        (session_dir / "session_info.txt").write_text("\n".join(lines) + "\n", encoding="utf-8")
    except OSError as e:
        logging.getLogger(__name__).warning("Could not write session info: %s", e)


def setup_logging(config_manager, level: Optional[Union[str, int]] = None) -> Path:
    """Install the session file handler and the console handler on the root logger.

    ``level`` wins over DEFAULT.log_level from config.ini. Returns the session
    directory.
    """
    lvl = _resolve_level(level if level is not None else config_manager.get("log_level"))

    root = logging.getLogger()
    root.setLevel(lvl)
    # Re-running replaces the handlers instead of stacking them
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    session_dir = get_session_dir(config_manager)
    os.environ["RS_LOG_SESSION_DIR"] = str(session_dir)
    log_file = session_dir / LOG_FILE_NAME

    file_handler = logging.FileHandler(log_file, encoding="utf-8", delay=True)
    file_handler.setLevel(lvl)
    console = logging.StreamHandler()
    console.setLevel(max(lvl, logging.INFO))
    for handler in (file_handler, console):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    prune_old_sessions(session_dir.parent)
    _write_session_info(session_dir, config_manager)

    # websockets logs every handshake at INFO
    if lvl > logging.DEBUG:
        logging.getLogger("websockets").setLevel(logging.WARNING)

    root.info("Logging initialized: level=%s, file=%s", logging.getLevelName(lvl), log_file)
    return session_dir
