"""Main application entry point.

Loads config.ini, initializes logging, then either runs one scan/lock pass or
serves the remote command protocol (--ws).
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .backends import Backend, make_backend
from .core.cli import GAMES, ScannerConfig, build_parser
from .core.config import ConfigManager
from .core.errors import RelicScanError
from .core.logging_setup import setup_logging
from .items.export import export_json, write_exports
from .items.lock import LOCK_FILE_NAME, LockAction, load_lock_file
from .remote.server import CommandServer, parse_listen
from .remote.session import CommandSession

logger = logging.getLogger(__name__)


def _default_game(config_manager: ConfigManager) -> str:
    game = config_manager.get("game", fallback=GAMES[0])
    if game not in GAMES:
        logger.warning("config.ini game %r is not one of %s; using %s", game, ", ".join(GAMES), GAMES[0])
        return GAMES[0]
    return game


def run_scan(backend: Backend, config: ScannerConfig, output_dir) -> str:
    """Scan, write every export for the game and return the primary export JSON.

    ``config.output_dir`` (from the request's own argv) wins over ``output_dir``.
    """
    relics = backend.scan(config)
    write_exports(relics, config.game, config.output_dir or output_dir)
    return export_json(relics, config.game)


def run_lock(backend: Backend, config: ScannerConfig, actions: List[LockAction]) -> None:
    logger.info("applying %d lock actions", len(actions))
    backend.lock(config, actions)


def run_once(backend: Backend, config: ScannerConfig, output_dir: Path, lock_file: Optional[str]) -> None:
    if lock_file:
        run_lock(backend, config, load_lock_file(lock_file))
        return
    if (output_dir / LOCK_FILE_NAME).exists():
        logger.info("found %s; pass --lock-file to apply it", output_dir / LOCK_FILE_NAME)
    run_scan(backend, config, output_dir)


def run_server(backend: Backend, config: ScannerConfig, output_dir: Path, listen: str,
               defaults: dict, verbose: bool) -> None:
    host, port = parse_listen(listen)
    session = CommandSession(
        config,
        scan_op=lambda cfg: run_scan(backend, cfg, output_dir),
        lock_op=lambda cfg, actions: run_lock(backend, cfg, actions),
        defaults=defaults,
        verbose=verbose,
    )
    server = CommandServer(session, host, port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("interrupted")


def main(argv: Optional[Sequence[str]] = None) -> int:
    config_manager = ConfigManager()
    defaults = {"game": _default_game(config_manager)}

    parser = build_parser()
    parser.set_defaults(**defaults)
    args = parser.parse_args(argv)

    verbose = args.verbose if args.verbose is not None else config_manager.get_bool("verbose")
    session_dir = setup_logging(config_manager, "DEBUG" if verbose else None)
    logger.debug("log session: %s", session_dir)

    def _excepthook(exc_type, exc, tb):
        logging.getLogger(__name__).exception("Unhandled exception:", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook

    config = ScannerConfig.from_namespace(args)
    output_dir = Path(args.output_dir or config_manager.get("output_dir", fallback="."))

    try:
        backend = make_backend(args.records)
        if args.ws:
            run_server(backend, config, output_dir, args.listen or config_manager.get("listen"),
                       defaults, verbose)
        else:
            run_once(backend, config, output_dir, args.lock_file)
    except (RelicScanError, ValueError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
