"""Option grammar shared by the local process and remote scan/lock requests.

A remote ``ScanReq``/``LockReq`` carries an argument vector which is parsed
with the same scan options and defaults as the process's own command line.
Options that configure the process itself (server, replay source, lock file)
and --help exist only locally.
"""
from __future__ import annotations

import argparse
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional, Sequence

from .errors import CommandLineError

GAMES = ("genshin", "starrail")

# Window titles of the desktop clients; any other window name means a
# cloud/streamed client, which scrolls by pixels instead of by rows.
DESKTOP_WINDOW_TITLES = frozenset({"", "原神", "崩坏：星穹铁道", "Genshin Impact", "Honkai: Star Rail"})


def _non_negative_int(text: str) -> int:
    try:
        value = int(text, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: {text!r}")
    return value


def _speed(text: str) -> int:
    value = _non_negative_int(text)
    if not 1 <= value <= 5:
        raise argparse.ArgumentTypeError(f"speed must be between 1 and 5, got {value}")
    return value


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}")
    if not value > 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text!r}")
    return value


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message):
        raise CommandLineError(message)

    def exit(self, status=0, message=None):
        raise CommandLineError((message or "").strip() or f"argument parser exited with status {status}")


def _add_scan_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--game", choices=GAMES, default="genshin",
                        help="Game whose inventory is scanned")
    parser.add_argument("--dump", dest="dump_mode", action="store_true",
                        help="Save recognized raw records next to the export (debug)")
    parser.add_argument("--capture-only", action="store_true",
                        help="Only save captures, do not recognize (debug)")
    parser.add_argument("--mark", action="store_true",
                        help="Save captures with calibrated regions marked (debug)")
    parser.add_argument("--no-check", action="store_true",
                        help="Do not check that the inventory panel is open")
    parser.add_argument("--dxgcap", action="store_true",
                        help="Use DXGI desktop duplication for capture")
    parser.add_argument("--max-row", type=_non_negative_int, default=1000,
                        help="Maximum rows to scan")
    parser.add_argument("--min-star", type=_non_negative_int, default=5,
                        help="Minimum rarity to keep")
    parser.add_argument("--min-level", type=_non_negative_int, default=0,
                        help="Minimum level to keep")
    parser.add_argument("--speed", type=_speed, default=5,
                        help="Speed tier 1-5 (lower it when many retries are reported)")
    parser.add_argument("--number", type=_non_negative_int, default=0,
                        help="Item count override when automatic counting is wrong")
    parser.add_argument("--default-stop", type=_non_negative_int, default=500,
                        help="Default pause after clicks and animations (ms)")
    parser.add_argument("--scroll-stop", type=_non_negative_int, default=100,
                        help="Pause after scrolling a page (ms)")
    parser.add_argument("--lock-stop", type=_non_negative_int, default=100,
                        help="Pause after toggling a lock (ms)")
    parser.add_argument("--max-wait-switch-artifact", type=_non_negative_int, default=800,
                        help="Maximum wait for the panel to switch item (ms)")
    parser.add_argument("--max-wait-scroll", type=_non_negative_int, default=0,
                        help="Maximum wait for a page scroll (ms)")
    parser.add_argument("--max-wait-lock", type=_non_negative_int, default=0,
                        help="Maximum wait for a lock toggle (ms)")
    parser.add_argument("--offset-x", type=int, default=0,
                        help="Manual horizontal capture offset (px)")
    parser.add_argument("--offset-y", type=int, default=0,
                        help="Manual vertical capture offset (px)")
    parser.add_argument("--window", default="",
                        help="Game window name")
    parser.add_argument("--scroll-speed", type=_positive_float, default=15.0,
                        help="Wheel speed in pixels (cloud clients only)")


def _add_request_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--output-dir", default=None, help="Export directory")
    parser.add_argument("--verbose", action="store_true", default=None, help="Verbose logging")


def _add_process_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--ws", action="store_true", help="Run the websocket command server")
    parser.add_argument("--listen", default=None, help="Websocket listen address HOST:PORT")
    parser.add_argument("--records", default=None,
                        help="Replay recognized records from a JSON dump instead of capturing")
    parser.add_argument("--lock-file", default=None,
                        help="Apply the lock specification in this file instead of scanning")


def build_parser(request: bool = False) -> argparse.ArgumentParser:
    """Return the option parser.

    A ``request`` parser reads the argv of a remote ScanReq/LockReq: it raises
    CommandLineError instead of exiting, has no --help, and rejects the options
    that only configure this process (--ws, --listen, --records, --lock-file).
    """
    if request:
        parser = _RaisingArgumentParser(prog="relicscan", add_help=False)
    else:
        parser = argparse.ArgumentParser(prog="relicscan", description="Relic/artifact export and lock tool")
    _add_scan_options(parser)
    _add_request_options(parser)
    if not request:
        _add_process_options(parser)
    return parser


@dataclass(frozen=True)
class ScannerConfig:
    """Flat configuration surface consumed by scan and lock operations."""

    game: str = "genshin"
    max_row: int = 1000
    capture_only: bool = False
    min_star: int = 5
    min_level: int = 0
    max_wait_switch_artifact: int = 800
    scroll_stop: int = 100
    number: int = 0
    dump_mode: bool = False
    speed: int = 5
    no_check: bool = False
    max_wait_scroll: int = 0
    mark: bool = False
    dxgcap: bool = False
    default_stop: int = 500
    cloud: bool = False
    scroll_speed: float = 15.0
    lock_stop: int = 100
    max_wait_lock: int = 0
    offset_x: int = 0
    offset_y: int = 0
    window: str = ""
    output_dir: Optional[str] = None

    @classmethod
    def from_namespace(cls, ns: argparse.Namespace) -> "ScannerConfig":
        return cls(
            game=ns.game,
            max_row=ns.max_row,
            capture_only=ns.capture_only,
            min_star=ns.min_star,
            min_level=ns.min_level,
            max_wait_switch_artifact=ns.max_wait_switch_artifact,
            scroll_stop=ns.scroll_stop,
            number=ns.number,
            dump_mode=ns.dump_mode,
            speed=ns.speed,
            no_check=ns.no_check,
            max_wait_scroll=ns.max_wait_scroll,
            mark=ns.mark,
            dxgcap=ns.dxgcap,
            default_stop=ns.default_stop,
            cloud=ns.window not in DESKTOP_WINDOW_TITLES,
            scroll_speed=ns.scroll_speed,
            lock_stop=ns.lock_stop,
            max_wait_lock=ns.max_wait_lock,
            offset_x=ns.offset_x,
            offset_y=ns.offset_y,
            window=ns.window,
            output_dir=ns.output_dir,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def parse_argv(argv: Sequence[str], defaults: Optional[Mapping[str, Any]] = None) -> argparse.Namespace:
    """Parse an argument vector without a program name.

    Raises CommandLineError instead of exiting; ``defaults`` override the
    grammar's defaults (e.g. the game configured in config.ini).
    """
    if isinstance(argv, (str, bytes)) or not all(isinstance(a, str) for a in argv):
        raise CommandLineError("argv must be a list of strings")
    parser = build_parser(request=True)
    if defaults:
        parser.set_defaults(**dict(defaults))
    return parser.parse_args(list(argv))


def config_from_argv(argv: Sequence[str], defaults: Optional[Mapping[str, Any]] = None) -> ScannerConfig:
    return ScannerConfig.from_namespace(parse_argv(argv, defaults))
