"""Remote command protocol: packets, dispatch and the websocket server."""

from .packets import (
    ConfigNotify,
    LockRequest,
    LockResponse,
    Packet,
    ScanRequest,
    ScanResponse,
    decode_packet,
    encode_packet,
)
from .server import CommandServer, parse_listen
from .session import CommandSession

__all__ = [
    "CommandServer",
    "CommandSession",
    "ConfigNotify",
    "LockRequest",
    "LockResponse",
    "Packet",
    "ScanRequest",
    "ScanResponse",
    "decode_packet",
    "encode_packet",
    "parse_listen",
]
