"""WebSocket transport for the command protocol.

One thread per connection (websockets' threaded server); the session
serializes the scan/lock operations themselves.
"""
from __future__ import annotations

import logging
import threading
from typing import Optional, Tuple

from websockets.exceptions import ConnectionClosed, ConnectionClosedOK
from websockets.sync.server import Server, ServerConnection, serve

from .packets import Packet, encode_packet
from .session import CommandSession

logger = logging.getLogger(__name__)


def parse_listen(address: str) -> Tuple[str, int]:
    """``"HOST:PORT"`` -> (host, port)."""
    host, sep, port = address.rpartition(":")
    if not sep or not host:
        raise ValueError(f"listen address must be HOST:PORT, got {address!r}")
    try:
        port_num = int(port)
    except ValueError:
        raise ValueError(f"invalid port in listen address {address!r}") from None
    if not 0 <= port_num <= 65535:
        raise ValueError(f"invalid port in listen address {address!r}")
    return host.strip("[]"), port_num


class CommandServer:
    """Serves a CommandSession over websockets from a background thread."""

    def __init__(self, session: CommandSession, host: str = "127.0.0.1", port: int = 2022):
        self.session = session
        self.host = host
        self._requested_port = port
        self._server: Optional[Server] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def port(self) -> int:
        if self._server is None:
            return self._requested_port
        return self._server.socket.getsockname()[1]

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._server = serve(self._handle_connection, self.host, self._requested_port)
        self._thread = threading.Thread(
            target=self._server.serve_forever, name="RelicScan-WebSocket", daemon=True
        )
        self._thread.start()
        logger.info("websocket server started: ws://%s:%d", self.host, self.port)

    def stop(self) -> None:
        if self._server is not None:
            self._server.shutdown()
        if self._thread is not None:
            self._thread.join(timeout=2.0)
        self._server = None
        self._thread = None
        logger.info("websocket server stopped")

    def serve_forever(self) -> None:
        """Run in the calling thread until interrupted."""
        self.start()
        try:
            while self.running:
                self._thread.join(timeout=0.5)
        finally:
            self.stop()

    def _send(self, connection: ServerConnection, packet: Packet) -> bool:
        try:
            connection.send(encode_packet(packet))
        except ConnectionClosed as e:
            logger.warning("connection closed: %s", e)
            return False
        logger.info("sent: %s", self.session.describe(packet))
        return True

    def _handle_connection(self, connection: ServerConnection) -> None:
        peer = connection.remote_address
        logger.info("connection established: %s", peer)
        if not self._send(connection, self.session.config_notify()):
            return
        while True:
            try:
                message = connection.recv()
            except ConnectionClosedOK:
                logger.info("connection closed: %s", peer)
                return
            except ConnectionClosed as e:
                logger.warning("connection lost: %s (%s)", peer, e)
                return
            if isinstance(message, bytes):
                logger.warning("ignored binary message (%d bytes) from %s", len(message), peer)
                continue
            response = self.session.handle_text(message)
            if response is None:
                continue
            if not self._send(connection, response):
                return
