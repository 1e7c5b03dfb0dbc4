"""Request dispatch for the remote command protocol.

``CommandSession`` is transport-free: it turns one decoded request into one
response packet (or none) by re-parsing the request's argument vector and
calling the scan/lock operations it was built with.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, List, Mapping, Optional

from ..core.cli import ScannerConfig, config_from_argv
from ..core.errors import ProtocolError
from ..items import lock as lockspec
from ..items.lock import LockAction
from .packets import (
    RESPONSE_FOR,
    ConfigNotify,
    LockRequest,
    LockResponse,
    Packet,
    ScanRequest,
    ScanResponse,
    decode_packet,
)

logger = logging.getLogger(__name__)

ScanOperation = Callable[[ScannerConfig], str]
LockOperation = Callable[[ScannerConfig, List[LockAction]], None]


def actions_for(request: LockRequest) -> List[LockAction]:
    """Lock actions carried by a request: the serialized spec wins over indices."""
    if request.lock_json is not None:
        return lockspec.loads(request.lock_json)
    if request.indices is not None:
        return lockspec.from_indices(request.indices)
    return []


class CommandSession:
    def __init__(
        self,
        config: ScannerConfig,
        scan_op: ScanOperation,
        lock_op: LockOperation,
        defaults: Optional[Mapping[str, Any]] = None,
        verbose: bool = False,
    ):
        self.config = config
        self.scan_op = scan_op
        self.lock_op = lock_op
        self.defaults = dict(defaults or {})
        self.verbose = verbose
        # Scan and lock drive a single pointer; never run two at once
        self._op_lock = threading.Lock()

    def config_notify(self) -> ConfigNotify:
        return ConfigNotify(config=self.config.to_dict())

    def describe(self, packet: Packet) -> str:
        return repr(packet) if self.verbose else packet.CMD

    def handle_text(self, text: str) -> Optional[Packet]:
        try:
            packet = decode_packet(text)
        except ProtocolError as e:
            logger.warning("undecodable packet: %s", e)
            response_cls = RESPONSE_FOR.get(e.cmd)
            if response_cls is None:
                return None
            return response_cls.failure(str(e))
        return self.handle(packet)

    def handle(self, packet: Packet) -> Optional[Packet]:
        if isinstance(packet, ScanRequest):
            logger.info("received: %s", self.describe(packet))
            return self._scan(packet)
        if isinstance(packet, LockRequest):
            logger.info("received: %s", self.describe(packet))
            return self._lock(packet)
        logger.warning("unexpected packet: %s", packet.CMD)
        return None

    def _scan(self, request: ScanRequest) -> ScanResponse:
        try:
            config = config_from_argv(request.argv, self.defaults)
            with self._op_lock:
                payload = self.scan_op(config)
        except Exception as e:
            logger.exception("scan request failed")
            return ScanResponse.failure(str(e))
        return ScanResponse.ok(payload)

    def _lock(self, request: LockRequest) -> LockResponse:
        try:
            config = config_from_argv(request.argv, self.defaults)
            actions = actions_for(request)
            with self._op_lock:
                self.lock_op(config, actions)
        except Exception as e:
            logger.exception("lock request failed")
            return LockResponse.failure(str(e))
        return LockResponse.ok()
