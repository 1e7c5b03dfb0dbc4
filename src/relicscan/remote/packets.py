"""Wire packets of the remote command protocol.

Every message is one JSON text frame shaped ``{"cmd": <kind>, "data": {...}}``.
"""
from __future__ import annotations

import abc
import json
from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type

from ..core.errors import ProtocolError


@dataclass
class Packet(abc.ABC):
    CMD: ClassVar[str] = ""

    def to_data(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    @abc.abstractmethod
    def from_data(cls, data: Mapping[str, Any]) -> "Packet":
        """Build the packet from its ``data`` object; raises ProtocolError."""


def _field(data: Mapping[str, Any], name: str, kind, cmd: str, default=...):
    if name not in data:
        if default is ...:
            raise ProtocolError(f"{cmd}: missing field {name!r}", cmd=cmd)
        return default
    value = data[name]
    if kind is not None and not isinstance(value, kind):
        raise ProtocolError(f"{cmd}: field {name!r} has the wrong type", cmd=cmd)
    return value


def _str_list(value: Any, name: str, cmd: str) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ProtocolError(f"{cmd}: field {name!r} must be a list of strings", cmd=cmd)
    return list(value)


@dataclass
class ConfigNotify(Packet):
    CMD: ClassVar[str] = "ConfigNotify"

    config: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_data(cls, data):
        return cls(config=dict(_field(data, "config", dict, cls.CMD)))


@dataclass
class ScanRequest(Packet):
    CMD: ClassVar[str] = "ScanReq"

    argv: List[str] = field(default_factory=list)

    @classmethod
    def from_data(cls, data):
        return cls(argv=_str_list(_field(data, "argv", None, cls.CMD), "argv", cls.CMD))


@dataclass
class ScanResponse(Packet):
    CMD: ClassVar[str] = "ScanRsp"

    success: bool = False
    message: str = ""
    json: str = ""

    @classmethod
    def from_data(cls, data):
        return cls(
            success=_field(data, "success", bool, cls.CMD),
            message=_field(data, "message", str, cls.CMD, ""),
            json=_field(data, "json", str, cls.CMD, ""),
        )

    @classmethod
    def ok(cls, payload: str) -> "ScanResponse":
        return cls(success=True, message="", json=payload)

    @classmethod
    def failure(cls, message: str) -> "ScanResponse":
        return cls(success=False, message=message or "scan failed", json="")


@dataclass
class LockRequest(Packet):
    CMD: ClassVar[str] = "LockReq"

    argv: List[str] = field(default_factory=list)
    indices: Optional[List[int]] = None
    lock_json: Optional[str] = None

    @classmethod
    def from_data(cls, data):
        argv = _str_list(_field(data, "argv", None, cls.CMD), "argv", cls.CMD)
        indices = _field(data, "indices", (list, type(None)), cls.CMD, None)
        if indices is not None and not all(
            isinstance(i, int) and not isinstance(i, bool) and i >= 0 for i in indices
        ):
            raise ProtocolError(f"{cls.CMD}: indices must be non-negative integers", cmd=cls.CMD)
        lock_json = _field(data, "lock_json", (str, type(None)), cls.CMD, None)
        return cls(argv=argv, indices=indices, lock_json=lock_json)


@dataclass
class LockResponse(Packet):
    CMD: ClassVar[str] = "LockRsp"

    success: bool = False
    message: str = ""

    @classmethod
    def from_data(cls, data):
        return cls(
            success=_field(data, "success", bool, cls.CMD),
            message=_field(data, "message", str, cls.CMD, ""),
        )

    @classmethod
    def ok(cls) -> "LockResponse":
        return cls(success=True, message="")

    @classmethod
    def failure(cls, message: str) -> "LockResponse":
        return cls(success=False, message=message or "lock failed")


PACKET_TYPES: Dict[str, Type[Packet]] = {
    cls.CMD: cls for cls in (ConfigNotify, ScanRequest, ScanResponse, LockRequest, LockResponse)
}

# Request kind -> response type used to report a failure for it
RESPONSE_FOR: Dict[str, Type[Packet]] = {
    ScanRequest.CMD: ScanResponse,
    LockRequest.CMD: LockResponse,
}


def encode_packet(packet: Packet) -> str:
    return json.dumps({"cmd": packet.CMD, "data": packet.to_data()}, ensure_ascii=False)


def decode_packet(text) -> Packet:
    """Decode one text frame; raises ProtocolError with ``cmd`` set when known."""
    try:
        message = json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        raise ProtocolError(f"invalid JSON: {e}") from e
    if not isinstance(message, dict):
        raise ProtocolError("packet must be a JSON object")

    cmd = message.get("cmd")
    if not isinstance(cmd, str):
        raise ProtocolError("packet has no cmd")
    cls = PACKET_TYPES.get(cmd)
    if cls is None:
        raise ProtocolError(f"unknown cmd {cmd!r}", cmd=cmd)
    data = message.get("data")
    if not isinstance(data, dict):
        raise ProtocolError(f"{cmd}: data must be an object", cmd=cmd)
    return cls.from_data(data)
