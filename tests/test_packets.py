import json

import pytest

from relicscan.core.errors import ProtocolError
from relicscan.remote.packets import (
    ConfigNotify,
    LockRequest,
    LockResponse,
    Packet,
    ScanRequest,
    ScanResponse,
    decode_packet,
    encode_packet,
)


def test_envelope_shape():
    msg = json.loads(encode_packet(ScanResponse.ok('{"format": "SROD"}')))
    assert msg == {"cmd": "ScanRsp", "data": {"success": True, "message": "", "json": '{"format": "SROD"}'}}
    msg = json.loads(encode_packet(LockRequest(argv=["--game", "starrail"], indices=[1, 2])))
    assert msg == {
        "cmd": "LockReq",
        "data": {"argv": ["--game", "starrail"], "indices": [1, 2], "lock_json": None},
    }


@pytest.mark.parametrize(
    "packet",
    [
        ConfigNotify(config={"game": "genshin", "max_row": 1000}),
        ScanRequest(argv=["--min-star", "4"]),
        ScanResponse.failure("window not found"),
        LockRequest(argv=[], lock_json='{"version": 2, "actions": []}'),
        LockResponse.ok(),
    ],
)
def test_decode_encoded(packet):
    assert decode_packet(encode_packet(packet)) == packet


def test_lock_request_optional_fields():
    pkt = decode_packet('{"cmd": "LockReq", "data": {"argv": []}}')
    assert pkt == LockRequest(argv=[], indices=None, lock_json=None)


def test_failure_messages_are_never_empty():
    assert ScanResponse.failure("").message
    assert LockResponse.failure("").message


@pytest.mark.parametrize(
    "text,cmd",
    [
        ("not json", None),
        ("[1, 2]", None),
        ('{"data": {}}', None),
        ('{"cmd": "Nope", "data": {}}', "Nope"),
        ('{"cmd": "ScanReq"}', "ScanReq"),
        ('{"cmd": "ScanReq", "data": {}}', "ScanReq"),
        ('{"cmd": "ScanReq", "data": {"argv": "--dump"}}', "ScanReq"),
        ('{"cmd": "LockReq", "data": {"argv": [], "indices": [-1]}}', "LockReq"),
        ('{"cmd": "LockReq", "data": {"argv": [], "indices": [true]}}', "LockReq"),
        ('{"cmd": "LockReq", "data": {"argv": [], "lock_json": 5}}', "LockReq"),
        ('{"cmd": "ScanRsp", "data": {"success": "yes"}}', "ScanRsp"),
    ],
)
def test_decode_errors_carry_cmd(text, cmd):
    with pytest.raises(ProtocolError) as exc:
        decode_packet(text)
    assert exc.value.cmd == cmd


def test_deep_nesting_is_a_protocol_error():
    with pytest.raises(ProtocolError):
        decode_packet("[" * 200000)


def test_base_packet_is_abstract():
    with pytest.raises(TypeError):
        Packet()
