import json
import sys

import pytest

from relicscan import main as entry
from relicscan.backends import Backend, RecordReplayBackend, UnavailableBackend, load_records, make_backend
from relicscan.core.cli import ScannerConfig
from relicscan.core.errors import BackendError
from relicscan.items.lock import LockAction, LockIntent, dump_lock_file

RECORDS = [
    {
        "name": "过客的逢春木簪",
        "main_stat_name": "生命值",
        "main_stat_value": "705",
        "sub_stat_1": "速度+2",
        "level": "+15",
        "location": "希儿已装备",
        "rarity": 5,
        "lock": False,
    },
    {
        "name": "快枪手的粗革手套",
        "main_stat_name": "攻击力",
        "main_stat_value": "352",
        "level": "+15",
        "rarity": 5,
        "lock": True,
    },
    {
        "name": "not a relic",
        "main_stat_name": "生命值",
        "main_stat_value": "1",
        "level": "+0",
        "rarity": 5,
    },
]

STARRAIL = ScannerConfig(game="starrail", min_star=5)


@pytest.fixture
def records_file(tmp_path):
    path = tmp_path / "records.json"
    path.write_text(json.dumps(RECORDS, ensure_ascii=False), encoding="utf-8")
    return path


def test_replay_scan(records_file):
    backend = make_backend(records_file)
    relics = backend.scan(STARRAIL)
    assert len(relics) == 2
    assert relics[0].location == "Seele"


def test_number_limits_replayed_items(records_file):
    backend = RecordReplayBackend.from_file(records_file)
    relics = backend.scan(ScannerConfig(game="starrail", number=1))
    assert len(relics) == 1


def test_lock_updates_replayed_flags(records_file):
    backend = RecordReplayBackend.from_file(records_file)
    backend.lock(STARRAIL, [LockAction(0, LockIntent.LOCK), LockAction(1, LockIntent.FLIP)])
    relics = backend.scan(STARRAIL)
    assert [r.lock for r in relics] == [True, False]


@pytest.mark.parametrize("action", [LockAction("abc"), LockAction(99)])
def test_lock_rejects_unknown_targets(records_file, action):
    backend = RecordReplayBackend.from_file(records_file)
    with pytest.raises(BackendError):
        backend.lock(STARRAIL, [LockAction(0, LockIntent.LOCK), action])
    # nothing applied
    assert backend.records[0].lock is False


@pytest.mark.parametrize("content", ["{", '{"a": 1}', "[1]"])
def test_bad_records_file(tmp_path, content):
    path = tmp_path / "records.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(BackendError):
        load_records(path)


def test_unavailable_backend():
    backend = make_backend(None)
    assert isinstance(backend, UnavailableBackend)
    with pytest.raises(BackendError):
        backend.scan(STARRAIL)
    with pytest.raises(BackendError):
        backend.lock(STARRAIL, [])


def test_main_scan_writes_exports(tmp_path, records_file, user_config_dir, restore_root_logging, monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    out = tmp_path / "export"
    code = entry.main(["--game", "starrail", "--records", str(records_file), "--output-dir", str(out)])
    assert code == 0
    doc = json.loads((out / "srod.json").read_text(encoding="utf-8"))
    assert [r["slotKey"] for r in doc["relics"]] == ["head", "hand"]
    assert (out / "hood.json").exists()
    assert (user_config_dir / "config.ini").parent.joinpath("logs").exists()


def test_main_lock_file(tmp_path, records_file, user_config_dir, restore_root_logging, monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    lock_file = dump_lock_file([LockAction(0, LockIntent.LOCK)], tmp_path / "lock.json")
    code = entry.main(["--game", "starrail", "--records", str(records_file), "--lock-file", str(lock_file)])
    assert code == 0


def test_main_reports_missing_backend(tmp_path, user_config_dir, restore_root_logging, monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    assert entry.main(["--output-dir", str(tmp_path)]) == 1


def test_run_scan_prefers_requested_output_dir(tmp_path, records_file):
    backend = RecordReplayBackend.from_file(records_file)
    requested = tmp_path / "requested"
    payload = entry.run_scan(backend, ScannerConfig(game="starrail", output_dir=str(requested)), tmp_path / "server")
    assert json.loads(payload)["format"] == "SROD"
    assert (requested / "srod.json").exists()
    assert not (tmp_path / "server").exists()
    entry.run_scan(backend, ScannerConfig(game="starrail"), tmp_path / "server")
    assert (tmp_path / "server" / "hood.json").exists()


def test_backend_requires_scan_and_lock():
    class ScanOnly(Backend):
        def scan(self, config):
            return []

    with pytest.raises(TypeError):
        Backend()
    with pytest.raises(TypeError):
        ScanOnly()
