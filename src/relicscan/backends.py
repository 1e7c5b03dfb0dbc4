"""Scan/lock backends.

Screen capture, recognition and pointer automation live outside this
package. ``RecordReplayBackend`` stands in for them by replaying raw records
recognized by an earlier pass, so the pipeline, exports and the command
protocol can run end to end.
"""
from __future__ import annotations

import abc
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Sequence

from .core.cli import ScannerConfig
from .core.errors import BackendError
from .items.catalogs import get_catalog
from .items.lock import LockAction, LockIntent
from .items.models import Relic
from .items.pipeline import RawScanRecord, collect

logger = logging.getLogger(__name__)


def load_records(path) -> List[RawScanRecord]:
    """Read a JSON array of raw record objects."""
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise BackendError(f"cannot read records {path}: {e}") from e
    except ValueError as e:
        raise BackendError(f"records file {path} is not valid JSON: {e}") from e
    if not isinstance(payload, list):
        raise BackendError(f"records file {path} must hold a JSON array")
    try:
        return [RawScanRecord.from_dict(item) for item in payload]
    except (AttributeError, TypeError, ValueError) as e:
        raise BackendError(f"bad record in {path}: {e}") from e


class Backend(abc.ABC):
    @abc.abstractmethod
    def scan(self, config: ScannerConfig) -> List[Relic]:
        """Return the relics found in the inventory."""

    @abc.abstractmethod
    def lock(self, config: ScannerConfig, actions: Sequence[LockAction]) -> None:
        """Apply ``actions``; raises LockSpecError for unknown targets."""


class UnavailableBackend(Backend):
    """Used when no capture layer is attached; every operation fails."""

    MESSAGE = "no capture/automation backend available (replay recognized records with --records)"

    def scan(self, config):
        raise BackendError(self.MESSAGE)

    def lock(self, config, actions):
        raise BackendError(self.MESSAGE)


class RecordReplayBackend(Backend):
    """Replays recognized records; lock actions update the replayed lock flags."""

    def __init__(self, records: Sequence[RawScanRecord]):
        self.records: List[RawScanRecord] = list(records)

    @classmethod
    def from_file(cls, path) -> "RecordReplayBackend":
        records = load_records(path)
        logger.info("loaded %d recognized records from %s", len(records), path)
        return cls(records)

    def scan(self, config: ScannerConfig) -> List[Relic]:
        records = self.records
        # --number overrides the item count the capture layer would detect
        if config.number > 0:
            records = records[: config.number]
        return collect(records, get_catalog(config.game), config.min_star, config.min_level)

    def lock(self, config: ScannerConfig, actions: Sequence[LockAction]) -> None:
        # Validate everything before touching any flag
        for action in actions:
            if not isinstance(action.target, int):
                raise BackendError(f"replayed records have no identifier {action.target!r}")
            if action.target >= len(self.records):
                raise BackendError(
                    f"lock index {action.target} out of range ({len(self.records)} records)"
                )

        for action in actions:
            record = self.records[action.target]
            if action.intent is LockIntent.LOCK:
                new_lock = True
            elif action.intent is LockIntent.UNLOCK:
                new_lock = False
            else:
                new_lock = not record.lock
            if new_lock != record.lock:
                self.records[action.target] = replace(record, lock=new_lock)
        logger.info("applied %d lock actions", len(actions))


def make_backend(records_path=None) -> Backend:
    if records_path:
        return RecordReplayBackend.from_file(records_path)
    return UnavailableBackend()
