"""Lock specifications: which items to lock, unlock or flip.

Persisted as ``{"version": 2, "actions": [{"target": ..., "intent": ...}]}``.
Older clients send a bare list of positional indices; each index becomes a
``flip`` action.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, List, Union

from ..core.errors import LockSpecError

logger = logging.getLogger(__name__)

LOCK_FILE_VERSION = 2
LOCK_FILE_NAME = "lock.json"


class LockIntent(Enum):
    LOCK = "lock"
    UNLOCK = "unlock"
    FLIP = "flip"


@dataclass(frozen=True)
class LockAction:
    target: Union[int, str]
    intent: LockIntent = LockIntent.FLIP

    def to_dict(self) -> dict:
        return {"target": self.target, "intent": self.intent.value}

    @classmethod
    def from_dict(cls, data: Any) -> "LockAction":
        if not isinstance(data, dict):
            raise LockSpecError(f"lock action must be an object, got {type(data).__name__}")
        target = data.get("target")
        # bool is an int subclass; reject it explicitly
        if isinstance(target, bool) or not isinstance(target, (int, str)):
            raise LockSpecError(f"invalid lock target: {target!r}")
        if isinstance(target, int) and target < 0:
            raise LockSpecError(f"negative lock index: {target}")
        try:
            intent = LockIntent(data.get("intent", LockIntent.FLIP.value))
        except ValueError:
            raise LockSpecError(f"invalid lock intent: {data.get('intent')!r}") from None
        return cls(target=target, intent=intent)


def from_indices(indices: Iterable[int]) -> List[LockAction]:
    """Legacy positional indices -> flip actions, order preserved."""
    actions = []
    for index in indices:
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise LockSpecError(f"invalid lock index: {index!r}")
        actions.append(LockAction(target=index, intent=LockIntent.FLIP))
    return actions


def dumps(actions: Iterable[LockAction]) -> str:
    payload = {
        "version": LOCK_FILE_VERSION,
        "actions": [a.to_dict() for a in actions],
    }
    return json.dumps(payload, ensure_ascii=False)


def loads(text: str) -> List[LockAction]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise LockSpecError(f"lock specification is not valid JSON: {e}") from e

    # A bare list is the legacy index format
    if isinstance(payload, list):
        return from_indices(payload)
    if not isinstance(payload, dict):
        raise LockSpecError("lock specification must be an object or a list of indices")

    version = payload.get("version")
    if version != LOCK_FILE_VERSION:
        raise LockSpecError(f"unsupported lock specification version: {version!r}")
    actions = payload.get("actions")
    if not isinstance(actions, list):
        raise LockSpecError("lock specification has no action list")
    return [LockAction.from_dict(item) for item in actions]


def dump_lock_file(actions: Iterable[LockAction], path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    actions = list(actions)
    path.write_text(dumps(actions), encoding="utf-8")
    logger.info("wrote %d lock actions to %s", len(actions), path)
    return path


def load_lock_file(path) -> List[LockAction]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LockSpecError(f"cannot read lock specification {path}: {e}") from e
    return loads(text)
