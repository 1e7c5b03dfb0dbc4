"""Exception hierarchy shared across relicscan.

Parsing of individual fields never raises; it returns ``None`` and logs.
These exceptions cover the seams where a whole operation has to be refused.
"""
from __future__ import annotations


class RelicScanError(Exception):
    """Base exception for relicscan."""


class CommandLineError(RelicScanError):
    """Raised when an argument vector does not match the option grammar."""


class ProtocolError(RelicScanError):
    """Raised when a remote message cannot be decoded into a packet."""

    def __init__(self, message: str, cmd: str | None = None) -> None:
        super().__init__(message)
        # Request kind named by the message, when it could be read
        self.cmd = cmd


class LockSpecError(RelicScanError):
    """Raised when a lock specification cannot be loaded."""


class UnsupportedResolutionError(RelicScanError):
    """Raised when no reference layout matches the captured window."""


class BackendError(RelicScanError):
    """Raised by scan/lock backends when the operation cannot run."""
