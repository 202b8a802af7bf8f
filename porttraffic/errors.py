from __future__ import annotations
from pathlib import Path


class PortTrafficError(Exception):
    """Base class for every failure raised by porttraffic."""


class ResolutionFailure(PortTrafficError):
    """No live connection currently owns the port."""

    def __init__(self, port: int, reason: str = ""):
        self.port = port
        self.reason = reason or f"no process found for port {port}"
        super().__init__(self.reason)


class SamplingFailure(PortTrafficError):
    """The owning process is gone or its I/O counters cannot be read."""

    def __init__(self, pid: int, reason: str = ""):
        self.pid = pid
        self.reason = reason or f"cannot read io counters of pid {pid}"
        super().__init__(self.reason)


class RenderFailure(PortTrafficError):
    def __init__(self, port: int, direction, path: Path, cause: BaseException):
        self.port = port
        self.direction = direction
        self.path = path
        self.cause = cause
        super().__init__(f"{port}-{direction.value}: cannot save {path}: {cause}")
