from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Tuple

@dataclass
class Conn:
    pid: int | None
    laddr: Tuple  # (ip, port) or () for unbound sockets

class IOSample(NamedTuple):
    read_bytes: int
    write_bytes: int

class Direction(Enum):
    RECEIVED = "Received"
    SENT = "Sent"

@dataclass
class PortSeries:
    received: List[int] = field(default_factory=list)
    sent: List[int] = field(default_factory=list)
    breaks: List[int] = field(default_factory=list)  # tick index where a new sub-series begins

    def of(self, direction: Direction) -> List[int]:
        return self.received if direction is Direction.RECEIVED else self.sent

class DeltaPoint(NamedTuple):
    tick: int
    kb: float
