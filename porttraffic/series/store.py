from __future__ import annotations
import copy
import threading
from typing import Dict, List

from ..models import Direction, IOSample, PortSeries

class SeriesStore:
    """Port -> (received, sent) cumulative byte series.

    Every mutation and the full read go through one lock. Each port has a
    single writer (its monitor), so per-port order is tick order; the lock
    only protects the map itself and keeps both directions the same length.
    """

    def __init__(self):
        self.lock = threading.Lock()
        self._series: Dict[int, PortSeries] = {}

    def create_series(self, port: int) -> None:
        with self.lock:
            self._series.setdefault(port, PortSeries())

    def append(self, port: int, direction: Direction, value: int) -> None:
        with self.lock:
            self._series[port].of(direction).append(value)

    def append_sample(self, port: int, s: IOSample) -> None:
        with self.lock:
            ps = self._series[port]
            ps.received.append(s.read_bytes)
            ps.sent.append(s.write_bytes)

    def mark_break(self, port: int) -> None:
        """The next sample of ``port`` starts a new sub-series (owner restarted)."""
        with self.lock:
            ps = self._series[port]
            ps.breaks.append(len(ps.received))

    def ports(self) -> List[int]:
        with self.lock:
            return list(self._series)

    def snapshot(self) -> Dict[int, PortSeries]:
        with self.lock:
            return copy.deepcopy(self._series)

