from __future__ import annotations
import logging, threading, time
from enum import Enum
from typing import Callable, Optional

from ..errors import ResolutionFailure, SamplingFailure
from ..models import IOSample
from ..series import SeriesStore
from .process import sample as default_sample
from .resolver import resolve as default_resolve

log = logging.getLogger(__name__)

Resolver = Callable[[int], int]
Sampler = Callable[[int], IOSample]

class MonitorState(Enum):
    INITIALIZING = "initializing"
    SAMPLING = "sampling"
    STOPPED = "stopped"

class PortMonitor:
    """Polls the owner of one local port once per tick and appends its io counters.

    Any resolution or sampling failure stops this monitor only; nothing is retried.
    """

    def __init__(self, port: int, store: SeriesStore, interval: float = 1.0,
                 resolver: Resolver = default_resolve, sampler: Sampler = default_sample):
        self.port = port
        self.store = store
        self.interval = interval
        self.resolver = resolver
        self.sampler = sampler
        self.stop_event = threading.Event()
        self.state = MonitorState.INITIALIZING
        self.ticks = 0
        self.error: Optional[BaseException] = None
        self._thread: Optional[threading.Thread] = None

    def start(self) -> "PortMonitor":
        self._thread = threading.Thread(target=self.run, name=f"monitor-{self.port}", daemon=True)
        self._thread.start()
        return self

    def stop(self) -> None:
        """Ask this monitor only to stop; it exits at the next tick wait."""
        self.stop_event.set()

    def join(self, timeout: Optional[float] = None) -> bool:
        """True once the monitor thread has ended."""
        if self._thread is None:
            return self.state is MonitorState.STOPPED
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def run(self) -> None:
        self.store.create_series(self.port)
        self.state = MonitorState.SAMPLING
        try:
            self._sample_loop()
        except (ResolutionFailure, SamplingFailure) as e:
            self.error = e
            log.error("%d: %s", self.port, e)
        except Exception as e:
            self.error = e
            log.exception("%d: monitor stopped unexpectedly", self.port)
        finally:
            self.state = MonitorState.STOPPED

    def _sample_loop(self) -> None:
        start = time.monotonic()
        last_pid: Optional[int] = None
        last: Optional[IOSample] = None
        while not self.stop_event.is_set():
            pid = self.resolver(self.port)
            s = self.sampler(pid)
            log.info("%d: received bytes: %d, sent bytes: %d", self.port, s.read_bytes, s.write_bytes)
            if last is not None and (pid != last_pid or s.read_bytes < last.read_bytes
                                     or s.write_bytes < last.write_bytes):
                log.info("%d: owner changed (pid %s -> %s), starting a new sub-series", self.port, last_pid, pid)
                self.store.mark_break(self.port)
            self.store.append_sample(self.port, s)
            last_pid, last = pid, s
            self.ticks += 1

            # next tick boundary; a slow tick skips missed boundaries instead of bursting
            now = time.monotonic()
            k = max(self.ticks, int((now - start) / self.interval) + 1)
            delay = start + k * self.interval - now
            if self.stop_event.wait(max(delay, 0.0)):
                break
