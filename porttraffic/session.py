from __future__ import annotations
import functools, logging, time
from typing import Callable, Dict, List, Optional

from .collectors import PortMonitor, collect, local_ports, resolve, sample
from .config import CFG
from .models import Conn, PortSeries
from .render import RenderReport, render_all, save_chart
from .series import SeriesStore

log = logging.getLogger(__name__)

class ObservationSession:
    """Seed the watched ports, run one monitor per port for the window, then render.

    Monitors are supervised: at window end each one is told to stop and joined
    before the store is read.
    """

    def __init__(self, cfg: CFG, store: Optional[SeriesStore] = None,
                 list_connections: Optional[Callable[[], List[Conn]]] = None,
                 sampler: Callable = sample, plot: Callable = save_chart):
        self.cfg = cfg
        self.store = store or SeriesStore()
        self.list_connections = list_connections or functools.partial(collect, cfg.kind)
        self.sampler = sampler
        self.plot = plot
        self.monitors: Dict[int, PortMonitor] = {}

    def seed_ports(self) -> List[int]:
        """Distinct local ports seen right now. Enumeration errors propagate."""
        ports = local_ports(self.list_connections())
        if self.cfg.ports:
            ports = [p for p in ports if p in self.cfg.ports]
        return ports

    def _resolver(self, port: int) -> int:
        return resolve(port, self.list_connections)

    def observe(self, ports: List[int]) -> Dict[int, PortSeries]:
        for port in ports:
            if port in self.monitors:
                continue
            self.monitors[port] = PortMonitor(port, self.store, self.cfg.interval,
                                              resolver=self._resolver, sampler=self.sampler).start()
        log.info("watching %d port(s) for %.0fs", len(self.monitors), self.cfg.window)

        # wait out the window, returning early once every monitor has stopped on its own
        deadline = time.monotonic() + self.cfg.window
        for m in self.monitors.values():
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            m.join(remaining)
        self.shutdown()
        return self.store.snapshot()

    def shutdown(self) -> None:
        for m in self.monitors.values():
            m.stop()
        deadline = time.monotonic() + self.cfg.join_timeout
        for port, m in self.monitors.items():
            if not m.join(max(deadline - time.monotonic(), 0.0)):
                log.warning("%d: monitor did not stop within %.1fs, abandoning it", port, self.cfg.join_timeout)

    def render(self, snapshot: Dict[int, PortSeries]) -> RenderReport:
        return render_all(snapshot, self.cfg, self.plot)

    def run(self) -> RenderReport:
        return self.render(self.observe(self.seed_ports()))
