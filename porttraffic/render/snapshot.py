from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from ..config import CFG, KB, TITLE, X_LABEL, Y_LABEL
from ..errors import RenderFailure
from ..models import DeltaPoint, Direction, PortSeries
from ..utils.path import artifact_path
from .chart import save_chart

log = logging.getLogger(__name__)

Plot = Callable[..., object]

@dataclass
class RenderReport:
    written: List[Path] = field(default_factory=list)
    skipped: List[Tuple[int, Direction]] = field(default_factory=list)
    failures: List[RenderFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def merge(self, other: "RenderReport") -> None:
        self.written.extend(other.written)
        self.skipped.extend(other.skipped)
        self.failures.extend(other.failures)

def should_render(series: Sequence[int]) -> bool:
    # fewer than two samples or no change between first and last: nothing to draw
    return len(series) >= 2 and series[0] != series[-1]

def delta_points(series: Sequence[int], breaks: Iterable[int] = (), scale: int = KB) -> List[DeltaPoint]:
    """Per-tick throughput: (i, (s[i] - s[i-1]) / scale) for i in 1..N-1.

    A tick listed in ``breaks`` starts a new sub-series (the owning process
    changed), so no delta is drawn across it.
    """
    skip = set(breaks)
    return [DeltaPoint(i, (series[i] - series[i - 1]) / scale)
            for i in range(1, len(series)) if i not in skip]

def has_traffic(series: Sequence[int], points: Sequence[DeltaPoint], breaks: Sequence[int] = ()) -> bool:
    # without breaks first/last decide; across a restart only the per-sub-series deltas count
    if breaks:
        return any(p.kb for p in points)
    return should_render(series)

def render_port(port: int, ps: PortSeries, cfg: CFG, plot: Plot = save_chart) -> RenderReport:
    report = RenderReport()
    for direction in Direction:
        series = ps.of(direction)
        points = delta_points(series, ps.breaks, cfg.scale)
        if not points or not has_traffic(series, points, ps.breaks):
            report.skipped.append((port, direction))
            continue
        path = artifact_path(cfg.out_dir, port, direction.value)
        try:
            plot(path, TITLE, X_LABEL, Y_LABEL, f"{port}-{direction.value}", points,
                 width=cfg.width, height=cfg.height, dpi=cfg.dpi)
        except Exception as e:
            failure = RenderFailure(port, direction, path, e)
            log.error("%s", failure)
            report.failures.append(failure)
            continue
        log.debug("wrote %s (%d points)", path, len(points))
        report.written.append(path)
    return report

def render_all(snapshot: Dict[int, PortSeries], cfg: CFG, plot: Plot = save_chart) -> RenderReport:
    """One chart per port and direction with traffic; a failed chart never blocks the rest."""
    report = RenderReport()
    for port in sorted(snapshot):
        report.merge(render_port(port, snapshot[port], cfg, plot))
    return report
