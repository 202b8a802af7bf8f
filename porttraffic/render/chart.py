from __future__ import annotations
from pathlib import Path
from typing import Sequence, Tuple

from matplotlib.figure import Figure

def save_chart(path: Path, title: str, x_label: str, y_label: str, series_name: str,
               points: Sequence[Tuple[float, float]], width: float = 32.0, height: float = 16.0,
               dpi: int = 100) -> Path:
    """Line-with-markers chart of ``points`` saved to ``path`` (overwritten).

    Uses a standalone Figure, not pyplot, so no process-wide backend or
    figure registry is touched.
    """
    if not points:
        raise ValueError("no points to plot")
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]

    fig = Figure(figsize=(width, height))
    ax = fig.add_subplot(1, 1, 1)
    ax.plot(xs, ys, marker="o", label=series_name, color="#1f77b4")
    ax.set_title(title)
    ax.set_xlabel(x_label)
    ax.set_ylabel(y_label)
    ax.grid(True, linewidth=0.4, alpha=0.4)
    ax.legend(loc="upper left")
    fig.tight_layout()
    fig.savefig(path, dpi=dpi)
    return Path(path)
