from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Set
from .utils.path import to_abs_path

log = logging.getLogger(__name__)

KB = 1024
TITLE = "Traffic statistics"
X_LABEL = "time (1s ticks)"
Y_LABEL = "traffic (KB)"
CONN_KINDS = ("all", "inet", "inet4", "inet6", "tcp", "tcp4", "tcp6", "udp", "udp4", "udp6", "unix")

@dataclass
class CFG:
    window: float = 60.0
    interval: float = 1.0
    scale: int = KB
    out_dir: Path = field(default_factory=lambda: Path("."))
    width: float = 32.0   # inches
    height: float = 16.0
    dpi: int = 100
    kind: str = "all"
    ports: Set[int] = field(default_factory=set)  # empty: every local port
    join_timeout: float = 5.0

def parse_ports(raw: str) -> Set[int]:
    ports: Set[int] = set()
    for x in raw.split(","):
        x = x.strip()
        if not x:
            continue
        try:
            p = int(x)
        except ValueError:
            log.warning("ignoring port %r: not a number", x)
            continue
        if not 0 < p < 65536:
            log.warning("ignoring port %d: out of range", p)
            continue
        ports.add(p)
    return ports

def init_cfg_from_args(args) -> CFG:
    cfg = CFG()
    cfg.window = float(args.window)
    cfg.interval = float(args.interval)
    cfg.kind = args.kind
    cfg.dpi = int(args.dpi)
    ports = getattr(args, "ports", "")
    if ports:
        cfg.ports = parse_ports(ports) if isinstance(ports, str) else set(ports)
    if getattr(args, "out_dir", None):
        cfg.out_dir = to_abs_path(args.out_dir)
        cfg.out_dir.mkdir(parents=True, exist_ok=True)
    return cfg
