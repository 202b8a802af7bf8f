from __future__ import annotations
from typing import Iterable, List
import psutil

from ..models import Conn

def _addr(a) -> tuple:
    # unix sockets report a path (or '') instead of an (ip, port) pair
    if not a or isinstance(a, str):
        return ()
    return (a.ip if hasattr(a, 'ip') else a[0], a.port if hasattr(a, 'port') else a[1])

def collect(kind: str = 'all') -> List[Conn]:
    """Full connection table of the host. psutil.Error propagates to the caller."""
    conns: List[Conn] = []
    for c in psutil.net_connections(kind=kind):
        conns.append(Conn(pid=c.pid, laddr=_addr(c.laddr)))
    return conns

def local_port(conn: Conn) -> int:
    return conn.laddr[1] if conn.laddr else 0

def local_ports(conns: Iterable[Conn]) -> List[int]:
    """Distinct local ports in first-seen order; port 0 means unbound and is dropped."""
    seen: dict[int, None] = {}
    for c in conns:
        p = local_port(c)
        if p > 0:
            seen.setdefault(p, None)
    return list(seen)
