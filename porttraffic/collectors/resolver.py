from __future__ import annotations
from typing import Callable, List
import psutil

from ..errors import ResolutionFailure
from ..models import Conn
from .generic import collect, local_port

ListConnections = Callable[[], List[Conn]]

def resolve(port: int, list_connections: ListConnections = collect) -> int:
    """Pid of the first connection bound to the local ``port``."""
    try:
        conns = list_connections()
    except psutil.Error as e:
        raise ResolutionFailure(port, f"cannot enumerate connections: {e}") from e
    unowned = False
    for c in conns:
        if local_port(c) != port:
            continue
        if c.pid:
            return c.pid
        unowned = True
    if unowned:
        raise ResolutionFailure(port, f"owner of port {port} is unknown (access denied?)")
    raise ResolutionFailure(port)
