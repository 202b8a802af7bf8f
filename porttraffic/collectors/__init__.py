from .generic import collect, local_ports
from .resolver import resolve
from .process import sample
from .loop import PortMonitor, MonitorState

__all__ = ["collect", "local_ports", "resolve", "sample", "PortMonitor", "MonitorState"]
