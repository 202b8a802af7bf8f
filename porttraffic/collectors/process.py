from __future__ import annotations
import psutil

from ..errors import SamplingFailure
from ..models import IOSample

def sample(pid: int) -> IOSample:
    try:
        io = psutil.Process(pid).io_counters()
    except psutil.NoSuchProcess:
        raise SamplingFailure(pid, f"process {pid} no longer exists")
    except psutil.AccessDenied:
        raise SamplingFailure(pid, f"access denied reading io counters of pid {pid}")
    except (AttributeError, NotImplementedError):
        # psutil has no Process.io_counters on macOS
        raise SamplingFailure(pid, "per-process io counters are not available on this platform")
    return IOSample(read_bytes=io.read_bytes, write_bytes=io.write_bytes)
