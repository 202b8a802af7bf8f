from porttraffic.errors import ResolutionFailure, SamplingFailure
from porttraffic.models import Conn, IOSample


def conn(port, pid):
    return Conn(pid=pid, laddr=('127.0.0.1', port))


class ScriptedSampler:
    """Returns scripted samples per pid, then fails like a vanished process."""

    def __init__(self, script):
        self.script = {pid: list(samples) for pid, samples in script.items()}

    def __call__(self, pid):
        samples = self.script.get(pid)
        if not samples:
            raise SamplingFailure(pid)
        read, write = samples.pop(0)
        return IOSample(read, write)


def failing_resolver(port):
    raise ResolutionFailure(port)
