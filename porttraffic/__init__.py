"""Per-port process I/O sampler: watch every local port for a fixed window, then chart it."""
__version__ = "0.1.0"
