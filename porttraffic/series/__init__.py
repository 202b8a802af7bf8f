from .store import SeriesStore

__all__ = ["SeriesStore"]
