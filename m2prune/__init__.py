"""m2prune - Maven local repository snapshot cleaner."""

from importlib.metadata import distribution

from .retention import ProcessStatus, RetentionEngine, RetentionStatistics, VersionToken


__version__ = distribution(__package__ or "m2prune").version

__all__ = [
    "ProcessStatus",
    "RetentionEngine",
    "RetentionStatistics",
    "VersionToken",
    "__version__",
]
