"""Snapshot retention: version tokens, name grammars and the cleanup engine."""

from .engine import ProcessStatus, RetentionEngine, create_retention_engine
from .statistics import RetentionStatistics
from .version_token import VersionToken


__all__ = [
    "ProcessStatus",
    "RetentionEngine",
    "RetentionStatistics",
    "VersionToken",
    "create_retention_engine",
]
