# src/depinsight/resolvers/__init__.py
"""
解析器套件，定義外部依賴解析器的介面與快照轉接器。
"""

from .base import AnalyzerConfig, DependencyAnalyzer
from .snapshot_analyzer import SnapshotAnalyzer, parse_snapshot

__all__ = [
    "AnalyzerConfig",
    "DependencyAnalyzer",
    "SnapshotAnalyzer",
    "parse_snapshot",
]
