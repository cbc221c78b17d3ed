# src/depinsight/core/__init__.py
"""
DepInsight 的核心協調器套件。

此套件負責將設定、解析、建構、渲染和報告等子系統串連起來，
執行完整的依賴圖產出流程。
"""

from .config_loader import ConfigLoader
from .dependency_processor import DependencyProcessor, ProcessorOptions, ProcessorResult

__all__ = [
    "ConfigLoader",
    "DependencyProcessor",
    "ProcessorOptions",
    "ProcessorResult",
]
