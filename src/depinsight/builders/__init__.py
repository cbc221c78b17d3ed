# src/depinsight/builders/__init__.py
"""
建構器套件，負責將解析出的資料轉換為圖形資料結構。
"""

from .dependency_graph_builder import DependencyGraphBuilder, build_dependency_graph, pod_node_id, target_node_id

__all__ = [
    "DependencyGraphBuilder",
    "build_dependency_graph",
    "pod_node_id",
    "target_node_id",
]
