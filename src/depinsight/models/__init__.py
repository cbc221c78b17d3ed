# src/depinsight/models/__init__.py
"""
資料模型套件：外部解析結果的唯讀視圖，以及渲染用的圖形模型。
"""

from .graph import (
    Cluster,
    DependencyRef,
    Edge,
    GraphModel,
    Node,
    NodeRef,
    SpecRef,
    TargetRef,
    normalize_identifier,
)
from .resolution import Dependency, ResolvedDependencyView, Source, Spec, Target, root_name_of

__all__ = [
    "Cluster",
    "Dependency",
    "DependencyRef",
    "Edge",
    "GraphModel",
    "Node",
    "NodeRef",
    "ResolvedDependencyView",
    "Source",
    "Spec",
    "SpecRef",
    "Target",
    "TargetRef",
    "normalize_identifier",
    "root_name_of",
]
