# src/depinsight/renderers/dot_renderer.py
"""
封裝依賴圖的 Graphviz DOT 原始碼生成邏輯。
"""

# 1. 標準庫導入
import logging
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
import graphviz

# 3. 本專案導入
from depinsight.models.graph import GraphModel, Node

DEFAULT_DOT_SETTINGS: dict[str, Any] = {
    "rankdir": "LR",
    "fontname": "Helvetica",
}


def _node_attributes(node: Node) -> dict[str, str]:
    return {key: str(value) for key, value in node.attrs.items()}


def generate_dependency_dot_source(graph: GraphModel, settings: dict[str, Any] | None = None) -> str:
    """
    生成依賴圖的 DOT 原始碼字串。

    叢集以 `cluster_` 子圖輸出並包含其成員節點，其餘節點位於圖的頂層。
    節點依插入順序、邊依來源節點順序輸出，因此相同的 GraphModel 總是產生相同的原始碼。

    Args:
        graph: 已建構完成的依賴圖。
        settings: 圖層級設定 (rankdir, fontname)。

    Returns:
        DOT 格式的圖形描述字串。
    """
    settings = {**DEFAULT_DOT_SETTINGS, **(settings or {})}
    fontname = settings["fontname"]

    dot = graphviz.Digraph(graph.name)
    dot.attr(rankdir=settings["rankdir"], charset="UTF-8", fontname=fontname)
    dot.attr("node", fontname=fontname, fontsize="11")
    dot.attr("edge", fontname=fontname, fontsize="9", arrowsize="0.7")

    for cluster in graph.clusters:
        with dot.subgraph(name=cluster.id) as sg:
            sg.attr(label=cluster.key, style="rounded", color="gray50", fontname=fontname)
            for node_id in cluster.members:
                node = graph.get_node(node_id)
                sg.node(node.id, label=node.label, **_node_attributes(node))

    for node in graph.unclustered_nodes():
        dot.node(node.id, label=node.label, **_node_attributes(node))

    for edge in graph.edges:
        dot.edge(edge.source, edge.target, label=edge.label, **edge.attrs)

    return dot.source


def write_dot_file(graph: GraphModel, output_path: Path, settings: dict[str, Any] | None = None) -> Path:
    """
    將依賴圖的 DOT 原始碼以 UTF-8 寫入檔案。

    Raises:
        OSError: 目標路徑無法寫入時。
    """
    dot_source = generate_dependency_dot_source(graph, settings)
    output_path.write_text(dot_source, encoding="utf-8")
    logging.info(f"DOT 原始檔已儲存至: {output_path}")
    return output_path
