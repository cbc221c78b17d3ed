# src/depinsight/models/graph.py
"""
依賴圖的記憶體內模型。

節點與邊以 NetworkX 有向圖保存：節點依插入順序輸出，邊依來源節點的順序分組輸出。
所有插入操作皆為以識別碼為鍵的 upsert：先寫入者優先，重複的邊被靜默忽略。
"""

# 1. 標準庫導入
import logging
import re
from dataclasses import dataclass, field
from typing import Union

# 2. 第三方庫導入
import networkx as nx

# 3. 本專案導入
# (無)

_ID_EXCLUDED = re.compile(r"[^0-9A-Za-z]")


def normalize_identifier(name: str, prefix: str = "") -> str:
    """移除名稱中所有非英數字元，作為 DOT 節點識別碼。"""
    return f"{prefix}{_ID_EXCLUDED.sub('', name)}"


@dataclass(frozen=True)
class TargetRef:
    name: str
    parent_name: str | None = None
    exclusive: bool = True


@dataclass(frozen=True)
class SpecRef:
    name: str
    root_name: str
    cluster_key: str


@dataclass(frozen=True)
class DependencyRef:
    name: str
    root_name: str


NodeRef = Union[TargetRef, SpecRef, DependencyRef]


@dataclass
class Node:
    """圖中的一個節點。`attrs` 為 Graphviz 樣式屬性 (fillcolor, shape...)。"""

    id: str
    label: str
    ref: NodeRef
    attrs: dict[str, str] = field(default_factory=dict)
    cluster: str | None = None


@dataclass
class Edge:
    source: str
    target: str
    label: str | None = None
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class Cluster:
    """依來源倉庫分組的節點集合。`id` 在所屬圖中唯一，作為 DOT 子圖名稱。"""

    key: str
    id: str
    members: list[str] = field(default_factory=list)


class GraphModel:
    """
    單次渲染流程使用的依賴圖。

    - 節點識別碼唯一；重複插入不會覆寫第一次指定的標籤與樣式。
    - 同一組 (source, target) 的邊最多插入一次，與標籤無關。
    """

    def __init__(self, name: str = "DependencyGraph"):
        self.name = name
        self._graph = nx.DiGraph()
        self._clusters: dict[str, Cluster] = {}

    def upsert_node(
        self,
        node_id: str,
        label: str,
        ref: NodeRef,
        cluster: str | None = None,
        **attrs: str,
    ) -> Node:
        """
        插入節點，若已存在則原樣回傳既有節點 (標籤、樣式與叢集皆不覆寫)。
        """
        if node_id in self._graph:
            return self._graph.nodes[node_id]["node"]

        node = Node(id=node_id, label=label, ref=ref, attrs=dict(attrs))
        self._graph.add_node(node_id, node=node)
        if cluster is not None:
            self._attach_to_cluster(node, cluster)
        return node

    def upsert_cluster(self, key: str) -> Cluster:
        if key not in self._clusters:
            self._clusters[key] = Cluster(key=key, id=self._unique_cluster_id(key))
        return self._clusters[key]

    def _unique_cluster_id(self, key: str) -> str:
        # 不同的鍵可能正規化為同一識別碼 (例如 "my-specs" 與 "my_specs")
        base = normalize_identifier(key, "cluster_")
        taken = {cluster.id for cluster in self._clusters.values()}
        cluster_id, ordinal = base, 2
        while cluster_id in taken:
            cluster_id = f"{base}_{ordinal}"
            ordinal += 1
        return cluster_id

    def _attach_to_cluster(self, node: Node, key: str):
        cluster = self.upsert_cluster(key)
        node.cluster = key
        cluster.members.append(node.id)

    def add_edge(self, source: str, target: str, label: str | None = None, **attrs: str) -> bool:
        """
        新增一條邊。若相同端點的邊已存在則忽略並回傳 False。

        Raises:
            KeyError: 任一端點節點尚未存在。
        """
        for endpoint in (source, target):
            if endpoint not in self._graph:
                raise KeyError(f"邊的端點節點不存在: {endpoint}")

        if self._graph.has_edge(source, target):
            logging.debug(f"忽略重複的邊: {source} -> {target}")
            return False

        self._graph.add_edge(source, target, edge=Edge(source, target, label, dict(attrs)))
        return True

    def has_node(self, node_id: str) -> bool:
        return node_id in self._graph

    def has_edge(self, source: str, target: str) -> bool:
        return self._graph.has_edge(source, target)

    def get_node(self, node_id: str) -> Node:
        return self._graph.nodes[node_id]["node"]

    def get_edge(self, source: str, target: str) -> Edge:
        return self._graph.edges[source, target]["edge"]

    @property
    def nodes(self) -> list[Node]:
        return [data["node"] for _, data in self._graph.nodes(data=True)]

    @property
    def edges(self) -> list[Edge]:
        return [data["edge"] for _, _, data in self._graph.edges(data=True)]

    @property
    def clusters(self) -> list[Cluster]:
        return list(self._clusters.values())

    def unclustered_nodes(self) -> list[Node]:
        return [node for node in self.nodes if node.cluster is None]

    def find_cycles(self) -> list[list[str]]:
        """列出圖中所有的依賴循環 (以節點識別碼表示)。"""
        return [list(cycle) for cycle in nx.simple_cycles(self._graph)]

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __repr__(self) -> str:
        return (
            f"GraphModel(name={self.name!r}, nodes={self._graph.number_of_nodes()}, "
            f"edges={self._graph.number_of_edges()}, clusters={len(self._clusters)})"
        )
