# src/depinsight/builders/dependency_graph_builder.py
"""
提供依賴圖的建構邏輯。

走訪外部解析器產出的 ResolvedDependencyView，為每個目標建立：
目標節點與父目標連結、目標直接宣告的依賴、以及依來源倉庫分組的套件規格節點與其依賴邊。

建構分為兩個階段：先登錄所有目標與套件規格節點，再建立連結。
節點插入採先寫入者優先，因此套件規格的標籤與叢集不會被較早出現的依賴引用搶先決定。
"""

# 1. 標準庫導入
import logging
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from depinsight.exceptions import MalformedGraphInputError
from depinsight.models.graph import DependencyRef, GraphModel, Node, SpecRef, TargetRef, normalize_identifier
from depinsight.models.resolution import Dependency, ResolvedDependencyView, Source, Spec, Target
from depinsight.utils.color_utils import color_for, get_analogous_dark_color

TARGET_ID_PREFIX = "target"
POD_ID_PREFIX = "pod"

DEFAULT_GRAPH_SETTINGS: dict[str, Any] = {
    "name": "DependencyGraph",
    "target_shape": "box",
    "remote_cluster_suffix": " repo",
    "local_cluster_key": "local",
    "link_color": "gray",
}


def target_node_id(name: str) -> str:
    return normalize_identifier(name, TARGET_ID_PREFIX)


def pod_node_id(name: str) -> str:
    return normalize_identifier(name, POD_ID_PREFIX)


class DependencyGraphBuilder:
    """將一個 ResolvedDependencyView 轉換為 GraphModel。"""

    def __init__(self, view: ResolvedDependencyView, settings: dict[str, Any] | None = None):
        self.view = view
        self.settings = {**DEFAULT_GRAPH_SETTINGS, **(settings or {})}
        self.graph = GraphModel(self.settings["name"])

    def build(self) -> GraphModel:
        for target, specs in self.view.items():
            self._add_target(target)
            for spec in specs:
                self._add_spec_node(spec, self._cluster_key_for(spec, specs))

        for target, specs in self.view.items():
            target_id = self._link_parent(target)
            self._add_declared_dependencies(target_id, target)
            for spec, dependencies in specs.items():
                self._add_spec_dependencies(spec, dependencies)

        for cycle in self.graph.find_cycles():
            logging.warning(f"偵測到依賴循環: {' -> '.join(cycle + cycle[:1])}")

        logging.info(
            f"依賴圖建構完成：共 {len(self.graph.nodes)} 個節點，{len(self.graph.edges)} 條邊，"
            f"{len(self.graph.clusters)} 個來源叢集。"
        )
        return self.graph

    def _add_target_node(self, target: Target) -> str:
        parent_name = target.parent.name if target.parent else None
        attrs = {"shape": self.settings["target_shape"]}
        if parent_name and not target.exclusive:
            attrs["tooltip"] = f"{target.name} (+{parent_name})"

        target_id = target_node_id(target.name)
        self.graph.upsert_node(target_id, target.name, TargetRef(target.name, parent_name, target.exclusive), **attrs)
        return target_id

    def _add_target(self, target: Target) -> str:
        if not target.root and target.parent is None:
            raise MalformedGraphInputError(f"非根目標 '{target.name}' 缺少父目標引用。")
        return self._add_target_node(target)

    def _link_parent(self, target: Target) -> str:
        target_id = target_node_id(target.name)
        if target.parent is not None:
            parent_id = self._add_target_node(target.parent)
            # 父目標連結只提供排序提示，不限制佈局
            self.graph.add_edge(target_id, parent_id, color=self.settings["link_color"], constraint="false")
        return target_id

    def _add_declared_dependencies(self, target_id: str, target: Target):
        for dependency in target.dependencies:
            node = self._add_dependency_node(dependency)
            self.graph.add_edge(target_id, node.id, dependency.requirement, color=self.settings["link_color"])

    def _add_dependency_node(self, dependency: Dependency) -> Node:
        return self.graph.upsert_node(
            pod_node_id(dependency.name),
            dependency.name,
            DependencyRef(dependency.name, dependency.root_name),
            style="filled",
            fillcolor=color_for(dependency.root_name),
        )

    def _add_spec_node(self, spec: Spec, cluster_key: str) -> Node:
        fill = color_for(spec.root_name)
        return self.graph.upsert_node(
            pod_node_id(spec.name),
            spec.display_name,
            SpecRef(spec.name, spec.root_name, cluster_key),
            cluster=cluster_key,
            style="filled",
            fillcolor=fill,
            color=get_analogous_dark_color(fill),
        )

    def _add_spec_dependencies(self, spec: Spec, dependencies: tuple[Dependency, ...]):
        spec_id = pod_node_id(spec.name)
        edge_color = f"black;0.5:{color_for(spec.root_name)}"
        for dependency in dependencies:
            node = self._add_dependency_node(dependency)
            self.graph.add_edge(spec_id, node.id, dependency.requirement, color=edge_color)

    def _cluster_key_for(self, spec: Spec, siblings: dict[Spec, tuple[Dependency, ...]]) -> str:
        source = spec.source
        if source is None:
            source = self._borrow_sibling_source(spec, siblings)
        if source is None or source.is_local:
            return self.settings["local_cluster_key"]
        return f"{source.name}{self.settings['remote_cluster_suffix']}"

    @staticmethod
    def _borrow_sibling_source(spec: Spec, siblings: dict[Spec, tuple[Dependency, ...]]) -> Source | None:
        """
        為來源不明確的 Spec 推斷來源：借用同一目標中、同頂層名稱且來源已知的兄弟 Spec 的來源。

        這只是盡力而為的推斷。子組件通常與其頂層套件來自同一倉庫，但並無保證；
        找不到可借用的來源時回傳 None，由呼叫端歸入本地叢集。
        """
        for sibling in siblings:
            if sibling is spec or sibling.root_name != spec.root_name:
                continue
            if sibling.source is not None:
                logging.debug(f"'{spec.name}' 的來源不明確，借用 '{sibling.name}' 的來源。")
                return sibling.source
        return None


def build_dependency_graph(view: ResolvedDependencyView, settings: dict[str, Any] | None = None) -> GraphModel:
    """
    將外部解析結果轉換為去重、分叢集、確定性著色的依賴圖。

    Raises:
        MalformedGraphInputError: 非根目標缺少父目標引用時。
    """
    return DependencyGraphBuilder(view, settings).build()
