# tests/test_dependency_graph_builder.py
"""依賴圖建構器的測試。"""

import pytest

from depinsight.builders.dependency_graph_builder import build_dependency_graph, pod_node_id, target_node_id
from depinsight.exceptions import MalformedGraphInputError
from depinsight.models.graph import DependencyRef, SpecRef, TargetRef
from depinsight.models.resolution import Dependency, ResolvedDependencyView, Source, Spec, Target
from depinsight.utils.color_utils import color_for


def _edge_pairs(graph) -> set[tuple[str, str]]:
    return {(edge.source, edge.target) for edge in graph.edges}


def test_simple_view_yields_three_nodes_and_one_edge(simple_view: ResolvedDependencyView) -> None:
    graph = build_dependency_graph(simple_view)

    assert {node.label for node in graph.nodes} == {"Pods", "A (1.0)", "B (2.0)"}
    assert len(graph.nodes) == 3
    assert _edge_pairs(graph) == {(pod_node_id("A"), pod_node_id("B"))}


def test_target_node_style(simple_view: ResolvedDependencyView) -> None:
    graph = build_dependency_graph(simple_view)
    node = graph.get_node(target_node_id("Pods"))
    assert node.attrs["shape"] == "box"
    assert node.ref == TargetRef("Pods", None, True)


def test_spec_nodes_are_clustered_by_source(simple_view: ResolvedDependencyView) -> None:
    graph = build_dependency_graph(simple_view)
    assert [cluster.key for cluster in graph.clusters] == ["local"]
    assert set(graph.clusters[0].members) == {pod_node_id("A"), pod_node_id("B")}

    spec_node = graph.get_node(pod_node_id("A"))
    assert spec_node.attrs["fillcolor"] == color_for("A")
    assert spec_node.attrs["style"] == "filled"
    assert isinstance(spec_node.ref, SpecRef)


def test_spec_edge_blends_black_into_spec_color(simple_view: ResolvedDependencyView) -> None:
    graph = build_dependency_graph(simple_view)
    edge = graph.get_edge(pod_node_id("A"), pod_node_id("B"))
    assert edge.label == "~> 2.0"
    assert edge.attrs["color"] == f"black;0.5:{color_for('A')}"


def test_subspec_dependencies_share_root_color() -> None:
    spec = Spec("A/Subspec", "1.0", source=Source.local())
    view = ResolvedDependencyView({Target("Pods"): {spec: (Dependency("A/Other"),)}})
    graph = build_dependency_graph(view)

    subspec = graph.get_node(pod_node_id("A/Subspec"))
    other = graph.get_node(pod_node_id("A/Other"))
    assert subspec.attrs["fillcolor"] == other.attrs["fillcolor"] == color_for("A")
    assert other.ref == DependencyRef("A/Other", "A")
    assert other.cluster is None


def test_shared_dependency_is_deduplicated(multi_target_view: ResolvedDependencyView) -> None:
    graph = build_dependency_graph(multi_target_view)
    c_id = pod_node_id("C")

    assert [node.id for node in graph.nodes].count(c_id) == 1
    incoming = {edge.source for edge in graph.edges if edge.target == c_id}
    assert incoming == {pod_node_id("A"), pod_node_id("D")}
    assert sum(1 for edge in graph.edges if edge.target == c_id) == 2


def test_child_target_links_to_parent(multi_target_view: ResolvedDependencyView) -> None:
    graph = build_dependency_graph(multi_target_view)
    edge = graph.get_edge(target_node_id("App"), target_node_id("Pods"))
    assert edge.attrs == {"color": "gray", "constraint": "false"}

    app = graph.get_node(target_node_id("App"))
    assert app.ref == TargetRef("App", "Pods", False)
    assert app.attrs["tooltip"] == "App (+Pods)"


def test_declared_dependencies_link_from_target(multi_target_view: ResolvedDependencyView) -> None:
    graph = build_dependency_graph(multi_target_view)
    edge = graph.get_edge(target_node_id("Pods"), pod_node_id("A"))
    assert edge.label == "~> 1.0"
    assert edge.attrs == {"color": "gray"}
    assert graph.get_edge(target_node_id("App"), pod_node_id("D")).label is None


def test_spec_identity_wins_over_earlier_dependency_reference(
    multi_target_view: ResolvedDependencyView,
) -> None:
    """目標宣告的依賴 A 與套件規格 A 為同一節點，且保有規格的標籤與叢集。"""
    graph = build_dependency_graph(multi_target_view)
    node = graph.get_node(pod_node_id("A"))
    assert node.label == "A (1.0)"
    assert node.cluster == "master repo"
    assert isinstance(node.ref, SpecRef)


def test_remote_and_local_clusters(multi_target_view: ResolvedDependencyView) -> None:
    graph = build_dependency_graph(multi_target_view)
    clusters = {cluster.key: set(cluster.members) for cluster in graph.clusters}
    assert clusters == {
        "master repo": {pod_node_id("A"), pod_node_id("C")},
        "local": {pod_node_id("D")},
    }


def test_cluster_suffix_is_configurable(multi_target_view: ResolvedDependencyView) -> None:
    graph = build_dependency_graph(multi_target_view, {"remote_cluster_suffix": "-specs"})
    assert "master-specs" in {cluster.key for cluster in graph.clusters}


def test_ambiguous_source_borrows_sibling_with_same_root() -> None:
    """來源不明確的子組件借用同目標中同頂層名稱 Spec 的來源 (盡力而為的推斷)。"""
    view = ResolvedDependencyView(
        {
            Target("Pods"): {
                Spec("A/Core", "1.0"): (),
                Spec("A", "1.0", source=Source.remote("trunk")): (Dependency("A/Core"),),
            }
        }
    )
    graph = build_dependency_graph(view)
    assert graph.get_node(pod_node_id("A/Core")).cluster == "trunk repo"


def test_ambiguous_source_without_sibling_falls_back_to_local() -> None:
    view = ResolvedDependencyView(
        {
            Target("Pods"): {
                Spec("A/Core", "1.0"): (),
                Spec("B", "1.0", source=Source.remote("trunk")): (),
            }
        }
    )
    graph = build_dependency_graph(view)
    assert graph.get_node(pod_node_id("A/Core")).cluster == "local"


def test_ambiguous_source_does_not_borrow_across_targets() -> None:
    view = ResolvedDependencyView(
        {
            Target("Pods"): {Spec("A", "1.0", source=Source.remote("trunk")): ()},
            Target("Other"): {Spec("A/Core", "1.0"): ()},
        }
    )
    graph = build_dependency_graph(view)
    assert graph.get_node(pod_node_id("A/Core")).cluster == "local"


def test_non_root_target_without_parent_fails_fast() -> None:
    orphan = Target("Orphan", parent=None, root=False)
    view = ResolvedDependencyView({orphan: {Spec("A"): ()}})
    with pytest.raises(MalformedGraphInputError, match="Orphan"):
        build_dependency_graph(view)


def test_cycle_is_reported(caplog: pytest.LogCaptureFixture) -> None:
    view = ResolvedDependencyView(
        {
            Target("Pods"): {
                Spec("A", "1.0", source=Source.local()): (Dependency("B"),),
                Spec("B", "1.0", source=Source.local()): (Dependency("A"),),
            }
        }
    )
    with caplog.at_level("WARNING"):
        build_dependency_graph(view)
    assert "依賴循環" in caplog.text
