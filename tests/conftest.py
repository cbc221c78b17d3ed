# tests/conftest.py
"""Pytest 設定與共用 fixtures。"""

import re
from pathlib import Path

import pytest

from depinsight.models.resolution import Dependency, ResolvedDependencyView, Source, Spec, Target

EDGE_PATTERN = re.compile(r"^\s*(\w+)\s*->\s*(\w+)", re.MULTILINE)
NODE_PATTERN = re.compile(r"^\s*(\w+)\s*\[", re.MULTILINE)
DOT_KEYWORDS = {"graph", "node", "edge"}


def parse_dot_structure(dot_source: str) -> tuple[set[str], set[tuple[str, str]]]:
    """從 DOT 原始碼中結構性地取回節點識別碼與邊的端點對。"""
    edges = set(EDGE_PATTERN.findall(dot_source))
    nodes = set()
    for line in dot_source.splitlines():
        if "->" in line:
            continue
        match = NODE_PATTERN.match(line)
        if match and match.group(1) not in DOT_KEYWORDS:
            nodes.add(match.group(1))
    return nodes, edges


@pytest.fixture
def simple_view() -> ResolvedDependencyView:
    """根目標 Pods 沒有宣告依賴；本地 Spec A 依賴本地 Spec B。"""
    pods = Target("Pods")
    spec_a = Spec("A", "1.0", source=Source.local())
    spec_b = Spec("B", "2.0", source=Source.local())
    return ResolvedDependencyView(
        {
            pods: {
                spec_a: (Dependency("B", "~> 2.0"),),
                spec_b: (),
            }
        }
    )


@pytest.fixture
def multi_target_view() -> ResolvedDependencyView:
    """兩個目標中不同的 Spec 皆依賴 C；App 繼承自 Pods 並宣告依賴 A。"""
    pods = Target("Pods", dependencies=(Dependency("A", "~> 1.0"),))
    app = Target("App", parent=pods, exclusive=False, dependencies=(Dependency("D"),), root=False)
    master = Source.remote("master")
    return ResolvedDependencyView(
        {
            pods: {
                Spec("A", "1.0", source=master): (Dependency("C", ">= 3.0"),),
                Spec("C", "3.1", source=master): (),
            },
            app: {
                Spec("D", "0.5", source=Source.local()): (Dependency("C"),),
                Spec("C", "3.1", source=master): (),
            },
        }
    )


SNAPSHOT_YAML = """\
targets:
  - name: Pods
    dependencies:
      - "AFNetworking (~> 2.0)"
    specs:
      - name: AFNetworking
        version: "2.0.1"
        source:
          remote: master
        dependencies:
          - "AFNetworking/Core (= 2.0.1)"
      - name: AFNetworking/Core
        version: "2.0.1"
      - name: LocalKit
        version: "0.1"
        source: local
  - name: App
    parent: Pods
    exclusive: false
    dependencies:
      - name: LocalKit
"""


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Path:
    path = tmp_path / "Podfile.resolved.yaml"
    path.write_text(SNAPSHOT_YAML, encoding="utf-8")
    return path


@pytest.fixture
def dot_structure():
    return parse_dot_structure
