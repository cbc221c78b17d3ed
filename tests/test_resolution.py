# tests/test_resolution.py
"""已解析依賴視圖資料模型的測試。"""

import pytest

from depinsight.models.resolution import Dependency, ResolvedDependencyView, Source, Spec, Target, root_name_of


@pytest.mark.parametrize(
    ("text", "name", "requirement"),
    [
        ("AFNetworking", "AFNetworking", None),
        ("AFNetworking (~> 2.0)", "AFNetworking", "~> 2.0"),
        ("AFNetworking/Core (= 2.0.1)", "AFNetworking/Core", "= 2.0.1"),
        ("  Kit ( >= 1.0 )  ", "Kit", ">= 1.0"),
    ],
)
def test_dependency_parse(text: str, name: str, requirement: str | None) -> None:
    dependency = Dependency.parse(text)
    assert dependency.name == name
    assert dependency.requirement == requirement


def test_dependency_parse_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        Dependency.parse("")


def test_dependency_str() -> None:
    assert str(Dependency("A/Core", "~> 1.0")) == "A/Core (~> 1.0)"
    assert str(Dependency("A")) == "A"
    assert Dependency("A/Core").root_name == "A"


def test_spec_defaults_root_name_and_display() -> None:
    spec = Spec("A/Subspec", "1.2")
    assert spec.root_name == "A"
    assert spec.display_name == "A/Subspec (1.2)"
    assert Spec("Plain").display_name == "Plain"
    assert Spec("Vendored", root_name="Other").root_name == "Other"


def test_source_kinds() -> None:
    assert Source.local().is_local
    assert not Source.remote("master").is_local
    assert Source.remote("master").name == "master"


def test_root_name_of() -> None:
    assert root_name_of("A/B/C") == "A"
    assert root_name_of("A") == "A"


def test_view_all_specs_merges_across_targets() -> None:
    spec = Spec("C", "1.0")
    view = ResolvedDependencyView(
        {
            Target("Pods"): {spec: (Dependency("D"),)},
            Target("Other"): {spec: (Dependency("D"),), Spec("E"): ()},
        }
    )
    assert list(view.all_specs()) == [spec, Spec("E")]
    assert view.summary() == {"targets": 2, "specs": 2}
