# src/depinsight/reporters/text_reporter.py
"""
提供將解析結果輸出為人類可讀 YAML 文字的功能。

支援兩種變體：
- pods: 仿照鎖定檔 `PODS` 區段的扁平列表 (套件 → 依賴名稱列表)。
- targets: 目標 → 套件規格 → 依賴名稱的巢狀映射。
"""

# 1. 標準庫導入
import io
import sys
import textwrap
from typing import Any, TextIO

# 2. 第三方庫導入
from ruamel.yaml import YAML

# 3. 本專案導入
from depinsight.exceptions import ConfigurationError
from depinsight.models.resolution import ResolvedDependencyView

TEXT_FORMATS = ("pods", "targets")


def build_targets_mapping(view: ResolvedDependencyView) -> dict[str, dict[str, list[str]]]:
    """將解析結果轉換為 `{目標: {套件規格: [依賴字串]}}`，保留原始順序。"""
    mapping: dict[str, dict[str, list[str]]] = {}
    for target, specs in view.items():
        mapping[target.name] = {
            spec.display_name: [str(d) for d in dependencies] for spec, dependencies in specs.items()
        }
    return mapping


def build_pods_listing(view: ResolvedDependencyView) -> list[str | dict[str, list[str]]]:
    """
    合成鎖定檔風格的套件列表。

    跨目標去重後依名稱排序；沒有依賴的套件以字串表示，
    有依賴的套件以 `{"A (1.0)": ["B (~> 2.0)"]}` 表示，依賴字串亦排序。
    """
    merged: dict[str, tuple[str, set[str]]] = {}
    for spec, dependencies in view.all_specs().items():
        _, collected = merged.setdefault(spec.name, (spec.display_name, set()))
        collected.update(str(d) for d in dependencies)

    listing: list[str | dict[str, list[str]]] = []
    for name in sorted(merged, key=str.lower):
        display_name, collected = merged[name]
        if collected:
            listing.append({display_name: sorted(collected, key=str.lower)})
        else:
            listing.append(display_name)
    return listing


def to_yaml_text(data: Any) -> str:
    """使用 ruamel.yaml 以區塊樣式輸出 YAML 字串。"""
    yaml = YAML()
    yaml.default_flow_style = False
    yaml.indent(mapping=2, sequence=4, offset=2)
    buffer = io.StringIO()
    yaml.dump(data, buffer)
    return buffer.getvalue()


def render_dependency_text(view: ResolvedDependencyView, text_format: str = "pods") -> str:
    """
    依指定格式輸出 YAML 文字報告。

    Raises:
        ConfigurationError: 格式不在 TEXT_FORMATS 之中。
    """
    if text_format == "pods":
        return to_yaml_text(build_pods_listing(view))
    if text_format == "targets":
        return to_yaml_text(build_targets_mapping(view))
    raise ConfigurationError(f"不支援的文字輸出格式: {text_format!r} (可用: {', '.join(TEXT_FORMATS)})")


def print_titled_section(title: str, body: str, stream: TextIO | None = None):
    """以標題框住內容並輸出，內容縮排兩格。"""
    stream = stream or sys.stdout
    stream.write(f"\n{title}\n{'-' * len(title)}\n")
    stream.write(textwrap.indent(body.rstrip("\n"), "  ") + "\n")
    stream.flush()
