# src/depinsight/resolvers/snapshot_analyzer.py
"""
從 YAML 快照讀取已解析依賴視圖的解析器轉接器。

快照由外部解析器事先產出，本模組只負責將其轉換為 ResolvedDependencyView。
"""

# 1. 標準庫導入
import logging
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
import yaml

# 3. 本專案導入
from depinsight.exceptions import ResolutionError
from depinsight.models.resolution import Dependency, ResolvedDependencyView, Source, Spec, Target
from depinsight.resolvers.base import AnalyzerConfig

LOCAL_SOURCE_KEYWORD = "local"


def _parse_dependency(raw: Any) -> Dependency:
    if isinstance(raw, str):
        return Dependency.parse(raw)
    if isinstance(raw, dict) and "name" in raw:
        requirement = raw.get("requirement")
        return Dependency(str(raw["name"]), str(requirement) if requirement is not None else None)
    raise ValueError(f"無法辨識的依賴項目: {raw!r}")


def _parse_source(raw: Any) -> Source | None:
    """`local` → 本地來源；`{remote: name}` 或其他字串 → 遠端來源；缺省 → 不明確。"""
    if raw is None:
        return None
    if isinstance(raw, str):
        return Source.local() if raw == LOCAL_SOURCE_KEYWORD else Source.remote(raw)
    if isinstance(raw, dict) and raw.get("remote"):
        return Source.remote(str(raw["remote"]))
    raise ValueError(f"無法辨識的來源描述: {raw!r}")


def _require_mapping(raw: Any, kind: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise ValueError(f"{kind}項目必須是映射 (mapping)，目前為: {raw!r}")
    return raw


def _parse_spec(raw: Any) -> tuple[Spec, tuple[Dependency, ...]]:
    raw = _require_mapping(raw, "套件規格")
    version = raw.get("version")
    spec = Spec(
        name=str(raw["name"]),
        version=str(version) if version is not None else None,
        root_name=str(raw.get("root") or ""),
        source=_parse_source(raw.get("source")),
    )
    dependencies = tuple(_parse_dependency(d) for d in raw.get("dependencies") or [])
    return spec, dependencies


def parse_snapshot(data: Any) -> ResolvedDependencyView:
    """
    將快照資料轉換為 ResolvedDependencyView。

    父目標以名稱在整份快照中查找；找不到時保留為無父目標的非根目標，
    交由圖形建構器以契約違反拒絕。

    Raises:
        ResolutionError: 快照結構不正確時。
    """
    if not isinstance(data, dict) or not isinstance(data.get("targets"), list):
        raise ResolutionError("快照格式錯誤：缺少 'targets' 列表。")

    try:
        entries = [_require_mapping(entry, "目標") for entry in data["targets"]]
        targets: dict[str, Target] = {}
        for entry in entries:
            name = str(entry["name"])
            targets[name] = Target(
                name=name,
                exclusive=bool(entry.get("exclusive", True)),
                dependencies=tuple(_parse_dependency(d) for d in entry.get("dependencies") or []),
                root=bool(entry.get("root", "parent" not in entry)),
            )

        view = ResolvedDependencyView()
        for entry in entries:
            target = targets[str(entry["name"])]
            parent_name = entry.get("parent")
            if parent_name is not None:
                target.parent = targets.get(str(parent_name))
                if target.parent is None:
                    logging.warning(f"目標 '{target.name}' 的父目標 '{parent_name}' 不存在於快照中。")
            view.specs_by_target[target] = dict(_parse_spec(s) for s in entry.get("specs") or [])
    except (KeyError, TypeError, ValueError) as e:
        raise ResolutionError(f"快照內容無法解析: {e}") from e

    return view


class SnapshotAnalyzer:
    """一個讀取 YAML 快照檔的 DependencyAnalyzer 實作。"""

    def __init__(self, snapshot_path: Path):
        self.snapshot_path = snapshot_path

    def analyze(self, config: AnalyzerConfig) -> ResolvedDependencyView:
        if not self.snapshot_path.is_file():
            raise ResolutionError(f"解析快照不存在: {self.snapshot_path}")

        logging.info(f"讀取解析快照: {self.snapshot_path}")
        if config.lockfile_path is None:
            logging.info("本次解析忽略既有的鎖定檔。")
        if config.repo_update:
            logging.info("已要求更新遠端來源；快照內容應由更新後的解析產出。")

        try:
            with open(self.snapshot_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ResolutionError(f"解析快照 '{self.snapshot_path.name}' 時發生錯誤: {e}") from e

        view = parse_snapshot(data)
        summary = view.summary()
        logging.info(f"快照載入完成：{summary['targets']} 個目標，{summary['specs']} 個套件規格。")
        return view
