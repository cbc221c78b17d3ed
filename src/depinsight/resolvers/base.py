# src/depinsight/resolvers/base.py
"""
外部依賴解析器的介面定義。

解析器所需的所有開關都透過不可變的 AnalyzerConfig 傳入，不修改任何行程層級的全域狀態。
"""

# 1. 標準庫導入
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from depinsight.models.resolution import ResolvedDependencyView


@dataclass(frozen=True)
class AnalyzerConfig:
    """
    單次解析呼叫的設定。

    Attributes:
        manifest_path: 專案的依賴清單 (例如 Podfile)。
        lockfile_path: 要沿用的既有鎖定檔；為 None 表示忽略先前的鎖定結果。
        repo_update: 解析前是否先更新遠端來源。
        integrate_targets: 是否整合進使用者專案；產生依賴圖時恆為 False。
        podspec: 單獨分析的套件規格 (檔案路徑或名稱)。
    """

    manifest_path: Path | None = None
    lockfile_path: Path | None = None
    repo_update: bool = False
    integrate_targets: bool = False
    podspec: str | None = None


class DependencyAnalyzer(Protocol):
    """任何能產出 ResolvedDependencyView 的外部解析器。"""

    def analyze(self, config: AnalyzerConfig) -> ResolvedDependencyView: ...
