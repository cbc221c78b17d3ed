# src/depinsight/exceptions.py
"""
DepInsight 的錯誤分類。

所有錯誤皆不自動重試，一律向上拋出交由呼叫端 (CLI) 回報。
I/O 錯誤保留為內建的 OSError。
"""


class DepInsightError(Exception):
    """所有 DepInsight 錯誤的基底類別。"""


class ConfigurationError(DepInsightError):
    """設定錯誤，於驗證階段 (解析之前) 偵測。"""


class RendererNotInstalledError(ConfigurationError):
    """要求輸出 DOT 或圖片，但外部渲染器不在 PATH 中。"""

    def __init__(self, executable: str):
        self.executable = executable
        super().__init__(
            f"渲染器 '{executable}' 未安裝或不在系統 PATH 中。請安裝 Graphviz 後再要求輸出圖檔。"
        )


class ResolutionError(DepInsightError):
    """外部依賴解析器回報的錯誤，原樣呈現。"""


class MalformedGraphInputError(DepInsightError):
    """解析結果違反輸入契約，例如非根目標缺少父目標。"""


class RenderingError(DepInsightError):
    """外部渲染器以非零狀態結束。"""

    def __init__(self, message: str, stderr: str = ""):
        self.stderr = stderr
        super().__init__(f"{message}\n{stderr}".rstrip())
