# src/depinsight/core/dependency_processor.py
"""
DepInsight 的核心處理引擎。

依序執行：驗證 → 外部解析 → 文字報告 → 建構依賴圖 → DOT / PNG 輸出。
任何階段失敗都會中止後續步驟，已完成的輸出不會回滾。
"""

# 1. 標準庫導入
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TextIO

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from depinsight.builders.dependency_graph_builder import build_dependency_graph
from depinsight.core.config_loader import ConfigLoader
from depinsight.exceptions import ConfigurationError
from depinsight.models.graph import GraphModel
from depinsight.models.resolution import ResolvedDependencyView
from depinsight.renderers.dot_renderer import write_dot_file
from depinsight.renderers.raster_renderer import ensure_renderer_available, render_png
from depinsight.reporters.text_reporter import TEXT_FORMATS, print_titled_section, render_dependency_text
from depinsight.resolvers.base import AnalyzerConfig, DependencyAnalyzer
from depinsight.resolvers.snapshot_analyzer import SnapshotAnalyzer
from depinsight.utils.path_utils import DOT_SUFFIX, PNG_SUFFIX, output_basename, output_path_for


@dataclass(frozen=True)
class ProcessorOptions:
    """命令列層級的選項。未指定的欄位 (None) 沿用設定檔中的值。"""

    podspec: str | None = None
    ignore_lockfile: bool = False
    repo_update: bool = False
    graphviz: bool = False
    image: bool = False
    text_format: str | None = None
    output_dir: Path | None = None


@dataclass
class ProcessorResult:
    view: ResolvedDependencyView
    graph: GraphModel
    written_files: list[Path] = field(default_factory=list)


class DependencyProcessor:
    """一個處理單次依賴圖產出流程的類別。"""

    def __init__(
        self,
        options: ProcessorOptions,
        config_loader: ConfigLoader | None = None,
        analyzer: DependencyAnalyzer | None = None,
        stream: TextIO | None = None,
    ):
        self.options = options
        self.config_loader = config_loader or ConfigLoader()
        self.config: dict[str, Any] = self.config_loader.config
        self.analyzer = analyzer or SnapshotAnalyzer(Path(self.config["analysis"]["snapshot"]))
        self.stream = stream

    @property
    def basename(self) -> str:
        return output_basename(self.options.podspec, self.config["output"]["default_basename"])

    @property
    def output_dir(self) -> Path:
        return self.options.output_dir or Path(self.config["output"]["dir"])

    @property
    def text_format(self) -> str:
        return self.options.text_format or self.config["text"]["format"]

    @property
    def needs_renderer(self) -> bool:
        return self.options.graphviz or self.options.image

    def validate(self):
        """
        在任何解析工作開始前進行低成本驗證。

        Raises:
            ConfigurationError: 文字報告格式不受支援。
            RendererNotInstalledError: 要求圖檔輸出但找不到渲染器。
        """
        if self.text_format not in TEXT_FORMATS:
            raise ConfigurationError(f"不支援的文字輸出格式: {self.text_format!r}")
        if self.needs_renderer:
            ensure_renderer_available(self.config["renderer"]["executable"])

    def analyzer_config(self) -> AnalyzerConfig:
        """建立本次解析的不可變設定；單獨分析 podspec 時一律忽略鎖定檔並更新來源。"""
        analysis = self.config["analysis"]
        podspec = self.options.podspec
        ignore_lockfile = self.options.ignore_lockfile or podspec is not None
        return AnalyzerConfig(
            manifest_path=Path(analysis["manifest"]) if analysis.get("manifest") else None,
            lockfile_path=None if ignore_lockfile or not analysis.get("lockfile") else Path(analysis["lockfile"]),
            repo_update=self.options.repo_update or podspec is not None,
            integrate_targets=False,
            podspec=podspec,
        )

    def run(self) -> ProcessorResult:
        """執行完整的依賴圖產出流程。"""
        self.validate()

        logging.info(f"========== 開始分析依賴: {self.basename} ==========")
        view = self.analyzer.analyze(self.analyzer_config())

        text_body = render_dependency_text(view, self.text_format)
        print_titled_section(self.config["text"]["title"], text_body, self.stream)

        graph_settings = self.config["graph"]
        graph = build_dependency_graph(view, graph_settings)
        result = ProcessorResult(view=view, graph=graph)

        if self.needs_renderer:
            self.output_dir.mkdir(parents=True, exist_ok=True)

        if self.options.graphviz:
            dot_path = output_path_for(self.output_dir, self.basename, DOT_SUFFIX)
            result.written_files.append(write_dot_file(graph, dot_path, graph_settings))

        if self.options.image:
            png_path = output_path_for(self.output_dir, self.basename, PNG_SUFFIX)
            result.written_files.append(render_png(graph, png_path, self.config["renderer"], graph_settings))

        logging.info(f"========== 依賴分析完成，共輸出 {len(result.written_files)} 個檔案 ==========")
        return result
