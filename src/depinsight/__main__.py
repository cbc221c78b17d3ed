# src/depinsight/__main__.py
"""
DepInsight 主執行入口。
"""

# 1. 標準庫導入
import argparse
import logging
import subprocess
import sys
from pathlib import Path

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from depinsight.core.config_loader import ConfigLoader
from depinsight.core.dependency_processor import DependencyProcessor, ProcessorOptions
from depinsight.exceptions import DepInsightError
from depinsight.reporters.text_reporter import TEXT_FORMATS
from depinsight.resolvers.snapshot_analyzer import SnapshotAnalyzer
from depinsight.utils.logging_utils import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="depinsight",
        description="顯示專案的依賴圖：輸出 YAML 文字，並可選擇輸出 Graphviz DOT 與 PNG 圖檔。",
    )
    parser.add_argument("podspec", nargs="?", help="單獨分析的套件規格檔案或名稱")
    parser.add_argument("--ignore-lockfile", action="store_true", help="計算依賴圖時忽略既有的鎖定檔")
    parser.add_argument("--repo-update", action="store_true", help="解析前先更新遠端來源")
    parser.add_argument("--graphviz", action="store_true", help="輸出 <basename>.gv 的 DOT 檔案")
    parser.add_argument("--image", action="store_true", help="輸出 <basename>.png 圖檔")
    parser.add_argument("--snapshot", type=Path, help="外部解析器產出的解析快照 (YAML)")
    parser.add_argument("--config", type=Path, help="DepInsight 設定檔路徑")
    parser.add_argument("--output-dir", type=Path, help="輸出目錄")
    parser.add_argument("--text-format", choices=TEXT_FORMATS, help="文字報告的格式")
    parser.add_argument("-v", "--verbose", action="store_true", help="輸出除錯日誌")
    return parser


def main(argv: list[str] | None = None) -> int:
    """主函式，解析命令列參數並執行一次依賴圖產出流程。"""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    options = ProcessorOptions(
        podspec=args.podspec,
        ignore_lockfile=args.ignore_lockfile,
        repo_update=args.repo_update,
        graphviz=args.graphviz,
        image=args.image,
        text_format=args.text_format,
        output_dir=args.output_dir,
    )

    try:
        config_loader = ConfigLoader(args.config)
        snapshot = args.snapshot or Path(config_loader.config["analysis"]["snapshot"])
        processor = DependencyProcessor(options, config_loader, SnapshotAnalyzer(snapshot))
        processor.run()
    except (DepInsightError, OSError) as e:
        logging.error(f"依賴分析失敗: {e}")
        return 1
    except subprocess.TimeoutExpired as e:
        logging.error(f"Graphviz 執行超時 (超過 {e.timeout} 秒)。依賴圖可能過於複雜。")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
