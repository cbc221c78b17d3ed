# src/depinsight/utils/path_utils.py
"""
提供與輸出路徑計算相關的通用工具函式。
"""

# 1. 標準庫導入
from pathlib import Path

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)

DEFAULT_BASENAME = "Podfile.graph"
DOT_SUFFIX = ".gv"
PNG_SUFFIX = ".png"
PODSPEC_SUFFIXES = (".podspec.json", ".podspec")


def output_basename(podspec: str | None, default: str = DEFAULT_BASENAME) -> str:
    """
    計算輸出檔案的基底名稱。

    - 未指定 podspec：使用固定的預設名稱。
    - podspec 檔案 (`.podspec` / `.podspec.json` 結尾或實際存在的檔案)：使用去除副檔名後的檔名。
    - 純套件名稱：原樣使用，僅將子組件分隔符 `/` 換成 `-`，使輸出檔留在輸出目錄中。
    """
    if not podspec:
        return default

    path = Path(podspec)
    for suffix in PODSPEC_SUFFIXES:
        if path.name.endswith(suffix) and len(path.name) > len(suffix):
            return path.name[: -len(suffix)]
    if path.is_file():
        return path.stem or default
    return podspec.replace("/", "-")


def output_path_for(output_dir: Path, basename: str, suffix: str) -> Path:
    """組合輸出路徑。基底名稱本身可能含有點號，因此不使用 with_suffix。"""
    return output_dir / f"{basename}{suffix}"
