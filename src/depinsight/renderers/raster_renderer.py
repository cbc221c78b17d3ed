# src/depinsight/renderers/raster_renderer.py
"""
將依賴圖交由外部 Graphviz 執行檔渲染成 PNG 圖片。
"""

# 1. 標準庫導入
import logging
import shutil
import subprocess
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
from depinsight.exceptions import RendererNotInstalledError, RenderingError
from depinsight.models.graph import GraphModel
from depinsight.renderers.dot_renderer import generate_dependency_dot_source

DEFAULT_RENDERER_SETTINGS: dict[str, Any] = {
    "executable": "dot",
    "dpi": 96,
    "timeout": 120,
}


def ensure_renderer_available(executable: str = "dot") -> str:
    """
    在系統 PATH 中尋找渲染器執行檔。

    Returns:
        執行檔的完整路徑。

    Raises:
        RendererNotInstalledError: 找不到執行檔時。
    """
    resolved = shutil.which(executable)
    if resolved is None:
        raise RendererNotInstalledError(executable)
    logging.debug(f"找到渲染器: {resolved}")
    return resolved


def render_png(
    graph: GraphModel,
    output_path: Path,
    renderer_settings: dict[str, Any] | None = None,
    graph_settings: dict[str, Any] | None = None,
) -> Path:
    """
    使用外部 Graphviz 執行檔將依賴圖渲染成 PNG 圖片。

    DOT 原始碼經由 stdin 傳入，渲染結果自 stdout 讀出後寫入目標檔案。
    執行超時 (subprocess.TimeoutExpired) 不在此處理，直接交由呼叫端決定。

    Raises:
        RendererNotInstalledError: 找不到渲染器。
        RenderingError: 渲染器以非零狀態結束。
        OSError: 無法寫入輸出檔案。
    """
    settings = {**DEFAULT_RENDERER_SETTINGS, **(renderer_settings or {})}
    executable = ensure_renderer_available(settings["executable"])
    dot_source = generate_dependency_dot_source(graph, graph_settings)

    logging.info(f"準備將依賴圖渲染至: {output_path} (DPI: {settings['dpi']})")
    command = [executable, "-Tpng", f"-Gdpi={settings['dpi']}"]
    try:
        process = subprocess.run(
            command,
            input=dot_source.encode("utf-8"),
            capture_output=True,
            check=True,
            timeout=settings["timeout"],
        )
    except subprocess.CalledProcessError as e:
        error_message = (e.stderr or b"").decode("utf-8", errors="ignore")
        logging.error(f"Graphviz ({settings['executable']}) 執行時返回錯誤 (代碼 {e.returncode})。")
        raise RenderingError(f"Graphviz ({settings['executable']}) 渲染失敗:", error_message) from e

    with open(output_path, "wb") as f:
        f.write(process.stdout)
    logging.info(f"圖表已成功儲存至: {output_path}")
    return output_path
