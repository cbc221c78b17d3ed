# src/depinsight/renderers/__init__.py
"""
渲染器套件，負責將依賴圖輸出為 DOT 原始碼與圖檔。
"""

from .dot_renderer import generate_dependency_dot_source, write_dot_file
from .raster_renderer import ensure_renderer_available, render_png

__all__ = [
    "ensure_renderer_available",
    "generate_dependency_dot_source",
    "render_png",
    "write_dot_file",
]
