# src/depinsight/utils/__init__.py
"""
通用工具函式套件。
"""

from .color_utils import color_for, get_analogous_dark_color
from .logging_utils import ThirdPartyNoiseFilter, configure_logging
from .path_utils import DEFAULT_BASENAME, output_basename, output_path_for

__all__ = [
    "DEFAULT_BASENAME",
    "ThirdPartyNoiseFilter",
    "color_for",
    "configure_logging",
    "get_analogous_dark_color",
    "output_basename",
    "output_path_for",
]
