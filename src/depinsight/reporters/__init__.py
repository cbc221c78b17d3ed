# src/depinsight/reporters/__init__.py
"""
報告生成器套件，負責將解析結果輸出為文字報告。
"""

from .text_reporter import (
    TEXT_FORMATS,
    build_pods_listing,
    build_targets_mapping,
    print_titled_section,
    render_dependency_text,
    to_yaml_text,
)

__all__ = [
    "TEXT_FORMATS",
    "build_pods_listing",
    "build_targets_mapping",
    "print_titled_section",
    "render_dependency_text",
    "to_yaml_text",
]
