# src/depinsight/core/config_loader.py
"""
負責載入並合併 DepInsight 的設定。

使用者設定檔為可選的 YAML 檔案，會被遞迴合併到內建預設值之上。
"""

# 1. 標準庫導入
import copy
import logging
from pathlib import Path
from typing import Any

# 2. 第三方庫導入
import yaml

# 3. 本專案導入
from depinsight.exceptions import ConfigurationError
from depinsight.reporters.text_reporter import TEXT_FORMATS
from depinsight.utils.path_utils import DEFAULT_BASENAME

DEFAULT_CONFIG_FILENAME = "depinsight.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "renderer": {
        "executable": "dot",
        "dpi": 96,
        "timeout": 120,
    },
    "graph": {
        "name": "DependencyGraph",
        "rankdir": "LR",
        "fontname": "Helvetica",
        "target_shape": "box",
        "remote_cluster_suffix": " repo",
        "local_cluster_key": "local",
        "link_color": "gray",
    },
    "output": {
        "dir": ".",
        "default_basename": DEFAULT_BASENAME,
    },
    "text": {
        "format": "pods",
        "title": "Dependencies",
    },
    "analysis": {
        "snapshot": "Podfile.resolved.yaml",
        "manifest": "Podfile",
        "lockfile": "Podfile.lock",
    },
}

class ConfigLoader:
    """一個處理設定檔載入與合併的類別。"""

    def __init__(self, config_path: Path | None = None):
        self.config_path = config_path
        self.config = copy.deepcopy(DEFAULT_CONFIG)

        user_config = self._resolve_user_config(config_path)
        if user_config:
            self.config = self._merge_configs(self.config, user_config)
        self._validate()

    def _resolve_user_config(self, config_path: Path | None) -> dict[str, Any]:
        """
        明確指定的設定檔必須存在；未指定時嘗試讀取當前目錄下的預設設定檔。
        """
        if config_path is not None:
            if not config_path.is_file():
                raise ConfigurationError(f"指定的設定檔不存在: {config_path}")
            return self._load_yaml(config_path)

        default_path = Path.cwd() / DEFAULT_CONFIG_FILENAME
        if default_path.is_file():
            self.config_path = default_path
            return self._load_yaml(default_path)

        logging.debug("未發現設定檔，將使用內建預設值。")
        return {}

    @staticmethod
    def _load_yaml(path: Path) -> dict[str, Any]:
        """載入一個 YAML 設定檔；空檔案視為空設定。"""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"解析設定檔 '{path.name}' 時發生錯誤: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"設定檔 '{path.name}' 的頂層必須是映射 (mapping)。")
        logging.info(f"已載入設定檔: {path}")
        return data

    @staticmethod
    def _merge_configs(default: dict, user: dict) -> dict:
        """遞迴地合併使用者設定到預設設定中。"""
        for key, value in user.items():
            if isinstance(value, dict) and isinstance(default.get(key), dict):
                default[key] = ConfigLoader._merge_configs(default[key], value)
            else:
                default[key] = value
        return default

    def _validate(self):
        for name in DEFAULT_CONFIG:
            section = self.config.get(name)
            if not isinstance(section, dict):
                raise ConfigurationError(f"設定區段 '{name}' 必須是映射 (mapping)，目前為: {section!r}")

        text_format = self.config["text"].get("format")
        if text_format not in TEXT_FORMATS:
            raise ConfigurationError(f"不支援的文字輸出格式: {text_format!r} (可用: {', '.join(TEXT_FORMATS)})")

        timeout = self.config["renderer"].get("timeout")
        if timeout is not None and (not isinstance(timeout, (int, float)) or timeout <= 0):
            raise ConfigurationError(f"renderer.timeout 必須為正數，目前為: {timeout!r}")

    def section(self, name: str) -> dict[str, Any]:
        return self.config.get(name, {})
