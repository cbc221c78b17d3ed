# src/depinsight/utils/logging_utils.py
"""
提供與日誌記錄相關的通用工具和過濾器。
"""

# 1. 標準庫導入
import logging

# 2. 第三方庫導入
# (無)

# 3. 本專案導入
# (無)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class ThirdPartyNoiseFilter(logging.Filter):
    """
    攔截第三方函式庫 (graphviz, networkx) 的除錯訊息，只保留本專案的 DEBUG 日誌。
    """

    NOISY_PREFIXES = ("graphviz", "networkx")

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno > logging.DEBUG:
            return True
        return not record.name.startswith(self.NOISY_PREFIXES)


def configure_logging(verbose: bool = False):
    """設定根日誌記錄器。日誌輸出至 stderr，stdout 保留給文字報告。"""
    level = logging.DEBUG if verbose else logging.INFO
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not root_logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler.addFilter(ThirdPartyNoiseFilter())
        root_logger.addHandler(console_handler)
