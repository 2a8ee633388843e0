"""
全域配置模組

提供統一的配置類別，控制日誌、大小寫、查詢模式等行為。

使用方式:
    from phonosearch import PinyinSearchEngine, SearchConfig

    config = SearchConfig(verbose=True)
    engine = PinyinSearchEngine.from_config(config)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("phonosearch").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .pinyin.compiler import SearchStrategy
from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)
    else:
        # 不主動設定，讓使用者可以透過標準 logging 控制
        pass


@dataclass
class SearchConfig:
    """
    搜尋配置類別

    屬性:
        verbose: 是否開啟詳細日誌
        case_fold: 搜尋時是否不分大小寫（編譯出的母音類別都是小寫）
        strategy: 新 session 的預設查詢模式
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
    """

    verbose: bool = False
    case_fold: bool = True
    strategy: SearchStrategy = SearchStrategy.PINYIN
    on_timing: Optional[Callable[[str, float], None]] = None

    def __post_init__(self):
        configure_logging(self.verbose)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = SearchConfig(verbose=False)
