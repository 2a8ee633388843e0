"""
搜尋引擎抽象基類

定義所有查詢編譯引擎必須實作的介面。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from phonosearch.utils.logger import TimingContext, get_logger, setup_logger


class SearchEngine(ABC):
    """
    搜尋引擎抽象基類 (Abstract Base Class)

    職責:
    - 持有啟動時建好、之後唯讀的查詢表
    - 把使用者查詢編譯成 pattern
    - 提供日誌與計時功能

    生命週期:
    - Engine 應在應用程式啟動時建立一次
    - 之後每次查詢更新只呼叫 compile()，不會再修改任何表
    """

    _engine_name: str = "base"

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger(f"engine.{self._engine_name}")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    @property
    def name(self) -> str:
        return self._engine_name

    @abstractmethod
    def compile(self, query: str, strategy: Any = None) -> str:
        pass

    @abstractmethod
    def is_initialized(self) -> bool:
        pass

    @abstractmethod
    def get_table_stats(self) -> Dict[str, Any]:
        pass
