"""
日誌與計時工具

所有模組都從 `phonosearch` 這個 logger 階層取得 logger，
預設只掛 NullHandler，不主動輸出；需要時由使用者或 verbose 選項開啟。

使用方式:
    from phonosearch.utils.logger import get_logger, TimingContext

    logger = get_logger("engine.pinyin")
    with TimingContext("build_table", logger):
        ...
"""

import functools
import logging
import time
from typing import Callable, Optional

ROOT_LOGGER_NAME = "phonosearch"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    取得 phonosearch 階層下的 logger

    Args:
        name: 子 logger 名稱（如 "engine.pinyin"），None 表示根 logger。
              已帶有 "phonosearch." 前綴的名稱（如 __name__）會原樣使用。

    Returns:
        logging.Logger
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """
    為根 logger 掛上輸出 handler 並設定等級

    重複呼叫不會重複掛 handler，只會更新等級。
    """
    logger = get_logger()
    logger.setLevel(level)

    has_stream = any(
        getattr(h, "_phonosearch_handler", False) for h in logger.handlers
    )
    if not has_stream:
        handler = handler or logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        handler._phonosearch_handler = True
        logger.addHandler(handler)
    return logger


def enable_debug_logging() -> logging.Logger:
    """開啟 DEBUG 等級輸出"""
    return setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> logging.Logger:
    """只開啟計時輸出（計時訊息記錄在 timing 子 logger）"""
    setup_logger(level=logging.INFO)
    timing_logger = get_logger("timing")
    timing_logger.setLevel(logging.DEBUG)
    return timing_logger


class TimingContext:
    """
    計時上下文管理器

    離開區塊時以指定等級記錄耗時，並呼叫 callback(operation, elapsed_seconds)。

    範例:
        >>> with TimingContext("build_table", logger) as t:
        ...     build()
        >>> t.elapsed
        0.0123
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or get_logger("timing")
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        self.logger.log(
            self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f}ms"
        )
        if self.callback is not None:
            self.callback(self.operation, self.elapsed)
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """
    計時裝飾器

    Args:
        operation: 記錄用名稱，預設為函式的 qualname
        level: 日誌等級
    """

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
