"""
核心抽象層

定義語言無關的接口、事件與例外。
"""

from .engine_interface import SearchEngine
from .errors import (
    InvalidPattern,
    PhonosearchError,
    SearchFailed,
    SessionClosed,
    SyllableTableError,
)
from .events import SearchEvent, SearchEventHandler
from .protocols import SearchPrimitiveProtocol

__all__ = [
    "SearchEngine",
    "SearchPrimitiveProtocol",
    "SearchEvent",
    "SearchEventHandler",
    "PhonosearchError",
    "SyllableTableError",
    "SearchFailed",
    "InvalidPattern",
    "SessionClosed",
]
