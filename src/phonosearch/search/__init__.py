"""
搜尋模組

- RegexSearcher: 文字游標上的正規表示式搜尋原語
- IncrementalSearchSession: 每次查詢更新都重新編譯並搜尋的 session
"""

from .primitive import RegexSearcher, compile_pattern
from .session import IncrementalSearchSession, SearchDirection

__all__ = [
    "RegexSearcher",
    "compile_pattern",
    "IncrementalSearchSession",
    "SearchDirection",
]
