"""
phonosearch - 拼音聲調模糊搜尋 (Tone-Insensitive Pinyin Search)

核心概念：
- 使用者輸入不帶聲調的拼音（如 "shanghai"）
- 系統把查詢編譯成正規表示式：第一個音節必須帶調，其餘母音可帶可不帶調
- 音節之間的空白一律忽略，"shànghǎi" 與 "shàng hǎi" 都能找到

官方入口（穩定 API）：
- `phonosearch.PinyinSearchEngine`
- `phonosearch.SearchStrategy`
"""

# =============================================================================
# Engine 層（官方入口）
# =============================================================================
from phonosearch.pinyin.engine import PinyinSearchEngine
from phonosearch.pinyin.compiler import QueryCompiler, SearchStrategy

# =============================================================================
# 搜尋原語 / Session
# =============================================================================
from phonosearch.search import IncrementalSearchSession, RegexSearcher, SearchDirection

# =============================================================================
# 配置與日誌工具
# =============================================================================
from phonosearch.config import DEFAULT_CONFIG, SearchConfig
from phonosearch.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

# =============================================================================
# 例外
# =============================================================================
from phonosearch.core.errors import (
    InvalidPattern,
    PhonosearchError,
    SearchFailed,
    SessionClosed,
    SyllableTableError,
)

# =============================================================================
# 依賴檢查工具
# =============================================================================
from phonosearch.utils.lazy_imports import check_pinyin_dependencies, is_pinyin_available

__all__ = [
    # Engine
    "PinyinSearchEngine",
    "QueryCompiler",
    "SearchStrategy",
    # Search
    "RegexSearcher",
    "IncrementalSearchSession",
    "SearchDirection",
    # Config / Logging
    "SearchConfig",
    "DEFAULT_CONFIG",
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    # Errors
    "PhonosearchError",
    "SyllableTableError",
    "SearchFailed",
    "InvalidPattern",
    "SessionClosed",
    # Dependency checks
    "is_pinyin_available",
    "check_pinyin_dependencies",
]

__version__ = "0.1.0"
