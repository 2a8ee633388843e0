"""
例外類別

- 初始化錯誤（音節表建不起來）是致命的，只報一次，不重試
- 單次查詢的編譯永遠不會失敗；搜尋失敗與無效 pattern 則由搜尋原語回報
"""


class PhonosearchError(Exception):
    """phonosearch 所有例外的基底類別"""


class SyllableTableError(PhonosearchError, ValueError):
    """音節表中出現無法辨識聲調母音的音節"""

    def __init__(self, syllable: str):
        self.syllable = syllable
        super().__init__(f"音節 {syllable!r} 找不到可辨識的聲調母音")


class SearchFailed(PhonosearchError, LookupError):
    """搜尋失敗 (noerror=False 時拋出)"""

    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"Search failed: {pattern!r}")


class InvalidPattern(PhonosearchError, ValueError):
    """pattern 無法編譯為正規表示式"""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class SessionClosed(PhonosearchError, RuntimeError):
    """搜尋 session 已結束後仍被呼叫"""
