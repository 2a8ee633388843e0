"""
正規表示式搜尋原語

在一段記憶體中的文字上維護一個游標 (point)，提供向後 / 向前兩種搜尋。
參數語意：

- bound: 搜尋邊界；向後搜尋時比對不可超過 bound，向前搜尋時起點不可小於 bound
- noerror: 失敗時的行為
    False   -> 拋出 SearchFailed
    True    -> 回傳 None，游標不動
    "bound" -> 回傳 None，游標移到 bound
- count: 找第幾個符合；負數代表反方向

編譯器只提供 pattern，這裡的其他參數原樣由呼叫端決定。
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional, Tuple, Union

from phonosearch.core.errors import InvalidPattern, SearchFailed
from phonosearch.utils.logger import get_logger

logger = get_logger(__name__)

NoError = Union[bool, str]


@lru_cache(maxsize=256)
def compile_pattern(pattern: str, case_fold: bool = True) -> "re.Pattern[str]":
    """快取版 re.compile；無效 pattern 轉成 InvalidPattern"""
    flags = re.IGNORECASE if case_fold else 0
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise InvalidPattern(pattern, str(e)) from e


class RegexSearcher:
    """
    文字游標 + 正規表示式搜尋

    Attributes:
        text: 被搜尋的文字
        point: 目前游標位置 (0 <= point <= len(text))
        case_fold: 是否不分大小寫
        match_data: 最後一次成功比對的 (start, end)
    """

    def __init__(self, text: str, point: int = 0, case_fold: bool = True):
        self.text = text
        self.case_fold = case_fold
        self.match_data: Optional[Tuple[int, int]] = None
        self.point = point

    @property
    def point(self) -> int:
        return self._point

    @point.setter
    def point(self, value: int) -> None:
        self._point = max(0, min(value, len(self.text)))

    def search_forward(
        self,
        pattern: str,
        bound: Optional[int] = None,
        noerror: NoError = False,
        count: int = 1,
    ) -> Optional[int]:
        """
        從游標往後找第 count 個符合

        成功時游標移到最後一個符合的結尾並回傳該位置。
        """
        if count < 0:
            return self.search_backward(pattern, bound, noerror, -count)

        regex = compile_pattern(pattern, self.case_fold)
        limit = len(self.text) if bound is None else max(self.point, min(bound, len(self.text)))
        position = self.point
        span = None

        for _ in range(count):
            match = regex.search(self.text, position, limit)
            if match is None:
                return self._fail(pattern, limit, noerror)
            span = match.span()
            # 空字串符合時往前推一格，避免原地打轉
            position = span[1] if span[1] > span[0] else span[1] + 1

        if span is None:
            return self.point
        self.match_data = span
        self.point = span[1]
        return self.point

    def search_backward(
        self,
        pattern: str,
        bound: Optional[int] = None,
        noerror: NoError = False,
        count: int = 1,
    ) -> Optional[int]:
        """
        從游標往前找第 count 個符合

        符合的起點必須在游標之前、不小於 bound，且結尾不超過游標。
        成功時游標移到符合的起點並回傳該位置。
        """
        if count < 0:
            return self.search_forward(pattern, bound, noerror, -count)

        regex = compile_pattern(pattern, self.case_fold)
        floor = 0 if bound is None else min(self.point, max(bound, 0))
        end = self.point
        span = None

        for _ in range(count):
            span = self._match_before(regex, floor, end)
            if span is None:
                return self._fail(pattern, floor, noerror)
            end = span[0]

        if span is None:
            return self.point
        self.match_data = span
        self.point = span[0]
        return self.point

    def _match_before(
        self, regex: "re.Pattern[str]", floor: int, end: int
    ) -> Optional[Tuple[int, int]]:
        for start in range(end - 1, floor - 1, -1):
            match = regex.match(self.text, start, end)
            if match is not None:
                return match.span()
        return None

    def _fail(self, pattern: str, bound: int, noerror: NoError) -> None:
        if not noerror:
            raise SearchFailed(pattern)
        if noerror == "bound":
            self.point = bound
        logger.debug(f"Search failed: {pattern!r}")
        return None
