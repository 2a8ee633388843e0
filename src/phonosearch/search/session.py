"""
增量搜尋 Session

每次查詢字串變動就重新編譯 pattern，並從 session 起點重新搜尋；
查詢模式 (PINYIN / REGEXP) 在 session 內明確持有，不改動任何全域狀態。

使用方式:
    engine = PinyinSearchEngine()
    session = engine.create_session("wǒ zài shànghǎi")
    session.update("shang")   # -> 12
    session.repeat()          # 下一個符合
    session.finish()          # 停在目前位置 (abort() 則回到起點)
"""

from __future__ import annotations

import uuid
from enum import Enum
from typing import TYPE_CHECKING, Optional

from phonosearch.core.errors import InvalidPattern, SessionClosed
from phonosearch.core.events import SearchEvent, SearchEventHandler
from phonosearch.core.protocols.search import SearchPrimitiveProtocol
from phonosearch.pinyin.compiler import SearchStrategy
from phonosearch.utils.logger import get_logger

if TYPE_CHECKING:
    from phonosearch.core.engine_interface import SearchEngine


class SearchDirection(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


class IncrementalSearchSession:
    """
    增量搜尋 Session

    功能:
    - update(): 查詢字串更新時重新編譯並搜尋
    - repeat(): 找下一個（可換方向）
    - toggle_strategy(): 在拼音 / 正規表示式模式間切換
    - finish() / abort(): 結束 session，abort 會把游標還原到起點
    """

    def __init__(
        self,
        engine: "SearchEngine",
        searcher: SearchPrimitiveProtocol,
        direction: SearchDirection = SearchDirection.FORWARD,
        strategy: SearchStrategy = SearchStrategy.PINYIN,
        on_event: Optional[SearchEventHandler] = None,
    ):
        self._engine = engine
        self._searcher = searcher
        self._logger = get_logger("session")
        self._on_event = on_event
        self.session_id = uuid.uuid4().hex
        self.direction = direction
        self.strategy = strategy
        self.origin = searcher.point
        self.query = ""
        self.pattern = ""
        self.closed = False
        self.last_match: Optional[int] = None

    @property
    def point(self) -> int:
        return self._searcher.point

    def update(self, query: str) -> Optional[int]:
        """
        查詢字串更新：從起點重新搜尋

        Returns:
            Optional[int]: 新的游標位置，找不到則 None
        """
        self._ensure_open()
        self.query = query
        self._searcher.point = self.origin
        if not query:
            self.pattern = ""
            self.last_match = None
            return None
        self._compile()
        return self._search(self.direction)

    def repeat(self, direction: Optional[SearchDirection] = None) -> Optional[int]:
        """從目前位置找下一個符合"""
        self._ensure_open()
        if direction is not None:
            self.direction = direction
        if not self.pattern:
            return None
        if self.direction is SearchDirection.FORWARD and self._at_empty_match():
            return self._step_past_empty_match()
        return self._search(self.direction)

    def toggle_strategy(self) -> Optional[int]:
        """切換 PINYIN / REGEXP，並以目前查詢重新搜尋"""
        self._ensure_open()
        self.strategy = (
            SearchStrategy.REGEXP
            if self.strategy is SearchStrategy.PINYIN
            else SearchStrategy.PINYIN
        )
        self._logger.debug(f"Strategy -> {self.strategy.value}")
        return self.update(self.query)

    def finish(self) -> int:
        """結束 session，游標停在目前位置"""
        return self._close(aborted=False)

    def abort(self) -> int:
        """結束 session，游標回到起點"""
        self._ensure_open()
        self._searcher.point = self.origin
        return self._close(aborted=True)

    def _compile(self) -> None:
        self.pattern = self._engine.compile(self.query, self.strategy)
        self._emit(
            {
                "type": "compiled",
                "query": self.query,
                "pattern": self.pattern,
                "strategy": self.strategy.value,
            }
        )

    def _search(self, direction: SearchDirection) -> Optional[int]:
        search = (
            self._searcher.search_forward
            if direction is SearchDirection.FORWARD
            else self._searcher.search_backward
        )
        try:
            position = search(self.pattern, None, True, 1)
        except InvalidPattern as e:
            # REGEXP 模式下打到一半的 pattern 很常見，視為暫時找不到
            self._emit(
                {
                    "type": "invalid_pattern",
                    "pattern": self.pattern,
                    "exception_type": type(e).__name__,
                    "exception_message": e.reason,
                }
            )
            self.last_match = None
            return None

        self.last_match = position
        if position is None:
            self._emit(
                {"type": "failed", "pattern": self.pattern, "direction": direction.value}
            )
            return None

        event: SearchEvent = {
            "type": "match",
            "pattern": self.pattern,
            "direction": direction.value,
            "point": position,
        }
        match_data = getattr(self._searcher, "match_data", None)
        if match_data is not None:
            event["start"], event["end"] = match_data
        self._emit(event)
        return position

    def _at_empty_match(self) -> bool:
        match_data = getattr(self._searcher, "match_data", None)
        return (
            self.last_match is not None
            and match_data is not None
            and match_data[0] == match_data[1] == self.point
        )

    def _step_past_empty_match(self) -> Optional[int]:
        """上一次是游標上的空字串符合：先跨過一個字元再找"""
        here = self.point
        self._searcher.point = here + 1
        if self.point == here:
            self.last_match = None
            self._emit(
                {"type": "failed", "pattern": self.pattern, "direction": self.direction.value}
            )
            return None
        position = self._search(self.direction)
        if position is None:
            self._searcher.point = here
        return position

    def _close(self, aborted: bool) -> int:
        self._ensure_open()
        self.closed = True
        self._emit({"type": "closed", "aborted": aborted, "point": self.point})
        return self.point

    def _ensure_open(self) -> None:
        if self.closed:
            raise SessionClosed(f"session {self.session_id} 已結束")

    def _emit(self, event: SearchEvent) -> None:
        if self._on_event is None:
            return
        event.setdefault("engine", self._engine.name)
        event.setdefault("session_id", self.session_id)
        try:
            self._on_event(event)
        except Exception:
            self._logger.exception("on_event handler failed")
