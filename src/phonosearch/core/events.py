"""
事件模型（Event Model）

增量搜尋 session 不直接輸出到 stdout。
若需要知道「這次編譯出什麼 pattern、跳到哪裡」，請使用事件回呼（event handler）。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class SearchEvent(TypedDict, total=False):
    type: Literal["compiled", "match", "failed", "invalid_pattern", "closed"]
    engine: str
    session_id: str

    # compiled
    query: str
    pattern: str
    strategy: Literal["pinyin", "regexp"]

    # match / failed
    direction: Literal["forward", "backward"]
    start: int
    end: int
    point: int

    # invalid_pattern
    exception_type: str
    exception_message: str

    # closed
    aborted: bool


SearchEventHandler = Callable[[SearchEvent], None]
