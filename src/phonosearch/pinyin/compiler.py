"""
查詢編譯器 (Query Compiler)

把不帶聲調的拼音查詢編譯成可以比對帶調拼音文本的正規表示式：

    "shanghai" -> "sh[āáǎà]ng\\s*h[aāáǎà]\\s*[iīíǐì]"

步驟：
1. 找出查詢開頭最長的合法音節（不含整段查詢本身、至少兩個字元）
2. 第一個音節：聲調母音換成 exact 類別（必須帶調）
3. 其餘部分：每個母音換成 relaxed 類別（可帶可不帶調），
   並在第三個字元起插入 \\s*，容許原文音節間有任意空白
4. 找不到音節時，整段用 exact 類別逐字替換

編譯是純函式：只讀取建好的表，不會失敗，也沒有副作用。
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from phonosearch.core.errors import SyllableTableError
from phonosearch.utils.logger import get_logger

from .config import PinyinToneConfig
from .syllables import SyllableTable
from .tone_model import ToneClusterModel, get_default_tone_model
from .vowel_classes import EXACT_VOWEL_CLASSES, RELAXED_VOWEL_CLASSES, VowelClassTable

logger = get_logger(__name__)

WHITESPACE = PinyinToneConfig.WHITESPACE_TOKEN


class SearchStrategy(Enum):
    """查詢模式：拼音轉換，或呼叫端已給出完整 pattern"""
    PINYIN = "pinyin"
    REGEXP = "regexp"


def match_longest_prefix(escaped: str, table: SyllableTable) -> Optional[int]:
    """
    找出查詢開頭最長的合法音節

    從長度 L-1 試到 2；整段查詢與單一字元都不列入。

    Args:
        escaped: 已跳脫的查詢字串
        table: 音節表

    Returns:
        Optional[int]: 音節長度，沒有則 None
    """
    for length in range(len(escaped) - 1, 1, -1):
        if escaped[:length] in table:
            return length
    return None


def syllable_pattern(
    toned: str,
    exact_classes: VowelClassTable = EXACT_VOWEL_CLASSES,
    tone_model: Optional[ToneClusterModel] = None,
    surface: Optional[str] = None,
) -> str:
    """
    產生單一音節的 pattern：聲調母音換成 exact 類別，其餘字元照抄

    Args:
        toned: 帶調音節（音節表中的值，如 "shàng"）
        surface: 使用者輸入的對應片段；長度相同時沿用其大小寫（含聲調母音類別）

    Returns:
        str: 如 "sh[āáǎà]ng"

    Raises:
        SyllableTableError: toned 中沒有聲調母音
    """
    tone_model = tone_model or get_default_tone_model()
    match = tone_model.search(toned)
    if match is None:
        raise SyllableTableError(toned)

    cluster = tone_model.lookup(match.group())
    fragment = exact_classes[cluster.base]
    source = toned
    if surface is not None and len(surface) == len(toned):
        # 只沿用大小寫；v / ü 等拼法差異以表中寫法為準
        source = "".join(
            s if s.lower() == t else t for s, t in zip(surface, toned)
        )
        if surface[match.start():match.end()].isupper():
            fragment = fragment.upper()
    return (
        re.escape(source[: match.start()])
        + fragment
        + re.escape(source[match.end():])
    )


def substitute_vowels(
    text: str,
    classes: VowelClassTable,
    whitespace: str = WHITESPACE,
) -> str:
    """
    逐字把母音換成字元類別

    - 最長鍵優先（ue/ve 先於單一母音），不分大小寫；大寫母音輸出大寫類別
    - 其他字元以 re.escape 跳脫
    - 查詢中的空白換成一個 whitespace token
    - text 長度 > 1 時，第三個字元（index 2）起每個 token 前加 whitespace token

    Args:
        text: 未跳脫的查詢片段
        classes: exact 或 relaxed 類別表
    """
    tolerant = len(text) > 1
    parts = []
    index = 0
    while index < len(text):
        char = text[index]
        if char.isspace():
            if not parts or parts[-1] != whitespace:
                parts.append(whitespace)
            index += 1
            continue

        if tolerant and index >= 2 and parts and parts[-1] != whitespace:
            parts.append(whitespace)

        key = classes.match_at(text, index)
        if key is not None:
            fragment = classes[key]
            if text[index:index + len(key)].isupper():
                fragment = fragment.upper()
            parts.append(fragment)
            index += len(key)
        else:
            parts.append(re.escape(char))
            index += 1
    return "".join(parts)


class QueryCompiler:
    """
    查詢編譯器

    持有唯讀的音節表與兩張母音類別表；compile() 對相同輸入永遠回傳相同結果。

    使用範例:
        >>> compiler = QueryCompiler(table)
        >>> compiler.compile("shanghai")
        'sh[āáǎà]ng\\\\s*h[aāáǎà]\\\\s*[iīíǐì]'
        >>> compiler.compile("sh.*ai", SearchStrategy.REGEXP)
        'sh.*ai'
    """

    def __init__(
        self,
        table: SyllableTable,
        tone_model: Optional[ToneClusterModel] = None,
        exact_classes: VowelClassTable = EXACT_VOWEL_CLASSES,
        relaxed_classes: VowelClassTable = RELAXED_VOWEL_CLASSES,
    ):
        self.table = table
        self.tone_model = tone_model or get_default_tone_model()
        self.exact_classes = exact_classes
        self.relaxed_classes = relaxed_classes

    def compile(self, query: str, strategy: SearchStrategy = SearchStrategy.PINYIN) -> str:
        """
        編譯查詢

        Args:
            query: 使用者輸入
            strategy: REGEXP 時原樣回傳

        Returns:
            str: 正規表示式 pattern
        """
        if strategy is SearchStrategy.REGEXP:
            return query

        escaped = re.escape(query)
        if len(escaped) <= 1:
            return substitute_vowels(query, self.exact_classes)

        length = match_longest_prefix(escaped, self.table)
        if length is None:
            pattern = substitute_vowels(query, self.exact_classes)
            logger.debug(f"[Compile] {query!r} -> {pattern!r} (no syllable)")
            return pattern

        # 音節只含字母，跳脫前後前綴相同
        head_text = query[:length]
        toned = self.table[head_text]
        head = syllable_pattern(
            toned, self.exact_classes, self.tone_model, surface=head_text
        )
        if length >= len(query):
            return head

        tail = substitute_vowels(query[length:], self.relaxed_classes)
        separator = "" if tail.startswith(WHITESPACE) else WHITESPACE
        pattern = head + separator + tail
        logger.debug(f"[Compile] {query!r} -> {pattern!r} (head {toned!r})")
        return pattern
