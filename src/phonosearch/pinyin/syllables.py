"""
音節表 (Syllable Table)

把有序的帶調音節列表轉成「去調鍵 -> 帶調音節」的唯讀對照表：

    "zhōng" -> "zhong"
    "lüè"   -> "lue"     (ü 一律以 u 建索引)
    "nǚ"    -> "nu"

查表不分大小寫：建表與查詢時都明確轉小寫，並把 v / ü 折成 u。

預設音節來源是 pypinyin 內建的單字讀音表，使用延遲導入。
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from phonosearch.core.errors import SyllableTableError
from phonosearch.utils.lazy_imports import _get_pinyin_dict
from phonosearch.utils.logger import get_logger

from .config import PinyinToneConfig
from .tone_model import ToneClusterModel, get_default_tone_model

logger = get_logger(__name__)

_KEY_FOLD = str.maketrans({"v": "u", "ü": "u"})


def normalize_key(text: str) -> str:
    """查表用的鍵：小寫，並把 v / ü 折成 u（長度不變）"""
    return text.lower().translate(_KEY_FOLD)


class SyllableTable(Mapping):
    """
    唯讀音節表

    鍵為去調音節（小寫、不含 ü），值為帶調的代表音節。
    `in` / `[]` / `get()` 都會先經過 normalize_key()。
    """

    def __init__(self, entries: Mapping[str, str]):
        self._entries = MappingProxyType(
            {normalize_key(k): v for k, v in entries.items()}
        )

    def __getitem__(self, plain: str) -> str:
        return self._entries[normalize_key(plain)]

    def __contains__(self, plain: object) -> bool:
        return isinstance(plain, str) and normalize_key(plain) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SyllableTable({len(self)} syllables)"

    @property
    def max_key_length(self) -> int:
        return max((len(k) for k in self._entries), default=0)


def derive_plain(
    toned: str,
    tone_model: ToneClusterModel,
    config=None,
) -> Tuple[str, str]:
    """
    由帶調音節推導去調鍵

    Args:
        toned: 帶調音節（如 "Shàng"）

    Returns:
        (plain, toned_lower)，如 ("shang", "shàng")

    Raises:
        SyllableTableError: 音節中沒有可辨識的聲調母音
    """
    config = config or PinyinToneConfig
    toned = toned.lower()
    match = tone_model.search(toned)
    if match is None:
        raise SyllableTableError(toned)

    cluster = tone_model.lookup(match.group())
    base = config.normalize_base(cluster.base)
    plain = toned[: match.start()] + base + toned[match.end():]
    return normalize_key(plain), toned


def build_syllable_table(
    syllables: Iterable[str],
    tone_model: Optional[ToneClusterModel] = None,
    config=None,
) -> SyllableTable:
    """
    建立音節表

    Args:
        syllables: 有序的帶調音節（重複項會略過）
        tone_model: 聲調母音模型，預設為 get_default_tone_model()

    Returns:
        SyllableTable

    Raises:
        SyllableTableError: 列表中任一音節沒有聲調母音（致命的設定錯誤）
    """
    tone_model = tone_model or get_default_tone_model()
    entries: Dict[str, str] = {}
    collisions = 0

    for syllable in syllables:
        plain, toned = derive_plain(syllable, tone_model, config)
        existing = entries.get(plain)
        if existing is None:
            entries[plain] = toned
        elif existing != toned:
            # 先出現者優先
            collisions += 1
            logger.debug(f"  [Collision] {plain}: keep {existing!r}, skip {toned!r}")

    logger.debug(f"Built syllable table: {len(entries)} keys, {collisions} collisions")
    return SyllableTable(entries)


@lru_cache(maxsize=1)
def load_pypinyin_syllables(config=None) -> Tuple[str, ...]:
    """
    從 pypinyin 的單字讀音表取出所有帶調音節

    依讀音表原順序、去重，並過濾掉：
    - 輕聲（沒有聲調符號）
    - 含字母表以外字元的讀音（ń、ň、m̄、ê̄ 等）

    Returns:
        Tuple[str, ...]: 小寫帶調音節
    """
    config = config or PinyinToneConfig
    tone_model = get_default_tone_model()
    allowed = re.compile(
        f"[{re.escape(config.SYLLABLE_ALPHABET + config.toned_letters())}]+"
    )

    seen = set()
    result: List[str] = []
    for readings in _get_pinyin_dict().values():
        for reading in readings.split(","):
            syllable = reading.strip().lower()
            if not syllable or syllable in seen:
                continue
            seen.add(syllable)
            if not allowed.fullmatch(syllable):
                continue
            if tone_model.search(syllable) is None:
                continue
            result.append(syllable)

    logger.debug(f"Loaded {len(result)} toned syllables from pypinyin")
    return tuple(result)
