"""
母音字元類別表 (Vowel Class Tables)

兩張固定的表：基本母音 -> pattern 片段
- exact: 只有帶調寫法（聲調必須存在）
- relaxed: 原母音 + 帶調寫法（聲調可有可無）
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterator, Optional, Tuple

from .config import PinyinToneConfig


class VowelClassTable(Mapping):
    """唯讀的 母音 -> 字元類別 對照表，鍵一律小寫"""

    def __init__(self, name: str, classes: Mapping[str, str]):
        self.name = name
        self._classes = MappingProxyType({k.lower(): v for k, v in classes.items()})
        # 最長鍵優先（ue/ve 先於 u/v/e）
        self._keys_longest_first: Tuple[str, ...] = tuple(
            sorted(self._classes, key=lambda k: (-len(k), k))
        )

    def __getitem__(self, vowel: str) -> str:
        return self._classes[vowel.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._classes)

    def __len__(self) -> int:
        return len(self._classes)

    def __repr__(self) -> str:
        return f"VowelClassTable({self.name!r}, {len(self)} keys)"

    def match_at(self, text: str, index: int) -> Optional[str]:
        """回傳 text[index:] 開頭可對應的最長鍵（不分大小寫），沒有則 None"""
        for key in self._keys_longest_first:
            chunk = text[index: index + len(key)]
            if len(chunk) == len(key) and chunk.lower() == key:
                return key
        return None


EXACT_VOWEL_CLASSES = VowelClassTable("exact", PinyinToneConfig.vowel_classes(exact=True))
RELAXED_VOWEL_CLASSES = VowelClassTable("relaxed", PinyinToneConfig.vowel_classes(exact=False))
