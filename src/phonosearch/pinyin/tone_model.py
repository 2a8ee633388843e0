"""
聲調母音模型 (Tone-Cluster Model)

回答兩個問題：
1. 一個音節裡，哪一段是帶聲調的母音 (recognizer)
2. 那一段代表哪個基本母音、有哪些聲調寫法 (lookup)

例：
    "zhōng" 中的 "ō"   -> ToneCluster(base="o", variants=("ō","ó","ǒ","ò"))
    "lüè"   中的 "üè"  -> ToneCluster(base="ve", variants=("üē","üé","üě","üè"))
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .config import PinyinToneConfig


@dataclass(frozen=True)
class ToneCluster:
    """
    帶調母音群

    Attributes:
        text: 在音節中出現的帶調寫法（小寫）
        base: 基本母音（a/e/i/o/u/v，或複合的 ve）
        variants: 依聲調排列的所有寫法
    """
    text: str
    base: str
    variants: Tuple[str, ...]


class ToneClusterModel:
    """
    聲調母音模型

    建立後唯讀；recognizer 不分大小寫，查表前一律轉小寫。
    """

    def __init__(self, clusters: Iterable[ToneCluster]):
        table: Dict[str, ToneCluster] = {}
        for cluster in clusters:
            table[cluster.text.lower()] = cluster
        if not table:
            raise ValueError("ToneClusterModel 至少需要一個 cluster")

        self._clusters = table
        # 長的優先，讓 "üè" 先於 "è" 被比對
        alternatives = sorted(table, key=lambda t: (-len(t), t))
        self._recognizer = re.compile(
            "|".join(re.escape(t) for t in alternatives), re.IGNORECASE
        )

    @classmethod
    def from_config(cls, config=None) -> "ToneClusterModel":
        """由 PinyinToneConfig 的聲調符號表建立預設模型"""
        config = config or PinyinToneConfig
        clusters = []
        for base, marks in config.TONE_MARKS.items():
            variants = tuple(marks)
            for mark in marks:
                clusters.append(ToneCluster(mark, base, variants))

        for base, (prefix, vowel) in config.COMPOUND_PREFIXES.items():
            variants = tuple(prefix + mark for mark in config.TONE_MARKS[vowel])
            for variant in variants:
                clusters.append(ToneCluster(variant, base, variants))

        return cls(clusters)

    @property
    def recognizer(self) -> "re.Pattern[str]":
        return self._recognizer

    @property
    def clusters(self) -> Mapping[str, ToneCluster]:
        return dict(self._clusters)

    def search(self, syllable: str) -> Optional["re.Match[str]"]:
        """找出音節中第一段帶調母音"""
        return self._recognizer.search(syllable)

    def lookup(self, text: str) -> ToneCluster:
        """
        以比對到的文字查出 ToneCluster

        Raises:
            KeyError: 不是已知的 cluster
        """
        return self._clusters[text.lower()]

    def __len__(self) -> int:
        return len(self._clusters)

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and text.lower() in self._clusters


_DEFAULT_MODEL: Optional[ToneClusterModel] = None


def get_default_tone_model() -> ToneClusterModel:
    """取得共用的預設模型（第一次呼叫時建立）"""
    global _DEFAULT_MODEL
    if _DEFAULT_MODEL is None:
        _DEFAULT_MODEL = ToneClusterModel.from_config()
    return _DEFAULT_MODEL
