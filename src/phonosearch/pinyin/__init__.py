"""
拼音查詢模組

讓使用者以不帶聲調的拼音搜尋帶調拼音文本，並忽略音節間的空白。

主要類別:
- PinyinSearchEngine: 持有音節表與編譯器的引擎
- QueryCompiler: 查詢 -> 正規表示式 的編譯器
- SyllableTable: 去調音節 -> 帶調音節 的唯讀表
- ToneClusterModel: 聲調母音辨識與查表
- PinyinToneConfig: 聲調與母音類別設定

預設音節表來自 pypinyin（延遲載入）。
"""

from __future__ import annotations

import importlib
from typing import Any

from phonosearch.utils.lazy_imports import PINYIN_INSTALL_HINT

INSTALL_HINT = PINYIN_INSTALL_HINT

_LAZY_IMPORTS = {
    "PinyinSearchEngine": (".engine", "PinyinSearchEngine"),
    "QueryCompiler": (".compiler", "QueryCompiler"),
    "SearchStrategy": (".compiler", "SearchStrategy"),
    "match_longest_prefix": (".compiler", "match_longest_prefix"),
    "syllable_pattern": (".compiler", "syllable_pattern"),
    "substitute_vowels": (".compiler", "substitute_vowels"),
    "SyllableTable": (".syllables", "SyllableTable"),
    "build_syllable_table": (".syllables", "build_syllable_table"),
    "load_pypinyin_syllables": (".syllables", "load_pypinyin_syllables"),
    "ToneCluster": (".tone_model", "ToneCluster"),
    "ToneClusterModel": (".tone_model", "ToneClusterModel"),
    "VowelClassTable": (".vowel_classes", "VowelClassTable"),
    "EXACT_VOWEL_CLASSES": (".vowel_classes", "EXACT_VOWEL_CLASSES"),
    "RELAXED_VOWEL_CLASSES": (".vowel_classes", "RELAXED_VOWEL_CLASSES"),
    "PinyinToneConfig": (".config", "PinyinToneConfig"),
}

__all__ = list(_LAZY_IMPORTS) + ["PINYIN_INSTALL_HINT", "INSTALL_HINT"]


def __getattr__(name: str) -> Any:
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_path, attr_name = _LAZY_IMPORTS[name]
    module = importlib.import_module(module_path, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(list(globals().keys()) + list(_LAZY_IMPORTS.keys())))
