"""
拼音配置模組

定義聲調符號、聲調母音群 (tone cluster) 與兩張母音字元類別表。
這些都是固定的字面資料，不從音節表推導。
"""

from typing import Dict


class PinyinToneConfig:
    """拼音聲調配置（類別常數，不需實例化）"""

    # 容許任意空白的 pattern 片段
    WHITESPACE_TOKEN = r"\s*"

    # =========================================================================
    # 1. 聲調符號 (Tone Marks)
    # =========================================================================
    # 依一、二、三、四聲排列；v 代表 ü
    TONE_MARKS = {
        "a": "āáǎà",
        "e": "ēéěè",
        "i": "īíǐì",
        "o": "ōóǒò",
        "u": "ūúǔù",
        "v": "ǖǘǚǜ",
    }

    # =========================================================================
    # 2. 複合聲調母音 (Compound Clusters)
    # =========================================================================
    # üe 的聲調標在 e 上 (lüè, nüè)，整段 "ü" + 帶調 e 視為一個 cluster，
    # 否則去調後會留下 ü
    COMPOUND_PREFIXES = {
        "ve": ("ü", "e"),
    }

    # =========================================================================
    # 3. 去調鍵正規化 (Plain Key Normalization)
    # =========================================================================
    # 查詢時使用者打 u（或 v），所以含 ü 的音節以 u 建索引
    BASE_NORMALIZATION = {
        "v": "u",
        "ve": "ue",
    }

    # =========================================================================
    # 4. 母音字元類別表 (Vowel Class Tables)
    # =========================================================================
    # exact: 只允許帶調寫法，用於第一個音節
    # u / v 兩者都涵蓋 ü 的聲調，因為去調鍵把 ü 併入 u
    EXACT_VOWEL_CLASSES = {
        "a": "[āáǎà]",
        "e": "[ēéěè]",
        "i": "[īíǐì]",
        "o": "[ōóǒò]",
        "u": "[ūúǔùǖǘǚǜ]",
        "v": "[ūúǔùǖǘǚǜ]",
        "ue": "[uü][ēéěè]",
        "ve": "[uü][ēéěè]",
    }

    # relaxed: 原母音 + 帶調寫法，用於其餘部分
    RELAXED_VOWEL_CLASSES = {
        "a": "[aāáǎà]",
        "e": "[eēéěè]",
        "i": "[iīíǐì]",
        "o": "[oōóǒò]",
        "u": "[uüūúǔùǖǘǚǜ]",
        "v": "[uüūúǔùǖǘǚǜ]",
        "ue": "[uü][eēéěè]",
        "ve": "[uü][eēéěè]",
    }

    # 預設音節來源允許的字元（pypinyin 讀音中的鼻音、ê 等會被濾掉）
    SYLLABLE_ALPHABET = "abcdefghijklmnopqrstuvwxyzü"

    @classmethod
    def normalize_base(cls, base: str) -> str:
        return cls.BASE_NORMALIZATION.get(base, base)

    @classmethod
    def toned_letters(cls) -> str:
        return "".join(cls.TONE_MARKS.values())

    @classmethod
    def vowel_classes(cls, exact: bool) -> Dict[str, str]:
        return dict(cls.EXACT_VOWEL_CLASSES if exact else cls.RELAXED_VOWEL_CLASSES)
