"""共用的測試 fixture：小型人工音節表，讓編譯器測試不依賴 pypinyin 資料"""

import pytest

from phonosearch.pinyin.compiler import QueryCompiler
from phonosearch.pinyin.engine import PinyinSearchEngine
from phonosearch.pinyin.syllables import build_syllable_table

SAMPLE_SYLLABLES = (
    "shàng",
    "shān",
    "hǎi",
    "hāi",
    "zhēn",
    "zhè",
    "dé",
    "mā",
    "xī",
    "xiān",
    "xiāng",
    "ān",
    "lǜ",
    "lù",
    "lüè",
    "nǚ",
    "nù",
    "jué",
    "yī",
)


@pytest.fixture
def sample_syllables():
    return SAMPLE_SYLLABLES


@pytest.fixture
def sample_table():
    return build_syllable_table(SAMPLE_SYLLABLES)


@pytest.fixture
def compiler(sample_table):
    return QueryCompiler(sample_table)


@pytest.fixture
def engine():
    return PinyinSearchEngine(syllables=SAMPLE_SYLLABLES)
