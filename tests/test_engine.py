"""
測試 PinyinSearchEngine

驗證：
1. 建立音節表與統計
2. 音節表錯誤是致命的（記錄一次並拋出）
3. finditer / 配置 / 計時回呼
4. pypinyin 預設音節表的端到端行為
"""

import logging
import re

import pytest

from phonosearch import SearchConfig
from phonosearch.core.engine_interface import SearchEngine
from phonosearch.core.errors import InvalidPattern, SyllableTableError
from phonosearch.pinyin.compiler import SearchStrategy
from phonosearch.pinyin.engine import PinyinSearchEngine

TEXT = "wǒ zài shànghǎi, tā zài shàng hǎi"


class TestPinyinSearchEngine:
    """測試自訂音節表的引擎"""

    def test_inherits_search_engine(self, engine):
        assert isinstance(engine, SearchEngine)
        assert engine.name == "pinyin"

    def test_initialized(self, engine):
        assert engine.is_initialized()

    def test_table_stats(self, engine, sample_syllables):
        stats = engine.get_table_stats()
        assert stats["source"] == "custom"
        assert stats["syllables"] == len(sample_syllables) - 3
        assert stats["max_syllable_length"] == 5
        assert stats["tone_clusters"] == 28

    def test_compile_defaults_to_pinyin(self, engine):
        assert engine.compile("shanghai") == r"sh[āáǎà]ng\s*h[aāáǎà]\s*[iīíǐì]"
        assert engine.compile("shanghai", SearchStrategy.REGEXP) == "shanghai"

    def test_finditer(self, engine):
        assert list(engine.finditer("shanghai", TEXT)) == [(7, 15), (24, 33)]

    def test_finditer_case_fold(self, engine):
        assert list(engine.finditer("shanghai", TEXT.upper())) == [(7, 15), (24, 33)]

    def test_finditer_case_sensitive(self, sample_syllables):
        engine = PinyinSearchEngine(sample_syllables, case_fold=False)
        assert list(engine.finditer("shanghai", TEXT.upper())) == []

    def test_finditer_invalid_regexp(self, engine):
        with pytest.raises(InvalidPattern):
            list(engine.finditer("(", TEXT, SearchStrategy.REGEXP))

    def test_bad_syllable_list(self, caplog):
        with caplog.at_level(logging.ERROR, logger="phonosearch"):
            with pytest.raises(SyllableTableError):
                PinyinSearchEngine(["mā", "de"])
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "de" in errors[0].getMessage()

    def test_on_timing_callback(self, sample_syllables):
        calls = []
        PinyinSearchEngine(sample_syllables, on_timing=lambda op, sec: calls.append(op))
        assert calls == ["PinyinSearchEngine.__init__"]

    def test_from_config(self, sample_syllables):
        config = SearchConfig(strategy=SearchStrategy.REGEXP, case_fold=False)
        engine = PinyinSearchEngine.from_config(config, syllables=sample_syllables)
        session = engine.create_session(TEXT)
        assert session.strategy is SearchStrategy.REGEXP


class TestDefaultSyllables:
    """測試 pypinyin 預設音節表（端到端）"""

    @pytest.fixture(autouse=True)
    def _engine(self):
        pytest.importorskip("pypinyin")
        self.engine = PinyinSearchEngine()

    def test_stats(self):
        stats = self.engine.get_table_stats()
        assert stats["source"] == "pypinyin"
        assert stats["syllables"] > 300

    def test_shanghai(self):
        pattern = self.engine.compile("shanghai")
        assert pattern.startswith("sh[āáǎà]ng")
        assert re.search(pattern, "shànghǎi")
        assert re.search(pattern, "shàng hǎi")

    def test_zhen_de_ma(self):
        pattern = self.engine.compile("zhen de ma")
        assert pattern.startswith("zh[ēéěè]n")
        assert re.search(pattern, "zhēn de ma")

    def test_single_character(self):
        assert self.engine.compile("x") == "x"

    def test_umlaut_syllables(self):
        assert re.search(self.engine.compile("nvren"), "nǚrén")
        assert re.search(self.engine.compile("xuesheng"), "xuéshēng")
        assert re.search(self.engine.compile("jvesheng"), "juéshēng")
