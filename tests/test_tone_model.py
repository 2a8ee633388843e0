"""
測試聲調母音模型

驗證：
1. 預設 cluster 的基本母音與聲調寫法
2. 複合 cluster (üe) 優先於單一母音
3. 不分大小寫的辨識與查表
"""

import pytest

from phonosearch.pinyin.tone_model import ToneCluster, ToneClusterModel, get_default_tone_model


class TestToneClusterModel:
    """測試預設聲調母音模型"""

    def setup_method(self):
        self.model = ToneClusterModel.from_config()

    def test_single_vowel_cluster(self):
        """單一帶調母音對應到基本母音與四個聲調"""
        cluster = self.model.lookup("ǎ")
        assert cluster.base == "a"
        assert cluster.variants == ("ā", "á", "ǎ", "à")

    def test_umlaut_cluster_uses_v(self):
        """ü 的聲調以 v 為基本母音"""
        assert self.model.lookup("ǚ").base == "v"

    def test_compound_cluster(self):
        """ü + 帶調 e 是一個複合 cluster"""
        cluster = self.model.lookup("üè")
        assert cluster.base == "ve"
        assert cluster.variants == ("üē", "üé", "üě", "üè")

    def test_compound_preferred_over_single(self):
        """最長的 cluster 優先"""
        match = self.model.search("lüè")
        assert match.group() == "üè"
        assert match.start() == 1

    def test_search_finds_first_cluster(self):
        match = self.model.search("xiān")
        assert match.group() == "ā"
        assert match.span() == (2, 3)

    def test_search_without_tone(self):
        """沒有聲調的音節找不到 cluster"""
        assert self.model.search("de") is None

    def test_case_insensitive(self):
        """辨識與查表都不分大小寫"""
        match = self.model.search("SHÀNG")
        assert match is not None
        assert self.model.lookup(match.group()).base == "a"
        assert "À" in self.model

    def test_unknown_cluster(self):
        with pytest.raises(KeyError):
            self.model.lookup("a")

    def test_cluster_count(self):
        """6 個母音 x 4 聲調 + 4 個 üe 複合寫法"""
        assert len(self.model) == 28


def test_empty_model_rejected():
    with pytest.raises(ValueError):
        ToneClusterModel([])


def test_custom_model():
    model = ToneClusterModel([ToneCluster("ā", "a", ("ā",))])
    assert model.search("mā").group() == "ā"
    assert model.search("mǎ") is None


def test_default_model_is_shared():
    assert get_default_tone_model() is get_default_tone_model()
