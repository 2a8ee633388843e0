"""
測試查詢編譯器

驗證：
1. 最長音節前綴（不含整段查詢、至少兩個字元）
2. 第一個音節用 exact 類別、其餘用 relaxed 類別
3. 第三個字元起容許任意空白
4. REGEXP 模式原樣回傳
5. 任意輸入都能編譯成合法的正規表示式
"""

import re

import pytest

from phonosearch.pinyin.compiler import (
    SearchStrategy,
    match_longest_prefix,
    substitute_vowels,
    syllable_pattern,
)
from phonosearch.pinyin.vowel_classes import EXACT_VOWEL_CLASSES, RELAXED_VOWEL_CLASSES


class TestMatchLongestPrefix:
    """測試最長音節前綴"""

    def test_shanghai(self, sample_table):
        assert match_longest_prefix("shanghai", sample_table) == 5

    def test_prefers_longer_syllable(self, sample_table):
        """xi 與 xian 都是音節時選 xian"""
        assert match_longest_prefix("xianhai", sample_table) == 4

    def test_full_length_excluded(self, sample_table):
        """整段查詢不算，zhen 只能找到 zhe"""
        assert match_longest_prefix("zhen", sample_table) == 3

    def test_escaped_query(self, sample_table):
        assert match_longest_prefix(re.escape("zhen de ma"), sample_table) == 4

    def test_short_queries(self, sample_table):
        assert match_longest_prefix("", sample_table) is None
        assert match_longest_prefix("a", sample_table) is None
        assert match_longest_prefix("ma", sample_table) is None

    def test_no_match(self, sample_table):
        assert match_longest_prefix("qqqq", sample_table) is None


class TestSyllablePattern:
    """測試單一音節 pattern"""

    def test_simple(self):
        assert syllable_pattern("shàng") == "sh[āáǎà]ng"

    def test_keeps_surface_case(self):
        assert syllable_pattern("shàng", surface="SHANG") == "SH[ĀÁǍÀ]NG"

    def test_surface_length_mismatch_uses_canonical(self):
        assert syllable_pattern("shàng", surface="sh") == "sh[āáǎà]ng"

    def test_compound(self):
        assert syllable_pattern("lüè") == "l[uü][ēéěè]"

    def test_umlaut_class_covers_u(self):
        assert syllable_pattern("nǚ") == "n[ūúǔùǖǘǚǜ]"

    def test_relaxed_table(self):
        assert syllable_pattern("mā", RELAXED_VOWEL_CLASSES) == "m[aāáǎà]"


class TestSubstituteVowels:
    """測試逐字母音替換"""

    def test_relaxed_with_whitespace(self):
        assert substitute_vowels("hai", RELAXED_VOWEL_CLASSES) == r"h[aāáǎà]\s*[iīíǐì]"

    def test_first_two_adjacent(self):
        assert substitute_vowels("ab", EXACT_VOWEL_CLASSES) == "[āáǎà]b"

    def test_single_character(self):
        assert substitute_vowels("a", EXACT_VOWEL_CLASSES) == "[āáǎà]"
        assert substitute_vowels("x", EXACT_VOWEL_CLASSES) == "x"

    def test_escapes_metacharacters(self):
        assert substitute_vowels("x.", EXACT_VOWEL_CLASSES) == r"x\."

    def test_compound_key(self):
        assert substitute_vowels("ue", RELAXED_VOWEL_CLASSES) == "[uü][eēéěè]"

    def test_uppercase_vowel(self):
        assert substitute_vowels("A", EXACT_VOWEL_CLASSES) == "[ĀÁǍÀ]"
        assert substitute_vowels("UE", RELAXED_VOWEL_CLASSES) == "[UÜ][EĒÉĚÈ]"

    def test_query_whitespace(self):
        assert substitute_vowels(" de", RELAXED_VOWEL_CLASSES) == r"\s*d\s*[eēéěè]"


class TestQueryCompiler:
    """測試完整編譯流程"""

    def test_shanghai(self, compiler):
        pattern = compiler.compile("shanghai")
        assert pattern == r"sh[āáǎà]ng\s*h[aāáǎà]\s*[iīíǐì]"

    def test_shanghai_matches_toned_forms(self, compiler):
        regex = re.compile(compiler.compile("shanghai"))
        assert regex.search("shànghǎi")
        assert regex.search("shàng hǎi")
        assert regex.search("shàng   hǎ i")
        assert regex.search("shànghai")

    def test_first_syllable_requires_tone(self, compiler):
        regex = re.compile(compiler.compile("shanghai"))
        assert regex.search("shanghai") is None

    def test_zhen_de_ma(self, compiler):
        pattern = compiler.compile("zhen de ma")
        assert pattern == r"zh[ēéěè]n\s*d\s*[eēéěè]\s*m\s*[aāáǎà]"
        regex = re.compile(pattern)
        assert regex.search("zhēn de ma")
        assert regex.search("zhēn dé mā")
        assert regex.search("zhēndema")
        assert regex.search("zhen de ma") is None

    def test_single_character(self, compiler):
        assert compiler.compile("x") == "x"
        assert compiler.compile("a") == "[āáǎà]"

    def test_empty(self, compiler):
        assert compiler.compile("") == ""

    def test_two_characters_skip_lookup(self, compiler):
        """長度 2 沒有可比對的前綴，整段 exact 替換"""
        assert compiler.compile("ma") == "m[āáǎà]"

    def test_no_syllable_uses_exact(self, compiler):
        assert compiler.compile("qqa") == r"qq\s*[āáǎà]"

    def test_longest_syllable_wins(self, compiler):
        regex = re.compile(compiler.compile("xianhai"))
        assert regex.search("xiānhǎi")
        assert regex.search("xīanhǎi") is None

    def test_compound_head(self, compiler):
        regex = re.compile(compiler.compile("lueshan"))
        assert regex.search("lüèshān")
        assert regex.search("luèshān")

    def test_v_input(self, compiler):
        pattern = compiler.compile("lvshan")
        assert pattern.startswith("l[ūúǔùǖǘǚǜ]")
        assert re.search(pattern, "lǜshān")

    def test_v_spelling_outside_cluster(self, compiler):
        """jve 的 v 以表中的 u 寫法輸出"""
        assert compiler.compile("jvexi") == r"ju[ēéěè]\s*x[iīíǐì]"

    def test_keeps_input_case(self, compiler):
        pattern = compiler.compile("Shanghai")
        assert pattern.startswith("Sh[āáǎà]ng")
        assert re.search(pattern, "SHÀNGHǍI", re.IGNORECASE)

    def test_uppercase_query_matches_case_sensitively(self, compiler):
        """大寫查詢產生大寫母音類別，不分大小寫時也照樣符合小寫文本"""
        pattern = compiler.compile("SHANGHAI")
        assert pattern == r"SH[ĀÁǍÀ]NG\s*H[AĀÁǍÀ]\s*[IĪÍǏÌ]"
        assert re.search(pattern, "SHÀNGHǍI")
        assert not re.search(pattern, "shànghǎi")
        assert re.search(pattern, "shànghǎi", re.IGNORECASE)

    def test_regexp_passthrough(self, compiler):
        for query in ("sh.*ai", "(", "", "shanghai", "[a-z]+"):
            assert compiler.compile(query, SearchStrategy.REGEXP) == query

    def test_pure(self, compiler):
        assert compiler.compile("shanghai") == compiler.compile("shanghai")

    @pytest.mark.parametrize(
        "query",
        ["(", "\\", "[", "?", "a b", "中文", "ü", "zhen.", "sh(ang", "  ", "***"],
    )
    def test_total(self, compiler, query):
        """任何輸入都能編譯成合法 pattern"""
        pattern = compiler.compile(query)
        re.compile(pattern)

    def test_metacharacter_after_syllable(self, compiler):
        regex = re.compile(compiler.compile("zhen."))
        assert regex.search("zhēn.")
        assert regex.search("zhēnx") is None
