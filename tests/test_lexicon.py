"""
詞庫組合測試

驗證：
1. 預設詞庫只建一次且不可修改
2. 空 key / 空 value 會被拒絕
3. 關鍵字 alternation 長詞優先、邊界規則
"""

import re
from dataclasses import replace

import pytest

from voicebill.core.lexicon import Lexicon, keyword_alternation


class TestDefaultLexicon:
    """測試預設詞庫"""

    def test_default_is_cached(self):
        assert Lexicon.default() is Lexicon.default()

    def test_mappings_are_read_only(self):
        lexicon = Lexicon.default()
        with pytest.raises(TypeError):
            lexicon.number_words["eleventy"] = "110"

    def test_contains_both_languages(self):
        lexicon = Lexicon.default()
        assert lexicon.number_words["இரண்டு"] == "2"
        assert lexicon.number_words["two"] == "2"
        assert "kg" in lexicon.quantity_keywords
        assert "கிலோ" in lexicon.quantity_keywords
        assert "rupees" in lexicon.rate_keywords
        assert "ரூபாய்" in lexicon.rate_keywords

    def test_every_formal_value_is_recognisable(self):
        """每個書面語 (單詞) 都必須在詞庫或映射 key 中，才能保持冪等"""
        lexicon = Lexicon.default()
        for value in lexicon.colloquial_to_formal.values():
            if len(value.split()) == 1:
                assert value in lexicon.grocery_lexicon or value in lexicon.colloquial_to_formal

    def test_patterns_compiled_once(self):
        lexicon = Lexicon.default()
        assert lexicon.patterns is lexicon.patterns

    def test_formal_phrases_longest_first(self):
        phrases = Lexicon.default().formal_phrases
        assert ("கோழி", "இறைச்சி") in phrases
        lengths = [len(p) for p in phrases]
        assert lengths == sorted(lengths, reverse=True)


class TestLexiconValidation:
    """測試注入詞庫的驗證"""

    def _minimal(self, **kwargs):
        fields = dict(number_words={"one": "1"}, quantity_keywords=("kg",), rate_keywords=("rs",))
        fields.update(kwargs)
        return Lexicon(**fields)

    def test_minimal_lexicon(self):
        lexicon = self._minimal()
        assert dict(lexicon.number_words) == {"one": "1"}

    def test_empty_key_rejected(self):
        with pytest.raises(ValueError):
            self._minimal(number_words={"": "1"})

    def test_empty_value_rejected(self):
        with pytest.raises(ValueError):
            self._minimal(colloquial_to_formal={"தக்காள": ""})

    def test_empty_keyword_rejected(self):
        with pytest.raises(ValueError):
            self._minimal(rate_keywords=("rs", ""))

    def test_number_word_keys_lowercased(self):
        lexicon = self._minimal(number_words={"ONE": "1"})
        assert "one" in lexicon.number_words

    def test_replace_keeps_validation(self):
        """dataclasses.replace 可用來替換語系表格"""
        custom = replace(Lexicon.default(), item_names=("widget",))
        assert custom.item_names == ("widget",)
        assert custom.number_words["two"] == "2"


class TestKeywordPatterns:
    """測試長詞優先與關鍵字邊界"""

    def test_alternation_longest_first(self):
        alternation = keyword_alternation(["g", "kg", "kilogram", "kg"])
        assert alternation.split("|") == ["kilogram", "kg", "g"]

    def test_alternation_escapes(self):
        alternation = keyword_alternation(["கி.கி", "₹"])
        assert re.fullmatch(alternation, "கி.கி")
        assert not re.fullmatch(alternation, "கிxகி")

    def test_quantity_prefers_longest_unit(self):
        match = Lexicon.default().patterns.quantity_after.search("2 kilograms")
        assert match.group("unit") == "kilograms"

    def test_unit_must_not_be_followed_by_letter(self):
        """"2 grapes" 不是 "2 g" """
        assert Lexicon.default().patterns.quantity_after.search("2 grapes") is None

    def test_rate_keyword_r_needs_boundary(self):
        assert Lexicon.default().patterns.price_after.search("50 rice") is None
        assert Lexicon.default().patterns.price_after.search("50 r") is not None

    def test_price_boundary_both_orders(self):
        boundary = Lexicon.default().patterns.price_boundary
        assert boundary.search("tomato 50 rupees").group(0) == "50 rupees"
        assert boundary.search("tomato rs 50").group(0) == "rs 50"
        assert boundary.search("தக்காளி 50 ரூபாய்").group(0) == "50 ரூபாய்"

    def test_item_name_automaton(self):
        automaton = Lexicon.default().patterns.item_names
        found = [m[3] for m in automaton.find_leftmost_longest("சின்ன வெங்காயம்")]
        assert found == ["சின்ன வெங்காயம்"]
