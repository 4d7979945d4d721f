"""
相似度比對測試

驗證：
1. similarity 的定義（含空字串）
2. find_closest_match 的門檻與 tie-break
3. LexiconMatcher 與線性掃描結果一致
"""

import pytest

from voicebill.matching import LexiconMatcher, find_closest_match, similarity


class TestSimilarity:
    """測試 similarity()"""

    def test_identical_strings(self):
        assert similarity("tomato", "tomato") == 1.0

    def test_both_empty(self):
        """兩個空字串定義為完全相同"""
        assert similarity("", "") == 1.0

    def test_one_empty(self):
        assert similarity("", "abc") == 0.0

    def test_single_edit(self):
        # 1 - 1/4
        assert similarity("milk", "silk") == pytest.approx(0.75)

    def test_tamil_code_points(self):
        """以 code point 計算距離：缺一個母音符號只差 1"""
        score = similarity("வெண்டைக்கய்", "வெண்டைக்காய்")
        assert score == pytest.approx(1 - 1 / 12)

    def test_range(self):
        for a, b in [("abc", "xyz"), ("kg", "kilogram"), ("a", "")]:
            assert 0.0 <= similarity(a, b) <= 1.0


class TestFindClosestMatch:
    """測試 find_closest_match()"""

    def test_returns_best_entry(self):
        match, score = find_closest_match("tomatto", ["potato", "tomato", "onion"])
        assert match == "tomato"
        assert score == pytest.approx(1 - 1 / 7)

    def test_below_threshold_returns_original(self):
        """低於門檻時回傳原詞，但仍回報最高分"""
        match, score = find_closest_match("xyz", ["tomato", "onion"], threshold=0.75)
        assert match == "xyz"
        assert score < 0.75

    def test_threshold_is_inclusive(self):
        match, score = find_closest_match("milk", ["silk"], threshold=0.75)
        assert match == "silk"
        assert score == pytest.approx(0.75)

    def test_tie_first_entry_wins(self):
        """同分時以宣告順序先出現者為準"""
        match, _ = find_closest_match("cat", ["bat", "hat", "rat"], threshold=0.5)
        assert match == "bat"

    def test_empty_word(self):
        match, score = find_closest_match("", ["tomato"])
        assert match == ""
        assert score == 0.0

    def test_empty_lexicon(self):
        assert find_closest_match("tomato", []) == ("tomato", 0.0)


class TestLexiconMatcher:
    """測試長度分桶比對器"""

    ENTRIES = ["tomato", "potato", "onion", "carrot", "beans", "bat", "hat", "cabbage"]

    @pytest.mark.parametrize("word", ["tomatto", "potatos", "onoin", "carot", "bean", "cat", "xyz", "cabage"])
    def test_accepted_matches_equal_linear_scan(self, word):
        """達到門檻的結果必須與線性掃描一致"""
        matcher = LexiconMatcher(self.ENTRIES)
        expected = find_closest_match(word, self.ENTRIES, 0.75)
        actual = matcher.closest(word, 0.75)
        if expected[1] >= 0.75:
            assert actual == expected
        else:
            assert actual[0] == word

    def test_len_and_entries(self):
        matcher = LexiconMatcher(self.ENTRIES)
        assert len(matcher) == len(self.ENTRIES)
        assert matcher.entries == tuple(self.ENTRIES)

    def test_tie_keeps_declaration_order(self):
        matcher = LexiconMatcher(["hat", "bat"])
        assert matcher.closest("cat", 0.6)[0] == "hat"

    def test_satisfies_protocol(self):
        from voicebill.core.protocols import FuzzyMatcherProtocol

        assert isinstance(LexiconMatcher(["a"]), FuzzyMatcherProtocol)

    def test_instances_do_not_share_cache(self):
        """不同詞庫的 matcher 不可互相污染"""
        first = LexiconMatcher(["tomato"])
        second = LexiconMatcher(["potato"])
        assert first.closest("tomatto")[0] == "tomato"
        assert second.closest("tomatto")[0] == "tomatto"
        assert first.closest("tomatto")[0] == "tomato"
