"""
泰米爾語書面化測試

驗證：
1. 正規化（Unicode / 空白 / 標點）
2. Diglossia 與模糊修正的順序與紀錄
3. Code-mixing 保留
4. 冪等性
5. 正字法診斷與事件回呼
"""

import pytest

from voicebill.core.lexicon import Lexicon
from voicebill.core.models import CorrectionKind
from voicebill.languages.tamil import TamilFormalizer
from voicebill.languages.tamil.config import TamilLinguisticConfig
from voicebill.languages.tamil.orthography import (
    contains_tamil,
    is_tamil_char,
    starts_with_mei,
    validate_orthography,
)


@pytest.fixture(scope="module")
def formalizer():
    return TamilFormalizer(Lexicon.default())


def _small_lexicon(grocery=("தக்காளி",)):
    return Lexicon(
        number_words={"one": "1"},
        quantity_keywords=("kg",),
        rate_keywords=("rs",),
        grocery_lexicon=grocery,
    )


class TestNormalization:
    """測試正規化步驟"""

    def test_whitespace_collapsed(self, formalizer):
        assert formalizer.formalize("  tomato   onion ") == "tomato onion"

    def test_zero_width_removed(self, formalizer):
        assert formalizer.formalize("தக்காளி\u200b") == "தக்காளி"

    def test_punctuation_unified(self, formalizer):
        assert formalizer.formalize("“tomato” – onion…") == '"tomato" - onion...'

    def test_nfc(self, formalizer):
        """分解形式 (க + ெ + ா) 與組合形式 கொ 結果一致"""
        decomposed = "க\u0bc6\u0bbe"
        composed = "க\u0bca"
        assert formalizer.formalize(decomposed) == formalizer.formalize(composed) == composed

    def test_normalization_recorded(self, formalizer):
        result = formalizer.process("  தக்காளி  ")
        assert result.processed_text == "தக்காளி"
        assert result.corrections[0].kind is CorrectionKind.NORMALIZATION

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_returned_unchanged(self, formalizer, text):
        assert formalizer.formalize(text) == text

    def test_none(self, formalizer):
        assert formalizer.formalize(None) == ""


class TestDiglossia:
    """測試口語 -> 書面語"""

    def test_colloquial_to_formal(self, formalizer):
        assert formalizer.formalize("தக்காள") == "தக்காளி"

    def test_multi_word_value(self, formalizer):
        assert formalizer.formalize("சிக்கன்") == "கோழி இறைச்சி"

    def test_unit_formalized(self, formalizer):
        assert formalizer.formalize("தக்காள 2 கிலோ") == "தக்காளி 2 கிலோகிராம்"

    def test_correction_record(self, formalizer):
        result = formalizer.process("வெங்கயம்")
        assert result.processed_text == "வெங்காயம்"
        correction = result.corrections[-1]
        assert correction.original == "வெங்கயம்"
        assert correction.corrected == "வெங்காயம்"
        assert correction.kind is CorrectionKind.DIGLOSSIA
        assert correction.confidence == 1.0

    def test_identity_mapping_recorded(self, formalizer):
        result = formalizer.process("தக்காளி")
        assert result.processed_text == "தக்காளி"
        assert [c.kind for c in result.corrections] == [CorrectionKind.DIGLOSSIA]

    def test_contains_tamil_flag(self, formalizer):
        assert formalizer.process("தக்காளி").contains_tamil is True
        assert formalizer.process("tomato").contains_tamil is False


class TestFuzzyCorrection:
    """測試詞庫模糊修正"""

    def test_near_miss_corrected(self, formalizer):
        result = formalizer.process("வெண்டைக்கய்")
        assert result.processed_text == "வெண்டைக்காய்"
        correction = result.corrections[-1]
        assert correction.kind is CorrectionKind.ASR_ERROR
        assert correction.confidence == pytest.approx(1 - 1 / 12)

    def test_below_threshold_unchanged(self):
        formalizer = TamilFormalizer(_small_lexicon())
        result = formalizer.process("வணக்கம்")
        assert result.processed_text == "வணக்கம்"
        assert result.corrections == []

    def test_latin_tokens_never_fuzzy_matched(self):
        formalizer = TamilFormalizer(_small_lexicon(grocery=("tomato",)))
        assert formalizer.formalize("tomatto") == "tomatto"

    def test_custom_threshold(self):
        strict = TamilFormalizer(Lexicon.default(), threshold=0.95)
        assert strict.formalize("வெண்டைக்கய்") == "வெண்டைக்கய்"


class TestCodeMixing:
    """測試英文借詞與數字保留"""

    def test_preserved_words(self, formalizer):
        assert formalizer.formalize("chicken 1 kg") == "chicken 1 kg"

    def test_numbers_and_punctuation_pass_through(self, formalizer):
        assert formalizer.formalize("2 ₹50 , 1.5") == "2 ₹50 , 1.5"

    def test_mixed_sentence(self, formalizer):
        assert formalizer.formalize("tomato தக்காள 2 kg") == "tomato தக்காளி 2 kg"


class TestIdempotence:
    """formalize(formalize(x)) == formalize(x)"""

    @pytest.mark.parametrize(
        "text",
        [
            "தக்காள 2 கிலோ",
            "சிக்கன் 1 kg",
            "மட்டன்",
            "துவர பருப்பு",
            "வெண்டைக்கய் கட்டு",
            "tomato வெங்கயம்",
        ],
    )
    def test_fixed_point(self, formalizer, text):
        once = formalizer.formalize(text)
        assert formalizer.formalize(once) == once

    def test_every_formal_value_is_fixed_point(self, formalizer):
        for value in set(TamilLinguisticConfig.COLLOQUIAL_TO_FORMAL.values()):
            assert formalizer.formalize(value) == value, value

    def test_every_lexicon_entry_is_fixed_point(self, formalizer):
        for entry in TamilLinguisticConfig.GROCERY_LEXICON:
            assert formalizer.formalize(entry) == entry, entry


class TestOrthography:
    """測試正字法檢查（僅診斷）"""

    def test_tamil_detection(self):
        assert is_tamil_char("த")
        assert not is_tamil_char("t")
        assert contains_tamil("tomato தக்காளி")
        assert not contains_tamil("tomato")

    def test_mei_start(self):
        assert starts_with_mei("க்காளி")
        assert not starts_with_mei("தக்காளி")
        issues = validate_orthography("க்காளி")
        assert [i.kind for i in issues] == ["mei_start"]

    def test_medial_uyir(self):
        issues = validate_orthography("தஅம்")
        assert len(issues) == 1
        assert issues[0].kind == "medial_uyir"
        assert issues[0].position == 1

    def test_valid_word(self):
        assert validate_orthography("தக்காளி") == []
        assert validate_orthography("tomato") == []

    def test_issues_do_not_change_output(self):
        formalizer = TamilFormalizer(_small_lexicon(grocery=()))
        result = formalizer.process("க்காளி")
        assert result.processed_text == "க்காளி"
        assert result.orthography_issues[0].kind == "mei_start"


class TestEvents:
    """測試事件回呼"""

    def test_events_emitted(self):
        events = []
        formalizer = TamilFormalizer(Lexicon.default(), on_event=events.append)
        formalizer.formalize("தக்காள")
        assert events == [
            {
                "type": "correction",
                "engine": "tamil",
                "original": "தக்காள",
                "replacement": "தக்காளி",
                "kind": "diglossia",
                "score": 1.0,
            }
        ]

    def test_failing_callback_does_not_break(self):
        def boom(event):
            raise RuntimeError("callback failed")

        formalizer = TamilFormalizer(Lexicon.default(), on_event=boom)
        assert formalizer.formalize("தக்காள") == "தக்காளி"
