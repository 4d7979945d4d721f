"""
BillingEngine 與模組層級入口測試
"""

import logging
from dataclasses import replace

import pytest

import voicebill
from voicebill import BillingEngine, Lexicon, ParsedItem, ParserConfig
from voicebill.session import BillItem


@pytest.fixture(scope="module")
def engine():
    return BillingEngine()


class TestEntryPoints:
    """測試兩個對外入口"""

    def test_module_level_parse(self):
        items = voicebill.parse_continuous_input("tomato 2 kg 50 rupees")
        assert items == [ParsedItem(name="Tomato", quantity="2 kg", rate=25.0)]

    def test_module_level_formalize(self):
        assert voicebill.formalize_for_display("தக்காள 2 கிலோ") == "தக்காளி 2 கிலோகிராம்"

    def test_module_level_parse_segment(self):
        assert voicebill.parse_segment("bread 40 rupees").rate == 40.0

    def test_parsed_item_to_dict(self):
        item = voicebill.parse_segment("tomato 2 kg 50 rupees")
        assert item.to_dict() == {"name": "Tomato", "quantity": "2 kg", "rate": 25.0}

    def test_default_engine_is_shared(self):
        assert voicebill.get_default_engine() is voicebill.get_default_engine()

    def test_formalize_idempotent(self, engine):
        once = engine.formalize_for_display("சிக்கன் ஒரு கிலோ")
        assert engine.formalize_for_display(once) == once


class TestEngineComponents:
    """測試引擎持有的共享元件"""

    def test_initialized(self, engine):
        assert engine.is_initialized()

    def test_components_share_lexicon(self, engine):
        assert engine.lexicon is Lexicon.default()
        assert engine.formalizer.matcher is engine.matcher

    def test_process_text_report(self, engine):
        result = engine.process_text("வெங்கயம் 1 kg")
        assert result.processed_text == "வெங்காயம் 1 kg"
        assert result.contains_tamil
        assert result.corrections[0].original == "வெங்கயம்"

    def test_cache_stats(self, engine):
        engine.formalize_for_display("வெண்டைக்கய்")
        engine.formalize_for_display("வெண்டைக்கய்")
        stats = engine.get_cache_stats()
        assert stats["hits"] >= 1

    def test_custom_lexicon(self):
        custom = replace(Lexicon.default(), item_names=("widget",))
        engine = BillingEngine(lexicon=custom)
        items = engine.parse_continuous_input("widget 2 pieces gadget 1 pieces")
        assert len(items) == 1
        assert items[0].quantity == "2 pieces"

    def test_config_threshold(self):
        strict = BillingEngine(config=ParserConfig(fuzzy_threshold=0.99))
        assert strict.formalize_for_display("வெண்டைக்கய்") == "வெண்டைக்கய்"


class TestBillItems:
    """測試匯出前的批次書面化"""

    def test_dict_rows(self, engine):
        rows = [
            {"name": "தக்காள", "quantity": "2 கிலோ", "rate": 25.0},
            {"name": "Tomato", "quantity": "", "rate": 10.0},
        ]
        processed = engine.process_bill_items(rows)
        assert processed[0] == {"name": "தக்காளி", "quantity": "2 கிலோகிராம்", "rate": 25.0}
        assert processed[1] == {"name": "Tomato", "quantity": "", "rate": 10.0}
        # 不修改輸入
        assert rows[0]["name"] == "தக்காள"

    def test_dataclass_rows(self, engine):
        item = BillItem(name="சிக்கன்", quantity="1 kg", rate=200.0, total=200.0)
        processed = engine.process_bill_items([item])[0]
        assert processed.name == "கோழி இறைச்சி"
        assert processed.quantity == "1 kg"
        assert processed.id == item.id
        assert item.name == "சிக்கன்"

    def test_parsed_item_rows(self, engine):
        processed = engine.process_bill_items([ParsedItem(name=None, quantity="அரை கிலோ")])
        assert processed == [ParsedItem(name=None, quantity="அரை கிலோகிராம்")]


class TestLoggingAndTiming:
    """測試日誌與計時回呼"""

    def test_timing_callback(self):
        calls = []
        engine = BillingEngine(on_timing=lambda op, elapsed: calls.append(op))
        engine.parse_continuous_input("tomato 2 kg 50 rupees")
        assert "BillingEngine.__init__" in calls
        assert "BillingEngine.parse_continuous_input" in calls

    def test_event_callback(self):
        events = []
        engine = BillingEngine(on_event=events.append)
        engine.parse_continuous_input("இரண்டு கிலோ சிக்கன் ஐம்பது ரூபாய்")
        assert any(e.get("replacement") == "கோழி இறைச்சி" for e in events)

    def test_logger_namespace(self, caplog):
        with caplog.at_level(logging.INFO, logger="voicebill"):
            BillingEngine()
        assert any(r.name == "voicebill.engine.billing" for r in caplog.records)
