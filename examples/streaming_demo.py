"""
串流解析範例 - 展示即時帳單更新

語音辨識每次回傳的都是「到目前為止的完整轉錄」，
這個範例模擬轉錄逐字增長，並展示每次重新解析的結果與 session 的自動確認。
"""

import time

from voicebill import BillingEngine, BillingSession

# 全域 Engine (單例模式)
engine = BillingEngine()


def demo_streaming_parse():
    """展示逐步增長的轉錄如何被重新解析"""

    print("=" * 60)
    print("串流解析展示")
    print("=" * 60)
    print()

    words = "tomato two kg fifty rupees potato one kg twenty rupees onion".split()

    transcript = ""
    for word in words:
        transcript = f"{transcript} {word}".strip()
        start_time = time.perf_counter()
        items = engine.parse_continuous_input(transcript)
        elapsed = (time.perf_counter() - start_time) * 1000

        print(f"📝 [{elapsed:6.2f}ms] {transcript}")
        for idx, item in enumerate(items):
            tag = "🔴 live" if idx == len(items) - 1 else "✅"
            print(f"    {tag} {item.to_dict()}")
    print()


def demo_tamil_transcript():
    """展示泰米爾語轉錄：口語數字 + 書面化品名"""

    print("=" * 60)
    print("泰米爾語轉錄")
    print("=" * 60)
    print()

    test_cases = [
        "இரண்டு கிலோ தக்காள ஐம்பது ரூபாய்",
        "அரை கிலோ வெங்கயம் இருபது ரூபா",
        "பால் ஒரு லிட்டர் அறுபது ரூபாய் முட்ட பத்து எண்ணிக்கை",
    ]

    for text in test_cases:
        print(f"原文: {text}")
        for item in engine.parse_continuous_input(text):
            print(f"  → {item.name} | {item.quantity} | {item.rate}")
        print()


def demo_formalize_for_display():
    """展示匯出前的書面化與修正紀錄"""

    print("=" * 60)
    print("書面化 (formalize_for_display)")
    print("=" * 60)
    print()

    corrections = []

    def on_event(event):
        if event.get("type") == "correction":
            corrections.append(event)
            print(f"  🔧 [{event['kind']}] '{event['original']}' → '{event['replacement']}'")

    display_engine = BillingEngine(on_event=on_event)
    for text in ["தக்காள 2 கிலோ", "சிக்கன் 1 kg", "கொத்துமல்லி கட்டு"]:
        print(f"原文: {text}")
        print(f"結果: {display_engine.formalize_for_display(text)}")
        print()

    print(f"共 {len(corrections)} 處修正")
    print()


def demo_session():
    """展示 BillingSession 的自動確認與語音指令"""

    print("=" * 60)
    print("BillingSession")
    print("=" * 60)
    print()

    session = BillingSession(engine)
    updates = [
        "tomato 2 kg 50 rupees",
        "tomato 2 kg 50 rupees potato 1 kg 20 rupees",
        "tomato 2 kg 50 rupees potato 1 kg 20 rupees delete last",
    ]
    for transcript in updates:
        update = session.update(transcript)
        print(f"📝 {transcript}")
        for item in update.committed:
            print(f"    ✅ 確認: {item.name} {item.quantity} @ {item.rate} = {item.total}")
        if update.command:
            print(f"    🗑️ 指令: {update.command.kind.value}")

    session.end_listening()
    print()
    print(f"帳單: {[item.name for item in session.confirmed_items]}")
    print(f"總計: ₹{session.grand_total:.2f}")


if __name__ == "__main__":
    print("\n" + "🌊" * 20)
    print("  串流解析範例")
    print("🌊" * 20 + "\n")

    demo_streaming_parse()
    demo_tamil_transcript()
    demo_formalize_for_display()
    demo_session()

    print("=" * 60)
    print("✅ 所有範例執行完成!")
    print("=" * 60)
