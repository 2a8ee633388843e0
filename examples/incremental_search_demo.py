"""
增量搜尋範例 - 模擬逐字輸入查詢

這個範例展示每打一個字母就重新編譯 pattern 並從起點重新搜尋，
以及 repeat() / abort() 的行為。
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from phonosearch import PinyinSearchEngine

# 全域 Engine (單例模式)
engine = PinyinSearchEngine()


def demo_incremental_search():
    """展示逐字輸入"""

    print("=" * 60)
    print("增量搜尋展示")
    print("=" * 60)
    print()

    text = "wǒ zài shànghǎi gōngzuò, tā zhù zài shàng hǎi de xiānggǎng lù"
    print(f"文本: {text}")
    print()

    events = []
    session = engine.create_session(text, on_event=events.append)

    query = ""
    for char in "shanghai":
        query += char
        position = session.update(query)
        status = f"-> {position}" if position is not None else "(找不到)"
        print(f"  {query:<10} {session.pattern:<45} {status}")

    print()
    print(f"下一個: {session.repeat()}")
    print(f"再下一個: {session.repeat()}")
    print(f"取消後回到: {session.abort()}")
    print()
    print(f"共 {len(events)} 個事件，最後一個: {events[-1]}")


def demo_patterns():
    """展示編譯出的 pattern"""

    print("=" * 60)
    print("查詢 -> pattern")
    print("=" * 60)
    for query in ["shanghai", "zhen de ma", "xianggang", "lvse", "x"]:
        print(f"  {query:<12} {engine.compile(query)}")
    print()


if __name__ == "__main__":
    demo_patterns()
    demo_incremental_search()
