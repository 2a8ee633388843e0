#!/usr/bin/env python3
"""
phonosearch 命令列工具

以不帶聲調的拼音搜尋帶調拼音文本，類似 grep：

    phonosearch shanghai notes.txt
    phonosearch "zhen de ma" --count notes.txt
    cat notes.txt | phonosearch xian
    phonosearch shanghai --show-pattern
    phonosearch "sh.ng" --regexp notes.txt

結束代碼：0 有符合、1 沒有符合、2 參數或 pattern 錯誤。
"""

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Tuple

from phonosearch import __version__
from phonosearch.config import SearchConfig
from phonosearch.core.errors import InvalidPattern
from phonosearch.pinyin.compiler import SearchStrategy
from phonosearch.pinyin.engine import PinyinSearchEngine
from phonosearch.search.primitive import compile_pattern


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phonosearch",
        description="Search tone-marked pinyin text with a plain pinyin query",
    )
    parser.add_argument("query", help="Plain pinyin query, e.g. 'shanghai'")
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Files to search (default: stdin)",
    )
    parser.add_argument(
        "--regexp",
        action="store_true",
        help="Treat QUERY as a ready-made regular expression",
    )
    parser.add_argument(
        "--case-sensitive",
        action="store_true",
        help="Do not fold case when matching (uppercase query vowels match uppercase toned vowels)",
    )
    parser.add_argument(
        "--show-pattern",
        action="store_true",
        help="Print the compiled pattern and exit",
    )
    parser.add_argument(
        "-c",
        "--count",
        action="store_true",
        help="Print only the number of matching lines",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _iter_sources(files: List[str], stdin: TextIO) -> Iterable[Tuple[Optional[str], str]]:
    if not files:
        yield None, stdin.read()
        return
    for name in files:
        yield name, Path(name).read_text(encoding="utf-8")


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    parser = _build_parser()
    # 旗標可出現在 QUERY 與 FILE 之間
    args = parser.parse_intermixed_args(argv)
    stdin = stdin or sys.stdin

    config = SearchConfig(
        verbose=args.verbose,
        case_fold=not args.case_sensitive,
        strategy=SearchStrategy.REGEXP if args.regexp else SearchStrategy.PINYIN,
    )
    engine = PinyinSearchEngine.from_config(config)
    pattern = engine.compile(args.query, config.strategy)

    if args.show_pattern:
        print(pattern)
        return 0

    try:
        regex = compile_pattern(pattern, config.case_fold)
    except InvalidPattern as e:
        print(f"phonosearch: {e}", file=sys.stderr)
        return 2

    total = 0
    try:
        for name, content in _iter_sources(args.files, stdin):
            matched = 0
            for lineno, line in enumerate(content.splitlines(), start=1):
                if not regex.search(line):
                    continue
                matched += 1
                if not args.count:
                    prefix = f"{name}:" if name is not None else ""
                    print(f"{prefix}{lineno}:{line}")
            if args.count:
                print(f"{name}:{matched}" if name is not None else matched)
            total += matched
    except OSError as e:
        print(f"phonosearch: {e}", file=sys.stderr)
        return 2

    return 0 if total else 1


if __name__ == "__main__":
    sys.exit(main())
