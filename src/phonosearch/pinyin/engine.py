"""
拼音搜尋引擎 (PinyinSearchEngine)

在啟動時建立一次音節表，之後持有唯讀的表與查詢編譯器，
並提供工廠方法建立增量搜尋 session。
"""

from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, Iterator, Optional, Tuple

from phonosearch.core.engine_interface import SearchEngine
from phonosearch.core.errors import SyllableTableError
from phonosearch.core.events import SearchEventHandler
from phonosearch.search.primitive import RegexSearcher, compile_pattern
from phonosearch.search.session import IncrementalSearchSession, SearchDirection

from .compiler import QueryCompiler, SearchStrategy
from .syllables import SyllableTable, build_syllable_table, load_pypinyin_syllables
from .tone_model import ToneClusterModel, get_default_tone_model

if TYPE_CHECKING:
    from phonosearch.config import SearchConfig


class PinyinSearchEngine(SearchEngine):
    _engine_name = "pinyin"

    def __init__(
        self,
        syllables: Optional[Iterable[str]] = None,
        tone_model: Optional[ToneClusterModel] = None,
        *,
        case_fold: bool = True,
        default_strategy: SearchStrategy = SearchStrategy.PINYIN,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ):
        self._init_logger(verbose=verbose, on_timing=on_timing)
        self._initialized = False
        self._case_fold = case_fold
        self._default_strategy = default_strategy

        with self._log_timing("PinyinSearchEngine.__init__"):
            self._tone_model = tone_model or get_default_tone_model()
            source = "custom"
            if syllables is None:
                syllables = load_pypinyin_syllables()
                source = "pypinyin"

            try:
                self._table: SyllableTable = build_syllable_table(
                    syllables, self._tone_model
                )
            except SyllableTableError as e:
                self._logger.error(f"Syllable table build failed: {e}")
                raise

            self._source = source
            self._compiler = QueryCompiler(self._table, self._tone_model)
            self._initialized = True
            self._logger.info(
                f"PinyinSearchEngine initialized ({len(self._table)} syllables from {source})"
            )

    @classmethod
    def from_config(
        cls,
        config: "SearchConfig",
        syllables: Optional[Iterable[str]] = None,
    ) -> "PinyinSearchEngine":
        return cls(
            syllables,
            case_fold=config.case_fold,
            default_strategy=config.strategy,
            verbose=config.verbose,
            on_timing=config.on_timing,
        )

    @property
    def table(self) -> SyllableTable:
        return self._table

    @property
    def tone_model(self) -> ToneClusterModel:
        return self._tone_model

    @property
    def compiler(self) -> QueryCompiler:
        return self._compiler

    def is_initialized(self) -> bool:
        return self._initialized

    def get_table_stats(self) -> Dict[str, Any]:
        return {
            "source": self._source,
            "syllables": len(self._table),
            "max_syllable_length": self._table.max_key_length,
            "tone_clusters": len(self._tone_model),
        }

    def compile(self, query: str, strategy: Optional[SearchStrategy] = None) -> str:
        return self._compiler.compile(query, strategy or SearchStrategy.PINYIN)

    def finditer(
        self,
        query: str,
        text: str,
        strategy: Optional[SearchStrategy] = None,
    ) -> Iterator[Tuple[int, int]]:
        """
        逐一輸出 text 中符合 query 的區間

        Yields:
            (start, end)

        Raises:
            InvalidPattern: REGEXP 模式下 query 不是合法的正規表示式
        """
        regex = compile_pattern(self.compile(query, strategy), self._case_fold)
        for match in regex.finditer(text):
            if match.end() > match.start():
                yield match.span()

    def create_session(
        self,
        text: str,
        point: int = 0,
        direction: SearchDirection = SearchDirection.FORWARD,
        strategy: Optional[SearchStrategy] = None,
        on_event: Optional[SearchEventHandler] = None,
    ) -> IncrementalSearchSession:
        strategy = strategy or self._default_strategy
        searcher = RegexSearcher(text, point=point, case_fold=self._case_fold)
        self._logger.debug(
            f"Creating session at {point} ({direction.value}, {strategy.value})"
        )
        return IncrementalSearchSession(
            engine=self,
            searcher=searcher,
            direction=direction,
            strategy=strategy,
            on_event=on_event,
        )
