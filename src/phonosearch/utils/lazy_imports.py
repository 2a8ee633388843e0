"""
延遲導入 (Lazy Import)

pypinyin 的讀音表很大，只在第一次需要預設音節表時才載入。
"""

import importlib
from typing import Any, Optional

from .logger import get_logger

logger = get_logger(__name__)

PINYIN_INSTALL_HINT = (
    "缺少拼音依賴。請執行:\n"
    "  pip install pypinyin\n"
    "或重新安裝:\n"
    "  pip install phonosearch"
)

_pypinyin: Optional[Any] = None


def _get_pypinyin() -> Any:
    """
    取得 pypinyin 模組 (Lazy Loading)

    Raises:
        ImportError: 如果未安裝 pypinyin
    """
    global _pypinyin
    if _pypinyin is None:
        try:
            _pypinyin = importlib.import_module("pypinyin")
        except ImportError as e:
            logger.error("無法載入 pypinyin，請確認是否已安裝")
            raise ImportError(PINYIN_INSTALL_HINT) from e
    return _pypinyin


def _get_pinyin_dict() -> dict:
    """取得 pypinyin 內建的單字讀音表 {codepoint: "zhōng,zhòng"}"""
    _get_pypinyin()
    module = importlib.import_module("pypinyin.pinyin_dict")
    return module.pinyin_dict


def is_pinyin_available() -> bool:
    """檢查 pypinyin 是否可用（不拋例外）"""
    try:
        _get_pypinyin()
    except ImportError:
        return False
    return True


def check_pinyin_dependencies() -> None:
    """
    檢查拼音依賴，缺少時拋出帶安裝提示的 ImportError
    """
    _get_pypinyin()
