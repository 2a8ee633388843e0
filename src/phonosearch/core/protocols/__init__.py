"""Protocol 定義"""

from .search import SearchPrimitiveProtocol

__all__ = ["SearchPrimitiveProtocol"]
