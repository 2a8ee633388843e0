"""
Search Primitive Protocol

定義搜尋原語的最小介面：編譯器只提供 pattern，
其餘 bound / noerror / count 參數原樣交給搜尋原語。
"""

from typing import Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class SearchPrimitiveProtocol(Protocol):
    point: int

    def search_forward(
        self,
        pattern: str,
        bound: Optional[int] = None,
        noerror: Union[bool, str] = False,
        count: int = 1,
    ) -> Optional[int]:
        """向後搜尋，成功時移動游標並回傳新位置"""
        ...

    def search_backward(
        self,
        pattern: str,
        bound: Optional[int] = None,
        noerror: Union[bool, str] = False,
        count: int = 1,
    ) -> Optional[int]:
        """向前搜尋，成功時移動游標並回傳新位置"""
        ...
