"""
页面文档接口

定义字段提取和填充所需的 DrissionPage 子集。
ChromiumTab / ChromiumElement 天然满足这些协议。
"""

from typing import Any, List, Optional, Protocol


class IElement(Protocol):
    """页面元素"""

    @property
    def tag(self) -> str:
        ...

    @property
    def text(self) -> str:
        ...

    def attr(self, name: str) -> Optional[str]:
        ...

    def ele(self, locator: str, index: int = 1, timeout: Optional[float] = None) -> Any:
        """查找单个子元素，找不到时返回 falsy 对象"""
        ...

    def eles(self, locator: str, timeout: Optional[float] = None) -> List['IElement']:
        ...

    def run_js(self, script: str, *args: Any) -> Any:
        """以元素为 this 执行 JavaScript"""
        ...


class IDocument(Protocol):
    """页面文档（标签页或 iframe）"""

    @property
    def url(self) -> str:
        ...

    def eles(self, locator: str, timeout: Optional[float] = None) -> List[IElement]:
        ...
