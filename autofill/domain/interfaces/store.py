"""
资料存储接口
"""

from typing import Optional, Protocol

from ..entities import Profile


class IProfileStore(Protocol):
    """
    键值存储接口

    只在命令层边界访问，内部组件通过参数接收 Profile 和 API Key。
    """

    def get_profile(self) -> Optional[Profile]:
        ...

    def get_api_key(self) -> Optional[str]:
        ...
