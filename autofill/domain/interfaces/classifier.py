"""
标签分类器接口
"""

from typing import Dict, Protocol, Sequence

from ..entities import FieldCategory


class ILabelClassifier(Protocol):
    """
    标签分类器接口

    职责:
    - 把一批标签一次性发给分类服务
    - 返回 序号 -> FieldCategory 映射（允许缺项）
    """

    def classify(self, labels: Sequence[str], api_key: str) -> Dict[int, FieldCategory]:
        ...
