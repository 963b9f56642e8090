"""
填充流程相关数据模型

包含:
- CandidateField: 待填充字段（标签 + 序号 + 元素句柄）
- FillOutcome: 单次填充的统计结果
- FillResult: 返回给调用方的 done/error 状态
"""

from dataclasses import dataclass, field, asdict
from typing import Any, List, Optional


@dataclass
class CandidateField:
    """单个候选字段，只在一次填充过程中存在"""
    index: int          # 在批次中的序号（0 开始）
    label: str          # 规范化后的标签文本
    handle: Any         # 页面元素句柄（DrissionPage 元素）


@dataclass
class FillOutcome:
    """填充统计"""
    filled_count: int = 0
    candidate_count: int = 0
    skipped_indices: List[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class FillResult:
    """命令执行结果"""
    status: str                     # done / error
    message: str = ""
    filled_count: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status == "done"

    def to_dict(self) -> dict:
        return asdict(self)
