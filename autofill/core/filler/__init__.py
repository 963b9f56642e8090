"""
Filler 模块

提供表单填充功能:
- EventSimulator: 原生 setter 写值 + 事件派发

使用示例:
    from autofill.core.filler import EventSimulator

    EventSimulator.fill_with_events(element, "山田")
"""

from .event_simulator import EventSimulator

__all__ = [
    'EventSimulator',
]
