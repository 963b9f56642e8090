"""
Analyzer 模块

提供表单字段提取功能:
- FieldExtractor: 问题块 -> (标签, 输入框) 提取
- SelectorProbe: 有序选择器探测

使用示例:
    from autofill.core.analyzer import FieldExtractor

    fields = FieldExtractor().extract(tab)
"""

from .field_extractor import FieldExtractor, SelectorProbe, is_text_input, css

__all__ = [
    'FieldExtractor',
    'SelectorProbe',
    'is_text_input',
    'css',
]
