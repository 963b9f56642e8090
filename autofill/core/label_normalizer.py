"""
标签规范化

全角英数字 -> 半角，全角空格 -> 半角空格，去除首尾空白。
纯函数，对任何输入都成功（空输入返回空串）。
"""

import re
from typing import Optional

# 全角英数字与半角的码位差
_FULLWIDTH_OFFSET = 0xFEE0
_FULLWIDTH_ALNUM = re.compile(r'[Ａ-Ｚａ-ｚ０-９]')


def normalize_text(text: Optional[str]) -> str:
    """
    规范化标签文本

    Args:
        text: 原始标签文本

    Returns:
        规范化后的文本
    """
    if not text:
        return ''
    text = _FULLWIDTH_ALNUM.sub(lambda m: chr(ord(m.group(0)) - _FULLWIDTH_OFFSET), text)
    return text.replace('　', ' ').strip()
