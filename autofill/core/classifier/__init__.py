"""
Classifier 模块

- ClassifierClient: 批量标签分类（OpenAI Chat Completions）
- SYSTEM_PROMPT / build_user_message: 提示词
"""

from .client import ClassifierClient
from .prompt import SYSTEM_PROMPT, build_user_message

__all__ = [
    'ClassifierClient',
    'SYSTEM_PROMPT',
    'build_user_message',
]
