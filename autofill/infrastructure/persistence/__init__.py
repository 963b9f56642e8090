"""
持久化基础设施模块

提供资料与 API Key 的保存和加载功能。
"""
from .profile_store import ProfileStore

__all__ = ['ProfileStore']
