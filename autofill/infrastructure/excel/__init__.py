"""
表格基础设施模块
"""
from .profile_sheet import ProfileSheetReader

__all__ = ['ProfileSheetReader']
