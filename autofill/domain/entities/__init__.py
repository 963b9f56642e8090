# Domain Entities

"""
领域实体 - 核心业务对象

提供应用程序的核心数据模型，不依赖任何外部框架。
"""

from .field_category import FieldCategory
from .profile import Profile, PROFILE_KEYS, DISPLAY_FIELDS, join_address
from .fill_models import CandidateField, FillOutcome, FillResult
from .credentials import API_KEY_PREFIX, validate_api_key

__all__ = [
    'FieldCategory',
    'Profile',
    'PROFILE_KEYS',
    'DISPLAY_FIELDS',
    'join_address',
    'CandidateField',
    'FillOutcome',
    'FillResult',
    'API_KEY_PREFIX',
    'validate_api_key',
]
