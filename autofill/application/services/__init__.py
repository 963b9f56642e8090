# Application Services

"""
应用服务 - 业务用例实现
"""

from .filling_service import FillOrchestrator, FieldWriter

__all__ = [
    'FillOrchestrator',
    'FieldWriter',
]
