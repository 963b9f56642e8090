"""
Utils 模块初始化文件
"""

from .logger import AutofillLogger, get_logger, setup_logging

__all__ = [
    'AutofillLogger',
    'get_logger',
    'setup_logging',
]
