"""
编排层 - 对外暴露的命令入口
"""

from autofill.application.orchestrator.autofill_command import AutofillCommand

__all__ = [
    'AutofillCommand',
]
