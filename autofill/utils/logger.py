"""
GForm AutoFill 日志系统

提供统一的日志接口，支持:
- 标准 Python logging 模块
- UI 回调日志（同步显示到弹窗状态栏）
- 文件日志输出

用法:
    from autofill.utils.logger import get_logger, setup_logging

    # 初始化日志系统（应用启动时调用）
    setup_logging()

    # 获取模块日志器
    logger = get_logger(__name__)
    logger.info("开始解析")
    logger.success("自动填充完成")
"""

import logging
import sys
from typing import Optional, Callable, Literal
from pathlib import Path


# 日志级别类型
LogLevel = Literal["debug", "info", "success", "warning", "error", "critical"]

# 日志格式
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TIME_FORMAT = "%H:%M:%S"


class AutofillLogger:
    """
    AutoFill 日志封装

    在标准 logging 基础上增加:
    - UI 回调支持
    - success 级别（介于 info 和 warning 之间）
    - exception() 附带堆栈
    """

    # 自定义 success 级别（25，介于 INFO=20 和 WARNING=30 之间）
    SUCCESS_LEVEL = 25

    def __init__(self, name: str, ui_callback: Optional[Callable[[str, str], None]] = None):
        """
        初始化日志器

        Args:
            name: 日志器名称（通常为 __name__）
            ui_callback: UI 回调函数，签名: (message, level) -> None
        """
        self.logger = logging.getLogger(name)
        self.ui_callback = ui_callback

        if logging.getLevelName(self.SUCCESS_LEVEL) != 'SUCCESS':
            logging.addLevelName(self.SUCCESS_LEVEL, 'SUCCESS')

    def _log_and_callback(self, level: int, message: str, level_name: str, exc_info: bool = False):
        """记录日志并调用 UI 回调"""
        self.logger.log(level, message, exc_info=exc_info)
        if self.ui_callback:
            try:
                self.ui_callback(message, level_name)
            except Exception:
                self.logger.debug("UI 回调失败", exc_info=True)

    def debug(self, message: str):
        """调试级别日志"""
        self._log_and_callback(logging.DEBUG, message, "debug")

    def info(self, message: str):
        """信息级别日志"""
        self._log_and_callback(logging.INFO, message, "info")

    def success(self, message: str):
        """成功级别日志（带 ✅ 前缀）"""
        self._log_and_callback(self.SUCCESS_LEVEL, f"✅ {message}", "success")

    def warning(self, message: str):
        """警告级别日志"""
        self._log_and_callback(logging.WARNING, message, "warning")

    def error(self, message: str):
        """错误级别日志"""
        self._log_and_callback(logging.ERROR, message, "error")

    def exception(self, message: str):
        """错误级别日志，附带当前异常堆栈"""
        self._log_and_callback(logging.ERROR, message, "error", exc_info=True)

    def set_ui_callback(self, callback: Optional[Callable[[str, str], None]]):
        """设置或更新 UI 回调"""
        self.ui_callback = callback


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT
):
    """
    初始化日志系统

    Args:
        level: 日志级别
        log_file: 日志文件路径（可选）
        format_string: 日志格式
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt=TIME_FORMAT,
        handlers=handlers,
        force=True
    )

    # 降低第三方库日志级别
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('DrissionPage').setLevel(logging.WARNING)


def get_logger(
    name: str,
    ui_callback: Optional[Callable[[str, str], None]] = None
) -> AutofillLogger:
    """
    获取日志器

    Args:
        name: 日志器名称（通常为 __name__）
        ui_callback: UI 回调函数

    Returns:
        AutofillLogger 实例
    """
    return AutofillLogger(name, ui_callback)
