"""
浏览器管理器 - 基础设施层实现

封装 DrissionPage 的浏览器连接和标签页管理。
"""

from typing import Any, Optional

from DrissionPage import ChromiumPage

from autofill.config import BrowserConfig, browser_config
from autofill.utils.port_check import PortChecker
from autofill.utils.logger import get_logger

logger = get_logger(__name__)


class BrowserManager:
    """
    浏览器管理器

    职责:
    - 连接已开启调试端口的浏览器
    - 获取当前活动标签页
    - 判断标签页是否为 Google 表单
    """

    def __init__(self, config: Optional[BrowserConfig] = None):
        """
        初始化浏览器管理器

        Args:
            config: 浏览器配置（调试地址、表单 URL 前缀）
        """
        self.config = config or browser_config
        self.page: Optional[ChromiumPage] = None

    def connect(self) -> ChromiumPage:
        """
        连接浏览器

        Returns:
            ChromiumPage 对象

        Raises:
            ConnectionError: 无法连接到浏览器
        """
        if not PortChecker.is_address_open(self.config.addr):
            raise ConnectionError(
                f"{self.config.addr} に接続できません。ブラウザをリモートデバッグモードで起動してください。"
            )

        self.page = ChromiumPage(addr_or_opts=self.config.addr)
        logger.info(f"已连接浏览器: {self.config.addr}")
        return self.page

    def is_connected(self) -> bool:
        """检查是否已连接"""
        return self.page is not None

    def get_current_tab(self) -> Any:
        """获取当前活动标签页（未连接时先连接）"""
        if not self.page:
            self.connect()
        return self.page.latest_tab

    def is_google_form(self, tab: Any) -> bool:
        """判断标签页是否为 Google 表单"""
        url = getattr(tab, 'url', '') or ''
        return url.startswith(self.config.form_url_prefix)
