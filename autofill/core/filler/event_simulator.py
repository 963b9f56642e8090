"""
事件模拟器模块

模拟用户输入，触发 React/Angular 等框架的事件处理。

事件链:
1. 通过原型上的原生 setter 写值（绕过框架对 value 属性的拦截）
2. 依次派发 input -> change -> keyup -> blur（均冒泡）
"""

from typing import Any, Optional, Sequence

from autofill.config import filler_config
from autofill.infrastructure.js import ScriptStore
from autofill.utils.logger import get_logger

logger = get_logger(__name__)


class EventSimulator:
    """
    表单事件模拟器

    通过 JavaScript 模拟完整的用户输入，
    确保宿主页面的响应式逻辑像用户手动输入一样感知到变化。
    """

    @staticmethod
    def fill_with_events(
        element: Any,
        value: str,
        events: Optional[Sequence[str]] = None
    ) -> bool:
        """
        写入值并派发事件

        Args:
            element: DrissionPage 元素对象
            value: 要填充的值
            events: 事件名列表，默认使用 FillerConfig.events

        Returns:
            填充是否成功
        """
        event_names = ','.join(events if events is not None else filler_config.events)
        try:
            result = element.run_js(ScriptStore.SET_NATIVE_VALUE, str(value), event_names)
        except Exception as e:
            logger.warning(f"事件模拟异常: {e}")
            return False

        if isinstance(result, dict) and result.get('success'):
            return True

        error = result.get('error', 'unknown') if isinstance(result, dict) else 'invalid_response'
        logger.warning(f"事件填充失败: {error}")
        return False
