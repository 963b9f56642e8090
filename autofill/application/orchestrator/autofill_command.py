"""
自动填充命令

"立即自动填充" 的调用入口，返回 done/error 结构化结果。

原则:
- 不包含任何 UI 代码，通过回调与 UI 层通信
- 存储只在这里读取，Profile 与 API Key 以参数形式传给编排器
- 同一时间只允许一次填充，第二次调用直接被拒绝
"""

import threading
from typing import Any, Callable, Optional

from autofill.application.services import FillOrchestrator
from autofill.domain.entities import FillResult, Profile
from autofill.domain.errors import (
    AutofillError,
    AutofillNotice,
    MissingCredentialsError,
    MissingProfileError,
    NoEligibleFields,
    NoFieldsFilled,
)
from autofill.domain.interfaces import IProfileStore
from autofill.utils.logger import get_logger


BUSY_MESSAGE = "自動入力を実行中です。完了までお待ちください。"


class AutofillCommand:
    """
    自动填充命令

    使用示例:
        command = AutofillCommand(ProfileStore())
        result = command.run(tab)
        print(result.status, result.message)
    """

    def __init__(
        self,
        store: IProfileStore,
        orchestrator: Optional[FillOrchestrator] = None,
        log_callback: Optional[Callable[[str, str], None]] = None
    ):
        self.store = store
        self.orchestrator = orchestrator or FillOrchestrator()
        self._lock = threading.Lock()
        self.logger = get_logger(__name__, ui_callback=log_callback)

    @property
    def is_running(self) -> bool:
        return self._lock.locked()

    def _load_inputs(self):
        """读取并校验资料与 API Key（提取前完成，Key 格式只在保存时校验）"""
        profile: Optional[Profile] = self.store.get_profile()
        if profile is None or profile.is_empty():
            raise MissingProfileError()
        api_key = (self.store.get_api_key() or "").strip()
        if not api_key:
            raise MissingCredentialsError()
        return profile, api_key

    def run(self, document: Any) -> FillResult:
        """
        同步执行一次自动填充

        Args:
            document: DrissionPage 的 tab/frame 对象

        Returns:
            FillResult（不会抛出异常）
        """
        if not self._lock.acquire(blocking=False):
            self.logger.warning("已有填充任务在执行，本次请求被拒绝")
            return FillResult(status="error", message=BUSY_MESSAGE)

        try:
            return self._execute(document)
        finally:
            self._lock.release()

    def _execute(self, document: Any) -> FillResult:
        try:
            profile, api_key = self._load_inputs()
            outcome = self.orchestrator.fill(document, profile, api_key)

            if outcome.candidate_count == 0:
                raise NoEligibleFields()
            if outcome.filled_count == 0:
                raise NoFieldsFilled()

            message = f"{outcome.filled_count}件の項目を自動入力しました。"
            self.logger.success(message)
            return FillResult(status="done", message=message, filled_count=outcome.filled_count)

        except AutofillNotice as notice:
            self.logger.info(notice.message)
            return FillResult(status="done", message=notice.message, filled_count=0)
        except AutofillError as e:
            self.logger.error(e.message)
            return FillResult(status="error", message=e.message)
        except Exception as e:
            self.logger.exception(f"自动填充异常: {e}")
            return FillResult(status="error", message=f"エラーが発生しました: {e}")

    def run_async(
        self,
        document: Any,
        callback: Optional[Callable[[FillResult], None]] = None
    ) -> threading.Thread:
        """
        在后台线程执行，完成后回调 FillResult

        Returns:
            工作线程
        """
        def _worker():
            result = self.run(document)
            if callback:
                callback(result)

        thread = threading.Thread(target=_worker, daemon=True)
        thread.start()
        return thread
