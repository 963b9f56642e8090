"""
错误分类

- 配置类错误（资料/API Key 缺失）在提取前检测
- 分类错误中止整次填充，消息原样展示给用户
- 单个字段解析不到值属于正常情况，不是错误
"""

from typing import Optional


class AutofillError(Exception):
    """自动填充错误基类，message 面向用户"""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class MissingProfileError(AutofillError):
    def __init__(self, message: str = "プロフィールが未登録です。設定画面から登録してください。"):
        super().__init__(message)


class MissingCredentialsError(AutofillError):
    def __init__(self, message: str = "OpenAI APIキーが未設定です。設定画面から登録してください。"):
        super().__init__(message)


class InvalidCredentialsError(AutofillError):
    def __init__(self, message: str = "APIキーの形式が正しくありません（\"sk-\" で始まる必要があります）"):
        super().__init__(message)


class ProfileImportError(AutofillError):
    def __init__(self, message: str = "ファイルの形式が正しくありません"):
        super().__init__(message)


# ============================================================
# 分类错误
# ============================================================

class ClassificationError(AutofillError):
    """LLM 分类失败，整次填充中止"""


class ClassificationTransportError(ClassificationError):
    """HTTP 状态非 2xx 或网络失败"""

    def __init__(self, status: Optional[int], provider_message: str = ""):
        self.status = status
        self.provider_message = provider_message
        status_text = str(status) if status is not None else "-"
        super().__init__(f"OpenAI API エラー: {status_text} {provider_message}".rstrip())


class ClassificationTimeoutError(ClassificationTransportError):
    """请求超时（没有 HTTP 状态）"""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(None, f"{timeout:g}秒以内に応答がありませんでした")


class ClassificationEmptyResponseError(ClassificationError):
    def __init__(self, message: str = "APIからの応答が空です"):
        super().__init__(message)


class ClassificationParseError(ClassificationError):
    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(f"APIの応答を解析できませんでした: {detail}".rstrip(": "))


# ============================================================
# 软提示（不作为失败传播）
# ============================================================

class AutofillNotice(AutofillError):
    """信息性提示，命令层转换为 done 状态的消息"""


class NoEligibleFields(AutofillNotice):
    def __init__(self):
        super().__init__("入力できるテキスト欄が見つかりませんでした。")


class NoFieldsFilled(AutofillNotice):
    def __init__(self):
        super().__init__("プロフィールに登録された情報と一致する項目が見つかりませんでした。")
