"""
API 凭据校验
"""

from typing import Optional

from autofill.domain.errors import InvalidCredentialsError, MissingCredentialsError

API_KEY_PREFIX = "sk-"


def validate_api_key(api_key: Optional[str]) -> str:
    """
    校验 API Key

    Returns:
        去除首尾空白后的 Key

    Raises:
        MissingCredentialsError: 未设置
        InvalidCredentialsError: 不以 sk- 开头
    """
    key = (api_key or "").strip()
    if not key:
        raise MissingCredentialsError()
    if not key.startswith(API_KEY_PREFIX):
        raise InvalidCredentialsError()
    return key
