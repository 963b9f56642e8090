"""
分类客户端 - 调用 OpenAI Chat Completions 批量分类标签

一次请求发送整批标签，要求返回以字符串序号为键的 JSON 对象。

错误处理:
- 非 2xx / 网络失败 -> ClassificationTransportError（附带服务端消息）
- 超时 -> ClassificationTimeoutError
- 响应内容为空 -> ClassificationEmptyResponseError
- 内容不是 JSON 对象 -> ClassificationParseError
- 单个条目无效（序号越界、未知字段键）只丢弃该条目

本组件不做重试，是否重试由调用方决定。
"""

import json
import re
from typing import Any, Dict, Optional, Sequence

import requests

from autofill.config import ClassifierConfig, classifier_config
from autofill.core.classifier.prompt import SYSTEM_PROMPT, build_user_message
from autofill.domain.entities import FieldCategory
from autofill.domain.errors import (
    ClassificationEmptyResponseError,
    ClassificationParseError,
    ClassificationTimeoutError,
    ClassificationTransportError,
)
from autofill.utils.logger import get_logger

logger = get_logger(__name__)

# 序号键只接受 ASCII 数字
_INDEX_KEY = re.compile(r'[0-9]+')


class ClassifierClient:
    """
    LLM 标签分类客户端

    使用示例:
        client = ClassifierClient()
        mapping = client.classify(["姓", "名"], api_key)
        # {0: FieldCategory.LAST_NAME, 1: FieldCategory.FIRST_NAME}
    """

    def __init__(
        self,
        config: Optional[ClassifierConfig] = None,
        session: Optional[requests.Session] = None
    ):
        self.config = config or classifier_config
        self.session = session or requests.Session()

    def build_payload(self, labels: Sequence[str]) -> Dict[str, Any]:
        """构建请求体"""
        return {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_user_message(labels)},
            ],
            "temperature": self.config.temperature,
            "max_tokens": self.config.max_tokens,
            "response_format": {"type": "json_object"},
        }

    def classify(self, labels: Sequence[str], api_key: str) -> Dict[int, FieldCategory]:
        """
        批量分类标签

        Args:
            labels: 规范化后的标签列表
            api_key: OpenAI API Key

        Returns:
            序号 -> FieldCategory（可能缺项）

        Raises:
            ClassificationError: 请求或解析失败
        """
        if not labels:
            return {}

        logger.info(f"发送 {len(labels)} 个标签进行分类 (model={self.config.model})")
        response = self._post(self.build_payload(labels), api_key)
        content = self._extract_content(response)
        mapping = self.parse_content(content, len(labels))
        logger.info(f"分类完成: {len(mapping)}/{len(labels)} 个标签有结果")
        return mapping

    def _post(self, payload: Dict[str, Any], api_key: str) -> requests.Response:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        try:
            response = self.session.post(
                self.config.api_url,
                headers=headers,
                json=payload,
                timeout=self.config.timeout
            )
        except requests.Timeout as e:
            raise ClassificationTimeoutError(self.config.timeout) from e
        except requests.RequestException as e:
            raise ClassificationTransportError(None, str(e)) from e

        if not response.ok:
            raise ClassificationTransportError(response.status_code, self._provider_message(response))
        return response

    @staticmethod
    def _provider_message(response: requests.Response) -> str:
        """提取服务端错误消息 {"error": {"message": ...}}，取不到返回空串"""
        try:
            body = response.json()
        except ValueError:
            return ""
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            return str(body["error"].get("message") or "")
        return ""

    @staticmethod
    def _extract_content(response: requests.Response) -> str:
        try:
            data = response.json()
        except ValueError as e:
            raise ClassificationParseError("レスポンスがJSONではありません") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None
        if not content or not isinstance(content, str) or not content.strip():
            raise ClassificationEmptyResponseError()
        return content

    @staticmethod
    def parse_content(content: str, label_count: int) -> Dict[int, FieldCategory]:
        """
        解析模型输出

        Args:
            content: 模型返回的 JSON 文本
            label_count: 提交的标签数量（用于过滤越界序号）

        Returns:
            序号 -> FieldCategory
        """
        try:
            raw = json.loads(content)
        except ValueError as e:
            raise ClassificationParseError(str(e)) from e
        if not isinstance(raw, dict):
            raise ClassificationParseError(f"JSONオブジェクトではありません: {type(raw).__name__}")

        mapping: Dict[int, FieldCategory] = {}
        for key, value in raw.items():
            if not _INDEX_KEY.fullmatch(key.strip()):
                logger.debug(f"忽略无效序号: {key!r}")
                continue
            index = int(key)
            if not 0 <= index < label_count:
                logger.debug(f"忽略越界序号: {index}")
                continue
            category = FieldCategory.parse(value)
            if category is None:
                logger.debug(f"忽略未知字段键: {index} -> {value!r}")
                continue
            mapping[index] = category
        return mapping
