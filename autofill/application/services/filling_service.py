"""
填充服务

串联 提取 -> 分类 -> 解析 -> 写入 的单次自动填充流程。
"""

from typing import Any, Callable, Optional

from autofill.core.analyzer import FieldExtractor
from autofill.core.classifier import ClassifierClient
from autofill.core.filler import EventSimulator
from autofill.core.profile_resolver import resolve
from autofill.domain.entities import FieldCategory, FillOutcome, Profile
from autofill.domain.interfaces import ILabelClassifier
from autofill.utils.logger import get_logger

logger = get_logger(__name__)

# (元素句柄, 值) -> 是否写入成功
FieldWriter = Callable[[Any, str], bool]


class FillOrchestrator:
    """
    填充编排器

    职责:
    - 提取候选字段（标签已规范化）
    - 整批标签一次分类；分类失败时整次中止，不做部分填充
    - 按序号查类别、解析资料值、写入元素
    - 单个字段缺类别/unknown/无值时静默跳过

    Profile 与 API Key 由调用方传入，本类不访问存储。
    """

    def __init__(
        self,
        extractor: Optional[FieldExtractor] = None,
        classifier: Optional[ILabelClassifier] = None,
        writer: Optional[FieldWriter] = None
    ):
        self.extractor = extractor or FieldExtractor()
        self.classifier = classifier or ClassifierClient()
        self.writer = writer or EventSimulator.fill_with_events

    def fill(self, document: Any, profile: Profile, api_key: str) -> FillOutcome:
        """
        执行一次自动填充

        Args:
            document: DrissionPage 的 tab/frame 对象
            profile: 用户资料
            api_key: OpenAI API Key

        Returns:
            FillOutcome

        Raises:
            ClassificationError: 分类失败（此时没有任何字段被写入）
        """
        fields = self.extractor.extract(document)
        outcome = FillOutcome(candidate_count=len(fields))
        if not fields:
            logger.info("没有可填写的文本字段，跳过分类")
            return outcome

        mapping = self.classifier.classify([f.label for f in fields], api_key)

        for field in fields:
            category = mapping.get(field.index)
            if category is None or category is FieldCategory.UNKNOWN:
                outcome.skipped_indices.append(field.index)
                continue

            value = resolve(category, profile)
            if not value:
                logger.debug(f"[{field.index}] {field.label} -> {category.value}: 资料中无值")
                outcome.skipped_indices.append(field.index)
                continue

            if self.writer(field.handle, value):
                outcome.filled_count += 1
                logger.debug(f"[{field.index}] {field.label} -> {category.value}: 已填写")
            else:
                outcome.skipped_indices.append(field.index)

        logger.success(f"填写完成: {outcome.filled_count}/{outcome.candidate_count}")
        return outcome
