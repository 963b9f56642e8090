"""
字段提取器模块

从表单页面中按文档顺序提取 (标签, 输入元素) 对，只保留可自由输入文本的字段。

主要功能:
- 按顺序探测多种"问题块"结构约定，第一个命中的约定生效
- 在每个问题块内按顺序探测标签约定和输入框约定
- 过滤单选/复选/隐藏等非文本控件
- 标签为空（规范化后）的字段被排除

选择器列表来自 ExtractorConfig，也可以在构造时传入，
宿主页面结构变化时无需修改代码。
"""

from typing import Any, Callable, Iterable, List, Optional, Sequence

from autofill.config import extractor_config
from autofill.core.label_normalizer import normalize_text
from autofill.domain.entities import CandidateField
from autofill.utils.logger import get_logger

logger = get_logger(__name__)

# 非文本输入类型
NON_TEXT_INPUT_TYPES = frozenset({
    'radio', 'checkbox', 'hidden', 'submit', 'button', 'reset', 'file', 'image',
})


def css(selector: str) -> str:
    """CSS 选择器 -> DrissionPage 定位符"""
    return selector if selector.startswith('css:') else f'css:{selector}'


class SelectorProbe:
    """
    有序选择器探测

    依次尝试每个选择器，返回第一个有结果的选择器的结果。
    """

    def __init__(self, selectors: Iterable[str]):
        self.selectors: List[str] = list(selectors)

    def find_all(self, root: Any) -> List[Any]:
        """返回第一个命中选择器的全部元素"""
        for selector in self.selectors:
            found = list(root.eles(css(selector), timeout=0) or [])
            if found:
                logger.debug(f"选择器命中: {selector} ({len(found)} 个)")
                return found
        return []

    def find_first(self, root: Any, accept: Optional[Callable[[Any], bool]] = None) -> Optional[Any]:
        """返回第一个命中且满足 accept 条件的单个元素"""
        for selector in self.selectors:
            element = root.ele(css(selector), timeout=0)
            if element and (accept is None or accept(element)):
                return element
        return None

    def prepend(self, selector: str):
        """在最前面插入一个新约定（优先级最高）"""
        self.selectors.insert(0, selector)

    def append(self, selector: str):
        """在最后追加一个新约定（兜底）"""
        self.selectors.append(selector)


def _has_text(element: Any) -> bool:
    return bool((element.text or '').strip())


def is_text_input(element: Any) -> bool:
    """判断元素是否接受自由文本输入"""
    tag = (element.tag or '').lower()
    if tag == 'textarea':
        return True
    if tag != 'input':
        return False
    input_type = (element.attr('type') or 'text').lower()
    return input_type not in NON_TEXT_INPUT_TYPES


class FieldExtractor:
    """
    表单字段提取器

    使用示例:
        extractor = FieldExtractor()
        fields = extractor.extract(tab)
        for field in fields:
            print(field.index, field.label)
    """

    def __init__(
        self,
        block_selectors: Optional[Sequence[str]] = None,
        label_selectors: Optional[Sequence[str]] = None,
        input_selectors: Optional[Sequence[str]] = None,
    ):
        self.blocks = SelectorProbe(block_selectors or extractor_config.block_selectors)
        self.labels = SelectorProbe(label_selectors or extractor_config.label_selectors)
        self.inputs = SelectorProbe(input_selectors or extractor_config.input_selectors)

    def extract_label(self, block: Any) -> str:
        """提取问题块的标签文本（已规范化），找不到返回空串"""
        element = self.labels.find_first(block, accept=_has_text)
        if element is None:
            return ''
        return normalize_text(element.text)

    def find_input(self, block: Any) -> Optional[Any]:
        """查找问题块中的文本输入元素"""
        return self.inputs.find_first(block, accept=is_text_input)

    def extract(self, document: Any) -> List[CandidateField]:
        """
        提取候选字段

        Args:
            document: DrissionPage 的 tab/frame 对象

        Returns:
            CandidateField 列表（文档顺序，序号连续），没有可用字段时为空列表
        """
        blocks = self.blocks.find_all(document)
        fields: List[CandidateField] = []

        for block in blocks:
            label = self.extract_label(block)
            if not label:
                continue
            handle = self.find_input(block)
            if handle is None:
                continue
            fields.append(CandidateField(index=len(fields), label=label, handle=handle))

        logger.info(f"问题块 {len(blocks)} 个，可填写文本字段 {len(fields)} 个")
        return fields
