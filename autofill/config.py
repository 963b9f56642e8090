"""
GForm AutoFill 配置中心

集中管理所有可配置参数，避免硬编码散落在各模块中。
支持从环境变量读取配置。

用法:
    from autofill.config import classifier_config, extractor_config

    # 访问配置
    timeout = classifier_config.timeout
    selectors = extractor_config.block_selectors
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Tuple


@dataclass
class ClassifierConfig:
    """
    分类器配置

    控制 LLM 标签分类请求的参数。
    """
    api_url: str = "https://api.openai.com/v1/chat/completions"
    model: str = "gpt-4.1-nano"
    temperature: float = 0.0        # 确定性输出
    max_tokens: int = 300           # 只返回短 JSON
    timeout: float = 30.0           # 请求超时(秒)


@dataclass
class ExtractorConfig:
    """
    字段提取配置

    每组选择器按顺序探测，第一个命中的约定生效。
    """
    block_selectors: Tuple[str, ...] = (
        ".Qr7Oae",
        ".freebirdFormviewerViewItemsItemItem",
        "[data-params]",
        "[role='listitem']",
    )
    label_selectors: Tuple[str, ...] = (
        ".freebirdFormviewerViewItemsItemItemTitle",
        ".M7eMe",
        "[role='heading']",
        ".freebirdFormviewerComponentsQuestionBaseTitle",
    )
    input_selectors: Tuple[str, ...] = (
        "input[type='text']",
        "input[type='email']",
        "input[type='tel']",
        "input[type='number']",
        "textarea",
        "input:not([type='radio']):not([type='checkbox']):not([type='hidden']):not([type='submit'])",
    )


@dataclass
class FillerConfig:
    """
    填充器配置

    写入值后按顺序派发的事件。
    """
    events: Tuple[str, ...] = ("input", "change", "keyup", "blur")


@dataclass
class StoreConfig:
    """
    存储配置

    profile 与 API Key 保存在同一个 JSON 文件中。
    """
    path: str = str(Path.home() / ".gform_autofill" / "store.json")
    profile_key: str = "profile"
    api_key_key: str = "openaiApiKey"


@dataclass
class BrowserConfig:
    """
    浏览器配置
    """
    addr: str = "127.0.0.1:9222"
    form_url_prefix: str = "https://docs.google.com/forms/"


def _get_env_float(key: str, default: float) -> float:
    """从环境变量获取浮点数配置"""
    value = os.environ.get(key)
    if value:
        try:
            return float(value)
        except ValueError:
            pass
    return default


def _get_env_int(key: str, default: int) -> int:
    """从环境变量获取整数配置"""
    value = os.environ.get(key)
    if value:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_str(key: str, default: str) -> str:
    """从环境变量获取字符串配置（空白视为未设置）"""
    value = os.environ.get(key, "").strip()
    return value or default


def _build_classifier_config() -> ClassifierConfig:
    return ClassifierConfig(
        api_url=_get_env_str('AUTOFILL_OPENAI_URL', ClassifierConfig.api_url),
        model=_get_env_str('AUTOFILL_OPENAI_MODEL', ClassifierConfig.model),
        max_tokens=_get_env_int('AUTOFILL_MAX_TOKENS', ClassifierConfig.max_tokens),
        timeout=_get_env_float('AUTOFILL_CLASSIFY_TIMEOUT', ClassifierConfig.timeout),
    )


def _build_store_config() -> StoreConfig:
    return StoreConfig(path=_get_env_str('AUTOFILL_STORE_PATH', StoreConfig.path))


def _build_browser_config() -> BrowserConfig:
    return BrowserConfig(addr=_get_env_str('AUTOFILL_BROWSER_ADDR', BrowserConfig.addr))


# ============================================================
# 全局配置实例
# ============================================================

# 分类器配置
classifier_config = _build_classifier_config()

# 字段提取配置
extractor_config = ExtractorConfig()

# 填充器配置
filler_config = FillerConfig()

# 存储配置
store_config = _build_store_config()

# 浏览器配置
browser_config = _build_browser_config()


# ============================================================
# 便捷函数
# ============================================================

def _update_in_place(target, source):
    """用 source 的字段原地覆盖 target"""
    for f in fields(target):
        setattr(target, f.name, getattr(source, f.name))


def reload_config():
    """
    重新加载配置

    从环境变量重新读取配置，原地更新全局实例。
    """
    _update_in_place(classifier_config, _build_classifier_config())
    _update_in_place(store_config, _build_store_config())
    _update_in_place(browser_config, _build_browser_config())
