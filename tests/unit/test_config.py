"""
配置模块单元测试
"""

import pytest
from autofill.config import (
    ClassifierConfig, ExtractorConfig, FillerConfig, StoreConfig, BrowserConfig,
    classifier_config, extractor_config, filler_config,
    _get_env_float, _get_env_int, _get_env_str, reload_config
)


class TestConfigDataclasses:
    """配置数据类测试"""

    def test_classifier_config_defaults(self):
        """ClassifierConfig 默认值"""
        config = ClassifierConfig()

        assert config.api_url == "https://api.openai.com/v1/chat/completions"
        assert config.model == "gpt-4.1-nano"
        assert config.temperature == 0.0
        assert config.max_tokens == 300
        assert config.timeout == 30.0

    def test_extractor_config_order(self):
        """ExtractorConfig 选择器顺序"""
        config = ExtractorConfig()

        assert config.block_selectors[0] == ".Qr7Oae"
        assert config.block_selectors[-1] == "[role='listitem']"
        assert config.input_selectors[-1].startswith("input:not(")

    def test_filler_config_events(self):
        """FillerConfig 事件顺序"""
        assert FillerConfig().events == ("input", "change", "keyup", "blur")

    def test_store_config_keys(self):
        """StoreConfig 存储键"""
        config = StoreConfig()

        assert config.profile_key == "profile"
        assert config.api_key_key == "openaiApiKey"
        assert config.path.endswith("store.json")

    def test_browser_config_defaults(self):
        """BrowserConfig 默认值"""
        config = BrowserConfig()

        assert config.addr == "127.0.0.1:9222"
        assert config.form_url_prefix == "https://docs.google.com/forms/"

    def test_configs_are_mutable(self):
        """配置应可修改"""
        config = ClassifierConfig()
        config.timeout = 5.0

        assert config.timeout == 5.0


class TestEnvironmentVariables:
    """环境变量测试"""

    def test_get_env_float_with_valid_value(self, monkeypatch):
        """有效浮点数环境变量"""
        monkeypatch.setenv('TEST_FLOAT', '25.5')

        assert _get_env_float('TEST_FLOAT', 10.0) == 25.5

    def test_get_env_float_with_invalid_value(self, monkeypatch):
        """无效浮点数环境变量返回默认值"""
        monkeypatch.setenv('TEST_FLOAT', 'not_a_number')

        assert _get_env_float('TEST_FLOAT', 10.0) == 10.0

    def test_get_env_float_with_missing_key(self):
        """缺失环境变量返回默认值"""
        assert _get_env_float('NONEXISTENT_KEY_12345', 42.0) == 42.0

    def test_get_env_int_with_valid_value(self, monkeypatch):
        """有效整数环境变量"""
        monkeypatch.setenv('TEST_INT', '100')

        assert _get_env_int('TEST_INT', 50) == 100

    def test_get_env_int_with_invalid_value(self, monkeypatch):
        """无效整数环境变量返回默认值"""
        monkeypatch.setenv('TEST_INT', 'abc')

        assert _get_env_int('TEST_INT', 50) == 50

    def test_get_env_str_blank_uses_default(self, monkeypatch):
        """空白字符串视为未设置"""
        monkeypatch.setenv('TEST_STR', '   ')

        assert _get_env_str('TEST_STR', 'default') == 'default'

    def test_get_env_str_strips_value(self, monkeypatch):
        """字符串配置去除首尾空白"""
        monkeypatch.setenv('TEST_STR', '  gpt-4o-mini ')

        assert _get_env_str('TEST_STR', 'default') == 'gpt-4o-mini'


class TestGlobalConfigs:
    """全局配置实例测试"""

    def test_classifier_config_is_accessible(self):
        """classifier_config 应可访问"""
        assert classifier_config is not None
        assert hasattr(classifier_config, 'timeout')

    def test_extractor_config_is_accessible(self):
        """extractor_config 应可访问"""
        assert extractor_config.label_selectors

    def test_filler_config_is_accessible(self):
        """filler_config 应可访问"""
        assert filler_config.events


class TestReloadConfig:
    """配置重载测试"""

    def test_reload_config_updates_classifier(self, monkeypatch):
        """reload_config 应更新 classifier_config"""
        monkeypatch.setenv('AUTOFILL_CLASSIFY_TIMEOUT', '12.5')
        monkeypatch.setenv('AUTOFILL_OPENAI_MODEL', 'gpt-4o-mini')

        reload_config()

        from autofill.config import classifier_config as reloaded
        assert reloaded.timeout == 12.5
        assert reloaded.model == 'gpt-4o-mini'

        monkeypatch.delenv('AUTOFILL_CLASSIFY_TIMEOUT')
        monkeypatch.delenv('AUTOFILL_OPENAI_MODEL')
        reload_config()

    def test_reload_config_updates_store_path(self, monkeypatch, tmp_path):
        """reload_config 应更新 store_config"""
        path = str(tmp_path / 'custom.json')
        monkeypatch.setenv('AUTOFILL_STORE_PATH', path)

        reload_config()

        from autofill.config import store_config as reloaded
        assert reloaded.path == path

        monkeypatch.delenv('AUTOFILL_STORE_PATH')
        reload_config()

    def test_reload_reaches_importing_modules(self, monkeypatch):
        """已按名导入配置的模块在重载后读到新值"""
        from autofill.core.classifier import ClassifierClient
        from autofill.infrastructure.browser.browser_manager import BrowserManager
        from autofill.infrastructure.persistence import ProfileStore

        monkeypatch.setenv('AUTOFILL_CLASSIFY_TIMEOUT', '3.0')
        monkeypatch.setenv('AUTOFILL_STORE_PATH', '/tmp/autofill-reload/store.json')
        monkeypatch.setenv('AUTOFILL_BROWSER_ADDR', '127.0.0.1:9333')

        reload_config()
        try:
            assert ClassifierClient(session=object()).config.timeout == 3.0
            assert ProfileStore().path == '/tmp/autofill-reload/store.json'
            assert BrowserManager().config.addr == '127.0.0.1:9333'
        finally:
            monkeypatch.delenv('AUTOFILL_CLASSIFY_TIMEOUT')
            monkeypatch.delenv('AUTOFILL_STORE_PATH')
            monkeypatch.delenv('AUTOFILL_BROWSER_ADDR')
            reload_config()

    def test_reload_keeps_instance_identity(self):
        """重载不替换全局实例"""
        import autofill.config as config
        before = config.classifier_config

        reload_config()

        assert config.classifier_config is before
