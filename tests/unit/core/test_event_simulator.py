"""
事件模拟器单元测试
"""

from autofill.core.filler import EventSimulator
from autofill.infrastructure.js import ScriptStore
from tests.fakes import FakeElement, text_input


class RaisingElement(FakeElement):
    def run_js(self, script, *args):
        raise RuntimeError("element detached")


class TestFillWithEvents:
    """fill_with_events 测试"""

    def test_passes_value_and_default_events(self):
        element = text_input()

        assert EventSimulator.fill_with_events(element, '山田') is True

        script, args = element.js_calls[0]
        assert script == ScriptStore.SET_NATIVE_VALUE
        assert args == ('山田', 'input,change,keyup,blur')
        assert element.value == '山田'

    def test_custom_events(self):
        element = text_input()

        EventSimulator.fill_with_events(element, 'x', events=['input'])

        assert element.js_calls[0][1] == ('x', 'input')

    def test_value_is_stringified(self):
        element = text_input()

        EventSimulator.fill_with_events(element, 30)

        assert element.js_calls[0][1][0] == '30'

    def test_script_failure_returns_false(self):
        element = FakeElement(tag='input', js_result={'success': False, 'error': 'readonly'})

        assert EventSimulator.fill_with_events(element, 'x') is False

    def test_invalid_response_returns_false(self):
        element = FakeElement(tag='input', js_result='ok')

        assert EventSimulator.fill_with_events(element, 'x') is False

    def test_exception_returns_false(self):
        assert EventSimulator.fill_with_events(RaisingElement(tag='input'), 'x') is False


class TestScriptStore:
    """填充脚本测试"""

    def test_script_uses_native_setter_and_bubbling_events(self):
        script = ScriptStore.SET_NATIVE_VALUE

        assert 'HTMLInputElement' in script
        assert 'HTMLTextAreaElement' in script
        assert 'bubbles: true' in script
