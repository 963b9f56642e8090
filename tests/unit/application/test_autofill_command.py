"""
自动填充命令单元测试
"""

import threading

import pytest
from autofill.application.orchestrator import AutofillCommand
from autofill.application.orchestrator.autofill_command import BUSY_MESSAGE
from autofill.application.services import FillOrchestrator
from autofill.domain.entities import FieldCategory, FillOutcome, Profile
from autofill.domain.errors import ClassificationTransportError
from tests.fakes import FakeClassifier, FakeDocument, question_block, text_input


class MemoryStore:
    """内存资料存储"""

    def __init__(self, profile=None, api_key=None):
        self.profile = profile
        self.api_key = api_key

    def get_profile(self):
        return self.profile

    def get_api_key(self):
        return self.api_key


class StubOrchestrator:
    """返回预设结果或抛出预设异常的编排器"""

    def __init__(self, outcome=None, error=None):
        self.outcome = outcome or FillOutcome()
        self.error = error
        self.calls = []

    def fill(self, document, profile, api_key):
        self.calls.append((document, profile, api_key))
        if self.error is not None:
            raise self.error
        return self.outcome


@pytest.fixture
def ready_store(sample_profile):
    return MemoryStore(sample_profile, "sk-test")


class TestPreconditions:
    """资料与 API Key 检查"""

    def test_missing_profile(self):
        orchestrator = StubOrchestrator()
        command = AutofillCommand(MemoryStore(None, "sk-test"), orchestrator)

        result = command.run(FakeDocument())

        assert result.status == "error"
        assert result.message == "プロフィールが未登録です。設定画面から登録してください。"
        assert orchestrator.calls == []

    def test_empty_profile_is_missing(self):
        command = AutofillCommand(MemoryStore(Profile(), "sk-test"), StubOrchestrator())

        assert command.run(FakeDocument()).message.startswith("プロフィールが未登録です")

    def test_missing_api_key(self, sample_profile):
        orchestrator = StubOrchestrator()
        command = AutofillCommand(MemoryStore(sample_profile, None), orchestrator)

        result = command.run(FakeDocument())

        assert result.status == "error"
        assert result.message == "OpenAI APIキーが未設定です。設定画面から登録してください。"
        assert orchestrator.calls == []

    def test_blank_api_key_is_missing(self, sample_profile):
        command = AutofillCommand(MemoryStore(sample_profile, "   "), StubOrchestrator())

        assert command.run(FakeDocument()).message.startswith("OpenAI APIキーが未設定です")

    def test_key_format_not_checked_at_run_time(self, sample_profile):
        """兼容端点的非 sk- Key 也能执行"""
        orchestrator = StubOrchestrator(FillOutcome(filled_count=1, candidate_count=1))
        command = AutofillCommand(MemoryStore(sample_profile, " gsk-compatible "), orchestrator)

        result = command.run(FakeDocument())

        assert result.ok
        assert orchestrator.calls[0][2] == "gsk-compatible"


class TestResults:
    """结果转换测试"""

    def test_success(self, ready_store):
        orchestrator = StubOrchestrator(FillOutcome(filled_count=3, candidate_count=4, skipped_indices=[3]))

        result = AutofillCommand(ready_store, orchestrator).run(FakeDocument())

        assert result.ok
        assert result.filled_count == 3
        assert result.message == "3件の項目を自動入力しました。"

    def test_no_eligible_fields(self, ready_store):
        result = AutofillCommand(ready_store, StubOrchestrator(FillOutcome())).run(FakeDocument())

        assert result.status == "done"
        assert result.filled_count == 0
        assert result.message == "入力できるテキスト欄が見つかりませんでした。"

    def test_no_fields_filled(self, ready_store):
        orchestrator = StubOrchestrator(FillOutcome(candidate_count=2, skipped_indices=[0, 1]))

        result = AutofillCommand(ready_store, orchestrator).run(FakeDocument())

        assert result.status == "done"
        assert result.filled_count == 0
        assert result.message == "プロフィールに登録された情報と一致する項目が見つかりませんでした。"

    def test_classification_error_message(self, ready_store):
        error = ClassificationTransportError(429, "Rate limit reached")

        result = AutofillCommand(ready_store, StubOrchestrator(error=error)).run(FakeDocument())

        assert result.status == "error"
        assert result.message == "OpenAI API エラー: 429 Rate limit reached"
        assert result.filled_count is None

    def test_unexpected_error(self, ready_store):
        result = AutofillCommand(ready_store, StubOrchestrator(error=RuntimeError("tab closed"))).run(FakeDocument())

        assert result.status == "error"
        assert result.message == "エラーが発生しました: tab closed"

    def test_profile_and_key_passed_to_orchestrator(self, ready_store, sample_profile):
        orchestrator = StubOrchestrator(FillOutcome(filled_count=1, candidate_count=1))
        document = FakeDocument()

        AutofillCommand(ready_store, orchestrator).run(document)

        assert orchestrator.calls == [(document, sample_profile, "sk-test")]

    def test_log_callback_receives_messages(self, ready_store):
        messages = []
        orchestrator = StubOrchestrator(FillOutcome(filled_count=1, candidate_count=1))

        AutofillCommand(ready_store, orchestrator, log_callback=lambda m, l: messages.append((m, l))).run(FakeDocument())

        assert ("✅ 1件の項目を自動入力しました。", "success") in messages


class TestConcurrency:
    """并发控制测试"""

    def test_second_run_is_rejected(self, ready_store):
        started = threading.Event()
        release = threading.Event()

        class BlockingOrchestrator(StubOrchestrator):
            def fill(self, document, profile, api_key):
                started.set()
                release.wait(timeout=5)
                return FillOutcome(filled_count=1, candidate_count=1)

        command = AutofillCommand(ready_store, BlockingOrchestrator())
        results = []
        thread = command.run_async(FakeDocument(), callback=results.append)
        assert started.wait(timeout=5)

        assert command.is_running
        busy = command.run(FakeDocument())
        release.set()
        thread.join(timeout=5)

        assert busy.status == "error"
        assert busy.message == BUSY_MESSAGE
        assert results[0].ok
        assert not command.is_running

    def test_lock_released_after_error(self, ready_store):
        command = AutofillCommand(ready_store, StubOrchestrator(error=RuntimeError("x")))

        command.run(FakeDocument())

        assert not command.is_running


class TestEndToEnd:
    """命令 + 真实编排器"""

    def test_event_form(self, ready_store):
        handles = [text_input() for _ in range(4)]
        labels = ['姓', '名', 'メールアドレス', '参加予定イベント']
        document = FakeDocument(children={
            'css:.Qr7Oae': [question_block(l, h) for l, h in zip(labels, handles)],
        })
        classifier = FakeClassifier({
            0: FieldCategory.LAST_NAME, 1: FieldCategory.FIRST_NAME,
            2: FieldCategory.EMAIL, 3: FieldCategory.UNKNOWN,
        })

        result = AutofillCommand(ready_store, FillOrchestrator(classifier=classifier)).run(document)

        assert result.message == "3件の項目を自動入力しました。"
        assert [h.value for h in handles] == ['山田', '太郎', 'a@b.com', None]
