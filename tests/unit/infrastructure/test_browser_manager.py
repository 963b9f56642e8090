"""
浏览器管理器单元测试（不启动浏览器）
"""

import socket

import pytest
from autofill.config import BrowserConfig
from autofill.infrastructure.browser import browser_manager
from autofill.infrastructure.browser.browser_manager import BrowserManager
from autofill.utils.port_check import PortChecker, parse_address
from tests.fakes import FakeDocument


class TestIsGoogleForm:

    def test_form_url(self):
        assert BrowserManager(BrowserConfig()).is_google_form(FakeDocument())

    @pytest.mark.parametrize('url', ['https://example.com/forms/', '', None])
    def test_other_urls(self, url):
        tab = FakeDocument()
        tab.url = url

        assert not BrowserManager(BrowserConfig()).is_google_form(tab)


class TestConnect:

    def test_closed_port_raises(self, monkeypatch):
        monkeypatch.setattr(PortChecker, 'is_port_open', staticmethod(lambda port, host='127.0.0.1', timeout=0.5: False))
        manager = BrowserManager(BrowserConfig(addr='127.0.0.1:9'))

        with pytest.raises(ConnectionError):
            manager.connect()
        assert not manager.is_connected()

    def test_latest_tab(self, monkeypatch):
        tab = FakeDocument()

        class FakePage:
            def __init__(self, addr_or_opts=None):
                self.addr = addr_or_opts
                self.latest_tab = tab

        monkeypatch.setattr(PortChecker, 'is_port_open', staticmethod(lambda port, host='127.0.0.1', timeout=0.5: True))
        monkeypatch.setattr(browser_manager, 'ChromiumPage', FakePage)
        manager = BrowserManager(BrowserConfig(addr='127.0.0.1:9333'))

        assert manager.get_current_tab() is tab
        assert manager.page.addr == '127.0.0.1:9333'
        assert manager.is_connected()


class TestPortChecker:

    def test_open_port(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
            server.bind(('127.0.0.1', 0))
            server.listen(1)
            port = server.getsockname()[1]

            assert PortChecker.is_port_open(port) is True

    def test_closed_port(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
            probe.bind(('127.0.0.1', 0))
            port = probe.getsockname()[1]

        assert PortChecker.is_port_open(port) is False

    def test_address_open(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
            server.bind(('127.0.0.1', 0))
            server.listen(1)
            port = server.getsockname()[1]

            assert PortChecker.is_address_open(f'127.0.0.1:{port}') is True

    def test_malformed_address(self):
        assert PortChecker.is_address_open('127.0.0.1:abc') is False


class TestParseAddress:

    @pytest.mark.parametrize('addr, expected', [
        ('127.0.0.1:9222', ('127.0.0.1', 9222)),
        ('localhost:9333', ('localhost', 9333)),
        (' 9222 ', ('127.0.0.1', 9222)),
        (':9222', ('127.0.0.1', 9222)),
    ])
    def test_parse(self, addr, expected):
        assert parse_address(addr) == expected

    def test_invalid_port(self):
        with pytest.raises(ValueError):
            parse_address('127.0.0.1:')
