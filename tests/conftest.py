"""
Pytest 配置文件

提供测试所需的 fixtures 和共享配置。
"""

import sys
from pathlib import Path

import pytest

# 确保项目根目录在 Python 路径中
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tests.fakes import FakeDocument  # noqa: E402


# ============================================================
# Document Fixtures
# ============================================================

@pytest.fixture
def make_document():
    """按问题块列表构造文档（默认使用 .Qr7Oae 约定）"""
    def _make(blocks, block_selector='css:.Qr7Oae'):
        return FakeDocument(children={block_selector: blocks})
    return _make


# ============================================================
# Profile Fixtures
# ============================================================

@pytest.fixture
def sample_profile():
    from autofill.domain.entities import Profile
    return Profile.from_dict({
        'lastName': '山田',
        'firstName': '太郎',
        'email': 'a@b.com',
    })


@pytest.fixture
def full_profile():
    from autofill.domain.entities import Profile
    return Profile.from_dict({
        'lastName': '山田', 'firstName': '太郎', 'fullName': '山田 太郎',
        'lastNameKana': 'ヤマダ', 'firstNameKana': 'タロウ', 'fullNameKana': 'ヤマダ タロウ',
        'phone': '090-1234-5678', 'email': 'taro@example.com',
        'postalCode': '100-0001', 'prefecture': '東京都', 'city': '千代田区',
        'addressLine': '千代田1-1', 'fullAddress': '〒100-0001 東京都 千代田区 千代田1-1',
        'organization': '山田商事', 'department': '営業部',
        'age': '30', 'birthday': '1995-04-01', 'gender': '男性',
    })


@pytest.fixture
def store(tmp_path):
    """指向临时目录的 ProfileStore"""
    from autofill.config import StoreConfig
    from autofill.infrastructure.persistence import ProfileStore
    return ProfileStore(StoreConfig(path=str(tmp_path / 'store.json')))
