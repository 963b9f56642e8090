"""
资料持久化适配器 - 基础设施层

以 JSON 文件作为键值存储，保存 profile 与 OpenAI API Key。
"""
import json
import os
from typing import Any, Dict, Optional

from autofill.config import StoreConfig, store_config
from autofill.domain.entities import Profile, validate_api_key
from autofill.domain.errors import MissingProfileError, ProfileImportError
from autofill.utils.logger import get_logger

logger = get_logger(__name__)


class ProfileStore:
    """资料存储管理器"""

    def __init__(self, config: Optional[StoreConfig] = None):
        self.config = config or store_config
        self.path = self.config.path

    # ==================== 底层读写 ====================

    def _read(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"存储文件读取失败，按空存储处理: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, Any]):
        os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    # ==================== 读取 ====================

    def get_profile(self) -> Optional[Profile]:
        """读取资料，未登记时返回 None"""
        raw = self._read().get(self.config.profile_key)
        if not isinstance(raw, dict):
            return None
        return Profile.from_dict(raw)

    def get_api_key(self) -> Optional[str]:
        """读取 API Key，未设置时返回 None"""
        key = self._read().get(self.config.api_key_key)
        return key.strip() if isinstance(key, str) and key.strip() else None

    # ==================== 写入 ====================

    def save(self, profile: Profile, api_key: Optional[str] = None) -> Profile:
        """
        保存资料（自动补全派生字段）与 API Key

        Args:
            profile: 用户资料
            api_key: API Key，为空时保留原值

        Returns:
            实际保存的资料

        Raises:
            InvalidCredentialsError: API Key 格式错误
        """
        data = self._read()
        completed = profile.complete()
        data[self.config.profile_key] = completed.to_dict()
        if api_key and api_key.strip():
            data[self.config.api_key_key] = validate_api_key(api_key)
        self._write(data)
        logger.info(f"资料已保存: {len(completed.to_dict())} 项")
        return completed

    def clear_profile(self):
        """清除资料（API Key 保留）"""
        data = self._read()
        data.pop(self.config.profile_key, None)
        self._write(data)
        logger.info("资料已清除")

    # ==================== 导入导出 ====================

    def export_profile(self, filepath: str) -> str:
        """
        导出资料为 JSON（不包含 API Key）

        Raises:
            MissingProfileError: 没有可导出的资料
        """
        profile = self.get_profile()
        if profile is None or profile.is_empty():
            raise MissingProfileError("エクスポートするデータがありません")

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(profile.to_dict(), f, ensure_ascii=False, indent=2)
        return filepath

    def import_profile(self, filepath: str) -> Profile:
        """
        从 JSON 导入资料（只接收已知键的字符串值）

        Raises:
            ProfileImportError: 文件无法读取或不是 JSON 对象
        """
        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ProfileImportError("JSONファイルの形式が正しくありません") from e
        if not isinstance(data, dict):
            raise ProfileImportError("JSONファイルの形式が正しくありません")

        return self.replace_profile(Profile.from_dict(data))

    def replace_profile(self, profile: Profile) -> Profile:
        """原样写入资料（不做派生补全）"""
        data = self._read()
        data[self.config.profile_key] = profile.to_dict()
        self._write(data)
        logger.info(f"资料已导入: {len(profile.to_dict())} 项")
        return profile
