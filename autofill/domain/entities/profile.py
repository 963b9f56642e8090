"""
用户资料 (Profile)

固定键集合到可选字符串值的映射。
不变式: 存在的值一定是非空且已去除首尾空白的字符串。
"""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple


PROFILE_KEYS: Tuple[str, ...] = (
    "lastName", "firstName", "fullName",
    "lastNameKana", "firstNameKana", "fullNameKana",
    "phone", "email",
    "postalCode", "prefecture", "city", "addressLine", "fullAddress",
    "organization", "department",
    "age", "birthday", "gender",
)

# 弹窗摘要显示的字段（显示名, 键）
DISPLAY_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("氏名", "fullName"),
    ("姓", "lastName"),
    ("名", "firstName"),
    ("フリガナ", "fullNameKana"),
    ("電話番号", "phone"),
    ("メール", "email"),
    ("郵便番号", "postalCode"),
    ("都道府県", "prefecture"),
    ("所属", "organization"),
)

POSTAL_MARK = "〒"


def join_address(values: Mapping[str, str]) -> Optional[str]:
    """
    拼接一行住所: 〒邮编 都道府県 市区町村 番地

    缺失的部分被跳过，全部缺失时返回 None。
    """
    postal = values.get("postalCode")
    parts = [
        f"{POSTAL_MARK}{postal}" if postal else "",
        values.get("prefecture") or "",
        values.get("city") or "",
        values.get("addressLine") or "",
    ]
    parts = [p for p in parts if p]
    return " ".join(parts) if parts else None


class Profile:
    """
    用户资料

    只读值对象。通过 from_dict() 构造时会过滤未知键、非字符串值和空值。
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values = MappingProxyType(self._sanitize(values or {}))

    @staticmethod
    def _sanitize(data: Mapping[str, Any]) -> Dict[str, str]:
        clean: Dict[str, str] = {}
        for key in PROFILE_KEYS:
            value = data.get(key)
            if isinstance(value, str) and value.strip():
                clean[key] = value.strip()
        return clean

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Profile':
        return cls(data)

    def to_dict(self) -> Dict[str, str]:
        return dict(self._values)

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def is_empty(self) -> bool:
        return not self._values

    def complete(self) -> 'Profile':
        """
        自动补全派生字段

        保存资料时补齐 fullName / fullNameKana / fullAddress（已有值不覆盖）。
        """
        data = self.to_dict()
        if "fullName" not in data and "lastName" in data and "firstName" in data:
            data["fullName"] = f"{data['lastName']} {data['firstName']}"
        if "fullNameKana" not in data and "lastNameKana" in data and "firstNameKana" in data:
            data["fullNameKana"] = f"{data['lastNameKana']} {data['firstNameKana']}"
        if "fullAddress" not in data:
            address = join_address(data)
            if address:
                data["fullAddress"] = address
        return Profile(data)

    def summary(self, limit: int = 5) -> List[Tuple[str, str]]:
        """弹窗用摘要: 最多 limit 条 (显示名, 值)"""
        items = [(label, self._values[key]) for label, key in DISPLAY_FIELDS if key in self._values]
        return items[:limit]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Profile):
            return NotImplemented
        return dict(self._values) == dict(other._values)

    def __repr__(self) -> str:
        return f"Profile({dict(self._values)!r})"
