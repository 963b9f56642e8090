"""
字段类别

LLM 返回的字段键，与 Profile 的属性键一一对应（UNKNOWN 除外）。
"""

from enum import Enum
from typing import Optional


class FieldCategory(str, Enum):
    """表单字段的语义类别（封闭枚举，共 19 个）"""
    LAST_NAME = "lastName"              # 姓
    FIRST_NAME = "firstName"            # 名
    FULL_NAME = "fullName"              # 氏名（全名）
    LAST_NAME_KANA = "lastNameKana"     # 姓（フリガナ）
    FIRST_NAME_KANA = "firstNameKana"   # 名（フリガナ）
    FULL_NAME_KANA = "fullNameKana"     # 氏名（フリガナ）
    PHONE = "phone"
    EMAIL = "email"
    POSTAL_CODE = "postalCode"
    PREFECTURE = "prefecture"
    CITY = "city"
    ADDRESS_LINE = "addressLine"        # 番地・建物名
    FULL_ADDRESS = "fullAddress"        # 一行住所
    ORGANIZATION = "organization"
    DEPARTMENT = "department"
    AGE = "age"
    BIRTHDAY = "birthday"
    GENDER = "gender"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, name: object) -> Optional['FieldCategory']:
        """
        按字段键解析类别

        Args:
            name: LLM 返回的字段键

        Returns:
            FieldCategory，无法识别时返回 None
        """
        if not isinstance(name, str):
            return None
        try:
            return cls(name.strip())
        except ValueError:
            return None
