"""
资料解析器 - 字段类别 -> 资料值

每个类别对应一个解析函数（查表分发），按"主值 -> 派生值"顺序取第一个可用值。
解析不到值返回 None，这是正常结果而不是错误。

派生规则:
- 姓/名缺失时从全名拆分（按空白切分，首段为姓，其余以单空格重新拼接为名）
- 全名缺失时由 "姓 名" 拼接（两者都存在时）
- 一行住所缺失时由 〒邮编 / 都道府県 / 市区町村 / 番地 拼接
- 假名族与普通姓名族规则完全一致
"""

import re
from typing import Callable, Dict, NamedTuple, Optional

from autofill.domain.entities import FieldCategory, Profile, join_address

Resolver = Callable[[Profile], Optional[str]]

_WHITESPACE = re.compile(r'\s+')


class NameParts(NamedTuple):
    last: str
    first: str


def split_name(full_name: str) -> NameParts:
    """
    拆分全名

    Args:
        full_name: 以空白分隔的全名（全角空格也视为空白）

    Returns:
        NameParts(last, first)；只有一段时整体作为姓，名为空串
    """
    trimmed = full_name.strip()
    tokens = _WHITESPACE.split(trimmed) if trimmed else []
    if len(tokens) >= 2:
        return NameParts(tokens[0], " ".join(tokens[1:]))
    return NameParts(trimmed, "")


def _name_family(last_key: str, first_key: str, full_key: str) -> Dict[str, Resolver]:
    """生成一组姓名解析函数（普通姓名与假名共用）"""

    def resolve_last(profile: Profile) -> Optional[str]:
        if profile.get(last_key):
            return profile.get(last_key)
        if profile.get(full_key):
            return split_name(profile.get(full_key)).last or None
        return None

    def resolve_first(profile: Profile) -> Optional[str]:
        if profile.get(first_key):
            return profile.get(first_key)
        if profile.get(full_key):
            return split_name(profile.get(full_key)).first or None
        return None

    def resolve_full(profile: Profile) -> Optional[str]:
        if profile.get(full_key):
            return profile.get(full_key)
        last, first = profile.get(last_key), profile.get(first_key)
        if last and first:
            return f"{last} {first}"
        return None

    return {last_key: resolve_last, first_key: resolve_first, full_key: resolve_full}


def _direct(key: str) -> Resolver:
    return lambda profile: profile.get(key)


def _resolve_full_address(profile: Profile) -> Optional[str]:
    if profile.get("fullAddress"):
        return profile.get("fullAddress")
    return join_address(profile.to_dict())


def _build_resolvers() -> Dict[FieldCategory, Resolver]:
    by_key: Dict[str, Resolver] = {}
    by_key.update(_name_family("lastName", "firstName", "fullName"))
    by_key.update(_name_family("lastNameKana", "firstNameKana", "fullNameKana"))
    for key in ("phone", "email", "postalCode", "prefecture", "city", "addressLine",
                "organization", "department", "age", "birthday", "gender"):
        by_key[key] = _direct(key)
    by_key["fullAddress"] = _resolve_full_address

    resolvers = {category: by_key[category.value]
                 for category in FieldCategory if category is not FieldCategory.UNKNOWN}
    resolvers[FieldCategory.UNKNOWN] = lambda profile: None
    return resolvers


# 类别 -> 解析函数，覆盖全部 19 个类别
RESOLVERS: Dict[FieldCategory, Resolver] = _build_resolvers()


def resolve(category: FieldCategory, profile: Profile) -> Optional[str]:
    """
    解析字段值

    Args:
        category: 字段类别
        profile: 用户资料

    Returns:
        非空字符串或 None
    """
    value = RESOLVERS[category](profile)
    return value or None
