"""
资料表格导入 - 基础设施层

用 pandas 从 CSV / Excel 读取资料，支持两种版式:
- 键值表: 两列（第一列为资料键，第二列为值）
- 单行表: 表头为资料键，取第一行数据
空单元格（NaN）被丢弃。
"""
from pathlib import Path
from typing import Any, Dict

import pandas as pd

from autofill.domain.entities import Profile, PROFILE_KEYS
from autofill.domain.errors import ProfileImportError


def _cell_to_str(value: Any) -> str:
    """单元格 -> 字符串（NaN 视为空；整数型浮点去掉 .0）"""
    if pd.isna(value):
        return ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


class ProfileSheetReader:
    """资料表格读取器"""

    EXCEL_SUFFIXES = ('.xlsx', '.xls')

    def read_frame(self, filepath: str) -> pd.DataFrame:
        """读取原始表格（所有单元格按字符串读取）"""
        path = Path(filepath)
        try:
            if path.suffix.lower() in self.EXCEL_SUFFIXES:
                return pd.read_excel(path, dtype=str, header=None)
            return pd.read_csv(path, dtype=str, header=None, encoding='utf-8-sig')
        except (OSError, ValueError) as e:
            raise ProfileImportError("ファイルを読み込めませんでした") from e

    def to_profile(self, frame: pd.DataFrame) -> Profile:
        """
        表格 -> Profile

        Raises:
            ProfileImportError: 两种版式都无法识别
        """
        if frame.empty:
            raise ProfileImportError("ファイルにデータがありません")

        header = [_cell_to_str(v) for v in frame.iloc[0].tolist()]
        first_column = [_cell_to_str(v) for v in frame.iloc[:, 0].tolist()]
        row_keys = sum(1 for h in header if h in PROFILE_KEYS)
        column_keys = sum(1 for k in first_column if k in PROFILE_KEYS)
        data: Dict[str, str] = {}

        # 首行的资料键多于首列 -> 单行表；数量相同时看第二行首格是否也是资料键
        if len(frame) >= 2:
            second_is_key = _cell_to_str(frame.iloc[1, 0]) in PROFILE_KEYS
            single_row = (frame.shape[1] < 2 or row_keys > column_keys
                          or (row_keys == column_keys and not second_is_key))
        else:
            single_row = False

        if single_row:
            for key, value in zip(header, frame.iloc[1].tolist()):
                data[key] = _cell_to_str(value)
        elif frame.shape[1] >= 2:
            for key, value in frame.iloc[:, :2].itertuples(index=False, name=None):
                data[_cell_to_str(key)] = _cell_to_str(value)
        else:
            raise ProfileImportError("表の形式を認識できませんでした")

        profile = Profile.from_dict(data)
        if profile.is_empty():
            raise ProfileImportError("プロフィール項目が見つかりませんでした")
        return profile

    def read(self, filepath: str) -> Profile:
        """读取文件并转换为 Profile"""
        return self.to_profile(self.read_frame(filepath))
