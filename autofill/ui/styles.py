import customtkinter as ctk

class ThemeColors:
    """系统配色系统 (Apple Monochrome - 极简黑白灰)"""
    # 背景色
    BG_DARK = "#FFFFFF"           # 纯白背景
    BG_SECONDARY = "#F5F5F7"      # 浅灰背景
    BG_CARD = "#FFFFFF"           # 卡片背景

    # 强调色
    ACCENT_PRIMARY = "#000000"

    # 功能色
    SUCCESS = "#000000"
    WARNING = "#555555"
    ERROR = "#C0392B"             # 错误消息需要醒目
    INFO = "#888888"

    # 文本色
    TEXT_PRIMARY = "#000000"
    TEXT_SECONDARY = "#6E6E73"
    TEXT_MUTED = "#86868B"

    # 边框
    BORDER = "#000000"

class UIStyles:
    """UI 样式配置"""
    FONT_FAMILY = "Yu Gothic UI"

    @staticmethod
    def apply_global_styles():
        ctk.set_appearance_mode("light")
        ctk.set_default_color_theme("blue")
