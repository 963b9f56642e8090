"""
自动填充弹窗

显示资料摘要，一键对当前 Google 表单执行自动填充。

- API Key 未设置 / 资料未登记 / 当前页不是 Google 表单时禁用按钮
- 填充进行中禁用按钮，收到 done/error 结果后恢复
- 资料消去前先确认（API Key 保留）
"""

from tkinter import filedialog, messagebox
from typing import Tuple

import customtkinter as ctk

from autofill.application.orchestrator import AutofillCommand
from autofill.domain.entities import FillResult, validate_api_key
from autofill.domain.errors import AutofillError, InvalidCredentialsError
from autofill.infrastructure.browser.browser_manager import BrowserManager
from autofill.infrastructure.excel import ProfileSheetReader
from autofill.infrastructure.persistence import ProfileStore
from autofill.ui.styles import ThemeColors, UIStyles


FILL_TEXT = "⚡ ワンクリックで自動入力"
FILLING_TEXT = "⏳ 入力中..."
STATUS_CLEAR_MS = 3000
CLEAR_CONFIRM_TEXT = "登録済みのプロフィールデータをすべて消去しますか？\n（APIキーは消去されません）"


class OutlineButton(ctk.CTkButton):
    """极简风格按钮：白底黑字黑框，悬停浅灰"""

    def __init__(self, master, **kwargs):
        defaults = {
            "fg_color": "#FFFFFF",
            "text_color": "#000000",
            "border_width": 1,
            "border_color": ThemeColors.BORDER,
            "hover_color": "#E5E5E5",
            "text_color_disabled": "#BCBCBC",
            "corner_radius": 6,
            "font": (UIStyles.FONT_FAMILY, 13)
        }
        for k, v in defaults.items():
            kwargs.setdefault(k, v)
        super().__init__(master, **kwargs)


class AutofillPopup(ctk.CTk):
    def __init__(self, store: ProfileStore = None, browser: BrowserManager = None):
        super().__init__()

        self.title("GForm AutoFill")
        self.geometry("360x460")
        self.resizable(False, False)
        self.configure(fg_color=ThemeColors.BG_DARK)

        self.store = store or ProfileStore()
        self.browser = browser or BrowserManager()
        self.command = AutofillCommand(self.store)
        self.sheet_reader = ProfileSheetReader()

        self._create_header()
        self._create_summary()
        self._create_actions()
        self.refresh()

    # ==================== 布局 ====================

    def _create_header(self):
        header = ctk.CTkFrame(self, fg_color=ThemeColors.BG_SECONDARY, corner_radius=0, height=60)
        header.pack(fill="x")
        ctk.CTkLabel(header, text="✦ GForm AutoFill",
                     font=ctk.CTkFont(family=UIStyles.FONT_FAMILY, size=18, weight="bold"),
                     text_color=ThemeColors.TEXT_PRIMARY).pack(side="left", padx=20, pady=15)

    def _create_summary(self):
        self.summary_card = ctk.CTkFrame(self, fg_color=ThemeColors.BG_CARD, border_width=1,
                                         border_color=ThemeColors.BORDER, corner_radius=12)
        self.summary_card.pack(fill="x", padx=20, pady=(15, 10))

        self.warning_label = ctk.CTkLabel(self, text="", wraplength=300,
                                          font=(UIStyles.FONT_FAMILY, 12),
                                          text_color=ThemeColors.ERROR)
        self.warning_label.pack(padx=20)

    def _create_actions(self):
        self.fill_btn = ctk.CTkButton(
            self, text=FILL_TEXT, height=40,
            fg_color=ThemeColors.ACCENT_PRIMARY, hover_color="#333333",
            font=(UIStyles.FONT_FAMILY, 14, "bold"),
            command=self.action_autofill
        )
        self.fill_btn.pack(fill="x", padx=20, pady=(10, 5))

        row = ctk.CTkFrame(self, fg_color="transparent")
        row.pack(fill="x", padx=20, pady=5)
        OutlineButton(row, text="📂 読込", width=100, height=30,
                      command=self.action_import).pack(side="left")
        OutlineButton(row, text="💾 書出", width=100, height=30,
                      command=self.action_export).pack(side="left", padx=5)
        OutlineButton(row, text="🗑", width=40, height=30,
                      command=self.action_clear).pack(side="left")
        OutlineButton(row, text="🔄", width=40, height=30,
                      command=self.refresh).pack(side="right")

        self.status_label = ctk.CTkLabel(self, text="", font=(UIStyles.FONT_FAMILY, 12),
                                         text_color=ThemeColors.TEXT_SECONDARY)
        self.status_label.pack(pady=(5, 10))

    # ==================== 状态 ====================

    def _render_summary(self) -> bool:
        for child in self.summary_card.winfo_children():
            child.destroy()

        profile = self.store.get_profile()
        items = profile.summary() if profile else []
        if not items:
            ctk.CTkLabel(self.summary_card, text="プロフィールが未登録です",
                         text_color=ThemeColors.TEXT_MUTED).pack(pady=20)
            return False

        for label, value in items:
            row = ctk.CTkFrame(self.summary_card, fg_color="transparent")
            row.pack(fill="x", padx=15, pady=3)
            ctk.CTkLabel(row, text=label, width=80, anchor="w",
                         text_color=ThemeColors.TEXT_SECONDARY).pack(side="left")
            ctk.CTkLabel(row, text=value, anchor="w",
                         text_color=ThemeColors.TEXT_PRIMARY).pack(side="left")
        return True

    def _check_api_key(self) -> Tuple[str, bool]:
        """返回 (API Key 的问题描述, 是否禁止执行)；格式不符只提示不禁止"""
        try:
            validate_api_key(self.store.get_api_key())
        except InvalidCredentialsError as e:
            return e.message, False
        except AutofillError:
            return "⚠️ APIキーが未設定です", True
        return "", False

    def _check_tab(self) -> str:
        try:
            tab = self.browser.get_current_tab()
        except ConnectionError as e:
            return str(e)
        if not self.browser.is_google_form(tab):
            return "Googleフォームのページを開いてから実行してください。"
        return ""

    def refresh(self):
        """重新检查资料、API Key 和当前页面，更新按钮状态"""
        has_profile = self._render_summary()
        key_problem, key_blocks = self._check_api_key()
        tab_problem = self._check_tab()
        self.warning_label.configure(text=key_problem or tab_problem)
        enabled = has_profile and not key_blocks and not tab_problem and not self.command.is_running
        self.fill_btn.configure(state="normal" if enabled else "disabled")

    def show_status(self, message: str, is_error: bool = False):
        color = ThemeColors.ERROR if is_error else ThemeColors.TEXT_SECONDARY
        self.status_label.configure(text=message, text_color=color)
        self.after(STATUS_CLEAR_MS, lambda: self.status_label.configure(text=""))

    # ==================== 动作 ====================

    def action_autofill(self):
        try:
            tab = self.browser.get_current_tab()
        except ConnectionError as e:
            self.show_status(str(e), is_error=True)
            self.refresh()
            return
        self.fill_btn.configure(state="disabled", text=FILLING_TEXT)
        # 工作线程结束后切回 UI 线程
        self.command.run_async(tab, callback=lambda result: self.after(0, self._on_fill_done, result))

    def _on_fill_done(self, result: FillResult):
        self.fill_btn.configure(text=FILL_TEXT)
        self.show_status(result.message, is_error=not result.ok)
        self.refresh()

    def action_import(self):
        path = filedialog.askopenfilename(
            filetypes=[("Profile", "*.json *.csv *.xlsx *.xls")]
        )
        if not path:
            return
        try:
            if path.lower().endswith(".json"):
                self.store.import_profile(path)
            else:
                self.store.replace_profile(self.sheet_reader.read(path))
        except AutofillError as e:
            self.show_status(e.message, is_error=True)
            return
        self.show_status("✓ プロフィールをインポートしました")
        self.refresh()

    def action_export(self):
        path = filedialog.asksaveasfilename(
            defaultextension=".json", initialfile="gform-autofill-profile.json"
        )
        if not path:
            return
        try:
            self.store.export_profile(path)
        except AutofillError as e:
            self.show_status(e.message, is_error=True)
            return
        self.show_status("✓ エクスポートしました（APIキーは含まれません）")

    def action_clear(self):
        if not messagebox.askyesno("データ消去", CLEAR_CONFIRM_TEXT, parent=self):
            return
        self.store.clear_profile()
        self.show_status("プロフィールデータを消去しました")
        self.refresh()
