"""
GForm AutoFill - Google 表单自动填充工具

程序入口:
    python main.py                  打开自动填充弹窗
    python main.py --once           对当前标签页执行一次自动填充
    python main.py --import FILE    导入资料（JSON / CSV / Excel）
    python main.py --api-key KEY    保存 OpenAI API Key
    python main.py --clear [--yes]  消去资料（API Key 保留）
"""

import argparse
import logging
import sys
import os

# 确保程序根目录在 Python 路径中
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from autofill.utils.logger import setup_logging


def run_once() -> int:
    """对当前标签页执行一次自动填充，返回进程退出码"""
    from autofill.application.orchestrator import AutofillCommand
    from autofill.infrastructure.browser.browser_manager import BrowserManager
    from autofill.infrastructure.persistence import ProfileStore

    browser = BrowserManager()
    try:
        tab = browser.get_current_tab()
    except ConnectionError as e:
        print(f"[Main] {e}")
        return 1

    if not browser.is_google_form(tab):
        print("[Main] 現在のタブはGoogleフォームではありません。")
        return 1

    result = AutofillCommand(ProfileStore()).run(tab)
    print(f"[Main] {result.status}: {result.message}")
    return 0 if result.ok else 1


def import_profile(path: str) -> int:
    from autofill.domain.errors import AutofillError
    from autofill.infrastructure.excel import ProfileSheetReader
    from autofill.infrastructure.persistence import ProfileStore

    store = ProfileStore()
    try:
        if path.lower().endswith('.json'):
            profile = store.import_profile(path)
        else:
            profile = store.replace_profile(ProfileSheetReader().read(path))
    except AutofillError as e:
        print(f"[Main] {e.message}")
        return 1
    print(f"[Main] プロフィールをインポートしました ({len(profile.to_dict())} 項目)")
    return 0


def save_api_key(api_key: str) -> int:
    from autofill.domain.entities import Profile
    from autofill.domain.errors import AutofillError
    from autofill.infrastructure.persistence import ProfileStore

    store = ProfileStore()
    try:
        store.save(store.get_profile() or Profile(), api_key=api_key)
    except AutofillError as e:
        print(f"[Main] {e.message}")
        return 1
    print("[Main] APIキーを保存しました")
    return 0


def clear_profile(assume_yes: bool = False) -> int:
    """消去资料（API Key 保留），未指定 --yes 时先确认"""
    from autofill.infrastructure.persistence import ProfileStore

    if not assume_yes:
        answer = input("登録済みのプロフィールデータをすべて消去しますか？（APIキーは消去されません） [y/N]: ")
        if answer.strip().lower() not in ("y", "yes"):
            print("[Main] キャンセルしました")
            return 1

    ProfileStore().clear_profile()
    print("[Main] プロフィールデータを消去しました")
    return 0


def main(argv=None) -> int:
    """程序入口"""
    parser = argparse.ArgumentParser(description='GForm AutoFill')
    parser.add_argument('--once', action='store_true', help='現在のタブを一度だけ自動入力する')
    parser.add_argument('--import', dest='import_path', metavar='FILE', help='プロフィールをインポートする')
    parser.add_argument('--api-key', metavar='KEY', help='OpenAI APIキーを保存する')
    parser.add_argument('--clear', action='store_true', help='プロフィールデータを消去する（APIキーは残す）')
    parser.add_argument('-y', '--yes', action='store_true', help='確認なしで実行する')
    parser.add_argument('--log-file', help='ログファイルのパス')
    parser.add_argument('-v', '--verbose', action='store_true', help='デバッグログを出力する')
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    if args.clear:
        return clear_profile(args.yes)
    if args.api_key:
        return save_api_key(args.api_key)
    if args.import_path:
        return import_profile(args.import_path)
    if args.once:
        return run_once()

    from autofill.ui.styles import UIStyles
    from autofill.ui.popup_window import AutofillPopup

    UIStyles.apply_global_styles()
    app = AutofillPopup()
    app.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
