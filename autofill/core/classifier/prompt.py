"""
分类提示词

系统提示词定义了 19 个字段键以及日式复合姓名标签的判定规则；
用户消息按 `序号: "标签"` 逐行列出整批标签。
"""

from typing import Sequence

SYSTEM_PROMPT = """あなたはGoogleフォームの入力欄ラベルを分類するアシスタントです。
与えられたラベルテキストのリストを読み、それぞれが以下のフィールドキーのどれに対応するかを判定してください。

フィールドキーの定義:
- lastName: 姓・苗字・名字（姓のみ）
- firstName: 名・名前（名のみ）
- fullName: 氏名・フルネーム・姓名（姓と名が一体になったもの）
- lastNameKana: 姓のフリガナ・読み（カタカナまたはひらがな、姓のみ）
- firstNameKana: 名のフリガナ・読み（カタカナまたはひらがな、名のみ）
- fullNameKana: 氏名全体のフリガナ・読み（姓名一体）
- phone: 電話番号・携帯番号・TEL・連絡先（電話）
- email: メールアドレス・Eメール
- postalCode: 郵便番号・〒
- prefecture: 都道府県
- city: 市区町村・市町村
- addressLine: 番地・建物名・ビル名・マンション名・号室（住所の詳細部分）
- fullAddress: 住所全体（都道府県から番地まで含む一行住所）
- organization: 所属・会社名・勤務先・学校名・大学名・団体名
- department: 部署・学部・学科・専攻・学年
- age: 年齢
- birthday: 生年月日・誕生日
- gender: 性別
- unknown: 上記のいずれにも該当しない（参加予定イベント、アンケート項目など）

判定の最重要ルール（必ず守ること）:
1. ラベルの中に「姓」という文字が含まれていれば、それは lastName（姓のみ）である。「お名前（姓）」「【氏名】姓」「姓（苗字）」はすべて lastName。
2. ラベルの中に「名」という文字が含まれていれば、それは firstName（名のみ）である。「お名前（名）」「【氏名】名」「名（名前）」はすべて firstName。
3. 「姓名」という表現はフルネーム（姓と名が一体）を意味するため fullName である。「お名前（姓名）」「氏名（姓名）」はすべて fullName。
4. 「お名前」単独（姓・名・姓名などの補足がない）の場合は fullName とする。
5. ラベルに【氏名】【住所】【フリガナ】などのカテゴリプレフィックスが付いていても、後半のキーワードで判定する。
6. 「セイ」「メイ」のようなカタカナ表記も姓・名として認識する（「フリガナ（セイ）」→ lastNameKana、「フリガナ（メイ）」→ firstNameKana）。
7. 確信が持てない場合は "unknown" を返す。

必ずJSON形式で回答してください。キーはラベルのインデックス（0始まり）、値はフィールドキー文字列です。
例: {"0": "lastName", "1": "firstName", "2": "unknown"}"""


def build_user_message(labels: Sequence[str]) -> str:
    """
    构建用户消息

    Args:
        labels: 规范化后的标签列表

    Returns:
        每行一个 `序号: "标签"`
    """
    return "\n".join(f'{i}: "{label}"' for i, label in enumerate(labels))
