"""Rule-based category and keyword assignment for studio FAQ entries.

Both tables are ordered: the first matching category wins, and keywords are
reported in pattern order. Keep them as tuples, never dicts keyed by name.
"""

import re
from typing import Pattern, Tuple

DEFAULT_CATEGORY = "その他"

# More specific categories come first
CATEGORY_TABLE: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("料金・七五三", ("七五三", "753", "着付け", "七五三 料金")),
    ("料金・スマッシュケーキ", ("スマッシュケーキ", "スマッシュ", "ケーキ")),
    ("料金・ミルクバス", ("ミルクバス", "ミルク")),
    (
        "料金",
        ("料金", "価格", "金額", "いくら", "値段", "費用", "コスト", "円", "割引", "支払"),
    ),
    ("予約方法", ("予約", "予約方法", "申込", "空き", "予約できます", "どうやって予約")),
    ("所要時間", ("所要時間", "どのくらい", "かかります", "時間")),
    ("対象年齢", ("年齢", "何歳", "赤ちゃん", "子供", "対象")),
    ("定休日", ("定休日", "休み", "営業日", "営業時間", "何曜日", "いつやって")),
    ("衣装", ("衣装", "着物", "ドレス", "持ち込み", "服", "着替え")),
    ("撮影内容", ("撮影", "メイン", "兄弟", "家族", "人数", "撮れます", "ポーズ")),
    ("納品", ("納品", "受け取り", "いつ届く", "データ", "写真")),
    ("レタッチ", ("レタッチ", "修正", "加工", "編集")),
    ("キャンセル", ("キャンセル", "キャンセル料", "取り消し")),
    ("日程変更", ("変更", "日程変更", "時間変更", "予約変更")),
    ("駐車場", ("駐車場", "駐車", "車", "パーキング")),
    ("持ち物", ("持ち物", "持って", "必要なもの", "用意")),
    ("家族撮影", ("家族", "両親", "パパ", "ママ", "祖父母", "兄弟")),
    (DEFAULT_CATEGORY, (DEFAULT_CATEGORY,)),
)

KEYWORD_PATTERNS: Tuple[Pattern, ...] = tuple(
    re.compile(p)
    for p in (
        r"料金|価格|金額|円|費用|コスト|割引|支払",
        r"七五三|753|着付け",
        r"スマッシュケーキ|スマッシュ|ケーキ",
        r"ミルクバス|ミルク",
        r"予約|申込|空き",
        r"時間|何時|所要時間",
        r"定休日|休み|営業",
        r"衣装|着物|ドレス|服",
        r"撮影|写真|フォト",
        r"データ|納品|受け取り",
        r"キャンセル|取り消し",
        r"変更|日程変更",
        r"駐車場|駐車|パーキング",
        r"持ち物|用意|必要",
        r"家族|両親|兄弟",
        r"年齢|何歳|対象",
        r"レタッチ|修正|加工",
    )
)


def categorize_question(question: str) -> str:
    """Return the first category whose keywords occur in the question."""
    for category, keywords in CATEGORY_TABLE:
        if any(keyword in question for keyword in keywords):
            return category
    return DEFAULT_CATEGORY


def extract_keywords(question: str, answer: str) -> str:
    """Collect the first match of each keyword pattern as a comma-joined tag list.

    Args:
        question: Cleaned question text
        answer: Cleaned answer text

    Returns:
        Matched substrings in pattern order without duplicates, or "" if none
    """
    text = f"{question} {answer}"
    # Ordered set of matched substrings
    keywords: dict[str, None] = {}
    for pattern in KEYWORD_PATTERNS:
        match = pattern.search(text)
        if match:
            keywords.setdefault(match.group(0), None)
    return ",".join(keywords)
