"""Message-level filters that keep private data and boilerplate out of the knowledge base."""

import re
from typing import Iterable, List, Optional, Pattern

from linekb.core.pii_utils import contains_private_info, detect_private_info


class PrivacyFilter:
    """Detect messages carrying customer names, contact details or addresses."""

    @classmethod
    def matches(cls, text: str) -> bool:
        return contains_private_info(text)

    @classmethod
    def reasons(cls, text: str) -> List[str]:
        """Names of the privacy patterns that matched, for debug logging."""
        return detect_private_info(text)


class PromotionFilter:
    """Detect reservation intake forms and unsolicited sales messages."""

    # Reservation form field labels
    FORM_LABELS = [
        r"お子様の名前[:：]",
        r"お名前[:：]",
        r"生年月日[:：]",
        r"撮影希望日[:：]",
        r"電話[:：]",
        r"メールアドレス[:：]",
    ]

    # Solicitation phrases and third-party advertising
    SOLICITATIONS = [
        r"ご予約の際は",
        r"企画を担当",
        r"広告代理店",
        r"掲載料金",
        r"InRed",
        r"雑誌",
        r"キャンペーン",
        r"プレゼント",
    ]

    # Form-style structure and decorations
    FORM_MARKERS = [
        r"フォーム",
        r"ご入力",
        r"必須項目",
        r"お問い合わせ番号",
        r"以下の内容",
        r"【重要】",
        r"＜重要＞",
        r"※注意",
        r"■",
        r"▼",
        r"★",
    ]

    _compiled: Optional[List[Pattern]] = None

    @classmethod
    def _patterns(cls) -> List[Pattern]:
        if cls._compiled is None:
            cls._compiled = [
                re.compile(p)
                for p in cls.FORM_LABELS + cls.SOLICITATIONS + cls.FORM_MARKERS
            ]
        return cls._compiled

    @classmethod
    def matches(cls, text: str) -> bool:
        if not text:
            return False
        return any(pattern.search(text) for pattern in cls._patterns())


def is_private_message(text: str) -> bool:
    """Check whether a message contains personal data and must not be stored."""
    return PrivacyFilter.matches(text)


def is_form_or_promotion(text: str) -> bool:
    """Check whether a message is an intake form or a sales pitch."""
    return PromotionFilter.matches(text)


def is_system_message(text: str, system_messages: Iterable[str]) -> bool:
    """Check whether a message is a media placeholder such as a sent sticker."""
    return text.strip() in set(system_messages)
