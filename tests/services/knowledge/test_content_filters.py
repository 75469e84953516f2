"""Tests for privacy, promotion and system-message filters."""

import pytest
from linekb.core.config import DEFAULT_SYSTEM_MESSAGES
from linekb.services.knowledge.content_filters import (
    PrivacyFilter,
    PromotionFilter,
    is_form_or_promotion,
    is_private_message,
    is_system_message,
)


class TestPrivacyFilter:
    """Test cases for is_private_message."""

    # === Names ===

    def test_name_with_honorific(self):
        assert is_private_message("田中さんお世話になります") is True

    @pytest.mark.parametrize("text", ["佐藤様", "はなちゃん元気です", "ゆうとくん"])
    def test_other_honorifics(self, text):
        assert is_private_message(text) is True

    def test_honorific_must_be_at_start(self):
        assert is_private_message("撮影の担当は、田中さんです") is False

    # === Contact details ===

    def test_phone_number(self):
        assert is_private_message("090-1234-5678") is True

    def test_phone_number_with_spaces_and_parentheses(self):
        assert is_private_message("連絡先 03 1234 5678 です") is True
        assert is_private_message("連絡先は(03)1234(5678)") is True

    def test_labelled_phone_without_separators(self):
        assert is_private_message("電話：09012345678") is True
        assert is_private_message("TEL 0312345678") is True

    def test_email(self):
        assert is_private_message("photo.booking+1@example.co.jp に送ります") is True

    def test_address(self):
        assert is_private_message("住所は東京都町田市です") is True

    # === Greetings ===

    def test_acknowledgement_only(self):
        assert is_private_message("ありがとうございます") is True
        assert is_private_message("承知しました") is True

    def test_acknowledgement_with_question_is_not_private(self):
        assert is_private_message("ありがとうございます。駐車場はありますか") is False

    # === Ordinary questions ===

    def test_business_question_is_not_private(self):
        assert is_private_message("営業時間を教えてください") is False

    def test_prices_are_not_phone_numbers(self):
        assert is_private_message("料金は税込15000円からです") is False

    def test_reasons(self):
        assert PrivacyFilter.reasons("田中さん 090-1234-5678") == ["phone", "honorific_name"]
        assert PrivacyFilter.reasons("営業時間を教えてください") == []

    def test_empty_text(self):
        assert is_private_message("") is False


class TestPromotionFilter:
    """Test cases for is_form_or_promotion."""

    @pytest.mark.parametrize(
        "text",
        [
            "お子様の名前：",
            "お名前:",
            "生年月日：2020/01/01",
            "撮影希望日：",
            "メールアドレス：",
            "ご予約の際は以下をお送りください",
            "弊社は広告代理店です",
            "InRedへの掲載のご案内",
            "雑誌掲載のお知らせ",
            "春のキャンペーン実施中",
            "【重要】営業日のお知らせ",
            "■メニュー",
            "▼詳しくはこちら",
            "★お得情報★",
        ],
    )
    def test_promotional_markers(self, text):
        assert is_form_or_promotion(text) is True

    def test_normal_answer_is_not_promotion(self):
        assert is_form_or_promotion("料金は税込15000円からです。") is False

    def test_patterns_cover_all_groups(self):
        total = (
            len(PromotionFilter.FORM_LABELS)
            + len(PromotionFilter.SOLICITATIONS)
            + len(PromotionFilter.FORM_MARKERS)
        )
        assert len(PromotionFilter._patterns()) == total

    def test_empty_text(self):
        assert is_form_or_promotion("") is False


class TestSystemMessages:
    """Test cases for is_system_message."""

    @pytest.mark.parametrize("text", DEFAULT_SYSTEM_MESSAGES)
    def test_default_placeholders(self, text):
        assert is_system_message(text, DEFAULT_SYSTEM_MESSAGES) is True

    def test_surrounding_whitespace_is_ignored(self):
        assert is_system_message("  スタンプを送信しました\n", DEFAULT_SYSTEM_MESSAGES) is True

    def test_placeholder_inside_text_is_not_system(self):
        text = "写真を送信しました。確認をお願いします"
        assert is_system_message(text, DEFAULT_SYSTEM_MESSAGES) is False
