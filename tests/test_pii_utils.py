"""Tests for centralized PII utilities."""

from linekb.core.pii_utils import (
    PII_CORE_PATTERNS,
    PII_LOGGING_PATTERNS,
    PII_PRIVACY_PATTERNS,
    contains_private_info,
    detect_private_info,
    redact_for_logs,
)


class TestPatternHierarchy:
    """Test that pattern groups build on the core set."""

    def test_privacy_patterns_include_core(self):
        for name in PII_CORE_PATTERNS:
            assert name in PII_PRIVACY_PATTERNS

    def test_logging_patterns_include_core(self):
        for name in PII_CORE_PATTERNS:
            assert name in PII_LOGGING_PATTERNS


class TestDetection:
    """Test cases for detect_private_info and contains_private_info."""

    def test_address_needs_adjacent_markers(self):
        found = detect_private_info("yamada@example.com 神奈川県横浜市")
        assert "email" in found
        assert "address" not in found

    def test_detects_address(self):
        assert detect_private_info("東京都町田市の者です") == ["address"]

    def test_nothing_found(self):
        assert detect_private_info("撮影の所要時間を教えてください") == []
        assert contains_private_info("撮影の所要時間を教えてください") is False

    def test_empty_input(self):
        assert detect_private_info("") == []
        assert contains_private_info("") is False


class TestRedactForLogs:
    """Test cases for redact_for_logs."""

    def test_redacts_email(self):
        result = redact_for_logs("from yamada@example.com")
        assert result == "from [EMAIL]"

    def test_redacts_phone(self):
        assert redact_for_logs("tel 090-1234-5678") == "tel [PHONE]"

    def test_redacts_labelled_phone(self):
        assert redact_for_logs("電話:09012345678") == "[LABELLED_PHONE]"

    def test_redacts_names_anywhere(self):
        result = redact_for_logs("row 12: 山田さん")
        assert "山田" not in result
        assert "[NAME]" in result

    def test_keeps_ordinary_text(self):
        text = "Parsed 12 messages from 40 lines"
        assert redact_for_logs(text) == text

    def test_empty_input(self):
        assert redact_for_logs("") == ""
