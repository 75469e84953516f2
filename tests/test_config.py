"""Tests for settings loading and validation."""

import pytest
from linekb.core.config import DEFAULT_SYSTEM_MESSAGES, Settings, get_settings
from pydantic import ValidationError


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, test_settings):
        assert test_settings.MIN_QUESTION_LENGTH == 5
        assert test_settings.MIN_ANSWER_LENGTH == 10
        assert test_settings.MAX_QUESTION_LENGTH == 200
        assert test_settings.MAX_ANSWER_LENGTH == 2000
        assert test_settings.AUTO_REPLY_SENDER_NAME == "応答メッセージ"
        assert test_settings.SYSTEM_MESSAGES == DEFAULT_SYSTEM_MESSAGES
        assert test_settings.max_file_size_bytes == 50 * 1024 * 1024

    def test_system_messages_from_comma_separated_string(self):
        settings = Settings(_env_file=None, SYSTEM_MESSAGES="写真を送信しました, ,ノートを作成しました")
        assert settings.SYSTEM_MESSAGES == ["写真を送信しました", "ノートを作成しました"]

    def test_log_level_is_normalized(self):
        assert Settings(_env_file=None, LOG_LEVEL=" warning ").LOG_LEVEL == "WARNING"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="verbose")

    def test_negative_length_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, MIN_ANSWER_LENGTH=-1)

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("MIN_ANSWER_LENGTH", "20")
        monkeypatch.setenv("AUTO_REPLY_SENDER_NAME", "自動応答")

        settings = get_settings()
        assert settings.MIN_ANSWER_LENGTH == 20
        assert settings.AUTO_REPLY_SENDER_NAME == "自動応答"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
