"""
Pytest configuration and fixtures for linekb.

This module provides:
- Test settings isolated from any local .env file
- Builders for LINE export text and Message sequences
"""

from typing import Callable, Iterable, List, Tuple

import pytest
from linekb.core.config import Settings, reset_settings
from linekb.models.knowledge import Message, SenderType

HEADER = "送信者タイプ,送信者名,送信日,送信時刻,内容"

Row = Tuple[str, str, str, str, str]


def build_export(rows: Iterable[Row], newline: str = "\n", header: str = HEADER) -> str:
    """Render rows the way the LINE chat export writes them.

    Contents are always quoted with doubled inner quotes; embedded newlines
    are written as-is, producing multi-line records.
    """
    lines = [
        "フォトスタジオ ひまわり",
        "保存日時：2024/05/01 10:00",
        "",
        header,
    ]
    for sender_type, sender_name, date, time, content in rows:
        escaped = content.replace('"', '""')
        lines.append(f'{sender_type},{sender_name},{date},{time},"{escaped}"')
    return newline.join(lines) + newline


@pytest.fixture
def test_settings() -> Settings:
    """Default settings that ignore the developer's .env file."""
    return Settings(_env_file=None)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make sure no test sees settings cached by another."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def export_builder() -> Callable[..., str]:
    return build_export


@pytest.fixture
def make_messages() -> Callable[..., List[Message]]:
    """Build Message lists from (sender_type, content) tuples."""

    def _make(*turns: Tuple[str, str], sender_name: str = "") -> List[Message]:
        messages = []
        for sender_type, content in turns:
            messages.append(
                Message(
                    sender_type=SenderType(sender_type),
                    sender_name=sender_name or sender_type,
                    date="2024/05/01",
                    time="10:00",
                    content=content,
                )
            )
        return messages

    return _make


@pytest.fixture
def user_row() -> Callable[[str], Row]:
    def _row(content: str) -> Row:
        return ("User", "お客", "2024/05/01", "10:00", content)

    return _row


@pytest.fixture
def account_row() -> Callable[..., Row]:
    def _row(content: str, sender_name: str = "フォトスタジオ ひまわり") -> Row:
        return ("Account", sender_name, "2024/05/01", "10:05", content)

    return _row
