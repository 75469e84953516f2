"""Tests for transcript and knowledge entry models."""

import pytest
from linekb.models.knowledge import (
    ExtractionResult,
    KnowledgeEntry,
    Message,
    SenderType,
)
from pydantic import ValidationError


class TestKnowledgeEntry:
    """Test cases for KnowledgeEntry."""

    def test_defaults(self):
        entry = KnowledgeEntry(category="料金", question="料金はいくらですか", answer="5000円からです")

        assert entry.priority == 2
        assert entry.is_active is True
        assert entry.source == "LINE"
        assert entry.keyword_list() == []

    def test_keyword_list(self):
        entry = KnowledgeEntry(
            category="料金", question="q", answer="a", keywords="料金,予約"
        )
        assert entry.keyword_list() == ["料金", "予約"]

    def test_priority_must_be_one_or_two(self):
        with pytest.raises(ValidationError):
            KnowledgeEntry(category="料金", question="q", answer="a", priority=3)

    def test_empty_fields_rejected(self):
        with pytest.raises(ValidationError):
            KnowledgeEntry(category="料金", question="", answer="a")


class TestMessage:
    """Test cases for Message."""

    def test_is_immutable(self):
        message = Message(SenderType.USER, "お客", "d", "t", "本文")
        with pytest.raises(AttributeError):
            message.content = "変更"

    def test_sender_helpers(self):
        message = Message(SenderType.ACCOUNT, "店", "d", "t", "本文")
        assert message.is_account is True
        assert message.is_user is False


class TestExtractionResult:
    """Test cases for ExtractionResult."""

    def test_counts_by_priority(self):
        result = ExtractionResult(
            entries=[
                KnowledgeEntry(category="c", question="q", answer="a", priority=1),
                KnowledgeEntry(category="c", question="q", answer="a", priority=2),
                KnowledgeEntry(category="c", question="q", answer="a", priority=2),
            ]
        )
        assert result.embedded_faq_count == 1
        assert result.pair_count == 2
        assert len(result.to_records()) == 3
