"""Infer question/answer pairs from adjacent customer and shop turns."""

import logging
from typing import List, Optional, Sequence

from linekb.core.config import Settings, get_settings
from linekb.models.knowledge import PAIR_SOURCE, PRIORITY_PAIR, KnowledgeEntry, Message
from linekb.services.knowledge.content_filters import (
    is_form_or_promotion,
    is_private_message,
    is_system_message,
)
from linekb.services.knowledge.qa_validation import build_entry
from linekb.services.knowledge.text_cleaner import clean_text

logger = logging.getLogger(__name__)


def is_shop_message(message: Message, settings: Settings) -> bool:
    """Messages written by the account itself or by its auto-reply."""
    return message.is_account or message.sender_name == settings.AUTO_REPLY_SENDER_NAME


def is_usable_question(message: Message, settings: Settings) -> bool:
    if is_system_message(message.content, settings.SYSTEM_MESSAGES):
        return False
    return not is_private_message(message.content)


def is_usable_answer(message: Message, settings: Settings) -> bool:
    return (
        is_shop_message(message, settings)
        and not is_system_message(message.content, settings.SYSTEM_MESSAGES)
        and not is_form_or_promotion(message.content)
        and not is_private_message(message.content)
    )


def extract_pair(
    messages: Sequence[Message], index: int, settings: Optional[Settings] = None
) -> Optional[KnowledgeEntry]:
    """Pair the user message at index with the reply directly after it.

    Args:
        messages: Transcript in order
        index: Position of the candidate question
        settings: Filter and length settings

    Returns:
        A priority-2 entry, or None when the two turns do not form a usable pair
    """
    settings = settings or get_settings()
    if index + 1 >= len(messages):
        return None

    question_msg = messages[index]
    answer_msg = messages[index + 1]
    if not question_msg.is_user or not is_usable_question(question_msg, settings):
        return None
    if not is_usable_answer(answer_msg, settings):
        return None

    entry = build_entry(
        clean_text(question_msg.content),
        clean_text(answer_msg.content),
        priority=PRIORITY_PAIR,
        source=PAIR_SOURCE,
        min_answer_length=settings.MIN_ANSWER_LENGTH,
        settings=settings,
    )
    if entry is None:
        logger.debug(f"Pair at message {index} rejected by length checks")
    return entry


def extract_qa_pairs(
    messages: Sequence[Message], settings: Optional[Settings] = None
) -> List[KnowledgeEntry]:
    """Extract every adjacent user/shop pair in a transcript."""
    settings = settings or get_settings()
    entries: List[KnowledgeEntry] = []
    for index in range(len(messages) - 1):
        entry = extract_pair(messages, index, settings)
        if entry is not None:
            entries.append(entry)
    return entries
