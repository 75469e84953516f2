"""Length checks and entry construction shared by the pair and FAQ extractors."""

import logging
import re
from typing import Optional

from linekb.core.config import Settings
from linekb.models.knowledge import KnowledgeEntry
from linekb.services.knowledge.categorizer import categorize_question, extract_keywords

logger = logging.getLogger(__name__)

TRUNCATION_SUFFIX = "..."

INTERROGATIVE_PATTERN = re.compile(
    r"[?？]|ですか$|ますか$|でしょうか$|いつ|どこ|だれ|何|なに|なん|どの|どう|いくら"
)


def is_valid_question(question: str, settings: Settings) -> bool:
    if len(question) <= settings.MIN_QUESTION_LENGTH:
        logger.debug(f"Question too short ({len(question)} chars)")
        return False
    if len(question) > settings.MAX_QUESTION_LENGTH:
        logger.debug(f"Question too long ({len(question)} chars)")
        return False
    if not INTERROGATIVE_PATTERN.search(question):
        # Statements such as "七五三の撮影について" are still useful questions
        logger.debug("Question may not be interrogative, keeping it")
    return True


def is_valid_answer(answer: str, min_length: int) -> bool:
    if len(answer) <= min_length:
        logger.debug(f"Answer too short ({len(answer)} chars)")
        return False
    return True


def truncate_answer(answer: str, max_length: int) -> str:
    """Cut overlong answers to max_length characters plus an ellipsis."""
    if len(answer) > max_length:
        logger.debug(f"Answer truncated from {len(answer)} to {max_length} chars")
        return answer[:max_length] + TRUNCATION_SUFFIX
    return answer


def build_entry(
    question: str,
    answer: str,
    *,
    priority: int,
    source: str,
    min_answer_length: int,
    settings: Settings,
) -> Optional[KnowledgeEntry]:
    """Validate a cleaned question/answer and build a categorized entry.

    Args:
        question: Cleaned question text
        answer: Cleaned answer text
        priority: 1 for explicit FAQ blocks, 2 for inferred pairs
        source: Provenance tag stored on the entry
        min_answer_length: Answers must be longer than this
        settings: Thresholds for question length and answer truncation

    Returns:
        The entry, or None when the texts fail the length checks
    """
    if not is_valid_question(question, settings):
        return None
    if not is_valid_answer(answer, min_answer_length):
        return None

    answer = truncate_answer(answer, settings.MAX_ANSWER_LENGTH)
    return KnowledgeEntry(
        category=categorize_question(question),
        question=question,
        answer=answer,
        keywords=extract_keywords(question, answer),
        priority=priority,
        is_active=True,
        source=source,
    )
