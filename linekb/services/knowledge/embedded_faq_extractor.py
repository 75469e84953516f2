"""Extract Q./A. blocks that the shop already wrote into its own messages.

Auto-replies and greeting messages often carry a small FAQ:

    Q. 定休日はいつですか
    A. 毎週火曜日です

Marker variants such as "Q:", "Ｑ．", "Q）", "Q】" and "【Q】" are accepted.
"""

import logging
import re
from typing import List, Optional

from linekb.core.config import Settings, get_settings
from linekb.models.knowledge import (
    EMBEDDED_FAQ_SOURCE,
    PRIORITY_EMBEDDED_FAQ,
    KnowledgeEntry,
)
from linekb.services.knowledge.qa_validation import build_entry
from linekb.services.knowledge.text_cleaner import clean_text

logger = logging.getLogger(__name__)

MARKER_PUNCTUATION = r"[.．:：）】\]]"

QUESTION_MARKER = re.compile(rf"^(?:[QＱq]{MARKER_PUNCTUATION}|【[QＱq]】)\s*")
ANSWER_MARKER = re.compile(rf"^(?:[AＡa]{MARKER_PUNCTUATION}|【[AＡa]】)\s*")


class EmbeddedFAQExtractor:
    """Single forward pass over the lines of one shop message."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.entries: List[KnowledgeEntry] = []
        self.question: Optional[str] = None
        self.answer: Optional[str] = None

    def extract(self, content: str) -> List[KnowledgeEntry]:
        for raw_line in content.split("\n"):
            line = raw_line.strip()
            if not line:
                continue

            question_match = QUESTION_MARKER.match(line)
            answer_match = ANSWER_MARKER.match(line)
            if question_match:
                self._flush()
                self.question = line[question_match.end() :]
                self.answer = None
            elif answer_match:
                self.answer = line[answer_match.end() :]
            elif self.answer is not None:
                self.answer += "\n" + line
            elif self.question is not None:
                # Question wrapped onto a second line before its answer
                self.question += "\n" + line

        self._flush()
        return self.entries

    def _flush(self) -> None:
        """Emit the pending block if it has both a question and an answer."""
        if self.question and self.answer:
            entry = build_entry(
                clean_text(self.question),
                clean_text(self.answer),
                priority=PRIORITY_EMBEDDED_FAQ,
                source=EMBEDDED_FAQ_SOURCE,
                min_answer_length=self.settings.MIN_FAQ_ANSWER_LENGTH,
                settings=self.settings,
            )
            if entry is not None:
                self.entries.append(entry)
        elif self.question:
            logger.debug("Dropping embedded FAQ question without an answer")
        self.question = None
        self.answer = None


def extract_embedded_faqs(
    content: str, settings: Optional[Settings] = None
) -> List[KnowledgeEntry]:
    """Extract priority-1 entries from the Q./A. blocks of one message body."""
    return EmbeddedFAQExtractor(settings).extract(content)
