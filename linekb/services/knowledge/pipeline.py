"""End-to-end extraction of knowledge-base entries from a LINE export."""

import logging
import time
from collections import Counter
from pathlib import Path
from typing import List, Optional, Sequence, Union

from linekb.core.config import Settings, get_settings
from linekb.models.knowledge import ExtractionResult, KnowledgeEntry, Message
from linekb.services.knowledge.content_filters import (
    PrivacyFilter,
    is_form_or_promotion,
    is_system_message,
)
from linekb.services.knowledge.embedded_faq_extractor import extract_embedded_faqs
from linekb.services.knowledge.pair_extractor import extract_pair, is_shop_message
from linekb.services.line_export.export_parser import LineExportParser

logger = logging.getLogger(__name__)

SKIP_SYSTEM = "system"
SKIP_PRIVATE = "private"
SKIP_PROMOTION = "promotion"


class KnowledgePipeline:
    """Parse a transcript and collect pair and embedded-FAQ entries in scan order."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.parser = LineExportParser(self.settings)

    def run(self, text: str) -> ExtractionResult:
        """
        Extract entries from raw export text.

        Raises:
            TypeError: If text is not a string
        """
        start = time.perf_counter()
        messages = self.parser.parse(text)
        return self._finish(messages, start)

    def run_file(self, file_path: Union[str, Path]) -> ExtractionResult:
        """
        Extract entries from an export file on disk.

        Raises:
            TranscriptTooLargeError: If the file exceeds MAX_FILE_SIZE_MB
            TranscriptError: If the file cannot be read as UTF-8 text
        """
        start = time.perf_counter()
        messages = self.parser.parse_file(file_path)
        return self._finish(messages, start)

    def _finish(self, messages: Sequence[Message], start: float) -> ExtractionResult:
        """Process parsed messages, stamp the elapsed time and log the run summary."""
        result = self.process_messages(messages)
        result.processing_time_ms = int((time.perf_counter() - start) * 1000)

        logger.info(
            f"Extracted {len(result.entries)} entries from {result.total_messages} "
            f"messages ({result.pair_count} pairs, {result.embedded_faq_count} "
            f"embedded FAQs) in {result.processing_time_ms}ms"
        )
        return result

    def process_messages(self, messages: Sequence[Message]) -> ExtractionResult:
        entries: List[KnowledgeEntry] = []
        skipped: Counter = Counter()

        for index, message in enumerate(messages):
            reason = self._skip_reason(message)
            if reason:
                skipped[reason] += 1
                continue

            if is_shop_message(message, self.settings):
                entries.extend(extract_embedded_faqs(message.content, self.settings))

            if message.is_user:
                entry = extract_pair(messages, index, self.settings)
                if entry is not None:
                    entries.append(entry)

        return ExtractionResult(
            entries=entries,
            total_messages=len(messages),
            skipped_messages=dict(skipped),
        )

    def _skip_reason(self, message: Message) -> Optional[str]:
        """Why a message cannot contribute entries, or None if it can."""
        content = message.content
        if is_system_message(content, self.settings.SYSTEM_MESSAGES):
            return SKIP_SYSTEM
        if PrivacyFilter.matches(content):
            logger.debug(
                f"Skipping private message: {', '.join(PrivacyFilter.reasons(content))}"
            )
            return SKIP_PRIVATE
        # Promotion filter applies to shop messages only
        if is_shop_message(message, self.settings) and is_form_or_promotion(content):
            return SKIP_PROMOTION
        return None


def extract_knowledge_entries(
    text: str, settings: Optional[Settings] = None
) -> List[KnowledgeEntry]:
    """Extract ordered knowledge-base entries from LINE export text."""
    return KnowledgePipeline(settings).run(text).entries


def parse_line_csv(text: str, settings: Optional[Settings] = None) -> List[dict]:
    """Extract entries as plain records ready for the knowledge store."""
    return KnowledgePipeline(settings).run(text).to_records()
