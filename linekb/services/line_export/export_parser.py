"""Parse LINE Official Account chat exports into ordered messages."""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from linekb.core.config import Settings, get_settings
from linekb.core.exceptions import TranscriptError, TranscriptTooLargeError
from linekb.models.knowledge import Message, RawRow, SenderType
from linekb.services.line_export.row_tokenizer import (
    QUOTE,
    RowTokenizer,
    normalize_line_endings,
)

logger = logging.getLogger(__name__)

HEADER_SIGNATURE = "送信者タイプ,送信者名,送信日,送信時刻,内容"
MESSAGE_FIELD_COUNT = 5
BOM = "\ufeff"


def locate_header(lines: Sequence[str]) -> Optional[int]:
    """Find the index of the column header line.

    Quotes and a leading byte order mark are ignored so that re-saved
    exports with quoted headers are still recognized.

    Returns:
        Index of the header line, or None when the document has no header
    """
    for index, line in enumerate(lines):
        if HEADER_SIGNATURE in line.lstrip(BOM).replace(QUOTE, ""):
            return index
    return None


def assemble_message(row: RawRow) -> Optional[Message]:
    """Build a Message from a tokenized row, or None if the row is malformed."""
    if len(row.fields) < MESSAGE_FIELD_COUNT:
        logger.debug(
            f"Skipping row at line {row.line_number}: "
            f"{len(row.fields)} fields, expected {MESSAGE_FIELD_COUNT}"
        )
        return None

    sender_type, sender_name, date, time, content = row.fields[:MESSAGE_FIELD_COUNT]
    try:
        kind = SenderType(sender_type.strip())
    except ValueError:
        logger.debug(
            f"Skipping row at line {row.line_number}: unknown sender type {sender_type!r}"
        )
        return None

    return Message(
        sender_type=kind,
        sender_name=sender_name,
        date=date,
        time=time,
        content=content.replace("\r", ""),
    )


class LineExportParser:
    """Turn LINE export text into the ordered list of chat messages."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def parse(self, text: str) -> List[Message]:
        """
        Parse export text into messages in transcript order.

        Malformed rows are skipped; a document without a header yields an
        empty list.

        Raises:
            TypeError: If text is not a string
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected export text as str, got {type(text).__name__}")

        lines = normalize_line_endings(text).split("\n")
        header_index = locate_header(lines)
        if header_index is None:
            logger.warning("Header row not found in LINE export, no messages parsed")
            return []

        tokenizer = RowTokenizer(
            lines[header_index + 1 :], first_line_number=header_index + 2
        )
        messages: List[Message] = []
        skipped = 0
        for row in tokenizer.rows():
            message = assemble_message(row)
            if message is None:
                skipped += 1
                continue
            messages.append(message)

        logger.info(
            f"Parsed {len(messages)} messages from {len(lines)} lines "
            f"({skipped} malformed rows skipped)"
        )
        return messages

    def parse_file(self, file_path: Union[str, Path]) -> List[Message]:
        """
        Read a LINE export from disk and parse it.

        Raises:
            TranscriptTooLargeError: If the file exceeds MAX_FILE_SIZE_MB
            TranscriptError: If the file cannot be read as UTF-8 text
        """
        path = Path(file_path)
        limit = self.settings.max_file_size_bytes
        try:
            size = path.stat().st_size
            if size > limit:
                raise TranscriptTooLargeError(size, limit)
            # utf-8-sig drops the BOM that LINE adds to exports
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise TranscriptError(f"Cannot read LINE export {path}: {e}") from e

        logger.info(f"Loaded LINE export {path} ({size} bytes)")
        return self.parse(text)
