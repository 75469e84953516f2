"""Quote-aware row tokenizer for LINE chat export CSV.

LINE exports are not strict CSV: message bodies are quoted and may contain
raw newlines, so one logical row can span several physical lines. Rows are
reassembled with a two-state machine before fields are split.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Union

from linekb.models.knowledge import RawRow

logger = logging.getLogger(__name__)

QUOTE = '"'
SEPARATOR = ","

# Rows either start with a quoted field or with a bare sender type
ROW_START_PATTERN = re.compile(r"^(?:Account|User),")


@dataclass
class Normal:
    """Between rows; the next row-start line opens a new row."""


@dataclass
class AccumulatingField:
    """Inside a quoted field that continues on the following lines."""

    buffer: str
    start_line: int


TokenizerState = Union[Normal, AccumulatingField]


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_fields(line: str) -> List[str]:
    """Split one logical CSV row into unescaped fields.

    A doubled quote inside a quoted field yields one literal quote; commas
    inside quotes are kept as text.
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0

    while i < len(line):
        char = line[i]
        if char == QUOTE:
            if in_quotes and line[i + 1 : i + 2] == QUOTE:
                current.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == SEPARATOR and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current))
    return fields


def starts_row(line: str) -> bool:
    return line.startswith(QUOTE) or bool(ROW_START_PATTERN.match(line))


def closes_field(line: str) -> bool:
    """Check whether a continuation line ends the open quoted field.

    Any quote on a line that does not end with a separator closes the field.
    This mirrors how the export writes message bodies and is not a full
    quote-balance check.
    """
    return QUOTE in line and not line.endswith(SEPARATOR)


class RowTokenizer:
    """Reassemble physical lines into logical rows."""

    def __init__(self, lines: Iterable[str], first_line_number: int = 1):
        """
        Initialize tokenizer.

        Args:
            lines: Physical lines with line endings already normalized
            first_line_number: Line number of the first item, for log messages
        """
        self.lines = lines
        self.first_line_number = first_line_number

    def rows(self) -> Iterator[RawRow]:
        """Yield logical rows in document order."""
        state: TokenizerState = Normal()
        line_number = self.first_line_number - 1

        for line_number, line in enumerate(self.lines, start=self.first_line_number):
            state, row = self._step(state, line, line_number)
            if row is not None:
                yield row

        if isinstance(state, AccumulatingField):
            logger.warning(
                f"Unterminated quoted field starting at line {state.start_line}, "
                f"closed at end of input (line {line_number})"
            )
            yield RawRow(
                fields=split_fields(state.buffer),
                line_number=state.start_line,
                unterminated=True,
            )

    def _step(
        self, state: TokenizerState, line: str, line_number: int
    ) -> tuple[TokenizerState, Optional[RawRow]]:
        """Advance the state machine by one physical line."""
        if isinstance(state, AccumulatingField):
            buffer = f"{state.buffer}\n{line}"
            if closes_field(line):
                return Normal(), RawRow(split_fields(buffer), state.start_line)
            return AccumulatingField(buffer, state.start_line), None

        if not line.strip() or not starts_row(line):
            return state, None

        if line.count(QUOTE) % 2 != 0:
            return AccumulatingField(line, line_number), None

        return state, RawRow(split_fields(line), line_number)


def tokenize_rows(text: str) -> List[RawRow]:
    """Tokenize a whole document into logical rows."""
    lines = normalize_line_endings(text).split("\n")
    return list(RowTokenizer(lines).rows())
