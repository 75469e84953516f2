"""Models for LINE transcript messages and the knowledge entries derived from them."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Literal

from pydantic import BaseModel, Field

PAIR_SOURCE = "LINE"
EMBEDDED_FAQ_SOURCE = "LINE (embedded FAQ)"

PRIORITY_EMBEDDED_FAQ = 1
PRIORITY_PAIR = 2


class SenderType(str, Enum):
    """Author kind of a transcript row."""

    ACCOUNT = "Account"  # The business side (staff or auto-reply)
    USER = "User"  # The end customer


@dataclass
class RawRow:
    """Fields of one logical CSV row, possibly spanning several physical lines."""

    fields: List[str]
    line_number: int  # 1-based physical line where the row started
    unterminated: bool = False  # Closed by end of input instead of a quote


@dataclass(frozen=True)
class Message:
    """A single chat turn from the export."""

    sender_type: SenderType
    sender_name: str
    date: str
    time: str
    content: str

    @property
    def is_account(self) -> bool:
        return self.sender_type is SenderType.ACCOUNT

    @property
    def is_user(self) -> bool:
        return self.sender_type is SenderType.USER


class KnowledgeEntry(BaseModel):
    category: str
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)
    keywords: str = ""  # Comma-joined, may be empty
    priority: Literal[1, 2] = PRIORITY_PAIR  # 1 = explicit FAQ block, 2 = inferred pair
    is_active: bool = True
    source: str = PAIR_SOURCE

    def keyword_list(self) -> List[str]:
        """Split the comma-joined keywords, dropping empty items."""
        return [kw for kw in self.keywords.split(",") if kw]


@dataclass
class ExtractionResult:
    """Outcome of one pipeline run over a transcript."""

    entries: List[KnowledgeEntry] = field(default_factory=list)
    total_messages: int = 0
    skipped_messages: Dict[str, int] = field(default_factory=dict)
    processing_time_ms: int = 0

    @property
    def pair_count(self) -> int:
        return sum(1 for e in self.entries if e.priority == PRIORITY_PAIR)

    @property
    def embedded_faq_count(self) -> int:
        return sum(1 for e in self.entries if e.priority == PRIORITY_EMBEDDED_FAQ)

    def to_records(self) -> List[dict]:
        """Convert entries to plain dicts for the persistence layer."""
        return [entry.model_dump() for entry in self.entries]
