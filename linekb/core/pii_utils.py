"""Centralized PII (Personally Identifiable Information) utilities.

This module provides a single source of truth for the personal-data patterns
found in Japanese customer chat, shared by the privacy filter (which drops
whole messages) and the logging filter (which redacts log records).

Pattern categories:
- PII_CORE_PATTERNS: Identifiers that are PII wherever they appear
- PII_PRIVACY_PATTERNS: Everything that makes a chat message private
- PII_LOGGING_PATTERNS: Aggressive redaction for log safety

Usage:
    from linekb.core.pii_utils import contains_private_info, redact_for_logs

    if contains_private_info(message.content):
        skip(message)

    logger.info(redact_for_logs(raw_line))
"""

import re
from typing import Dict, List, Pattern

# =============================================================================
# CORE PATTERNS - Identifiers that are PII in any context
# =============================================================================

PII_CORE_PATTERNS: Dict[str, str] = {
    # Email addresses
    "email": r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}",
    # Phone numbers: 2-4 digits, separator, 2-4 digits, separator, 4 digits
    "phone": r"\d{2,4}[-\s()]\d{2,4}[-\s()]\d{4}",
    # Labelled phone numbers without separators (電話: 09012345678)
    "labelled_phone": r"(?:電話|TEL|tel|Tel)[:：\s]*\d{10,11}",
}

# =============================================================================
# PRIVACY PATTERNS - A match makes the whole message unusable
# =============================================================================

PII_PRIVACY_PATTERNS: Dict[str, str] = {
    **PII_CORE_PATTERNS,
    # Personal name with honorific at the start of a message (山田さん、...)
    "honorific_name": r"^[ぁ-んァ-ヶ一-龥]{2,10}(?:さん|様|ちゃん|くん)",
    # Prefecture followed by municipality (東京都港区, 大阪府堺市)
    "address": r"[都道府県][市区町村]",
    # Stock acknowledgement with nothing else in it
    "greeting_only": (
        r"^(?:ありがとうございます|ありがとうございました|了解です"
        r"|承知しました|よろしくお願いします)$"
    ),
}

# =============================================================================
# LOGGING PATTERNS - Aggressive redaction for log safety
# =============================================================================

PII_LOGGING_PATTERNS: Dict[str, str] = {
    **PII_CORE_PATTERNS,
    # Honorific names anywhere in the record, not only at the start
    "name": r"[ぁ-んァ-ヶ一-龥]{2,10}(?:さん|様|ちゃん|くん)",
}

# =============================================================================
# COMPILED PATTERN CACHES
# =============================================================================

_compiled_privacy: Dict[str, Pattern] = {}
_compiled_logging: Dict[str, Pattern] = {}


def _get_compiled_patterns(
    patterns: Dict[str, str], cache: Dict[str, Pattern]
) -> Dict[str, Pattern]:
    """Get or create compiled regex patterns."""
    if not cache:
        for name, pattern in patterns.items():
            cache[name] = re.compile(pattern)
    return cache


# =============================================================================
# DETECTION FUNCTIONS
# =============================================================================


def detect_private_info(text: str) -> List[str]:
    """Return the names of all privacy patterns that match the text.

    Args:
        text: Message text to scan

    Returns:
        Pattern names in definition order, empty when nothing matches
    """
    if not text:
        return []

    patterns = _get_compiled_patterns(PII_PRIVACY_PATTERNS, _compiled_privacy)
    return [name for name, pattern in patterns.items() if pattern.search(text)]


def contains_private_info(text: str) -> bool:
    """Check whether a message contains personal data.

    Args:
        text: Message text to check

    Returns:
        True if any privacy pattern matches
    """
    if not text:
        return False

    patterns = _get_compiled_patterns(PII_PRIVACY_PATTERNS, _compiled_privacy)
    return any(pattern.search(text) for pattern in patterns.values())


# =============================================================================
# REDACTION FUNCTIONS
# =============================================================================


def redact_for_logs(text: str) -> str:
    """Aggressively redact PII from text for safe logging.

    Args:
        text: Text potentially containing PII

    Returns:
        Text with all detected PII replaced with [TYPE] placeholders
    """
    if not text:
        return text

    patterns = _get_compiled_patterns(PII_LOGGING_PATTERNS, _compiled_logging)
    result = text

    for name, pattern in patterns.items():
        placeholder = f"[{name.upper()}]"
        result = pattern.sub(placeholder, result)

    return result
