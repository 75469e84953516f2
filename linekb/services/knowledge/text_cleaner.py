import re

# Text codes LINE leaves behind for emoji and stickers, e.g. "(smile)"
PARENTHESIZED_PATTERN = re.compile(r"\(.*?\)")

EMOJI_PATTERN = re.compile(
    "["
    "\U0001F300-\U0001F5FF"  # symbols and pictographs
    "\U0001F600-\U0001F64F"  # emoticons
    "\U0001F680-\U0001F6FF"  # transport and map
    "\U0001F700-\U0001F77F"  # alchemical symbols
    "\U0001F780-\U0001F7FF"  # geometric shapes extended
    "\U0001F800-\U0001F8FF"  # supplemental arrows
    "\U0001F900-\U0001F9FF"  # supplemental symbols and pictographs
    "\U0001FA00-\U0001FA6F"  # chess symbols
    "\U0001FA70-\U0001FAFF"  # symbols and pictographs extended-A
    "\u2600-\u26FF"  # miscellaneous symbols
    "\u2700-\u27BF"  # dingbats
    "]"
)

WHITESPACE_PATTERN = re.compile(r"\s+")


def clean_text(text: str) -> str:
    """Normalize message text before validation and storage.

    Removes parenthesized emoji codes and emoji characters, then collapses
    whitespace (newlines included) to single spaces.
    """
    text = PARENTHESIZED_PATTERN.sub("", text)
    text = EMOJI_PATTERN.sub("", text)
    return WHITESPACE_PATTERN.sub(" ", text).strip()
