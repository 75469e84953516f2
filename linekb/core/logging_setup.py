import logging
from typing import Optional

from linekb.core.config import Settings, get_settings
from linekb.core.pii_filter import PIIFilter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging for command-line use.

    Installs the standard format at the configured level and, unless
    REDACT_LOGS is disabled, attaches PIIFilter to every root handler.

    Args:
        settings: Settings to read LOG_LEVEL and REDACT_LOGS from
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL, format=LOG_FORMAT)

    root = logging.getLogger()
    root.setLevel(settings.LOG_LEVEL)
    if not settings.REDACT_LOGS:
        return

    for handler in root.handlers:
        if not any(isinstance(f, PIIFilter) for f in handler.filters):
            handler.addFilter(PIIFilter())
