# app/utils/logging.py
import logging
import re

from app.utils.settings import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

#tokeny i hasla nigdy nie trafiaja do logow
_PATTERNS = [
    (re.compile(r"(Bearer\s+)([A-Za-z0-9_\-\.]+)", re.IGNORECASE), r"\1[REDACTED]"),
    (re.compile(r"(password[\"']?\s*[:=]\s*[\"']?)([^\s\"',]+)", re.IGNORECASE), r"\1[REDACTED]"),
    (re.compile(r"(token[\"']?\s*[:=]\s*[\"']?)([A-Za-z0-9_\-\.]{20,})", re.IGNORECASE), r"\1[REDACTED]"),
]

_configured = False


class SecretMaskingFilter(logging.Filter):
    """Masks bearer tokens and password fields in log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = message
        for pattern, replacement in _PATTERNS:
            masked = pattern.sub(replacement, masked)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


def configure_logging(level: str | None = None) -> None:
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.addFilter(SecretMaskingFilter())

    root = logging.getLogger()
    root.setLevel((level or LOG_LEVEL).upper())
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)
