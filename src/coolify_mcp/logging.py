"""Logging setup and redaction of tool arguments."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List

REDACTED = "***REDACTED***"

_SENSITIVE_NAMES = re.compile(
    r"(token|secret|api[_-]?key|password|private[_-]?key)", re.IGNORECASE
)


def configure_logging(level: str) -> None:
    # basicConfig writes to stderr; stdout belongs to the stdio transport.
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # httpx logs every request line at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def redact_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``payload`` that is safe to log.

    Fields whose name looks sensitive are masked. Environment variable entries
    (``{"key": "DB_PASSWORD", "value": ...}``) have their ``value`` masked when
    the variable name looks sensitive.
    """
    masked_value = isinstance(payload.get("key"), str) and bool(
        _SENSITIVE_NAMES.search(payload["key"])
    )
    redacted: Dict[str, Any] = {}
    for key, value in payload.items():
        if _SENSITIVE_NAMES.search(key) or (masked_value and key == "value"):
            redacted[key] = REDACTED
        elif isinstance(value, dict):
            redacted[key] = redact_payload(value)
        elif isinstance(value, list):
            redacted[key] = _redact_items(value)
        else:
            redacted[key] = value
    return redacted


def _redact_items(items: List[Any]) -> List[Any]:
    return [redact_payload(item) if isinstance(item, dict) else item for item in items]
