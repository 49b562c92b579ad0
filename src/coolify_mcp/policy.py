"""Safety checks applied around tool execution."""

from __future__ import annotations

import re
from typing import Any

from .coolify_client import CoolifyError

MAX_TEXT_LENGTH = 4096

_SHELL_METACHARACTERS = re.compile(r"[;&|`$><\\]")


class CommandRejectedError(CoolifyError, ValueError):
    pass


def sanitize_output(data: Any) -> Any:
    """Strip NUL characters and cap every string at ``MAX_TEXT_LENGTH``.

    Lists and dicts are walked recursively, dict key order is preserved and
    non-string scalars are returned as-is.
    """
    if isinstance(data, str):
        return data.replace("\0", "")[:MAX_TEXT_LENGTH]
    if isinstance(data, list):
        return [sanitize_output(item) for item in data]
    if isinstance(data, dict):
        return {key: sanitize_output(value) for key, value in data.items()}
    return data


def validate_command(command: str) -> None:
    if _SHELL_METACHARACTERS.search(command):
        raise CommandRejectedError("Command contains unsupported characters")
