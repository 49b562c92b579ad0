"""Core adapter service logic."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from pydantic import ValidationError

from .coolify_client import CoolifyError
from .logging import redact_payload
from .models import ToolDefinition
from .policy import sanitize_output

logger = logging.getLogger(__name__)


class AdapterService:
    """
    Executes a single tool call.

    Steps, in order:
    - validate the raw arguments against the tool's input model
    - drop the ``confirm`` flag and run the tool guard, if any
    - call the handler (exactly one Coolify request)
    - sanitize when the tool asks for it and wrap the result as text content

    Validation and guard failures happen before any network call. Nothing is
    retried; failures are logged and re-raised to the caller.
    """

    async def execute_tool(self, tool: ToolDefinition, arguments: Dict[str, Any]) -> Dict[str, Any]:
        logger.info("Executing tool=%s payload=%s", tool.name, redact_payload(arguments))

        try:
            validated = tool.input_model.model_validate(arguments)
        except ValidationError as exc:
            logger.warning("Rejected tool=%s: %s", tool.name, exc.error_count())
            raise

        payload = validated.model_dump(exclude_unset=True)
        payload.pop("confirm", None)

        if tool.guard:
            try:
                tool.guard(payload)
            except CoolifyError as exc:
                logger.warning("Rejected tool=%s: %s", tool.name, exc)
                raise

        try:
            result = await tool.handler(payload)
        except CoolifyError as exc:
            logger.error("Tool execution failed: tool=%s error=%s", tool.name, exc)
            raise

        if tool.sanitize:
            result = sanitize_output(result)
        return self._format_result(result)

    def _format_result(self, result: Any) -> Dict[str, Any]:
        return {"content": [{"type": "text", "text": json.dumps(result, ensure_ascii=False)}]}
