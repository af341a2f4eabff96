"""Analysis client adapters around the Claude Agent SDK."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, AsyncIterator, Callable, Optional

from claude_agent_sdk import ClaudeAgentOptions
from claude_agent_sdk import query as sdk_query

from ..errors import AnalysisError
from ..logging import get_logger
from .messages import ASSISTANT_TEXT, OTHER, RESULT, ModelMessage, collect_response_async

QueryFn = Callable[..., AsyncIterator[Any]]


class AnalysisClient(ABC):
    """Contract for services that turn an analysis prompt into response text."""

    @abstractmethod
    async def run(
        self,
        prompt: str,
        *,
        working_directory: str | Path,
        timeout: Optional[float] = None,
    ) -> str:
        """Submit the prompt and return the assembled response text."""


class ClaudeAnalysisClient(AnalysisClient):
    """Runs analysis prompts through Claude Code via the Agent SDK.

    The API key travels with each request in the SDK options rather than
    through the process environment. ``timeout`` bounds a call in seconds;
    ``None`` leaves it unbounded.
    """

    def __init__(
        self,
        api_key: str,
        *,
        model: Optional[str] = None,
        max_turns: Optional[int] = None,
        permission_mode: str = "plan",
        timeout: Optional[float] = None,
        query: QueryFn | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("api_key is required")
        self._api_key = api_key
        self.model = model
        self.max_turns = max_turns
        self.permission_mode = permission_mode
        self.timeout = timeout
        self._query = query or sdk_query
        self.logger = get_logger("llm")

    async def run(
        self,
        prompt: str,
        *,
        working_directory: str | Path,
        timeout: Optional[float] = None,
    ) -> str:
        effective_timeout = timeout if timeout is not None else self.timeout
        options = self._build_options(working_directory)
        self.logger.debug(
            "Submitting analysis prompt (%d chars, model=%s, timeout=%s)",
            len(prompt),
            self.model or "default",
            effective_timeout,
        )
        try:
            collecting = collect_response_async(self._messages(prompt, options))
            if effective_timeout is None:
                response = await collecting
            else:
                response = await asyncio.wait_for(collecting, timeout=effective_timeout)
        except asyncio.TimeoutError as exc:
            raise AnalysisError(
                f"Claude analysis failed: no response within {effective_timeout:g} seconds"
            ) from exc
        except Exception as exc:
            raise AnalysisError(f"Claude analysis failed: {exc}") from exc
        self.logger.debug("Received %d chars of analysis output", len(response))
        return response

    def _build_options(self, working_directory: str | Path) -> ClaudeAgentOptions:
        kwargs: dict[str, Any] = {
            "cwd": str(working_directory),
            "env": {"ANTHROPIC_API_KEY": self._api_key},
            "permission_mode": self.permission_mode,
        }
        if self.model:
            kwargs["model"] = self.model
        if self.max_turns is not None:
            kwargs["max_turns"] = self.max_turns
        return ClaudeAgentOptions(**kwargs)

    async def _messages(self, prompt: str, options: ClaudeAgentOptions) -> AsyncIterator[ModelMessage]:
        async for message in self._query(prompt=prompt, options=options):
            for converted in to_model_messages(message):
                yield converted


def to_model_messages(message: Any) -> list[ModelMessage]:
    """Map one SDK message onto transport-neutral records."""
    msg_type = type(message).__name__
    if msg_type == "AssistantMessage":
        content = getattr(message, "content", None)
        if isinstance(content, str):
            return [ModelMessage(ASSISTANT_TEXT, content)]
        records: list[ModelMessage] = []
        for block in content or []:
            if type(block).__name__ == "TextBlock" and hasattr(block, "text"):
                records.append(ModelMessage(ASSISTANT_TEXT, block.text))
            else:
                records.append(ModelMessage(OTHER))
        return records
    if msg_type == "ResultMessage":
        result = getattr(message, "result", None)
        if getattr(message, "subtype", None) == "success" and isinstance(result, str):
            return [ModelMessage(RESULT, result)]
    return [ModelMessage(OTHER)]


__all__ = ["AnalysisClient", "ClaudeAnalysisClient", "to_model_messages"]
