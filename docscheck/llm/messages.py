"""Transport-neutral message records produced by the analysis service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AsyncIterable, Iterable, List

ASSISTANT_TEXT = "assistant_text"
RESULT = "result"
OTHER = "other"


@dataclass(frozen=True)
class ModelMessage:
    """One streamed record: its kind and, for text-bearing kinds, the text payload."""

    kind: str
    payload: str = ""


def _accept(message: ModelMessage) -> bool:
    return message.kind in (ASSISTANT_TEXT, RESULT)


def collect_response(messages: Iterable[ModelMessage]) -> str:
    """Concatenate assistant text and final results, dropping every other kind."""
    return "".join(message.payload for message in messages if _accept(message))


async def collect_response_async(messages: AsyncIterable[ModelMessage]) -> str:
    """Async counterpart of :func:`collect_response` for streamed messages."""
    parts: List[str] = []
    async for message in messages:
        if _accept(message):
            parts.append(message.payload)
    return "".join(parts)


__all__ = [
    "ASSISTANT_TEXT",
    "OTHER",
    "RESULT",
    "ModelMessage",
    "collect_response",
    "collect_response_async",
]
