from __future__ import annotations

import math
from dataclasses import dataclass
from os import getenv

from chamber_chat.intelligence.reply_catalog import DEFAULT_REPLY_CATALOG, ReplyCatalog
from chamber_chat.services.completion_client import (
    DEFAULT_COMPLETION_MODEL,
    DEFAULT_COMPLETION_URL,
    OpenAICompletionClient,
)
from chamber_chat.services.message_router import MessageRouter


@dataclass
class ServiceContainer:
    completion_client: OpenAICompletionClient
    reply_catalog: ReplyCatalog
    message_router: MessageRouter


def build_container() -> ServiceContainer:
    completion_client = OpenAICompletionClient(
        api_key=getenv("OPENAI_API_KEY"),
        url=getenv("CHAMBER_CHAT_COMPLETION_URL", DEFAULT_COMPLETION_URL),
        model=getenv("CHAMBER_CHAT_COMPLETION_MODEL", DEFAULT_COMPLETION_MODEL),
        timeout_sec=_parse_float(getenv("CHAMBER_CHAT_COMPLETION_TIMEOUT_SEC"), default=20.0),
    )
    reply_catalog = DEFAULT_REPLY_CATALOG
    return ServiceContainer(
        completion_client=completion_client,
        reply_catalog=reply_catalog,
        message_router=MessageRouter(
            completion_backend=completion_client,
            reply_catalog=reply_catalog,
        ),
    )


def _parse_float(value: str | None, *, default: float) -> float:
    if value is None:
        return default
    try:
        parsed = float(value)
    except ValueError:
        return default
    if not math.isfinite(parsed):
        return default
    return parsed
