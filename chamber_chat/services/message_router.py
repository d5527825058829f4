from __future__ import annotations

import logging

from chamber_chat.intelligence.intent import canned_topic, classify_message
from chamber_chat.intelligence.language import detect_script
from chamber_chat.intelligence.models import IncomingMessage, RouteResult
from chamber_chat.intelligence.reply_catalog import DEFAULT_REPLY_CATALOG, ReplyCatalog
from chamber_chat.services.completion_client import CompletionBackend

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a knowledgeable assistant. Answer questions naturally according to the context. "
    "If a question is not related to your expertise, you may say "
    "'I don't know this subject, I'm not experienced.'"
)


class MessageRouter:
    """Answer a chat message from the reply catalog or the completion backend."""

    def __init__(
        self,
        *,
        completion_backend: CompletionBackend,
        reply_catalog: ReplyCatalog = DEFAULT_REPLY_CATALOG,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> None:
        self._completion_backend = completion_backend
        self._reply_catalog = reply_catalog
        self._system_prompt = system_prompt

    async def route(self, raw_text: str | None, *, trace_id: str | None = None) -> RouteResult:
        message = IncomingMessage.from_text(raw_text)
        rule = classify_message(message)
        verdict = detect_script(message.raw)

        topic = canned_topic(rule)
        if topic is not None:
            logger.info(
                "chat_routed trace_id=%s rule=%s verdict=%s delegated=false",
                trace_id,
                rule,
                verdict,
            )
            return RouteResult(
                reply=self._reply_catalog.lookup(topic, verdict),
                rule=rule,
                verdict=verdict,
            )

        logger.info(
            "chat_routed trace_id=%s rule=%s verdict=%s delegated=true",
            trace_id,
            rule,
            verdict,
        )
        reply = await self._completion_backend.complete(
            system_prompt=self._system_prompt,
            user_text=message.raw,
        )
        return RouteResult(reply=reply, rule=rule, verdict=verdict, delegated=True)
