from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from chamber_chat.errors import InvalidInputError
from chamber_chat.intelligence.language import ScriptVerdict


class MessageRule(StrEnum):
    GREETING = "greeting"
    IDENTITY = "identity"
    CHAMBER_DETAILS = "chamber_details"
    CHAMBER_UNKNOWN = "chamber_unknown"
    GENERAL = "general"


@dataclass(frozen=True)
class IncomingMessage:
    raw: str
    trimmed: str
    normalized: str

    @classmethod
    def from_text(cls, text: str | None) -> IncomingMessage:
        raw = text or ""
        trimmed = raw.strip()
        if not trimmed:
            raise InvalidInputError("empty_message")
        return cls(raw=raw, trimmed=trimmed, normalized=trimmed.casefold())


@dataclass(frozen=True)
class RouteResult:
    reply: str
    rule: MessageRule
    verdict: ScriptVerdict
    delegated: bool = False
