from __future__ import annotations

from collections.abc import Callable

from chamber_chat.intelligence.models import IncomingMessage, MessageRule
from chamber_chat.intelligence.reply_catalog import ReplyTopic

_GREETINGS = frozenset({"hi", "hello", "how are you"})

_IDENTITY_PHRASE = "who made you"
_IDENTITY_PHRASE_BN = "কে তৈরি করেছে"

CANONICAL_QUESTIONS = (
    "Tell me something about your chamber.",
    "When did you open your chamber?",
    "Where is your chamber?",
)
CANONICAL_QUESTIONS_BN = (
    "আপনার চেম্বার সম্পর্কে কিছু বলুন",
    "আপনার চেম্বার কখন খোলা হয়?",
    "আপনার চেম্বার কোথায় আছে?",
)
_CANONICAL_NORMALIZED = frozenset(question.casefold() for question in CANONICAL_QUESTIONS)
# Bengali phrasings are compared case-sensitively against the trimmed raw text.
_CANONICAL_RAW_BN = frozenset(CANONICAL_QUESTIONS_BN)

_DOMAIN_KEYWORDS = ("chamber", "hospital")


def _is_greeting(message: IncomingMessage) -> bool:
    return message.normalized in _GREETINGS


def _is_identity_question(message: IncomingMessage) -> bool:
    return _IDENTITY_PHRASE in message.normalized or _IDENTITY_PHRASE_BN in message.raw


def _is_canonical_question(message: IncomingMessage) -> bool:
    return message.normalized in _CANONICAL_NORMALIZED or message.trimmed in _CANONICAL_RAW_BN


def _mentions_domain(message: IncomingMessage) -> bool:
    return any(keyword in message.normalized for keyword in _DOMAIN_KEYWORDS)


# Evaluated in order; the first predicate that matches decides the rule.
_RULES: tuple[tuple[MessageRule, Callable[[IncomingMessage], bool]], ...] = (
    (MessageRule.GREETING, _is_greeting),
    (MessageRule.IDENTITY, _is_identity_question),
    (MessageRule.CHAMBER_DETAILS, _is_canonical_question),
    (MessageRule.CHAMBER_UNKNOWN, _mentions_domain),
)

_CANNED_TOPICS = {
    MessageRule.IDENTITY: ReplyTopic.MAKER_IDENTITY,
    MessageRule.CHAMBER_DETAILS: ReplyTopic.CHAMBER_DETAILS,
    MessageRule.CHAMBER_UNKNOWN: ReplyTopic.CHAMBER_UNKNOWN,
}


def classify_message(message: IncomingMessage) -> MessageRule:
    for rule, matches in _RULES:
        if matches(message):
            return rule
    return MessageRule.GENERAL


def canned_topic(rule: MessageRule) -> ReplyTopic | None:
    """Topic answered from the catalog, or None when the rule delegates."""
    return _CANNED_TOPICS.get(rule)
