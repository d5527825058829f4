import pytest

from chamber_chat.errors import InvalidInputError
from chamber_chat.intelligence.intent import canned_topic, classify_message
from chamber_chat.intelligence.models import IncomingMessage, MessageRule
from chamber_chat.intelligence.reply_catalog import ReplyTopic


def _classify(text: str) -> MessageRule:
    return classify_message(IncomingMessage.from_text(text))


def test_incoming_message_normalizes_and_keeps_raw() -> None:
    message = IncomingMessage.from_text("  Where Is Your CHAMBER?  ")

    assert message.raw == "  Where Is Your CHAMBER?  "
    assert message.trimmed == "Where Is Your CHAMBER?"
    assert message.normalized == "where is your chamber?"


@pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
def test_incoming_message_rejects_blank(text: str | None) -> None:
    with pytest.raises(InvalidInputError):
        IncomingMessage.from_text(text)


def test_intent_greetings_are_exact_matches() -> None:
    assert _classify("hi") == MessageRule.GREETING
    assert _classify("  Hello ") == MessageRule.GREETING
    assert _classify("How are you") == MessageRule.GREETING
    assert _classify("hi there") == MessageRule.GENERAL
    assert _classify("how are you?") == MessageRule.GENERAL


def test_intent_identity_question() -> None:
    assert _classify("Who made you?") == MessageRule.IDENTITY
    assert _classify("tell me, WHO MADE YOU and when") == MessageRule.IDENTITY
    assert _classify("তোমাকে কে তৈরি করেছে?") == MessageRule.IDENTITY


def test_intent_identity_has_priority_over_domain_keywords() -> None:
    assert _classify("who made you and your hospital?") == MessageRule.IDENTITY


def test_intent_canonical_english_questions_ignore_case() -> None:
    assert _classify("Tell me something about your chamber.") == MessageRule.CHAMBER_DETAILS
    assert _classify("WHEN DID YOU OPEN YOUR CHAMBER?") == MessageRule.CHAMBER_DETAILS
    assert _classify("  where is your chamber?  ") == MessageRule.CHAMBER_DETAILS


def test_intent_canonical_english_requires_exact_punctuation() -> None:
    assert _classify("Where is your chamber") == MessageRule.CHAMBER_UNKNOWN


def test_intent_canonical_bengali_questions() -> None:
    assert _classify("আপনার চেম্বার সম্পর্কে কিছু বলুন") == MessageRule.CHAMBER_DETAILS
    assert _classify("আপনার চেম্বার কখন খোলা হয়?") == MessageRule.CHAMBER_DETAILS
    assert _classify(" আপনার চেম্বার কোথায় আছে? ") == MessageRule.CHAMBER_DETAILS


def test_intent_domain_adjacent_keywords() -> None:
    assert _classify("Tell me about your Hospital wait times") == MessageRule.CHAMBER_UNKNOWN
    assert _classify("Does the chamber accept insurance?") == MessageRule.CHAMBER_UNKNOWN
    # Bare substring match also catches unrelated mentions.
    assert _classify("I don't like hospitals") == MessageRule.CHAMBER_UNKNOWN


def test_intent_bengali_domain_question_without_english_keyword_is_general() -> None:
    assert _classify("আপনার চেম্বারে কি পার্কিং আছে?") == MessageRule.GENERAL


def test_intent_general_question() -> None:
    assert _classify("What is diabetes?") == MessageRule.GENERAL


def test_canned_topic_mapping() -> None:
    assert canned_topic(MessageRule.IDENTITY) == ReplyTopic.MAKER_IDENTITY
    assert canned_topic(MessageRule.CHAMBER_DETAILS) == ReplyTopic.CHAMBER_DETAILS
    assert canned_topic(MessageRule.CHAMBER_UNKNOWN) == ReplyTopic.CHAMBER_UNKNOWN
    assert canned_topic(MessageRule.GREETING) is None
    assert canned_topic(MessageRule.GENERAL) is None
