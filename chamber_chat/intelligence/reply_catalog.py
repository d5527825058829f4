from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from chamber_chat.intelligence.language import ScriptVerdict


class ReplyTopic(StrEnum):
    CHAMBER_DETAILS = "chamber_details"
    CHAMBER_UNKNOWN = "chamber_unknown"
    MAKER_IDENTITY = "maker_identity"


class ReplyCatalog:
    """Read-only (topic, script) -> canned reply table."""

    def __init__(self, entries: Mapping[tuple[ReplyTopic, ScriptVerdict], str]) -> None:
        missing = [
            f"{topic}/{verdict}"
            for topic in ReplyTopic
            for verdict in ScriptVerdict
            if not entries.get((topic, verdict))
        ]
        if missing:
            raise ValueError(f"reply catalog incomplete: {', '.join(missing)}")
        self._entries = MappingProxyType(dict(entries))

    def lookup(self, topic: ReplyTopic, verdict: ScriptVerdict) -> str:
        return self._entries[(topic, verdict)]

    def __len__(self) -> int:
        return len(self._entries)


DEFAULT_REPLY_CATALOG = ReplyCatalog(
    {
        (ReplyTopic.CHAMBER_DETAILS, ScriptVerdict.DEFAULT): (
            "The name of our chamber is 'Ataullah's Hospital'. We treat all types of patients, "
            "and we have 4 branches: Dhaka, Barisal, Khulna, and Rangpur. We open our chamber "
            "every day from 8 AM to 10 PM. Sazia Ansar."
        ),
        (ReplyTopic.CHAMBER_DETAILS, ScriptVerdict.SECONDARY): (
            "আমাদের চেম্বারের নাম 'Ataullah's Hospital'. আমরা সব ধরনের রোগীর চিকিৎসা করি, "
            "এবং আমাদের ৪টি শাখা রয়েছে: ঢাকা, বরিশাল, খুলনা, এবং রংপুর। আমাদের চেম্বার "
            "প্রতিদিন সকাল ৮টা থেকে রাত ১০টা পর্যন্ত খোলা থাকে। সাযিয়া আনসার।"
        ),
        (ReplyTopic.CHAMBER_UNKNOWN, ScriptVerdict.DEFAULT): (
            "I don't know this subject, I'm not experienced. Please contact with Ataullah."
        ),
        (ReplyTopic.CHAMBER_UNKNOWN, ScriptVerdict.SECONDARY): "আমি এই বিষয়ে জানি না, আমি অভিজ্ঞ নই।",
        (ReplyTopic.MAKER_IDENTITY, ScriptVerdict.DEFAULT): "Developer Ataullah sir made me.",
        (ReplyTopic.MAKER_IDENTITY, ScriptVerdict.SECONDARY): (
            "ডেভেলপার আতাউল্লাহ স্যার আমাকে তৈরি করেছেন।"
        ),
    }
)
