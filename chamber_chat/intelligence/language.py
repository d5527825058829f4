from __future__ import annotations

import re
from enum import StrEnum

# Bengali Unicode block.
_SECONDARY_SCRIPT_PATTERN = re.compile(r"[\u0980-\u09FF]")


class ScriptVerdict(StrEnum):
    DEFAULT = "default"
    SECONDARY = "secondary"


def detect_script(text: str) -> ScriptVerdict:
    """Return SECONDARY when any Bengali character appears in `text`."""
    if text and _SECONDARY_SCRIPT_PATTERN.search(text):
        return ScriptVerdict.SECONDARY
    return ScriptVerdict.DEFAULT
