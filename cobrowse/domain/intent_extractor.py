"""Deterministic fill-intent detection from the raw user message.

Explicit requests like "fill name as Bob, set email to bob@x.com" are
honoured without asking the model, so the form always gets what the user
typed.
"""

import re
from typing import Dict, List

from cobrowse.domain.models import FILL_FIELDS, FillIntent

# "(fill|add|set) <field> [field] [as|to|=]"
TRIGGER_RE = re.compile(
    r"\b(?:fill|add|set)\s+(" + "|".join(FILL_FIELDS) + r")\b"
    r"(?:\s+field\b)?"
    r"(?:\s*(?:(?:as|to)\b|=))?",
    re.IGNORECASE,
)

_LEADING_SEPARATOR_RE = re.compile(r"^[,:\-]\s*")
_TRAILING_JUNK_RE = re.compile(r"[\s,]+$")


def _clean_value(span: str) -> str:
    value = _LEADING_SEPARATOR_RE.sub("", span.strip(), count=1)
    return _TRAILING_JUNK_RE.sub("", value)


def extract_fill_intents(text: str) -> List[FillIntent]:
    """Return one FillIntent per field mentioned, last occurrence wins.

    The value of each trigger runs until the next trigger (or end of
    text). Fields keep the position of their first mention.
    """
    triggers = list(TRIGGER_RE.finditer(text or ""))
    found: Dict[str, str] = {}
    for i, match in enumerate(triggers):
        end = triggers[i + 1].start() if i + 1 < len(triggers) else len(text)
        value = _clean_value(text[match.end():end])
        if not value:
            continue
        found[match.group(1).lower()] = value
    return [FillIntent(field=f, value=v) for f, v in found.items()]
