import re

from aincome_parser.extraction.keywords import AMOUNT_UNITS, NOTE_DATE_WORDS
from aincome_parser.models import NOTE_MAX_LENGTH

_AMOUNT_TOKEN = re.compile(
    r"[0-9]+(?:\.[0-9]+)?\s*(?:" + "|".join(re.escape(unit) for unit, _ in AMOUNT_UNITS) + ")",
    re.IGNORECASE,
)
_DATE_WORDS = re.compile("|".join(re.escape(word) for word in NOTE_DATE_WORDS), re.IGNORECASE)


def extract_note(original: str) -> str | None:
    """Strip amount and date tokens from the original text; ``None`` when nothing is left."""
    note = _AMOUNT_TOKEN.sub("", original)
    note = _DATE_WORDS.sub("", note).strip()
    return note[:NOTE_MAX_LENGTH] or None
