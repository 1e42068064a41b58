import math
import re
from dataclasses import dataclass
from decimal import Decimal

from aincome_parser.extraction.keywords import AMOUNT_UNITS

UNIT_MATCH_BONUS = 0.2
BARE_NUMBER_BONUS = 0.1

# Bare numbers below this are read as thousands ("50" -> 50,000).
BARE_NUMBER_SHORTHAND_LIMIT = 1000

_UNIT_PATTERNS: tuple[tuple[re.Pattern[str], str, Decimal], ...] = tuple(
    (re.compile(rf"([0-9]+(?:\.[0-9]+)?)\s*{re.escape(unit)}", re.IGNORECASE), unit, multiplier)
    for unit, multiplier in AMOUNT_UNITS
)
_BARE_NUMBER = re.compile(r"[0-9]+")
_ANY_DIGIT = re.compile(r"[0-9]")


@dataclass(frozen=True)
class AmountMatch:
    amount: float
    confidence_bonus: float
    unit: str | None = None


def has_digit(text: str) -> bool:
    return _ANY_DIGIT.search(text) is not None


def _as_amount(value: Decimal) -> float | None:
    # Very long digit runs overflow to inf once converted.
    amount = float(value)
    if not math.isfinite(amount) or amount <= 0:
        return None
    return amount


def extract_amount(text: str) -> AmountMatch | None:
    """
    Find the monetary amount in ``text``.

    Unit patterns are tried in the fixed priority order of ``AMOUNT_UNITS`` and
    the first one that matches wins. Without a unit, the first bare digit run is
    used, scaled by 1000 when it is below 1000. Returns ``None`` when no positive
    finite amount can be read.
    """
    for pattern, unit, multiplier in _UNIT_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        value = Decimal(match.group(1)) * multiplier
        if value > 0:
            amount = _as_amount(value)
            if amount is None:
                return None
            return AmountMatch(amount=amount, confidence_bonus=UNIT_MATCH_BONUS, unit=unit)
        break

    match = _BARE_NUMBER.search(text)
    if not match:
        return None
    value = Decimal(match.group(0))
    if value < BARE_NUMBER_SHORTHAND_LIMIT:
        value *= 1000
    amount = _as_amount(value)
    if amount is None:
        return None
    return AmountMatch(amount=amount, confidence_bonus=BARE_NUMBER_BONUS)
